"""Wikidata querying and event aggregation."""

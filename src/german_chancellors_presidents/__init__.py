"""Historic events: Chancellors and Presidents of Germany (since 1949).

Timeline events for a genealogy host, read from a bundled CSV file or
queried live from Wikidata, rendered as GEDCOM event records.
"""

__version__ = "2.2.1.0"

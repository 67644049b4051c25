"""Rendering of GEDCOM event records."""

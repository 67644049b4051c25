"""Office-holder records, priority scoring and deduplication."""

"""Office-holder deduplication.

Resolves the several result rows the query service returns for one person
(one per linked wiki article and party membership) to the single best row.
"Konrad Adenauer" with a Wikipedia, a Wikiquote and a Wikinews article
resolves to the Wikipedia row.
"""

import logging
import re
from dataclasses import replace
from datetime import date

from german_chancellors_presidents.graph.records import OfficeHolderRecord
from german_chancellors_presidents.graph.scoring import priority

logger = logging.getLogger(__name__)

_WIKI_TYPE_RE = re.compile(r"wiki([^.]*)\.")


def extract_wiki_type(article: str | None) -> str:
    """Return the article family of a wiki URL.

    "https://de.wikipedia.org/wiki/Foo" -> "pedia",
    "https://de.wikiquote.org/wiki/Foo" -> "quote". Empty string when the
    URL has no "wiki<family>." segment.
    """
    if not article:
        return ""
    match = _WIKI_TYPE_RE.search(article)
    return match.group(1) if match else ""


def deduplicate(
    records: list[OfficeHolderRecord],
    today: date | None = None,
) -> list[OfficeHolderRecord]:
    """Select one record per office holder label.

    Args:
        records: All result rows of a single office.
        today: Reference date for the scorer's recency term.

    Returns:
        One record per distinct label, in order of first appearance, with
        ``wiki_type`` set to "wiki" + the article family (e.g. "wikipedia").
    """
    # label -> (score, family, record); dicts keep first-seen label order
    best: dict[str, tuple[int, str, OfficeHolderRecord]] = {}

    for record in records:
        family = extract_wiki_type(record.article)
        score = priority(family, record.start_party_date, record.end_acting_date, today)

        current = best.get(record.label)
        if current is None or score > current[0]:
            best[record.label] = (score, family, record)

    winners = [replace(record, wiki_type=f"wiki{family}") for _, family, record in best.values()]
    logger.debug(f"Deduplicated {len(records)} rows to {len(winners)} office holders")
    return winners

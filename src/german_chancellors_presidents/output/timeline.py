"""GEDCOM event records for the host's timeline.

Each record is one string with embedded newlines:

    1 EVEN <name> (<*birth>, <†death>) (<from> <party start> <member of party> <party>)
    2 TYPE <office>
    2 DATE FROM <start> TO <end>
    2 NOTE [<wiki type>](<article> )

Markdown is used for NOTE. The blank before the closing parenthesis keeps
the link usable when markdown is disabled for the tree.
"""

import logging

from german_chancellors_presidents.graph.records import OfficeDescriptor, OfficeHolderRecord
from german_chancellors_presidents.i18n import translate
from german_chancellors_presidents.output.dates import normalize_date
from german_chancellors_presidents.static.loader import StaticRow, expand_type_code

logger = logging.getLogger(__name__)


def _life_span(record: OfficeHolderRecord) -> str:
    parts = []
    if record.birth_date:
        parts.append(f"*{normalize_date(record.birth_date)}")
    if record.death_date:
        parts.append(f"†{normalize_date(record.death_date)}")
    return f" ({', '.join(parts)})" if parts else ""


def _party(record: OfficeHolderRecord, language: str) -> str:
    if not record.party_short_label:
        return ""
    membership = f"{translate('member of party', language)} {record.party_short_label}"
    if record.start_party_date:
        since = f"{translate('from', language)} {normalize_date(record.start_party_date)}"
        return f" ({since} {membership})"
    return f" ({membership})"


def _acting_period(record: OfficeHolderRecord) -> str | None:
    if record.start_acting_date and record.end_acting_date:
        return (
            f"FROM {normalize_date(record.start_acting_date)} "
            f"TO {normalize_date(record.end_acting_date)}"
        )
    if record.start_acting_date:
        return f"FROM {normalize_date(record.start_acting_date)}"
    if record.end_acting_date:
        return f"TO {normalize_date(record.end_acting_date)}"
    return None


def format_office_holder(
    record: OfficeHolderRecord,
    office: OfficeDescriptor,
    language: str,
) -> str:
    """Render a deduplicated query record as an event record.

    Args:
        record: Winning record of the deduplicator.
        office: Office the record was queried for.
        language: Language for the translated labels.

    Returns:
        The event record string.

    Raises:
        MalformedDateError: If one of the record's dates cannot be converted.
    """
    lines = [
        f"1 EVEN {record.label}{_life_span(record)}{_party(record, language)}",
        f"2 TYPE {office.translated_label(language)}",
    ]
    period = _acting_period(record)
    if period:
        lines.append(f"2 DATE {period}")
    if record.article:
        lines.append(f"2 NOTE [{record.wiki_type or 'wiki'}]({record.article} )")
    return "\n".join(lines)


def format_static_row(row: StaticRow, language: str, wikipedia_language: str) -> str:
    """Render a static dataset row as an event record.

    Args:
        row: Parsed CSV row.
        language: Language for the role labels and the "source" caption.
        wikipedia_language: Wikipedia edition the article slugs belong to.

    Returns:
        The event record string; with an image the NOTE links the thumbnail
        to the article and the attribution follows as continuation line.
    """
    article_url = f"https://{wikipedia_language}.wikipedia.org/wiki/{row.article}"
    caption = f"wikipedia {wikipedia_language}"

    if row.image:
        note = f"[![{caption}](https://{row.image} )]({article_url} )"
    else:
        note = f"[{caption}]({article_url} )"

    lines = [
        f"1 EVEN {row.name}",
        f"2 TYPE {expand_type_code(row.type_code, language)}",
        f"2 DATE {row.date}",
        f"2 NOTE {note}",
    ]
    if row.attribution:
        lines.append(f"3 CONT {translate('source', language)}: {row.attribution}")
    return "\n".join(lines)

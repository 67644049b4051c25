"""Records exchanged between the query, dedup and output stages.

Offices are identified by a Wikidata item and the property that links the
office to its holders. Office holders arrive as flat SPARQL result rows and
are turned into typed records with every column optional except the label.
"""

import logging
from dataclasses import dataclass

from german_chancellors_presidents.i18n import translate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OfficeDescriptor:
    """One tracked office: Wikidata item, linking property and label msgid."""

    entity_id: str
    linking_property: str
    label: str

    def translated_label(self, language: str) -> str:
        return translate(self.label, language)


# Fixed order of the live stream: Chancellor, President, former-state head.
# P1308 ("officeholder") links the office item to the person holding it.
OFFICES: tuple[OfficeDescriptor, ...] = (
    OfficeDescriptor("Q4970706", "P1308", "Chancellor of Germany"),
    OfficeDescriptor("Q25223", "P1308", "President of Germany"),
    OfficeDescriptor("Q1589591", "P1308", "Head of State of the GDR"),
)


@dataclass(frozen=True)
class OfficeHolderRecord:
    """A single SPARQL result row for one office holder.

    Dates are ISO-8601 strings as returned by the query service
    (``1949-09-15T00:00:00Z``). ``wiki_type`` is not part of the query; the
    deduplicator fills it in on the record it selects.
    """

    label: str
    start_acting_date: str | None = None
    end_acting_date: str | None = None
    birth_date: str | None = None
    death_date: str | None = None
    party_short_label: str | None = None
    start_party_date: str | None = None
    article: str | None = None
    wiki_type: str | None = None

    @classmethod
    def from_binding(cls, binding: dict) -> "OfficeHolderRecord | None":
        """Build a record from one ``results.bindings`` row.

        Returns None for rows without an office holder label.
        """
        values = {
            name: cell.get("value")
            for name, cell in binding.items()
            if isinstance(cell, dict) and isinstance(cell.get("value"), str)
        }
        label = values.get(SPARQL_COLUMNS["label"])
        if not label:
            logger.debug(f"Dropping result row without label: {binding}")
            return None
        kwargs = {
            field_name: values[column]
            for field_name, column in SPARQL_COLUMNS.items()
            if field_name != "label" and column in values
        }
        return cls(label=label, **kwargs)


# Record field -> SPARQL result variable
SPARQL_COLUMNS: dict[str, str] = {
    "label": "officeHolderLabel",
    "start_acting_date": "startActingDate",
    "end_acting_date": "endActingDate",
    "birth_date": "birthDate",
    "death_date": "deathDate",
    "party_short_label": "partyShortLabel",
    "start_party_date": "startPartyDate",
    "article": "article",
}


"""Translations for the labels used in generated event records.

Message ids are the English texts. Languages without a catalogue, and
message ids missing from a catalogue, fall back to English.
"""

CATALOGUES: dict[str, dict[str, str]] = {
    "de": {
        "Chancellor of Germany": "Bundeskanzler von Deutschland",
        "President of Germany": "Bundespräsident von Deutschland",
        "Head of State of the GDR": "Staatsoberhaupt der DDR",
        "acting": "nur geschäftsführend",
        "source": "Quelle",
        "from": "ab",
        "member of party": "Mitglied der Partei",
        "Historical facts (in German) - Chancellors and Presidents of Germany (since 1949)": (
            "Historische Daten - Bundeskanzler und Bundespräsidenten der "
            "Bundesrepublik Deutschland (seit 1949)"
        ),
    },
}


def short_language(language_tag: str) -> str:
    """Reduce a language tag such as ``de-AT`` to its first two characters."""
    return language_tag[:2].lower()


def translate(msgid: str, language: str) -> str:
    """Translate ``msgid`` into ``language`` (a tag or a two-letter code)."""
    catalogue = CATALOGUES.get(short_language(language), {})
    return catalogue.get(msgid, msgid)

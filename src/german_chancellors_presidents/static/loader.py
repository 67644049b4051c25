"""Load the bundled CSV list of chancellors and presidents.

There is a heading line as comment. Each following line has six columns:

- name: <name> of person (<party>), e.g. "Konrad Adenauer (CDU)"
- type: "C" Chancellor of Germany, "P" President of Germany, "A" acting,
  combinable, e.g. "C (A)"
- date: acting period in GEDCOM syntax, e.g. "FROM 15 SEP 1949 TO 16 OCT 1963"
- article: article name in Wikipedia, e.g. "Konrad_Adenauer"
- image: Wikimedia Commons link without the mandatory "https://"
- attribution: attribution text for the image
"""

import csv
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from german_chancellors_presidents.i18n import translate

logger = logging.getLogger(__name__)

COLUMNS = ("name", "type_code", "date", "article", "image", "attribution")

# Type code letter -> role msgid
ROLE_LABELS: dict[str, str] = {
    "C": "Chancellor of Germany",
    "P": "President of Germany",
    "A": "acting",
}

_TYPE_CODE_RE = re.compile(r"^[CPA()\s]+$")
_ROLE_LETTER_RE = re.compile(r"[CPA]")


class MalformedStaticRow(ValueError):
    """Raised for rows with a wrong column count or an unknown type code."""


@dataclass(frozen=True)
class StaticRow:
    """One person/role line of the static dataset."""

    name: str
    type_code: str
    date: str
    article: str
    image: str = ""
    attribution: str = ""


def is_comment(cells: list[str]) -> bool:
    return bool(cells) and cells[0].lstrip().startswith("#")


def parse_row(cells: list[str]) -> StaticRow:
    """Validate one CSV row and turn it into a StaticRow."""
    if len(cells) != len(COLUMNS):
        raise MalformedStaticRow(f"Expected {len(COLUMNS)} columns, got {len(cells)}: {cells}")

    row = StaticRow(*(cell.strip() for cell in cells))
    if not _TYPE_CODE_RE.match(row.type_code) or not _ROLE_LETTER_RE.search(row.type_code):
        raise MalformedStaticRow(f"Unknown type code {row.type_code!r} for {row.name!r}")
    return row


def expand_type_code(type_code: str, language: str) -> str:
    """Replace the role letters of a type code by their translated labels.

    "C (A)" -> "Chancellor of Germany (acting)".
    """
    return _ROLE_LETTER_RE.sub(lambda m: translate(ROLE_LABELS[m.group()], language), type_code)


def load_static_rows(path: Path) -> list[StaticRow]:
    """Read all valid rows of the static dataset.

    The first line is the heading and is ignored. Blank lines, comment
    lines (starting with "#") and malformed rows are skipped.

    Args:
        path: Path to the CSV file.

    Returns:
        Rows in file order.
    """
    rows: list[StaticRow] = []
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        next(reader, None)

        for cells in reader:
            if not cells or is_comment(cells):
                continue
            try:
                rows.append(parse_row(cells))
            except MalformedStaticRow as e:
                logger.debug(f"Skipping static row at line {reader.line_num}: {e}")

    logger.info(f"Loaded {len(rows)} rows from {path.name}")
    return rows

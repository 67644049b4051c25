"""ISO-8601 to GEDCOM date conversion."""

MONTHS: tuple[str, ...] = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)


class MalformedDateError(ValueError):
    """Raised when a timestamp does not have the YYYY-MM-DD... layout."""


def normalize_date(value: str) -> str:
    """Convert ``YYYY-MM-DDThh:mm:ssZ`` into the GEDCOM form ``D MON YYYY``.

    The fields are read at fixed offsets; the time and zone suffix are
    ignored and no timezone conversion takes place.

    >>> normalize_date("1937-03-19T00:00:00Z")
    '19 MAR 1937'
    """
    year, month, day = value[0:4], value[5:7], value[8:10]
    if not (len(year) == 4 and year.isdigit() and month.isdigit() and day.isdigit()):
        raise MalformedDateError(f"Unparseable date: {value!r}")

    month_number = int(month)
    day_number = int(day)
    if not 1 <= month_number <= 12:
        raise MalformedDateError(f"Month out of range in {value!r}")
    if not 1 <= day_number <= 31:
        raise MalformedDateError(f"Day out of range in {value!r}")

    return f"{day_number} {MONTHS[month_number - 1]} {year}"

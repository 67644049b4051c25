"""Static dataset bundled with the package."""

from german_chancellors_presidents.static.loader import (
    MalformedStaticRow,
    StaticRow,
    expand_type_code,
    load_static_rows,
    parse_row,
)

__all__ = [
    "MalformedStaticRow",
    "StaticRow",
    "expand_type_code",
    "load_static_rows",
    "parse_row",
]

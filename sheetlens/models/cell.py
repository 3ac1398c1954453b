"""
Cell values — the scalars a table is made of.

A cell is ``int | float | str | None``:

* numbers (``int`` / ``float``, never ``bool``)
* text (``str``, including the empty string)
* ``None`` — the absence marker

Both ``None`` and ``""`` count as *missing* for statistics, but they stay
distinct values so uniqueness and duplicate detection can tell them apart.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

__all__ = [
    "CellValue",
    "CellKind",
    "cell_kind",
    "is_missing",
    "is_supported",
    "format_number",
    "parse_number",
    "coerce_token",
]

CellValue = Union[int, float, str, None]


class CellKind(Enum):
    """The closed set of cell variants."""

    NUMBER = "number"
    TEXT = "text"
    MISSING = "missing"


def is_supported(value: object) -> bool:
    """Return ``True`` if *value* is a cell the engine can profile."""
    if value is None or isinstance(value, str):
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def cell_kind(value: CellValue) -> CellKind:
    """Classify *value* into exactly one :class:`CellKind`.

    Raises ``TypeError`` for anything that is not a supported cell.
    """
    if value is None or value == "":
        return CellKind.MISSING
    if isinstance(value, str):
        return CellKind.TEXT
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return CellKind.NUMBER
    raise TypeError(f"Unsupported cell value: {value!r} ({type(value).__name__})")


def is_missing(value: CellValue) -> bool:
    """The one missing-value predicate shared by every statistic."""
    return value is None or value == ""


def format_number(value: int | float) -> str:
    """Render a number as text; integral floats drop the fractional part.

    >>> format_number(2.0)
    '2'
    >>> format_number(2.5)
    '2.5'
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def parse_number(text: str) -> int | float | None:
    """Parse *text* as a finite number, or return ``None``.

    Integral values come back as ``int`` so ``"2"`` and ``"2.0"`` both
    round-trip to ``2``.
    """
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def coerce_token(token: str) -> CellValue:
    """Apply the import contract to a raw delimited-text token.

    Numeric-looking tokens become numbers; everything else stays text.
    """
    value = token.strip()
    number = parse_number(value)
    return value if number is None else number

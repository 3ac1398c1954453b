"""
Exception hierarchy for sheetlens.

The profiling engine itself never raises on a well-typed table; errors
only surface at the boundaries (table construction, column lookup, and
reading delimited files).
"""

from __future__ import annotations

__all__ = [
    "SheetlensError",
    "TableValidationError",
    "ColumnNotFoundError",
    "SourceReadError",
]


class SheetlensError(Exception):
    """Base class for all sheetlens errors."""


class TableValidationError(SheetlensError, ValueError):
    """A table was built from cells or headers the engine cannot profile."""


class ColumnNotFoundError(SheetlensError, KeyError):
    """The requested column does not exist in the table."""

    def __init__(self, column: str) -> None:
        super().__init__(column)
        self.column = column

    def __str__(self) -> str:
        return f"Column {self.column!r} not found"


class SourceReadError(SheetlensError):
    """A delimited text source could not be read into a table."""

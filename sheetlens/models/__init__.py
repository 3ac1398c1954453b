"""Core data-model classes used throughout sheetlens."""

from sheetlens.models.cell import (
    CellKind,
    CellValue,
    cell_kind,
    coerce_token,
    format_number,
    is_missing,
    parse_number,
)
from sheetlens.models.profile import (
    ColumnProfile,
    ColumnStats,
    ColumnType,
    DatasetReport,
    DateStats,
    NumericStats,
    Quartiles,
)
from sheetlens.models.table import Row, Table

__all__ = [
    "CellKind",
    "CellValue",
    "cell_kind",
    "coerce_token",
    "format_number",
    "is_missing",
    "parse_number",
    "ColumnProfile",
    "ColumnStats",
    "ColumnType",
    "DatasetReport",
    "DateStats",
    "NumericStats",
    "Quartiles",
    "Row",
    "Table",
]

"""
Profiling results — per-column profiles and the whole-dataset report.

All containers are frozen dataclasses fully derived from a
:class:`~sheetlens.models.table.Table`; they hold no references back into
it.  ``to_dict()`` renders the camelCase shape the report view and the
insight service consume, omitting absent payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sheetlens.models.cell import CellValue

__all__ = [
    "ColumnType",
    "Quartiles",
    "NumericStats",
    "DateStats",
    "ColumnStats",
    "ColumnProfile",
    "DatasetReport",
]


class ColumnType(str, Enum):
    """Inferred column type.  Values are the display labels."""

    NUMERIC = "Numeric"
    CATEGORICAL = "Categorical"
    DATE = "Date"
    MIXED = "Mixed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Quartiles:
    """Nearest-rank quartiles; ``q2`` is the interpolated median."""

    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, float]:
        return {"q1": self.q1, "q2": self.q2, "q3": self.q3}


@dataclass(frozen=True, slots=True)
class NumericStats:
    """Summary statistics over the numeric values of a column."""

    mean: float
    median: float
    mode: tuple[CellValue, ...]
    min: float
    max: float
    std_dev: float
    outliers: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "mean": self.mean,
            "median": self.median,
            "mode": list(self.mode),
            "min": self.min,
            "max": self.max,
            "stdDev": self.std_dev,
            "outliers": self.outliers,
        }


@dataclass(frozen=True, slots=True)
class DateStats:
    """Date range of a Date column, as ``YYYY-MM-DD`` strings."""

    min: str
    max: str
    invalid_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max, "invalidCount": self.invalid_count}


@dataclass(frozen=True, slots=True)
class ColumnStats:
    """Details-panel statistics for a single column.

    Numeric columns fill the numeric fields and ``quartiles``; categorical
    columns only carry a lexicographic ``min`` / ``max``.
    """

    type: ColumnType
    count: int
    unique: int
    missing: int
    mean: float | None = None
    median: float | None = None
    min: float | str | None = None
    max: float | str | None = None
    std_dev: float | None = None
    quartiles: Quartiles | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": self.type.value,
            "count": self.count,
            "unique": self.unique,
            "missing": self.missing,
        }
        optional = (
            ("mean", self.mean),
            ("median", self.median),
            ("min", self.min),
            ("max", self.max),
            ("stdDev", self.std_dev),
        )
        for key, value in optional:
            if value is not None:
                out[key] = value
        if self.quartiles is not None:
            out["quartiles"] = self.quartiles.to_dict()
        return out


@dataclass(frozen=True, slots=True)
class ColumnProfile:
    """Inferred type, counts, issues and typed payload for one column."""

    name: str
    type: ColumnType
    count: int
    unique: int
    missing: int
    issues: tuple[str, ...] = ()
    numeric_stats: NumericStats | None = None
    date_stats: DateStats | None = None

    @property
    def non_missing(self) -> int:
        return self.count - self.missing

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "count": self.count,
            "missing": self.missing,
            "unique": self.unique,
            "issues": list(self.issues),
        }
        if self.numeric_stats is not None:
            out["numericStats"] = self.numeric_stats.to_dict()
        if self.date_stats is not None:
            out["dateStats"] = self.date_stats.to_dict()
        return out


@dataclass(frozen=True)
class DatasetReport:
    """Whole-table quality report: totals, duplicates, and column profiles."""

    total_rows: int
    total_columns: int
    duplicate_rows: int
    columns: dict[str, ColumnProfile] = field(default_factory=dict)

    def columns_with_issues(self) -> list[ColumnProfile]:
        return [p for p in self.columns.values() if p.issues]

    def numeric_columns(self) -> list[ColumnProfile]:
        return [p for p in self.columns.values() if p.numeric_stats is not None]

    def date_columns(self) -> list[ColumnProfile]:
        return [p for p in self.columns.values() if p.date_stats is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalRows": self.total_rows,
            "totalCols": self.total_columns,
            "duplicateRows": self.duplicate_rows,
            "columns": {name: p.to_dict() for name, p in self.columns.items()},
        }

"""Column type inference: Numeric, Date, Mixed or Categorical."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sheetlens.config import ProfilerConfig
from sheetlens.models.cell import CellKind, CellValue, cell_kind
from sheetlens.models.profile import ColumnType
from sheetlens.profiler.dates import parse_date

__all__ = [
    "ISSUE_INVALID_DATES",
    "ISSUE_MIXED_TYPES",
    "TypeInference",
    "looks_like_date",
    "infer_type",
]

ISSUE_INVALID_DATES = "Invalid Date Formats Detected"
ISSUE_MIXED_TYPES = "Mixed Data Types (Numbers & Text)"


@dataclass(frozen=True, slots=True)
class TypeInference:
    column_type: ColumnType
    issues: tuple[str, ...]
    numeric_count: int
    text_count: int
    date_count: int


def looks_like_date(value: CellValue, cfg: ProfilerConfig = ProfilerConfig()) -> bool:
    """Text that parses as a date *and* carries a date separator."""
    if not isinstance(value, str):
        return False
    if not any(sep in value for sep in cfg.date_separators):
        return False
    return parse_date(value) is not None


def infer_type(
    values: Sequence[CellValue],
    cfg: ProfilerConfig = ProfilerConfig(),
) -> TypeInference:
    """Classify a column from its non-missing values.

    Checks run in a fixed order: all-numbers → Numeric; mostly dates →
    Date; numbers and text → Mixed; otherwise Categorical.  Missing values
    in *values* are ignored.
    """
    numeric = text = dates = 0
    for v in values:
        kind = cell_kind(v)
        if kind is CellKind.NUMBER:
            numeric += 1
        elif kind is CellKind.TEXT:
            text += 1
            if looks_like_date(v, cfg):
                dates += 1
    present = numeric + text

    issues: list[str] = []
    if numeric > 0 and text == 0:
        column_type = ColumnType.NUMERIC
    elif dates > present * cfg.date_ratio_threshold:
        column_type = ColumnType.DATE
        if dates < present:
            issues.append(ISSUE_INVALID_DATES)
    elif numeric > 0 and text > 0:
        column_type = ColumnType.MIXED
        issues.append(ISSUE_MIXED_TYPES)
    else:
        column_type = ColumnType.CATEGORICAL

    return TypeInference(
        column_type=column_type,
        issues=tuple(issues),
        numeric_count=numeric,
        text_count=text,
        date_count=dates,
    )

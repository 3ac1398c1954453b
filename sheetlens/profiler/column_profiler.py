"""
Column profiler — per-column statistics, inferred type and quality issues.

Two views of a column are produced:

* :func:`analyze_column` — the :class:`ColumnProfile` used by the dataset
  report (type inference, issues, numeric / date payloads).
* :func:`calculate_column_stats` — the lighter :class:`ColumnStats` shown
  in the column details panel and handed to the insight service.

Both read the table without mutating it and share the same missing-value
predicate.  Uniqueness is counted over the *raw* values, so the missing
markers ``None`` and ``""`` each form their own bucket.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from sheetlens.config import ProfilerConfig
from sheetlens.models.cell import CellValue, format_number, is_missing
from sheetlens.models.profile import ColumnProfile, ColumnStats, ColumnType
from sheetlens.models.table import Table
from sheetlens.profiler import numeric
from sheetlens.profiler.dates import compute_date_stats
from sheetlens.profiler.type_inference import infer_type

__all__ = [
    "unique_count",
    "profile_values",
    "analyze_column",
    "calculate_column_stats",
    "build_insight_context",
]

logger = logging.getLogger(__name__)

_NAN_KEY = object()


def _unique_key(value: CellValue) -> object:
    # NaN != NaN, but it should still occupy a single bucket.
    if isinstance(value, float) and math.isnan(value):
        return _NAN_KEY
    return value


def unique_count(values: Sequence[CellValue]) -> int:
    """Distinct raw values, missing markers included."""
    return len({_unique_key(v) for v in values})


def _numbers(values: Sequence[CellValue]) -> list[int | float]:
    return [v for v in values if isinstance(v, (int, float)) and not isinstance(v, bool)]


def profile_values(
    name: str,
    values: Sequence[CellValue],
    cfg: ProfilerConfig = ProfilerConfig(),
) -> ColumnProfile:
    """Profile an already-extracted column of values."""
    present = [v for v in values if not is_missing(v)]
    inference = infer_type(present, cfg)
    issues = list(inference.issues)

    numeric_stats = None
    wants_numeric = inference.column_type is ColumnType.NUMERIC or (
        inference.column_type is ColumnType.MIXED and inference.numeric_count > 0
    )
    if wants_numeric:
        numeric_stats = numeric.compute_numeric_stats(_numbers(present), cfg)
        if numeric_stats is not None and numeric_stats.outliers > 0:
            issues.append(f"Potential Outliers ({numeric_stats.outliers})")

    date_stats = None
    if inference.column_type is ColumnType.DATE:
        date_stats = compute_date_stats(present)

    logger.debug(
        "Column %r: %s, %d/%d present, %d issue(s)",
        name, inference.column_type.value, len(present), len(values), len(issues),
    )
    return ColumnProfile(
        name=name,
        type=inference.column_type,
        count=len(values),
        unique=unique_count(values),
        missing=len(values) - len(present),
        issues=tuple(issues),
        numeric_stats=numeric_stats,
        date_stats=date_stats,
    )


def analyze_column(
    table: Table,
    column: str,
    cfg: ProfilerConfig = ProfilerConfig(),
) -> ColumnProfile:
    """Profile one column of *table* for the dataset report."""
    return profile_values(column, table.column_values(column), cfg)


def calculate_column_stats(
    table: Table,
    column: str,
    cfg: ProfilerConfig = ProfilerConfig(),
) -> ColumnStats:
    """Details-panel statistics: Numeric when every present value is a number."""
    values = table.column_values(column)
    present = [v for v in values if not is_missing(v)]
    count = len(values)
    missing = count - len(present)
    unique = unique_count(values)

    nums = _numbers(present)
    if present and len(nums) == len(present):
        mu = numeric.mean(nums)
        return ColumnStats(
            type=ColumnType.NUMERIC,
            count=count,
            unique=unique,
            missing=missing,
            mean=mu,
            median=numeric.median(nums),
            min=float(min(nums)),
            max=float(max(nums)),
            std_dev=numeric.std_dev(nums, mu),
            quartiles=numeric.quartiles(nums, cfg),
        )

    rendered = sorted(v if isinstance(v, str) else format_number(v) for v in present)
    return ColumnStats(
        type=ColumnType.CATEGORICAL,
        count=count,
        unique=unique,
        missing=missing,
        min=rendered[0] if rendered else None,
        max=rendered[-1] if rendered else None,
    )


def build_insight_context(
    table: Table,
    column: str,
    cfg: ProfilerConfig = ProfilerConfig(),
) -> dict[str, Any]:
    """JSON-ready payload for the external insight service.

    Carries the column's :class:`ColumnStats` verbatim plus the first
    ``cfg.insight_sample_size`` raw values.
    """
    stats = calculate_column_stats(table, column, cfg)
    sample = table.column_values(column)[: cfg.insight_sample_size]
    return {
        "column": column,
        "stats": stats.to_dict(),
        "sampleValues": sample,
    }

"""
Numeric helpers — mean, median, population std-dev, nearest-rank
quartiles, IQR outliers and mode.

Every helper is total: empty input yields ``0.0`` (or an empty mode)
instead of raising, so a degenerate column never breaks a report.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from sheetlens.config import ProfilerConfig
from sheetlens.models.cell import format_number, parse_number
from sheetlens.models.profile import NumericStats, Quartiles

__all__ = [
    "mean",
    "median",
    "std_dev",
    "quartiles",
    "outlier_count",
    "mode",
    "compute_numeric_stats",
]

Number = int | float


def _as_array(values: Sequence[Number]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def mean(values: Sequence[Number]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(_as_array(values)))


def median(values: Sequence[Number]) -> float:
    """Middle element, or the average of the two middle elements."""
    if len(values) == 0:
        return 0.0
    ordered = np.sort(_as_array(values))
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[mid])
    return float((ordered[mid - 1] + ordered[mid]) / 2)


def std_dev(values: Sequence[Number], center: float | None = None) -> float:
    """Population standard deviation (divides by *n*) around *center*."""
    if len(values) == 0:
        return 0.0
    arr = _as_array(values)
    mu = float(np.mean(arr)) if center is None else center
    return float(np.sqrt(np.mean((arr - mu) ** 2)))


def _rank_value(ordered: np.ndarray, fraction: float) -> float:
    idx = math.floor(len(ordered) * fraction)
    if idx >= len(ordered):
        return 0.0
    value = float(ordered[idx])
    return 0.0 if math.isnan(value) else value


def quartiles(values: Sequence[Number], cfg: ProfilerConfig = ProfilerConfig()) -> Quartiles:
    """Nearest-rank ``q1`` / ``q3`` (no interpolation); ``q2`` is the median."""
    ordered = np.sort(_as_array(values))
    return Quartiles(
        q1=_rank_value(ordered, cfg.q1_fraction),
        q2=median(values),
        q3=_rank_value(ordered, cfg.q3_fraction),
    )


def outlier_count(values: Sequence[Number], q1: float, q3: float, multiplier: float = 1.5) -> int:
    """Count values strictly outside ``[q1 - k·IQR, q3 + k·IQR]``."""
    if len(values) == 0:
        return 0
    iqr = q3 - q1
    lower = q1 - multiplier * iqr
    upper = q3 + multiplier * iqr
    arr = _as_array(values)
    return int(np.count_nonzero((arr < lower) | (arr > upper)))


def mode(values: Sequence[Number], max_modes: int = 3) -> tuple[int | float | str, ...]:
    """Most frequent values, grouped by text rendering.

    Ties come back in first-seen order and are cut at *max_modes*.
    """
    if len(values) == 0:
        return ()
    counts: dict[str, int] = {}
    for v in values:
        key = format_number(v)
        counts[key] = counts.get(key, 0) + 1
    top = max(counts.values())
    winners = [k for k, c in counts.items() if c == top][:max_modes]
    return tuple(_from_key(k) for k in winners)


def _from_key(key: str) -> int | float | str:
    number = parse_number(key)
    return key if number is None else number


def compute_numeric_stats(
    values: Sequence[Number],
    cfg: ProfilerConfig = ProfilerConfig(),
) -> NumericStats | None:
    """Compute :class:`NumericStats` for *values*, or ``None`` when there
    are no numbers."""
    if len(values) == 0:
        return None
    mu = mean(values)
    q = quartiles(values, cfg)
    return NumericStats(
        mean=mu,
        median=q.q2,
        mode=mode(values, cfg.max_modes),
        min=float(min(values)),
        max=float(max(values)),
        std_dev=std_dev(values, mu),
        outliers=outlier_count(values, q.q1, q.q3, cfg.outlier_iqr_multiplier),
    )

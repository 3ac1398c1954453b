"""
Calendar-date parsing for type inference and Date-column statistics.

Parsing is deliberately lenient (``pandas.to_datetime`` falls back to a
dateutil-style parser), so callers pair it with a separator check before
trusting that a string is really a date.
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Sequence
from functools import lru_cache

import pandas as pd

from sheetlens.models.cell import CellValue, is_missing
from sheetlens.models.profile import DateStats

__all__ = ["parse_date", "format_date", "compute_date_stats"]

logger = logging.getLogger(__name__)

_DIGIT_RUN = re.compile(r"\d+")


def _has_year(text: str) -> bool:
    # A 3+ digit run, or day/month/year as three numeric groups.
    # Without one the year comes from the parser or the wall clock
    # ("3/4", "March 4", "now").
    runs = _DIGIT_RUN.findall(text)
    return len(runs) >= 3 or any(len(run) >= 3 for run in runs)


@lru_cache(maxsize=8192)
def parse_date(text: str) -> pd.Timestamp | None:
    """Parse *text* into a UTC timestamp, or ``None`` if it is not a date."""
    cleaned = text.strip()
    if not cleaned or not _has_year(cleaned):
        return None
    with warnings.catch_warnings():
        # Ambiguous day/month orders warn on every call.
        warnings.simplefilter("ignore", UserWarning)
        try:
            ts = pd.to_datetime(cleaned, errors="coerce", utc=True)
        except (ValueError, OverflowError, TypeError):
            return None
    if pd.isna(ts):
        return None
    return ts


def format_date(ts: pd.Timestamp) -> str:
    """``YYYY-MM-DD`` with a zero-padded year; *ts* is already UTC."""
    return f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"


def compute_date_stats(values: Sequence[CellValue]) -> DateStats | None:
    """Earliest / latest date and invalid count over the non-missing values.

    Only text values are parsed; numbers always count as invalid.
    Returns ``None`` when nothing parses.
    """
    present = [v for v in values if not is_missing(v)]
    parsed = [
        ts for ts in (parse_date(v) for v in present if isinstance(v, str)) if ts is not None
    ]
    if not parsed:
        logger.debug("No parseable dates among %d values", len(present))
        return None
    return DateStats(
        min=format_date(min(parsed)),
        max=format_date(max(parsed)),
        invalid_count=len(present) - len(parsed),
    )

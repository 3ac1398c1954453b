"""
Dataset aggregator — profiles every column and scans for duplicate rows.

The report is recomputed from scratch for each table snapshot; nothing is
cached between calls, so two calls on the same table return equal reports.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping

from sheetlens.config import ProfilerConfig
from sheetlens.models.cell import CellValue
from sheetlens.models.profile import ColumnProfile, DatasetReport
from sheetlens.models.table import Table
from sheetlens.profiler.column_profiler import analyze_column

__all__ = ["row_fingerprint", "count_duplicate_rows", "generate_report"]

logger = logging.getLogger(__name__)


def _canonical(value: CellValue) -> CellValue:
    # 5 and 5.0 are the same number; 5 and "5" stay distinct.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def row_fingerprint(row: Mapping[str, CellValue]) -> str:
    """Canonical JSON for *row*, independent of key insertion order."""
    return json.dumps(
        {key: _canonical(value) for key, value in row.items()},
        sort_keys=True,
        separators=(",", ":"),
    )


def count_duplicate_rows(rows: Iterable[Mapping[str, CellValue]]) -> int:
    """Number of rows identical to an earlier row; first occurrences never count."""
    seen: set[str] = set()
    duplicates = 0
    for row in rows:
        fp = row_fingerprint(row)
        if fp in seen:
            duplicates += 1
        else:
            seen.add(fp)
    return duplicates


def generate_report(table: Table, cfg: ProfilerConfig = ProfilerConfig()) -> DatasetReport:
    """Build the whole-table quality report.

    Columns are profiled in display order; the resulting mapping keeps
    that order.
    """
    duplicates = count_duplicate_rows(table)
    profiles: dict[str, ColumnProfile] = {}
    for column in table.columns:
        profiles[column] = analyze_column(table, column, cfg)

    logger.debug(
        "Profiled %d columns over %d rows (%d duplicate rows)",
        table.column_count, table.row_count, duplicates,
    )
    return DatasetReport(
        total_rows=table.row_count,
        total_columns=table.column_count,
        duplicate_rows=duplicates,
        columns=profiles,
    )

"""
sheetlens — spreadsheet profiling engine.

Infers column types, computes descriptive statistics, flags data-quality
issues (missing values, duplicates, outliers, mixed types, malformed
dates) and rolls them up into a dataset report.

Quick start::

    from sheetlens import Table, generate_report
    table = Table.from_records([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}])
    report = generate_report(table)
    report.columns["a"].numeric_stats.mean   # 1.5
"""

from sheetlens.config import ProfilerConfig
from sheetlens.models import ColumnProfile, ColumnStats, ColumnType, DatasetReport, Table
from sheetlens.profiler.column_profiler import (
    analyze_column,
    build_insight_context,
    calculate_column_stats,
)
from sheetlens.profiler.dataset import count_duplicate_rows, generate_report
from sheetlens.profiler.source_readers import parse_csv_text, read_csv, write_csv
from sheetlens.profiler.type_inference import infer_type

__all__ = [
    "ProfilerConfig",
    "ColumnProfile",
    "ColumnStats",
    "ColumnType",
    "DatasetReport",
    "Table",
    "analyze_column",
    "build_insight_context",
    "calculate_column_stats",
    "count_duplicate_rows",
    "generate_report",
    "infer_type",
    "parse_csv_text",
    "read_csv",
    "write_csv",
]
__version__ = "0.1.0"

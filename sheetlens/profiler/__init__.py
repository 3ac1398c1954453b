"""
Profiler package — the dataset profiling engine.

Modules
-------
type_inference
    Numeric / Date / Mixed / Categorical classification of a column.
numeric
    Mean, median, std-dev, nearest-rank quartiles, IQR outliers, mode.
dates
    Lenient date parsing and Date-column range statistics.
column_profiler
    Per-column profiles, details-panel stats and insight-service payloads.
dataset
    Duplicate-row detection and the whole-table report.
source_readers
    Delimited-text import into a :class:`~sheetlens.models.table.Table` and export back out.
"""

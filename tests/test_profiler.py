"""Tests for sheetlens.profiler.column_profiler and sheetlens.profiler.dates."""

from datetime import datetime, timezone

import pytest

from sheetlens.config import ProfilerConfig
from sheetlens.errors import ColumnNotFoundError
from sheetlens.models import ColumnType, Table
from sheetlens.profiler.column_profiler import (
    analyze_column,
    build_insight_context,
    calculate_column_stats,
    profile_values,
    unique_count,
)
from sheetlens.profiler.dates import compute_date_stats, format_date, parse_date


def _table(**columns):
    names = list(columns)
    length = len(next(iter(columns.values())))
    rows = [{name: columns[name][i] for name in names} for i in range(length)]
    return Table(names, rows)


# ── dates ────────────────────────────────────────────────────────────

class TestDates:
    def test_parse_and_format(self):
        ts = parse_date("2023-03-09")
        assert ts is not None
        assert format_date(ts) == "2023-03-09"

    def test_unparseable(self):
        assert parse_date("not a date") is None
        assert parse_date("") is None
        assert parse_date("now") is None

    def test_date_stats(self):
        stats = compute_date_stats(["2023-05-01", "2023-01-15", None, "2023-03-01"])
        assert stats is not None
        assert stats.min == "2023-01-15"
        assert stats.max == "2023-05-01"
        assert stats.invalid_count == 0

    def test_invalid_and_numbers_count_as_invalid(self):
        stats = compute_date_stats(["2023-01-01", "garbage", 7, ""])
        assert stats.invalid_count == 2

    def test_nothing_parses(self):
        assert compute_date_stats(["x-y", "a/b"]) is None

    def test_year_is_zero_padded(self):
        assert format_date(datetime(1, 1, 1, tzinfo=timezone.utc)) == "0001-01-01"
        assert format_date(datetime(999, 12, 31, tzinfo=timezone.utc)) == "0999-12-31"

    def test_dates_without_a_year_are_rejected(self):
        assert parse_date("3/4") is None
        assert parse_date("March 4") is None
        assert compute_date_stats(["3/4", "5/6"]) is None

    def test_yearless_column_is_categorical(self):
        prof = analyze_column(_table(d=["3/4", "5/6"]), "d")
        assert prof.type is ColumnType.CATEGORICAL
        assert prof.date_stats is None


# ── uniqueness ───────────────────────────────────────────────────────

class TestUniqueCount:
    def test_missing_markers_are_buckets(self):
        assert unique_count([1, None, "", 1]) == 3

    def test_number_and_text_are_distinct(self):
        assert unique_count([5, "5"]) == 2

    def test_int_and_float_equal(self):
        assert unique_count([5, 5.0]) == 1

    def test_nan_single_bucket(self):
        assert unique_count([float("nan"), float("nan")]) == 1


# ── analyze_column ───────────────────────────────────────────────────

class TestAnalyzeColumn:
    def test_numeric_column(self):
        prof = analyze_column(_table(age=[25, 30, 35, 40, 45]), "age")
        assert prof.type is ColumnType.NUMERIC
        assert prof.count == 5
        assert prof.unique == 5
        assert prof.missing == 0
        assert prof.numeric_stats is not None
        assert prof.numeric_stats.median == 35.0
        assert prof.date_stats is None

    def test_outlier_issue(self):
        prof = analyze_column(_table(v=[1, 2, 3, 4, 5, 100]), "v")
        assert prof.numeric_stats.outliers == 1
        assert "Potential Outliers (1)" in prof.issues

    def test_mixed_column_gets_partial_numeric_stats(self):
        prof = analyze_column(_table(v=[1, "a", 2]), "v")
        assert prof.type is ColumnType.MIXED
        assert prof.issues[0] == "Mixed Data Types (Numbers & Text)"
        assert prof.numeric_stats.mean == 1.5
        assert prof.numeric_stats.min == 1.0

    def test_date_column(self):
        prof = analyze_column(_table(d=["2023-01-01", "2023-02-01"]), "d")
        assert prof.type is ColumnType.DATE
        assert prof.date_stats.invalid_count == 0
        assert prof.date_stats.min == "2023-01-01"
        assert prof.date_stats.max == "2023-02-01"
        assert prof.numeric_stats is None

    def test_categorical_column(self):
        prof = analyze_column(_table(c=["a", "b", "a"]), "c")
        assert prof.type is ColumnType.CATEGORICAL
        assert prof.unique == 2
        assert prof.issues == ()
        assert prof.numeric_stats is None
        assert prof.date_stats is None

    def test_empty_column(self):
        prof = profile_values("e", [None, "", None])
        assert prof.type is ColumnType.CATEGORICAL
        assert prof.missing == 3
        assert prof.unique == 2
        assert prof.issues == ()
        assert prof.numeric_stats is None

    def test_missing_plus_present_is_count(self):
        prof = profile_values("m", [1, None, "", "x", 3.5])
        assert prof.missing + prof.non_missing == prof.count == 5

    def test_unknown_column(self):
        with pytest.raises(ColumnNotFoundError):
            analyze_column(_table(a=[1]), "b")


# ── calculate_column_stats ───────────────────────────────────────────

class TestCalculateColumnStats:
    def test_numeric(self):
        stats = calculate_column_stats(_table(v=[10, 20, 30, None]), "v")
        assert stats.type is ColumnType.NUMERIC
        assert stats.count == 4
        assert stats.missing == 1
        assert stats.unique == 4
        assert stats.mean == 20.0
        assert stats.median == 20.0
        assert stats.min == 10.0
        assert stats.max == 30.0
        assert stats.std_dev == pytest.approx(8.16496580927726)
        assert (stats.quartiles.q1, stats.quartiles.q2, stats.quartiles.q3) == (10.0, 20.0, 30.0)

    def test_categorical_lexicographic_range(self):
        stats = calculate_column_stats(_table(v=["pear", "apple", 3, ""]), "v")
        assert stats.type is ColumnType.CATEGORICAL
        assert stats.min == "3"
        assert stats.max == "pear"
        assert stats.mean is None
        assert stats.quartiles is None

    def test_all_missing(self):
        stats = calculate_column_stats(_table(v=[None, ""]), "v")
        assert stats.type is ColumnType.CATEGORICAL
        assert stats.min is None
        assert stats.max is None
        assert "min" not in stats.to_dict()

    def test_to_dict(self):
        out = calculate_column_stats(_table(v=[1, 2, 3]), "v").to_dict()
        assert out["type"] == "Numeric"
        assert out["quartiles"] == {"q1": 1.0, "q2": 2.0, "q3": 3.0}
        assert "stdDev" in out


class TestInsightContext:
    def test_payload(self):
        table = _table(v=list(range(25)))
        ctx = build_insight_context(table, "v")
        assert ctx["column"] == "v"
        assert ctx["stats"]["type"] == "Numeric"
        assert ctx["sampleValues"] == list(range(10))

    def test_sample_size_from_config(self):
        ctx = build_insight_context(_table(v=["a", "b", "c"]), "v", ProfilerConfig(insight_sample_size=2))
        assert ctx["sampleValues"] == ["a", "b"]

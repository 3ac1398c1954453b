"""Tests for sheetlens.profiler.type_inference."""

from sheetlens.config import ProfilerConfig
from sheetlens.models import ColumnType
from sheetlens.profiler.type_inference import (
    ISSUE_INVALID_DATES,
    ISSUE_MIXED_TYPES,
    infer_type,
    looks_like_date,
)


class TestLooksLikeDate:
    def test_iso_date(self):
        assert looks_like_date("2023-01-01")

    def test_slash_date(self):
        assert looks_like_date("2023/02/15")

    def test_bare_year_is_not_a_date(self):
        # Parses leniently but has no separator.
        assert not looks_like_date("2023")

    def test_numbers_are_never_dates(self):
        assert not looks_like_date(20230101)

    def test_hyphenated_text(self):
        assert not looks_like_date("hello-world")


class TestInferType:
    def test_numeric(self):
        result = infer_type([1, 2, 3])
        assert result.column_type is ColumnType.NUMERIC
        assert result.issues == ()

    def test_date(self):
        result = infer_type(["2023-01-01", "2023-02-01"])
        assert result.column_type is ColumnType.DATE
        assert result.issues == ()
        assert result.date_count == 2

    def test_date_with_invalid_values(self):
        values = ["2023-01-01", "2023-01-05", "2023-02-01", "2023-03-01", "2023-04-01", "not a date"]
        result = infer_type(values)
        assert result.column_type is ColumnType.DATE
        assert result.issues == (ISSUE_INVALID_DATES,)

    def test_too_few_dates_is_categorical(self):
        values = ["2023-01-01", "2023-01-05", "apple", "pear"]
        assert infer_type(values).column_type is ColumnType.CATEGORICAL

    def test_mixed(self):
        result = infer_type([1, "a", 2])
        assert result.column_type is ColumnType.MIXED
        assert result.issues == (ISSUE_MIXED_TYPES,)
        assert result.numeric_count == 2
        assert result.text_count == 1

    def test_categorical(self):
        result = infer_type(["a", "b", "a"])
        assert result.column_type is ColumnType.CATEGORICAL
        assert result.issues == ()

    def test_empty_is_categorical(self):
        result = infer_type([])
        assert result.column_type is ColumnType.CATEGORICAL
        assert result.issues == ()

    def test_missing_values_are_ignored(self):
        assert infer_type([1, None, "", 2]).column_type is ColumnType.NUMERIC
        assert infer_type([None, ""]).column_type is ColumnType.CATEGORICAL

    def test_numeric_checked_before_date(self):
        assert infer_type([2023, 2024]).column_type is ColumnType.NUMERIC

    def test_dates_win_over_mixed(self):
        values = ["2023-01-01"] * 9 + [5]
        result = infer_type(values)
        assert result.column_type is ColumnType.DATE
        assert result.issues == (ISSUE_INVALID_DATES,)

    def test_threshold_is_configurable(self):
        values = ["2023-01-01", "2023-01-05", "apple", "pear"]
        cfg = ProfilerConfig(date_ratio_threshold=0.4)
        assert infer_type(values, cfg).column_type is ColumnType.DATE

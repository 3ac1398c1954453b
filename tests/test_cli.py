"""Tests for sheetlens.cli."""

import json

import pytest
from click.testing import CliRunner

from sheetlens.cli import main


@pytest.fixture
def sales_csv(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text(
        "Region,Sales\nNorth,10\nSouth,12\nNorth,10\n",
        encoding="utf-8",
    )
    return path


def test_report_table(sales_csv):
    result = CliRunner().invoke(main, ["report", str(sales_csv)])
    assert result.exit_code == 0, result.output
    assert "Region" in result.output
    assert "1 duplicate row(s)" in result.output
    assert "Sales: mean" in result.output


def test_report_json(sales_csv):
    result = CliRunner().invoke(main, ["report", str(sales_csv), "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["totalRows"] == 3
    assert payload["duplicateRows"] == 1
    assert payload["columns"]["Sales"]["type"] == "Numeric"


def test_column_json(sales_csv):
    result = CliRunner().invoke(main, ["column", str(sales_csv), "Sales", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["type"] == "Numeric"
    assert payload["min"] == 10.0
    assert payload["max"] == 12.0


def test_column_table(sales_csv):
    result = CliRunner().invoke(main, ["column", str(sales_csv), "Region"])
    assert result.exit_code == 0, result.output
    assert "Categorical" in result.output


def test_unknown_column(sales_csv):
    result = CliRunner().invoke(main, ["column", str(sales_csv), "Profit"])
    assert result.exit_code == 1
    assert "Profit" in result.output


def test_env_override(sales_csv, monkeypatch):
    monkeypatch.setenv("SHEETLENS_MAX_MODES", "not-a-number")
    result = CliRunner().invoke(main, ["report", str(sales_csv)])
    assert result.exit_code != 0

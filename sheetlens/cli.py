"""
sheetlens CLI — profile a delimited file from the terminal.

Commands
--------
- ``report`` — whole-dataset quality report (types, missing, unique,
  issues, duplicate rows).
- ``column`` — details statistics for a single column.

Usage::

    sheetlens report sales.csv
    sheetlens column sales.csv Profit --json

Profiling knobs can be overridden with ``SHEETLENS_*`` environment
variables (a ``.env`` file in the working directory is loaded first).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table as RichTable

from sheetlens.config import ProfilerConfig
from sheetlens.errors import SheetlensError

console = Console()


def _load_config() -> ProfilerConfig:
    load_dotenv()
    try:
        return ProfilerConfig.from_env()
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _fmt(value: object) -> str:
    if isinstance(value, float):
        return f"{value:,.4g}"
    return str(value)


# ── Shared options ───────────────────────────────────────────────────

@click.group()
@click.version_option(package_name="sheetlens")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """sheetlens — spreadsheet profiling toolkit."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
            datefmt="%H:%M:%S",
        )


# ── report ───────────────────────────────────────────────────────────

@main.command("report")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Emit the report as JSON.")
def report(path: Path, as_json: bool) -> None:
    """Profile every column of PATH and list data-quality issues."""
    from sheetlens.profiler.dataset import generate_report
    from sheetlens.profiler.source_readers import read_csv

    cfg = _load_config()
    try:
        result = generate_report(read_csv(path, cfg), cfg)
    except SheetlensError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    table = RichTable(title=f"Dataset report: {path.name}")
    table.add_column("Column")
    table.add_column("Type")
    table.add_column("Missing", justify="right")
    table.add_column("Unique", justify="right")
    table.add_column("Issues")

    for name, prof in result.columns.items():
        issues = "; ".join(prof.issues) if prof.issues else "[green]—[/]"
        table.add_row(name, prof.type.value, str(prof.missing), str(prof.unique), issues)

    console.print(table)
    console.print(
        f"{result.total_rows} row(s), {result.total_columns} column(s), "
        f"[bold]{result.duplicate_rows}[/] duplicate row(s)"
    )
    for prof in result.numeric_columns():
        s = prof.numeric_stats
        console.print(
            f"  {prof.name}: mean {_fmt(s.mean)}, median {_fmt(s.median)}, "
            f"range {_fmt(s.min)}–{_fmt(s.max)}, {s.outliers} outlier(s)"
        )
    for prof in result.date_columns():
        d = prof.date_stats
        console.print(f"  {prof.name}: {d.min} to {d.max}, {d.invalid_count} invalid")


# ── column ───────────────────────────────────────────────────────────

@main.command("column")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Emit the statistics as JSON.")
def column(path: Path, name: str, as_json: bool) -> None:
    """Show details statistics for column NAME of PATH."""
    from sheetlens.profiler.column_profiler import calculate_column_stats
    from sheetlens.profiler.source_readers import read_csv

    cfg = _load_config()
    try:
        stats = calculate_column_stats(read_csv(path, cfg), name, cfg)
    except SheetlensError as exc:
        raise click.ClickException(str(exc)) from exc

    payload = stats.to_dict()
    if as_json:
        click.echo(json.dumps(payload, indent=2))
        return

    table = RichTable(title=f"{name} ({stats.type.value})")
    table.add_column("Statistic", style="dim")
    table.add_column("Value", justify="right")
    for key, value in payload.items():
        if key in ("type", "quartiles"):
            continue
        table.add_row(key, _fmt(value))
    if stats.quartiles is not None:
        for key, value in stats.quartiles.to_dict().items():
            table.add_row(key, _fmt(value))
    console.print(table)


if __name__ == "__main__":
    main()

"""
Delimited-text import and export.

Reading follows the import contract the profiler relies on:

* headers are trimmed
* every token is trimmed; finite numeric tokens become numbers, the rest
  stays text
* short rows are padded with ``""``

Polars does the CSV tokenising (quotes, separators); every column is read
as text so number coercion stays under our control.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import polars as pl

from sheetlens.config import ProfilerConfig
from sheetlens.errors import SourceReadError
from sheetlens.models.cell import CellValue, coerce_token, format_number
from sheetlens.models.table import Table

__all__ = ["read_csv", "parse_csv_text", "table_from_polars", "write_csv"]

logger = logging.getLogger(__name__)


def _read_frame(source: str | Path | io.BytesIO, cfg: ProfilerConfig) -> pl.DataFrame | None:
    try:
        return pl.read_csv(
            source,
            separator=cfg.csv_separator,
            encoding=cfg.csv_encoding,
            infer_schema=False,
            truncate_ragged_lines=True,
        )
    except pl.exceptions.NoDataError:
        return None


def table_from_polars(df: pl.DataFrame) -> Table:
    """Convert a string-typed Polars frame into a :class:`Table`."""
    headers = [name.strip().strip('"') for name in df.columns]
    rows: list[dict[str, CellValue]] = []
    for raw in df.iter_rows():
        rows.append({
            header: coerce_token("" if token is None else str(token))
            for header, token in zip(headers, raw)
        })
    return Table(headers, rows)


def read_csv(path: str | Path, cfg: ProfilerConfig = ProfilerConfig()) -> Table:
    """Read a delimited file into a :class:`Table`.

    An empty file yields an empty table.  Unreadable input raises
    :class:`~sheetlens.errors.SourceReadError`.
    """
    path = Path(path)
    logger.info("Reading CSV: %s", path)
    try:
        df = _read_frame(path, cfg)
    except (OSError, pl.exceptions.PolarsError) as exc:
        raise SourceReadError(f"Failed to read {path}: {exc}") from exc
    if df is None:
        logger.warning("No data in %s", path)
        return Table([])
    table = table_from_polars(df)
    logger.info("Loaded %d rows x %d columns from %s", table.row_count, table.column_count, path)
    return table


def parse_csv_text(text: str, cfg: ProfilerConfig = ProfilerConfig()) -> Table:
    """Parse delimited text held in memory into a :class:`Table`."""
    stripped = text.strip()
    if not stripped:
        return Table([])
    try:
        df = _read_frame(io.BytesIO(stripped.encode("utf-8")), cfg)
    except pl.exceptions.PolarsError as exc:
        raise SourceReadError(f"Failed to parse CSV text: {exc}") from exc
    return Table([]) if df is None else table_from_polars(df)


def _render(value: CellValue) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    return format_number(value)


def write_csv(table: Table, path: str | Path, cfg: ProfilerConfig = ProfilerConfig()) -> Path:
    """Write *table* to *path* in column order; missing cells become empty fields."""
    path = Path(path)
    data = {col: [_render(v) for v in table.column_values(col)] for col in table.columns}
    df = pl.DataFrame(data, schema={col: pl.String for col in table.columns})
    df.write_csv(path, separator=cfg.csv_separator)
    logger.info("Wrote %d rows to %s", table.row_count, path)
    return path

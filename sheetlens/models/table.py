"""
Table — the in-memory spreadsheet every profiling function reads.

An ordered list of column names plus an ordered list of rows, each row a
mapping from column name to :data:`~sheetlens.models.cell.CellValue`.
Column order is display order; statistics never depend on it.

The table is treated as a snapshot: rows are copied on construction and
edits (:meth:`Table.with_cell`) return a new table.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from sheetlens.errors import ColumnNotFoundError, TableValidationError
from sheetlens.models.cell import CellValue, is_supported

__all__ = ["Row", "Table"]

Row = dict[str, CellValue]


class Table:
    """Ordered columns + ordered rows of scalar cells.

    Parameters
    ----------
    columns : Sequence[str]
        Unique column names in display order.
    rows : Iterable[Mapping[str, CellValue]]
        Row mappings.  Rows may omit keys; a missing key reads as ``None``.
        Keys not listed in *columns* are kept on the row (they take part in
        duplicate detection) but are not profiled.
    """

    __slots__ = ("_columns", "_rows")

    def __init__(
        self,
        columns: Sequence[str],
        rows: Iterable[Mapping[str, CellValue]] = (),
    ) -> None:
        cols = tuple(columns)
        seen: set[str] = set()
        for name in cols:
            if not isinstance(name, str):
                raise TableValidationError(f"Column names must be strings, got {name!r}")
            if name in seen:
                raise TableValidationError(f"Duplicate column name {name!r}")
            seen.add(name)

        copied: list[Row] = []
        for idx, row in enumerate(rows):
            for key, value in row.items():
                if not isinstance(key, str):
                    raise TableValidationError(
                        f"Row {idx}: column keys must be strings, got {key!r}"
                    )
                if not is_supported(value):
                    raise TableValidationError(
                        f"Row {idx}, column {key!r}: unsupported cell value "
                        f"{value!r} ({type(value).__name__})"
                    )
            copied.append(dict(row))

        self._columns = cols
        self._rows = copied

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_records(
        cls,
        rows: Iterable[Mapping[str, CellValue]],
        columns: Sequence[str] | None = None,
    ) -> Table:
        """Build a table from row mappings, deriving columns if not given.

        Derived columns follow first-seen key order across the rows.
        """
        materialised = list(rows)
        if columns is None:
            derived: dict[str, None] = {}
            for row in materialised:
                for key in row:
                    derived.setdefault(key, None)
            columns = list(derived)
        return cls(columns, materialised)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def rows(self) -> tuple[Row, ...]:
        """Read-only view of the rows (the dicts themselves are shared)."""
        return tuple(self._rows)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __contains__(self, column: object) -> bool:
        return column in self._columns

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Table):
            return self._columns == other._columns and self._rows == other._rows
        return NotImplemented

    def __repr__(self) -> str:
        return f"Table(columns={list(self._columns)!r}, rows={len(self._rows)})"

    def column_values(self, column: str) -> list[CellValue]:
        """Return the column's values in row order (``None`` for absent keys)."""
        if column not in self._columns:
            raise ColumnNotFoundError(column)
        return [row.get(column) for row in self._rows]

    # ------------------------------------------------------------------
    # Editing (copy-on-write)
    # ------------------------------------------------------------------

    def with_cell(self, row_index: int, column: str, value: Any) -> Table:
        """Return a new table with one cell replaced.

        Writing to an unknown column appends it to the column list.
        """
        if not 0 <= row_index < len(self._rows):
            raise IndexError(f"Row index {row_index} out of range (0..{len(self._rows) - 1})")
        rows = list(self._rows)
        rows[row_index] = {**rows[row_index], column: value}
        columns = self._columns if column in self._columns else self._columns + (column,)
        return Table(columns, rows)

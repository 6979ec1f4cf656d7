# csv_analyzer/core/queries.py
from __future__ import annotations
from collections import Counter

from .errors import ColumnNotFound, EmptyTable, RowCountExceeded
from .model import Cell, ColumnInfo, NumberCell, Record, Table, TextCell
from .normalize import format_number


def list_columns(table: Table) -> list[ColumnInfo]:
    """Every column with its inferred type, in header order."""
    return [ColumnInfo(name, table.column_is_numeric[name]) for name in table.header]


def rows_count(table: Table) -> int:
    return table.rows_count()


def _check_count(table: Table, n: int) -> None:
    if n < 0:
        raise ValueError(f"row count must be non-negative, got {n}")
    if n > table.rows_count():
        raise RowCountExceeded(n, table.rows_count())


def head(table: Table, n: int) -> list[Record]:
    _check_count(table, n)
    return list(table.rows[:n])


def tail(table: Table, n: int) -> list[Record]:
    _check_count(table, n)
    return list(table.rows[table.rows_count() - n:])


def show(table: Table) -> list[Record]:
    return list(table.rows)


def _column_position(table: Table, column: str) -> int:
    if not table.has_column(column):
        raise ColumnNotFound(column)
    if table.rows_count() == 0:
        raise EmptyTable()
    return table.column_index[column]


def show_column(table: Table, column: str) -> list[Cell]:
    idx = _column_position(table, column)
    return [row[idx] for row in table.rows]


def cell_key(cell: Cell) -> str:
    """Grouping key used by unique: numbers in their printed form, text verbatim."""
    if isinstance(cell, NumberCell):
        return format_number(cell.value)
    if isinstance(cell, TextCell):
        return cell.value
    raise TypeError(f"unexpected cell type {type(cell).__name__}")


def unique(table: Table, column: str) -> Counter:
    """
    Count rows per distinct value of ``column``.

    Values are grouped by their textual form, so 1 and 1.0 share a bucket.
    The returned Counter iterates in first-seen order.
    """
    idx = _column_position(table, column)
    counts: Counter = Counter()
    for row in table.rows:
        counts[cell_key(row[idx])] += 1
    return counts

# csv_analyzer/core/metrics.py
from __future__ import annotations
from functools import reduce
import operator
import numpy as np

from .errors import ColumnNotFound, ColumnNotNumeric, EmptyTable, TypeMismatch
from .model import NumberCell, Table, TextCell


def numeric_values(table: Table, column: str) -> list[float]:
    """
    Values of a numeric column in row order.

    Checks run in a fixed order: unknown column, text column, empty table,
    then every cell is verified to actually hold a number.
    """
    if not table.has_column(column):
        raise ColumnNotFound(column)
    if not table.column_is_numeric[column]:
        raise ColumnNotNumeric(column)
    if table.rows_count() == 0:
        raise EmptyTable()

    idx = table.column_index[column]
    values: list[float] = []
    for r, row in enumerate(table.rows):
        cell = row[idx]
        if isinstance(cell, NumberCell):
            values.append(cell.value)
        elif isinstance(cell, TextCell):
            raise TypeMismatch(column, r)
        else:
            raise TypeError(f"unexpected cell type {type(cell).__name__}")
    return values


def average(table: Table, column: str) -> float:
    values = numeric_values(table, column)
    total = reduce(operator.add, values)   # plain left-to-right sum
    return total / len(values)


def minimum(table: Table, column: str) -> float:
    # fmin/fmax: a NaN operand yields the other one
    return float(np.fmin.reduce(np.asarray(numeric_values(table, column), dtype=float)))


def maximum(table: Table, column: str) -> float:
    return float(np.fmax.reduce(np.asarray(numeric_values(table, column), dtype=float)))

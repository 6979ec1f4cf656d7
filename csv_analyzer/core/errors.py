# csv_analyzer/core/errors.py
from __future__ import annotations


class TableError(Exception):
    """Base class for everything the table core raises."""


# ---------- construction ----------
class ParseError(TableError):
    pass


class EmptyInput(ParseError):
    def __init__(self):
        super().__init__("input has no header line")


class DuplicateColumn(ParseError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate column name '{name}' in header")


class MalformedRow(ParseError):
    def __init__(self, line_number: int, expected: int, found: int):
        self.line_number = line_number
        self.expected = expected
        self.found = found
        super().__init__(f"line {line_number}: expected {expected} fields, found {found}")


# ---------- queries ----------
class QueryError(TableError):
    pass


class ColumnNotFound(QueryError):
    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Column '{column}' not found")


class ColumnNotNumeric(QueryError):
    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Column '{column}' is not numeric")


class EmptyTable(QueryError):
    def __init__(self):
        super().__init__("no data in the file")


class TypeMismatch(QueryError):
    def __init__(self, column: str, row: int):
        self.column = column
        self.row = row
        super().__init__("expected number, found string")


class RowCountExceeded(TableError):
    """More rows requested than the table holds (head/tail)."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"there are only {available} rows in the file")

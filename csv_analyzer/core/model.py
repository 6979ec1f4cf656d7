# csv_analyzer/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class NumberCell:
    value: float


@dataclass(frozen=True)
class TextCell:
    value: str


Cell = Union[NumberCell, TextCell]
Record = tuple[Cell, ...]


@dataclass(frozen=True)
class ColumnInfo:
    name: str
    is_numeric: bool

    @property
    def label(self) -> str:
        return "number" if self.is_numeric else "text"


@dataclass(frozen=True)
class Table:
    header: tuple[str, ...]              # column names, header order
    rows: tuple[Record, ...]             # one Cell per column, input order
    column_index: Mapping[str, int]      # name -> zero-based position
    column_is_numeric: Mapping[str, bool]

    @classmethod
    def build(cls, header, rows, numeric_flags) -> "Table":
        """Freeze parsed pieces; ``numeric_flags`` is a list aligned with ``header``."""
        index = {name: i for i, name in enumerate(header)}
        numeric = {name: bool(numeric_flags[i]) for i, name in enumerate(header)}
        return cls(
            header=tuple(header),
            rows=tuple(tuple(r) for r in rows),
            column_index=MappingProxyType(index),
            column_is_numeric=MappingProxyType(numeric),
        )

    def rows_count(self) -> int:
        return len(self.rows)

    def has_column(self, name: str) -> bool:
        return name in self.column_index

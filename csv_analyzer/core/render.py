# csv_analyzer/core/render.py
from __future__ import annotations
from typing import Iterable, Sequence

from .model import Cell, NumberCell, Record, TextCell
from .normalize import format_number

NUMBER = "number"
TEXT = "text"

Segment = tuple[str, "str | None"]   # (text, style tag); None = unstyled


def render_cell(cell: Cell) -> tuple[str, str]:
    if isinstance(cell, NumberCell):
        return format_number(cell.value), NUMBER
    if isinstance(cell, TextCell):
        return cell.value, TEXT
    raise TypeError(f"unexpected cell type {type(cell).__name__}")


def render_header(header: Sequence[str], delimiter: str = ",") -> str:
    return delimiter.join(header)


def render_record(record: Record, delimiter: str = ",") -> list[Segment]:
    """Every cell followed by the delimiter, the last one included."""
    segs: list[Segment] = []
    for cell in record:
        segs.append(render_cell(cell))
        segs.append((delimiter, None))
    return segs


def plain(segments: Iterable[Segment]) -> str:
    return "".join(text for text, _ in segments)

# csv_analyzer/loaders/csv_loader.py
from __future__ import annotations
from pathlib import Path
import logging

from ..core.errors import DuplicateColumn, EmptyInput, MalformedRow
from ..core.model import NumberCell, Table, TextCell
from ..core.normalize import parse_number

_LOG = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"


# ---------- text helpers ----------
def _split_lines(text: str) -> list[str]:
    # "\n"-separated, "\r\n" tolerated, no phantom line after a final newline
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def _split_fields(line: str, delimiter: str) -> list[str]:
    return [f.strip() for f in line.split(delimiter)]


def _parse_header(line: str, delimiter: str) -> list[str]:
    header = _split_fields(line, delimiter)
    seen: set[str] = set()
    for name in header:
        if name in seen:
            raise DuplicateColumn(name)
        seen.add(name)
    return header


def _fit_row(fields: list[str], width: int, line_number: int) -> list[str]:
    if len(fields) == width:
        return fields
    # a trailing delimiter (as printed by show/head/tail) leaves one empty field behind
    if len(fields) == width + 1 and fields[-1] == "":
        return fields[:-1]
    raise MalformedRow(line_number, width, len(fields))


# ---------- parsing ----------
def parse_table(text: str, delimiter: str = DEFAULT_DELIMITER) -> Table:
    """
    Build a Table from the full text of a delimited file.

    The first line is the header. Every following line becomes one record whose
    fields are trimmed and parsed as numbers where possible; a single field that
    does not parse turns its whole column into a text column.
    """
    lines = _split_lines(text)
    if not lines:
        raise EmptyInput()

    header = _parse_header(lines[0], delimiter)
    width = len(header)
    numeric = [True] * width
    rows = []

    for line_number, line in enumerate(lines[1:], start=2):
        fields = _fit_row(_split_fields(line, delimiter), width, line_number)
        record = []
        for col, field in enumerate(fields):
            value = parse_number(field)
            if value is None:
                if numeric[col]:
                    _LOG.debug("column '%s' downgraded to text at line %d (%r)",
                               header[col], line_number, field)
                numeric[col] = False
                record.append(TextCell(field))
            else:
                record.append(NumberCell(value))
        rows.append(record)

    return Table.build(header, rows, numeric)


# ---------- public loader ----------
def load(path: Path, cfg: dict | None = None) -> Table:
    """
    Read ``path`` fully into memory and parse it.
    Delimiter and encoding come from the ``input`` section of the config.
    """
    inp = (cfg or {}).get("input") or {}
    delimiter = str(inp.get("delimiter", DEFAULT_DELIMITER))
    encoding = str(inp.get("encoding", DEFAULT_ENCODING))
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")

    text = Path(path).read_text(encoding=encoding)
    table = parse_table(text, delimiter=delimiter)
    _LOG.info("[load] %s: %d column(s), %d row(s)", Path(path).name,
              len(table.header), table.rows_count())
    return table

# csv_analyzer/core/display.py
from __future__ import annotations
from typing import IO, Iterable, Sequence
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from .model import Cell, Record
from .render import NUMBER, TEXT, Segment, render_cell, render_header, render_record

DEFAULT_STYLES = {NUMBER: "blue", TEXT: "red"}


class Display:
    """
    Writes rendered tables and cells through a rich console, one style per cell type.

    Text goes to ``console.file`` as is; the console only decides whether colour
    is on and supplies the escape codes. ``Console.print`` would expand tabs
    inside cell values.
    """

    def __init__(self, console: Console | None = None, styles: dict | None = None,
                 delimiter: str = ","):
        self.console = console or make_console()
        self.styles = {**DEFAULT_STYLES, **(styles or {})}
        self.delimiter = delimiter

    @classmethod
    def from_config(cls, cfg: dict | None, *, color: bool | None = None,
                    file: IO[str] | None = None) -> "Display":
        disp = (cfg or {}).get("display") or {}
        use_color = bool(disp.get("color", True)) if color is None else color
        styles = {
            NUMBER: str(disp.get("number_style", DEFAULT_STYLES[NUMBER])),
            TEXT: str(disp.get("text_style", DEFAULT_STYLES[TEXT])),
        }
        delimiter = str(((cfg or {}).get("input") or {}).get("delimiter", ","))
        return cls(make_console(color=use_color, file=file), styles, delimiter)

    # ---------- primitives ----------
    def _styled(self, chunk: str, tag: str | None) -> str:
        system = self.console.color_system
        if not tag or system is None or not chunk:
            return chunk
        style = Style.parse(self.styles.get(tag, "none"))
        return style.render(chunk, color_system=COLOR_SYSTEMS[system])

    def line(self, message: str = "") -> None:
        self.console.file.write(message + "\n")

    def segments(self, segs: Iterable[Segment]) -> None:
        self.line("".join(self._styled(chunk, tag) for chunk, tag in segs))

    # ---------- composite views ----------
    def table(self, header: Sequence[str], records: Iterable[Record]) -> None:
        self.line(render_header(header, self.delimiter))
        for record in records:
            self.segments(render_record(record, self.delimiter))

    def cells(self, cells: Iterable[Cell]) -> None:
        for cell in cells:
            self.segments([render_cell(cell)])


def make_console(color: bool = True, file: IO[str] | None = None) -> Console:
    return Console(
        file=file,
        color_system="auto" if color else None,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )

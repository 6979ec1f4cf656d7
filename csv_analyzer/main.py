# csv_analyzer/main.py
from __future__ import annotations
from pathlib import Path
import argparse
import logging
import sys
import yaml

from .core import metrics, queries, reports
from .core.display import Display
from .core.errors import ParseError, QueryError, RowCountExceeded
from .core.normalize import format_average, format_number, parse_count
from .loaders import csv_loader

_LOG = logging.getLogger(__name__)

HELP_TEXT = """CSV Analyzer - A command-line tool for analyzing CSV files

USAGE:
    csv-analyzer <file.csv> <command> [argument]
    csv-analyzer help

COMMANDS:
    columns              Show all columns and their data types
    rows                 Show total number of rows
    show                 Display the entire CSV file with colored output
    show <column>        Displays the given column
    head [n]             Show first n rows (default: all rows)
    tail [n]             Show last n rows (default: all rows)
    avg <column>         Calculate average of numeric column
    min <column>         Find minimum value in numeric column
    max <column>         Find maximum value in numeric column
    unique <column>      Show unique values and their counts in column

EXAMPLES:
    csv-analyzer data.csv columns
    csv-analyzer data.csv head 10
    csv-analyzer data.csv avg salary
    csv-analyzer data.csv unique department"""

DEFAULT_CONFIG: dict = {
    "input": {"delimiter": ",", "encoding": "utf-8"},
    "display": {"color": True, "number_style": "blue", "text_style": "red"},
    "reports": {"format": "csv", "mat_variable": "report"},
    "logging": {"verbose": False},
}

_AGGREGATES = {
    "avg": (metrics.average, "Average", format_average),
    "min": (metrics.minimum, "Min", format_number),
    "max": (metrics.maximum, "Max", format_number),
}


# ---------- config ----------
def load_config(cfg_path: Path | None = None) -> dict:
    """Defaults overlaid with the YAML file, section by section."""
    cfg = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    if cfg_path is None:
        cfg_path = Path(__file__).resolve().parent / "config.yaml"
        if not cfg_path.is_file():
            return cfg
    with cfg_path.open("r", encoding="utf-8") as f:
        user = yaml.safe_load(f) or {}
    if not isinstance(user, dict):
        raise ValueError(f"{cfg_path}: expected a mapping at top level")
    for section, values in user.items():
        if values is None:      # empty section: keep the defaults
            continue
        if isinstance(values, dict):
            cfg.setdefault(section, {}).update(values)
        else:
            cfg[section] = values
    return cfg


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="csv-analyzer",
        description="Query a comma-separated file from the command line.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", help="input file, or 'help'")
    p.add_argument("command", nargs="?", help="query to run")
    p.add_argument("argument", nargs="?", help="column name or row count")
    p.add_argument("--config", type=Path, default=None, help="YAML config file")
    p.add_argument("--report", type=Path, default=None,
                   help="also write the result table to this base path (.csv/.mat)")
    p.add_argument("--no-color", action="store_true", help="plain output")
    p.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return p


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------- dispatch ----------
def _dispatch(table, command: str, arg: str | None, display: Display):
    """
    Run one query and print it. Returns (exit_code, report_frame, title);
    report_frame is None for commands without a tabular result.
    """
    if command == "columns":
        cols = queries.list_columns(table)
        display.line("Columns: ")
        for c in cols:
            display.line(f"  {c.name} ({c.label})")
        return 0, reports.columns_frame(cols), "columns"

    if command == "rows":
        display.line(f"Number of rows: {queries.rows_count(table)}")
        return 0, None, None

    if command in ("head", "tail"):
        n = parse_count(arg, default=table.rows_count())
        select = queries.head if command == "head" else queries.tail
        try:
            records = select(table, n)
        except RowCountExceeded as e:
            display.line(str(e))
            return 1, None, None
        display.table(table.header, records)
        return 0, None, None

    if command == "show":
        if arg is None:
            display.table(table.header, queries.show(table))
            return 0, None, None
        display.line(arg)
        try:
            cells = queries.show_column(table, arg)
        except QueryError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1, None, None
        display.cells(cells)
        return 0, None, None

    if command in _AGGREGATES:
        if arg is None:
            display.line(f"usage: {command} <column name>")
            return 0, None, None
        fn, label, fmt = _AGGREGATES[command]
        try:
            value = fn(table, arg)
        except QueryError as e:
            display.line(f"Error: {e}")
            return 0, None, None
        display.line(f"{label}: {fmt(value)}")
        return 0, reports.aggregate_frame(arg, command, value), f"{command} {arg}"

    if command == "unique":
        if arg is None:
            display.line("usage: unique <column name>")
            return 0, None, None
        try:
            counts = queries.unique(table, arg)
        except QueryError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1, None, None
        display.line(f"Column '{arg}' has {len(counts)} unique elements:")
        for value, n in counts.items():
            display.line(f"{value} : {n}")
        return 0, reports.unique_frame(arg, counts), f"unique {arg}"

    display.line(f"unknown command: {command}")
    return 0, None, None


def run(argv: list[str] | None = None, display: Display | None = None) -> int:
    """Parse ``argv``, run one command and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error reading config: {e}", file=sys.stderr)
        return 1

    verbose = args.verbose or bool((cfg.get("logging") or {}).get("verbose", False))
    _setup_logging(verbose)

    if display is None:
        display = Display.from_config(cfg, color=False if args.no_color else None)

    if args.file == "help":
        display.line(HELP_TEXT)
        return 0
    if args.command is None:
        parser.error("too few arguments: expected <file> <command> [argument]")

    in_path = Path(args.file)
    _LOG.info("[cfg] input=%s command=%s argument=%s", in_path, args.command, args.argument)

    try:
        table = csv_loader.load(in_path, cfg)
    except (OSError, UnicodeDecodeError) as e:
        display.line(f"Error reading file: '{args.file}', {e}")
        return 1
    except (ParseError, ValueError) as e:
        display.line(f"Error: {e}")
        return 1

    code, frame, title = _dispatch(table, args.command, args.argument, display)

    if args.report is not None:
        if frame is None:
            _LOG.info("[report] '%s' has no tabular result; nothing written", args.command)
        else:
            rep = cfg.get("reports") or {}
            try:
                reports.write_report(
                    frame,
                    args.report,
                    title,
                    fmt=str(rep.get("format", "csv")).lower(),
                    mat_variable=str(rep.get("mat_variable", "report")),
                )
            except (OSError, ValueError) as e:
                _LOG.error("report not written: %s", e)
                return 1
    return code


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()

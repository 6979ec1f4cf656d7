# csv_analyzer/core/normalize.py
from __future__ import annotations
import math
import re
import numpy as np

# decimal float syntax; float() alone would also take "1_000" and inner whitespace
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_COUNT_RE = re.compile(r"\+?[0-9]+")
_COUNT_MAX = 2**64 - 1   # larger counts are treated as unparseable


def parse_number(field: str) -> float | None:
    """Return the float value of an already trimmed field, or None if it is text."""
    if not _NUMBER_RE.fullmatch(field):
        return None
    return float(field)


def parse_count(arg: str | None, default: int) -> int:
    """Row count argument for head/tail; anything but a non-negative integer means ``default``."""
    if arg is None or not _COUNT_RE.fullmatch(arg):
        return default
    n = int(arg)
    return n if n <= _COUNT_MAX else default


def format_number(x: float) -> str:
    """Shortest decimal form, never in exponent notation: 1.0 -> '1', 0.25 -> '0.25'."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return np.format_float_positional(x, trim="-")


def format_average(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return f"{x:.2f}"

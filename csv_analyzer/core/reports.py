# csv_analyzer/core/reports.py
from __future__ import annotations
from collections import Counter
from pathlib import Path
from typing import Literal, Sequence
import logging
import numpy as np
import pandas as pd
from scipy.io import savemat

from .model import ColumnInfo

ReportFormat = Literal["csv", "mat", "both"]

_LOG = logging.getLogger(__name__)


# ---------- result -> dataframe ----------
def columns_frame(columns: Sequence[ColumnInfo]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"column": c.name, "type": c.label} for c in columns],
        columns=["column", "type"],
    )


def unique_frame(column: str, counts: Counter) -> pd.DataFrame:
    rows = [{"column": column, "value": value, "count": int(n)} for value, n in counts.items()]
    return pd.DataFrame(rows, columns=["column", "value", "count"])


def aggregate_frame(column: str, stat: str, value: float) -> pd.DataFrame:
    return pd.DataFrame([{"column": column, "stat": stat, "value": float(value)}],
                        columns=["column", "stat", "value"])


# ---------- writers ----------
def _write_csv(df_out: pd.DataFrame, out_csv: Path, title: str) -> None:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df_out.to_csv(out_csv, index=False, encoding="utf-8")
    _LOG.info("[OK] wrote report: %s → %s", title, out_csv)


def _to_mat_cellstr(seq: list) -> np.ndarray:
    """Make a MATLAB column cell array from a list of strings."""
    seq2 = [("" if s is None else str(s)) for s in seq]
    arr = np.empty((len(seq2), 1), dtype=object)
    arr[:, 0] = seq2
    return arr


def _write_mat(df_out: pd.DataFrame, out_mat: Path, varname: str, title: str) -> None:
    """
    Save a MATLAB struct with one field per dataframe column.
    Numeric columns become double (Nx1), everything else a cell array (Nx1).
    """
    out_mat.parent.mkdir(parents=True, exist_ok=True)

    mat_struct = {}
    for name in df_out.columns:
        col = df_out[name]
        if pd.api.types.is_numeric_dtype(col):
            mat_struct[str(name)] = col.to_numpy(dtype=float).reshape(-1, 1)
        else:
            mat_struct[str(name)] = _to_mat_cellstr(col.tolist())

    savemat(out_mat, {varname: mat_struct})
    _LOG.info("[OK] wrote report: %s → %s", title, out_mat)


def write_report(df_out: pd.DataFrame,
                 out_base: Path,
                 title: str,
                 fmt: ReportFormat = "csv",
                 mat_variable: str = "report") -> list[Path]:
    """
    Write a query result in the requested format.
    - out_base is a *base path*; any extension is replaced (e.g., .../report)
    - fmt: "csv" | "mat" | "both"
    - mat_variable: MATLAB variable name of the struct
    Returns the written paths.
    """
    if fmt not in ("csv", "mat", "both"):
        raise ValueError(f"unknown report format: {fmt!r}")
    written: list[Path] = []
    if fmt in ("csv", "both"):
        out_csv = out_base.with_suffix(".csv")
        _write_csv(df_out, out_csv, title)
        written.append(out_csv)
    if fmt in ("mat", "both"):
        out_mat = out_base.with_suffix(".mat")
        _write_mat(df_out, out_mat, mat_variable, title)
        written.append(out_mat)
    return written

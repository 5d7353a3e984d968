# formula_catalog/reporting.py
from __future__ import annotations

import os
import sys
import datetime as _dt
from typing import Optional, Sequence

from .catalog import Catalog
from .forms.pretty import format_formula

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "FORMULA_LIST_FILE_NAME",
    "RUN_REPORT_FILE_NAME",
    "prepare_output_directory",
    "write_formula_list",
    "format_run_report",
    "write_run_report",
]

DEFAULT_OUTPUT_DIR = os.path.join(os.path.expanduser("~"), "Documents", "Formula Catalog")
FORMULA_LIST_FILE_NAME = "formulalist.txt"
RUN_REPORT_FILE_NAME = "report.txt"


def _hr(ch: str = "─", n: int = 80) -> str:
    """Return a horizontal rule string of length n."""
    return ch * n


def _now_stamp() -> str:
    """Current local timestamp as YYYY-MM-DD HH:MM:SS."""
    return _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def prepare_output_directory(path: Optional[str] = None) -> str:
    """
    Create (if needed) and return the directory reports are written to.

    Defaults to ``~/Documents/Formula Catalog``.
    """
    directory = os.path.abspath(os.path.expanduser(path or DEFAULT_OUTPUT_DIR))
    os.makedirs(directory, exist_ok=True)
    return directory


def write_formula_list(
    catalog: Catalog,
    directory: str,
    *,
    names: Optional[Sequence[str]] = None,
    unicode_ops: bool = False,
) -> str:
    """
    Write every generated formula, one per line in generation order, to
    ``formulalist.txt`` inside ``directory``. Returns the file path.
    """
    filepath = os.path.join(directory, FORMULA_LIST_FILE_NAME)
    with open(filepath, "w", encoding="utf-8", newline="\n") as f:
        for formula in catalog.list_all_formulas():
            f.write(format_formula(formula, names, unicode_ops=unicode_ops))
            f.write("\n")
    return filepath


def format_run_report(result, *, title: str = "Formula Catalog Run Report") -> str:
    """
    Plain-text summary of an :class:`~formula_catalog.pipeline.EnumerationResult`:
    header, configuration, outcome and the per-size-class table.
    """
    cfg = result.config
    ops = ", ".join(op.name for op in cfg.operators)
    budget = "unbounded" if cfg.max_formulas is None else f"{cfg.max_formulas:,}"
    lines = [
        _hr(),
        title,
        _hr(),
        f"Written: {_now_stamp()}",
        f"Working dir: {os.getcwd()}",
        f"Python: {sys.version.split()[0]}",
        _hr(),
        f"Variables (n): {cfg.n}",
        f"Operators: {ops} (negation free: {cfg.include_negations})",
        f"Size ceiling: {cfg.max_size}",
        f"Formula budget: {budget}",
        f"Status: {result.status.value}",
        f"Stopped by: {result.stop_reason.value}",
        f"Formulas generated: {result.formulas_generated:,}",
        f"Truth tables found: {result.tables_found:,} of {result.tables_possible:,}",
        f"Elapsed: {result.elapsed:.3f} s",
        "",
        result.describe(),
        _hr(),
    ]
    if len(result.size_summary):
        lines.append(result.size_summary.to_string(index=False))
    else:
        lines.append("(no size class was generated)")
    lines += [_hr(), "END OF REPORT", _hr()]
    return "\n".join(lines) + "\n"


def write_run_report(result, directory: str) -> str:
    filepath = os.path.join(directory, RUN_REPORT_FILE_NAME)
    with open(filepath, "w", encoding="utf-8", newline="\n") as f:
        f.write(format_run_report(result))
    return filepath

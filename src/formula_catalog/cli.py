# src/formula_catalog/cli.py
"""
Command-line entry point.

    formula-catalog [-n {1,2,3,4,5}] [-o {text,html}] [--max-size K] ...

Generates boolean formulas over ``n`` variables, computes their truth tables
and finds the formulas with the fewest binary operators for each table. In
text mode every generated formula is listed in ``formulalist.txt``; in html
mode ``truthtablesX.htm`` pages show each truth table with its minimal
formula(s) followed by every formula with that table. A ``report.txt`` run
summary is written in both modes.

Exhaustive enumeration is practically intractable for n ≥ 4; such runs stop
at the size ceiling or the formula budget and report an incomplete catalog.
"""

from __future__ import annotations
import argparse
from time import perf_counter

from rich.console import Console

from .config import EnumerationConfig, OUTPUT_MODES, DEFAULT_MAX_FORMULAS
from .forms.formula import variable_names
from .forms.pretty import format_formulas
from .forms.textparse import parse_formula
from .forms.truth_table import MAX_VARIABLES
from .html_report import write_html_pages
from .pipeline.enumeration import assess_tractability, run_enumeration
from .reporting import prepare_output_directory, write_formula_list, write_run_report, DEFAULT_OUTPUT_DIR

console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="formula-catalog",
        description="Enumerate boolean formulas and find the smallest formula for every truth table.",
    )
    p.add_argument("-n", type=int, default=3, choices=range(1, MAX_VARIABLES + 1),
                   help="Number of boolean variables (default: 3).")
    p.add_argument("-o", "--output", default="text", choices=OUTPUT_MODES,
                   help="Report format: text formula list or paginated html (default: text).")
    p.add_argument("--max-size", type=int, default=2,
                   help="Largest number of binary operators per formula (default: 2).")
    p.add_argument("--max-formulas", type=int, default=DEFAULT_MAX_FORMULAS,
                   help=f"Formula budget; 0 means unbounded (default: {DEFAULT_MAX_FORMULAS:,}).")
    p.add_argument("--stop-when-complete", action="store_true",
                   help="Stop after the size class that completes the catalog.")
    p.add_argument("--output-dir", default=None,
                   help=f"Directory for the reports (default: {DEFAULT_OUTPUT_DIR}).")
    p.add_argument("--query", action="append", default=[], metavar="FORMULA",
                   help="Show the catalog entry of a formula such as 'p1 ^ ~p2' (can repeat).")
    p.add_argument("-q", "--quiet", action="store_true",
                   help="Only print errors.")
    return p


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def _show_queries(result, queries) -> None:
    names = variable_names(result.config.n)
    for text, formula in queries:
        entry = result.catalog.lookup(formula)
        if entry is None:
            console.print(f"{text}: truth table not discovered within the size ceiling")
            continue
        console.print(
            f"{text}: truth table {entry.truth_table}, "
            f"minimal ({entry.minimal_count} binary operators): {format_formulas(entry.minimal, names)}; "
            f"{len(entry.formulas)} formulas in total"
        )


def _fmt_count(c: int) -> str:
    # ints past a few thousand digits cannot be converted to str
    c = int(c)
    if c < 10 ** 15:
        return f"{c:,}"
    return f"~1e{int((c.bit_length() - 1) * 0.30103)}"


def _show_plan(plan) -> None:
    df = plan.to_frame()
    df = df[df["planned"]].drop(columns="planned")
    df["projected"] = df["projected"].map(_fmt_count)
    df["cumulative"] = df["cumulative"].map(_fmt_count)
    console.print(f"[bold]Projected formulas per size class (n={plan.n}):[/bold]")
    if len(df):
        console.print(df.to_string(index=False))
    console.print(f"Planned: {_fmt_count(plan.planned_total)} formulas")
    cut = plan.first_cut
    if cut is not None:
        console.print(
            f"Size class {cut} ({_fmt_count(plan.projected[cut])} formulas) does not fit "
            f"the budget of {plan.max_formulas:,}; the run stops here"
        )


def main(argv=None) -> int:
    start = perf_counter()
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = not args.quiet

    try:
        cfg = EnumerationConfig(
            n=args.n,
            max_size=args.max_size,
            max_formulas=args.max_formulas or None,
            stop_when_complete=args.stop_when_complete,
            output_mode=args.output,
        )
    except ValueError as e:
        parser.error(str(e))
    names = variable_names(cfg.n)
    queries = []
    for text in args.query:
        try:
            queries.append((text, parse_formula(text, names)))
        except ValueError as e:
            parser.error(f"--query {text!r}: {e}")

    if verbose:
        _show_plan(assess_tractability(cfg))

    result = run_enumeration(cfg, verbose=verbose)
    directory = prepare_output_directory(args.output_dir)

    if cfg.output_mode == "html":
        paths = write_html_pages(result.catalog, directory, names=names, progress=verbose)
        written = f"Truth table data written to {len(paths)} file(s) in {directory}"
    else:
        path = write_formula_list(result.catalog, directory, names=names)
        written = f"Formula list written to file {path}"
    report_path = write_run_report(result, directory)

    if queries:
        _show_queries(result, queries)
    if verbose:
        console.print(written)
        console.print(f"Run report written to file {report_path}")
        console.print(f"Total execution time = {perf_counter() - start:.3f} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

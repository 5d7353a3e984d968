# src/formula_catalog/pipeline/enumeration.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import List, Optional

import pandas as pd
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TimeElapsedColumn, TextColumn

from formula_catalog.config import EnumerationConfig
from formula_catalog.catalog import Catalog
from formula_catalog.forms.truth_table import TruthTableEvaluator, table_count
from formula_catalog.generators.formulas import FormulaGenerator, count_size_class

console = Console()

__all__ = [
    "RunStatus",
    "StopReason",
    "TractabilityReport",
    "EnumerationResult",
    "assess_tractability",
    "run_enumeration",
]

# Progress bars are refreshed every this many formulas.
PROGRESS_CHUNK = 4096


class RunStatus(Enum):
    COMPLETE = "complete"      # every 2**(2**n) truth table was discovered
    INCOMPLETE = "incomplete"  # a limit stopped the run first; results are partial


class StopReason(Enum):
    SIZE_CEILING = "size ceiling"
    FORMULA_BUDGET = "formula budget"
    ALL_TABLES_FOUND = "all truth tables found"


# ──────────────────────────────────────────────────────────────────────────────
# Tractability
# ──────────────────────────────────────────────────────────────────────────────

@dataclass
class TractabilityReport:
    """
    Up-front cost estimate of a run, from the exact size-class projections.

    ``planned_sizes`` are the size classes that fit the formula budget; the
    run will stop before the first class that does not. ``projected`` ends at
    that first cut: larger classes are never produced, so they are not
    projected either.
    """
    n: int
    max_size: int
    max_formulas: Optional[int]
    projected: List[int]
    planned_sizes: List[int]
    practically_intractable: bool

    @property
    def planned_total(self) -> int:
        return sum(self.projected[k] for k in self.planned_sizes)

    @property
    def fits_budget(self) -> bool:
        return len(self.planned_sizes) == len(self.projected)

    @property
    def first_cut(self) -> Optional[int]:
        """First size class the budget refuses (``None`` if every class fits)."""
        return None if self.fits_budget else len(self.planned_sizes)

    def warnings(self) -> List[str]:
        out = []
        if self.practically_intractable:
            out.append(
                f"n={self.n}: exhaustive enumeration is practically intractable for n ≥ 4; "
                f"expect an incomplete catalog"
            )
        cut = self.first_cut
        if cut is not None:
            where = "before size class 0" if cut == 0 else f"after size class {cut - 1}"
            out.append(
                f"size class {cut} needs {self.projected[cut]:,} more formulas; "
                f"the budget of {self.max_formulas:,} stops the run {where}"
            )
        return out

    def to_frame(self) -> pd.DataFrame:
        rows = []
        running = 0
        for k, c in enumerate(self.projected):
            running += c
            rows.append({"size": k, "projected": c, "cumulative": running, "planned": k in self.planned_sizes})
        return pd.DataFrame(rows, columns=["size", "projected", "cumulative", "planned"])


def assess_tractability(config: EnumerationConfig) -> TractabilityReport:
    projected, planned, running = [], [], 0
    for k in range(config.max_size + 1):
        c = count_size_class(config.n, k, len(config.operators), config.include_negations)
        projected.append(c)
        if config.max_formulas is not None and running + c > config.max_formulas:
            break
        running += c
        planned.append(k)
    return TractabilityReport(
        n=config.n,
        max_size=config.max_size,
        max_formulas=config.max_formulas,
        projected=projected,
        planned_sizes=planned,
        practically_intractable=config.practically_intractable,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Result
# ──────────────────────────────────────────────────────────────────────────────

@dataclass
class EnumerationResult:
    config: EnumerationConfig
    catalog: Catalog
    status: RunStatus
    stop_reason: StopReason
    sizes_completed: List[int]
    formulas_generated: int
    elapsed: float
    size_summary: pd.DataFrame
    tractability: TractabilityReport = field(repr=False)

    @property
    def complete(self) -> bool:
        return self.status is RunStatus.COMPLETE

    @property
    def tables_found(self) -> int:
        return len(self.catalog)

    @property
    def tables_possible(self) -> int:
        return table_count(self.config.n)

    @property
    def largest_size(self) -> Optional[int]:
        return self.sizes_completed[-1] if self.sizes_completed else None

    def describe(self) -> str:
        """One-line, human-readable outcome of the run."""
        found = f"{self.tables_found:,} of {self.tables_possible:,} truth tables"
        if self.complete:
            return (
                f"generation complete: {found} found with {self.formulas_generated:,} formulas "
                f"of at most {self.largest_size} binary operators"
            )
        where = "before size class 0" if self.largest_size is None else f"after size class {self.largest_size}"
        return (
            f"generation incomplete: {self.stop_reason.value} reached {where}; "
            f"{found} found with {self.formulas_generated:,} formulas"
        )


# ──────────────────────────────────────────────────────────────────────────────
# Pipeline
# ──────────────────────────────────────────────────────────────────────────────

def _make_progress(ui: str, persist: bool, disable: bool) -> Progress:
    """
    Build a Rich Progress instance based on UI prefs.

    ui:
      - "bars"    -> spinner + bar + elapsed time
      - "spinner" -> spinner only
    persist:
      - True  -> keep bars on screen after completion
      - False -> auto-clear when done
    """
    columns = [SpinnerColumn(), TextColumn("[bold blue]{task.description}")]
    if ui == "bars":
        columns += [BarColumn(), TimeElapsedColumn()]
    return Progress(*columns, transient=not persist, console=console, disable=disable)


def run_enumeration(
    config: Optional[EnumerationConfig] = None,
    *,
    verbose: bool = True,
    ui: str = "bars",        # "bars" or "spinner"
    persist: bool = False,   # keep progress visible after completion
) -> EnumerationResult:
    """
    Generate, evaluate and catalog formulas size class by size class.

    Formulas flow one at a time from the generator through the evaluator into
    the catalog, in non-decreasing operator count. Before each size class its
    exact size is compared against the remaining formula budget; a class that
    does not fit is not started. The catalog is finalized before returning.

    Parameters
    ----------
    config : EnumerationConfig, optional
        Run configuration (defaults to ``EnumerationConfig()``).
    verbose : bool, default True
        Print warnings, per-class progress and the final status.
    ui : {"bars","spinner"}, default "bars"
        Choose progress presentation: progress bars or minimal spinners.
    persist : bool, default False
        If True, keep progress on screen when finished; else auto-clear.

    Returns
    -------
    EnumerationResult
        Always returned, also when a limit stopped the run; check
        ``result.status`` / ``result.describe()``.
    """
    cfg = config or EnumerationConfig()
    tractability = assess_tractability(cfg)
    if verbose:
        for w in tractability.warnings():
            console.print(f"[yellow]warning:[/yellow] {w}")

    generator = FormulaGenerator(
        cfg.n,
        max_size=cfg.max_size,
        operators=cfg.operators,
        include_negations=cfg.include_negations,
    )
    evaluator = TruthTableEvaluator(cfg.n)
    catalog = Catalog(cfg.n, strict=cfg.strict)

    rows = []
    sizes_completed: List[int] = []
    generated = 0
    stop = StopReason.SIZE_CEILING
    t0 = perf_counter()

    progress = _make_progress(ui, persist, disable=not verbose)
    with progress:
        for k in range(cfg.max_size + 1):
            projected = generator.count_size_class(k)
            if cfg.max_formulas is not None and generated + projected > cfg.max_formulas:
                stop = StopReason.FORMULA_BUDGET
                break

            task = progress.add_task(f"Size class {k}", total=projected)
            tables_before = len(catalog)
            count = 0
            for formula in generator.size_class(k):
                # frontier formulas are never reused as subtrees during this run
                catalog.ingest(formula, evaluator.evaluate(formula, remember=False))
                count += 1
                if count % PROGRESS_CHUNK == 0:
                    progress.update(task, completed=count)
            progress.update(
                task,
                completed=count,
                description=f"Size class {k}: {count:,} formulas, {len(catalog):,} tables",
            )
            progress.stop_task(task)

            generated += count
            sizes_completed.append(k)
            rows.append({
                "size": k,
                "formulas": count,
                "new_tables": len(catalog) - tables_before,
                "tables_found": len(catalog),
            })
            if cfg.stop_when_complete and catalog.is_complete:
                stop = StopReason.ALL_TABLES_FOUND
                break

    catalog.finalize()
    evaluator.clear()

    result = EnumerationResult(
        config=cfg,
        catalog=catalog,
        status=RunStatus.COMPLETE if catalog.is_complete else RunStatus.INCOMPLETE,
        stop_reason=stop,
        sizes_completed=sizes_completed,
        formulas_generated=generated,
        elapsed=perf_counter() - t0,
        size_summary=pd.DataFrame(rows, columns=["size", "formulas", "new_tables", "tables_found"]),
        tractability=tractability,
    )
    if verbose:
        color = "green" if result.complete else "yellow"
        console.print(f"[{color}]{result.describe()}[/{color}]")
    return result

# src/formula_catalog/catalog.py

"""
Catalog of formulas keyed by truth table.

One :class:`CatalogEntry` per distinct truth table, created lazily the first
time the table is seen. Each entry keeps every formula mapped to the table and
the minimal subset chosen by the :class:`~formula_catalog.minimality.MinimalityPolicy`.

Ingestion is single pass. Because the generator emits formulas in
non-decreasing operator count, the first formula recorded for a table is
already minimal (or tied), and a later formula can only join the minimal list
on a tie. Out-of-order callers are still handled: a strictly smaller formula
replaces the minimal list.

Examples
--------
>>> from formula_catalog.forms import Literal, BinaryOp, XOR, evaluate
>>> cat = Catalog(2)
>>> f = BinaryOp(XOR, Literal(0), Literal(1))
>>> cat.ingest(f, evaluate(f, 2))
<Verdict.FIRST: 'first'>
>>> entry = cat.lookup(f)
>>> str(entry.truth_table), entry.minimal_count
('0110', 1)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple

import pandas as pd

from .forms.formula import Formula
from .forms.truth_table import TruthTable, TruthTableEvaluator, table_count
from .forms.pretty import format_formulas
from .minimality import MinimalityPolicy, Verdict, DEFAULT_POLICY

__all__ = [
    "CatalogError",
    "DuplicateFormulaError",
    "CatalogFrozenError",
    "CatalogEntry",
    "TruthTableRecord",
    "Catalog",
]


# ──────────────────────────────────────────────────────────────────────────────
# Errors
# ──────────────────────────────────────────────────────────────────────────────

class CatalogError(RuntimeError):
    """Base class for catalog contract violations."""


class DuplicateFormulaError(CatalogError):
    """A structurally identical formula was ingested twice."""


class CatalogFrozenError(CatalogError):
    """Ingestion was attempted after the catalog was finalized."""


# ──────────────────────────────────────────────────────────────────────────────
# Entries
# ──────────────────────────────────────────────────────────────────────────────

@dataclass(slots=True)
class CatalogEntry:
    """
    Everything known about one truth table.

    Attributes
    ----------
    truth_table : TruthTable
    minimal_count : int or None
        Smallest operator count seen so far (None until the first formula).
    minimal : list of Formula
        Formulas achieving ``minimal_count``, in discovery order.
    formulas : list of Formula
        Every formula mapped to this table, in discovery order.
    """
    truth_table: TruthTable
    minimal_count: Optional[int] = None
    minimal: List[Formula] = field(default_factory=list)
    formulas: List[Formula] = field(default_factory=list)

    def add(self, formula: Formula, policy: MinimalityPolicy = DEFAULT_POLICY) -> Verdict:
        """Record ``formula`` and update the minimal list; returns the policy verdict."""
        verdict = policy.judge(self.minimal_count, formula)
        self.formulas.append(formula)
        if verdict is Verdict.FIRST or verdict is Verdict.DETHRONES:
            self.minimal = [formula]
            self.minimal_count = policy.size(formula)
        elif verdict is Verdict.TIES:
            self.minimal.append(formula)
        return verdict

    def __len__(self) -> int:
        return len(self.formulas)

    @property
    def representative(self) -> Optional[Formula]:
        """First-discovered minimal formula."""
        return self.minimal[0] if self.minimal else None


class TruthTableRecord(NamedTuple):
    """Read-only view of one entry handed to the reports."""
    truth_table: TruthTable
    minimal: Tuple[Formula, ...]
    formulas: Tuple[Formula, ...]


# ──────────────────────────────────────────────────────────────────────────────
# Catalog
# ──────────────────────────────────────────────────────────────────────────────

class Catalog:
    """
    Mapping ``TruthTable -> CatalogEntry`` for one run over ``n`` variables.

    Parameters
    ----------
    n : int
        Number of variables every ingested truth table must have.
    policy : MinimalityPolicy, optional
        Size metric and tie rule (default: fewest binary operators, keep ties).
    strict : bool, default True
        Remember every ingested formula and raise
        :class:`DuplicateFormulaError` on a second ingestion of the same tree.

    Notes
    -----
    - Build one catalog per run and pass it explicitly to whoever ingests.
    - Call :meth:`finalize` when generation is done; after that the catalog
      is read-only and :meth:`ingest` raises :class:`CatalogFrozenError`.
    - Not thread-safe; the pipeline is the single ingestion owner.
    """

    def __init__(self, n: int, *, policy: MinimalityPolicy = DEFAULT_POLICY, strict: bool = True):
        self.n = n
        self.policy = policy
        self.strict = strict
        self._entries: Dict[TruthTable, CatalogEntry] = {}
        self._formulas: List[Formula] = []
        self._seen: Set[Formula] = set()
        self._frozen = False

    def __repr__(self) -> str:
        state = "finalized" if self._frozen else "open"
        return f"Catalog(n={self.n}, tables={len(self)}, formulas={len(self._formulas)}, {state})"

    # ---------- ingestion ----------
    def ingest(self, formula: Formula, truth_table: TruthTable) -> Verdict:
        """
        Record ``formula`` under ``truth_table``.

        Raises
        ------
        CatalogFrozenError
            The catalog has been finalized.
        DuplicateFormulaError
            ``strict`` is on and the same formula was ingested before.
        ValueError
            ``truth_table`` is over a different number of variables.
        """
        if self._frozen:
            raise CatalogFrozenError("catalog is finalized; no further ingestion")
        if truth_table.n != self.n:
            raise ValueError(f"truth table over {truth_table.n} variables given to a catalog over {self.n}")
        if self.strict:
            if formula in self._seen:
                raise DuplicateFormulaError(f"formula ingested twice: {formula}")
            self._seen.add(formula)

        entry = self._entries.get(truth_table)
        if entry is None:
            entry = self._entries[truth_table] = CatalogEntry(truth_table)
        self._formulas.append(formula)
        return entry.add(formula, self.policy)

    def finalize(self) -> "Catalog":
        """Make the catalog read-only and drop the duplicate-detection set."""
        self._frozen = True
        self._seen = set()
        return self

    @property
    def finalized(self) -> bool:
        return self._frozen

    # ---------- lookup ----------
    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, truth_table: TruthTable) -> bool:
        return truth_table in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def entry(self, truth_table: TruthTable) -> Optional[CatalogEntry]:
        return self._entries.get(truth_table)

    def lookup(self, formula: Formula, evaluator: Optional[TruthTableEvaluator] = None) -> Optional[CatalogEntry]:
        """Entry for the truth table of ``formula`` (``None`` if never discovered)."""
        ev = evaluator or TruthTableEvaluator(self.n, memoize=False)
        return self._entries.get(ev.evaluate(formula))

    @property
    def formula_count(self) -> int:
        return len(self._formulas)

    @property
    def tables_possible(self) -> int:
        return table_count(self.n)

    @property
    def is_complete(self) -> bool:
        """True once every one of the ``2**(2**n)`` truth tables has an entry."""
        return len(self._entries) == self.tables_possible

    # ---------- read interface for reports ----------
    def list_all_formulas(self) -> Tuple[Formula, ...]:
        """Every ingested formula, in generation order."""
        return tuple(self._formulas)

    def list_truth_tables(self) -> List[TruthTableRecord]:
        """One record per discovered truth table, in first-discovery order."""
        return [
            TruthTableRecord(e.truth_table, tuple(e.minimal), tuple(e.formulas))
            for e in self._entries.values()
        ]

    def to_frame(self, names: Optional[Sequence[str]] = None, *, unicode_ops: bool = False) -> pd.DataFrame:
        """
        Summary table, one row per entry in discovery order.

        Columns: ``table`` (packed int), ``outputs`` (0/1 string in assignment
        order), ``minimal_count``, ``n_minimal``, ``n_formulas``, ``minimal``
        (formatted minimal formulas).
        """
        rows = []
        for e in self._entries.values():
            rows.append({
                "table": e.truth_table.bits,
                "outputs": str(e.truth_table),
                "minimal_count": e.minimal_count,
                "n_minimal": len(e.minimal),
                "n_formulas": len(e.formulas),
                "minimal": format_formulas(e.minimal, names, unicode_ops=unicode_ops),
            })
        return pd.DataFrame(rows, columns=[
            "table", "outputs", "minimal_count", "n_minimal", "n_formulas", "minimal",
        ])

# src/formula_catalog/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .forms.formula import Operator, DEFAULT_OPERATORS
from .forms.truth_table import MAX_VARIABLES

"""
Configuration objects for an enumeration run.

The primary entry point is :class:`EnumerationConfig`, a small dataclass with
sane defaults. Treat it as an immutable configuration snapshot you pass into
:func:`formula_catalog.pipeline.enumeration.run_enumeration`; avoid mutating it
mid-run.

Examples
--------
>>> from formula_catalog.config import EnumerationConfig
>>> cfg = EnumerationConfig(n=2, max_size=1)
>>> cfg.n, cfg.max_size
(2, 1)
>>> cfg.practically_intractable
False
"""

__all__ = [
    'EnumerationConfig',
    'OUTPUT_MODES',
    'INTRACTABLE_N',
    'DEFAULT_MAX_FORMULAS',
]

OUTPUT_MODES = ("text", "html")

# Exhaustive enumeration is practically intractable from this many variables on.
INTRACTABLE_N = 4

DEFAULT_MAX_FORMULAS = 2_000_000


@dataclass
class EnumerationConfig:
    """
    Knobs for one enumeration run.

    Parameters
    ----------
    n : int, default=3
        Number of boolean variables, ``1 ≤ n ≤ 5``. ``n ≥ 4`` is accepted but
        flagged as practically intractable.
    max_size : int, default=2
        Size ceiling: the largest number of binary operators a generated
        formula may have. Memory grows roughly multiplicatively per size
        class, so this is the main resource bound.
    max_formulas : int or None, default=2_000_000
        Formula budget. A size class whose projected size would push the total
        past this number is not started. ``None`` disables the budget.
    operators : tuple[Operator, ...], default=(AND, OR, XOR)
        Binary connectives available to the generator.
    include_negations : bool, default=True
        Emit the negation of every literal and every combination (free in the
        size metric).
    stop_when_complete : bool, default=False
        Stop after the size class in which the last of the ``2**(2**n)``
        truth tables was discovered, instead of running to the ceiling.
    strict : bool, default=True
        Make the catalog reject a formula ingested twice.
    output_mode : {"text", "html"}, default="text"
        Report produced by the CLI; has no effect on the engine.

    Notes
    -----
    - Validation happens in ``__post_init__`` and raises ``ValueError``.
    - ``operators`` is normalized to a tuple of :class:`Operator`; symbols and
      names such as ``"&"`` or ``"xor"`` are accepted.
    """

    n: int = 3
    max_size: int = 2
    max_formulas: Optional[int] = DEFAULT_MAX_FORMULAS
    operators: Tuple[Operator, ...] = DEFAULT_OPERATORS
    include_negations: bool = True
    stop_when_complete: bool = False
    strict: bool = True
    output_mode: str = "text"

    def __post_init__(self):
        if not 1 <= self.n <= MAX_VARIABLES:
            raise ValueError(f"n must be between 1 and {MAX_VARIABLES}")
        if self.max_size < 0:
            raise ValueError("max_size must be ≥ 0")
        if self.max_formulas is not None and self.max_formulas < 1:
            raise ValueError("max_formulas must be ≥ 1 (or None for no budget)")
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(f"output_mode must be one of {OUTPUT_MODES}")
        ops = tuple(op if isinstance(op, Operator) else Operator.from_symbol(op) for op in self.operators)
        if not ops:
            raise ValueError("at least one operator is required")
        if len(set(ops)) != len(ops):
            raise ValueError("operators must not repeat")
        self.operators = ops

    @property
    def practically_intractable(self) -> bool:
        return self.n >= INTRACTABLE_N

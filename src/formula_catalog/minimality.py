# src/formula_catalog/minimality.py

"""
Minimality policy: which formulas represent a truth table.

"Minimal" means fewest binary operators (negation is free). Formulas tied on
that count are *all* kept, in the order they were discovered; the policy
applies no secondary tie-break such as alphabetical order or tree shape.
Any further ordering is left to the reports.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .forms.formula import Formula

__all__ = ["Verdict", "MinimalityPolicy", "DEFAULT_POLICY"]


class Verdict(Enum):
    """Outcome of comparing a newly seen formula with a table's current minimum."""
    FIRST = "first"          # the table had no formula yet
    DETHRONES = "dethrones"  # strictly smaller: replaces the minimal list
    TIES = "ties"            # same size: appended to the minimal list
    LOSES = "loses"          # larger: recorded, but not minimal

    @property
    def is_minimal(self) -> bool:
        return self is not Verdict.LOSES


@dataclass(frozen=True)
class MinimalityPolicy:
    """
    Size metric plus tie rule.

    Examples
    --------
    >>> from formula_catalog.forms.formula import Literal, BinaryOp, AND
    >>> policy = MinimalityPolicy()
    >>> policy.judge(None, Literal(0))
    <Verdict.FIRST: 'first'>
    >>> policy.judge(0, BinaryOp(AND, Literal(0), Literal(0)))
    <Verdict.LOSES: 'loses'>
    """

    def size(self, formula: Formula) -> int:
        return formula.operator_count

    def judge(self, current_min: Optional[int], formula: Formula) -> Verdict:
        if current_min is None:
            return Verdict.FIRST
        size = self.size(formula)
        if size < current_min:
            return Verdict.DETHRONES
        if size == current_min:
            return Verdict.TIES
        return Verdict.LOSES


DEFAULT_POLICY = MinimalityPolicy()

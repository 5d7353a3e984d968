# src/formula_catalog/forms/truth_table.py

"""
Truth tables and the truth-table evaluator.

A truth table over ``n`` variables is a bit vector of length ``2**n``. Bit
``a`` holds the formula's output under assignment ``a``, where variable ``v``
takes the value of bit ``v`` of ``a``. Tables are stored packed in a python
``int`` so they hash, compare and combine cheaply; :meth:`TruthTable.to_array`
gives the numpy view.

Evaluation runs all ``2**n`` assignments in one pass: each literal is a
precomputed packed column, NOT is an XOR against the all-ones mask, and binary
connectives apply their truth function to the packed columns.

Examples
--------
>>> from formula_catalog.forms.formula import Literal, BinaryOp, XOR
>>> from formula_catalog.forms.truth_table import evaluate
>>> evaluate(Literal(0), 2).values()
(0, 1, 0, 1)
>>> evaluate(BinaryOp(XOR, Literal(0), Literal(1)), 2).values()
(0, 1, 1, 0)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np

from .formula import Formula, Literal, Not, BinaryOp

__all__ = [
    "MAX_VARIABLES",
    "TruthTable",
    "TruthTableEvaluator",
    "evaluate",
    "evaluate_assignment",
    "literal_column",
    "table_count",
]

MAX_VARIABLES = 5


# =========================
# Internal helpers
# =========================

def _check_n(n: int) -> None:
    if not 1 <= n <= MAX_VARIABLES:
        raise ValueError(f"n must be between 1 and {MAX_VARIABLES}, got {n}")


def _pack(column: np.ndarray) -> int:
    """Pack a boolean column (index = assignment) into an int, bit ``a`` = row ``a``."""
    packed = np.packbits(np.asarray(column, dtype=bool), bitorder="little")
    return int.from_bytes(packed.tobytes(), "little")


def table_count(n: int) -> int:
    """
    Number of distinct truth tables over ``n`` variables, ``2**(2**n)``.

    >>> table_count(2)
    16
    """
    return 1 << (1 << n)


def literal_column(index: int, n: int) -> int:
    """
    Packed truth table of variable ``index`` over ``n`` variables.

    >>> bin(literal_column(1, 2))
    '0b1100'
    """
    assignments = np.arange(1 << n, dtype=np.int64)
    return _pack((assignments >> index) & 1)


# =========================
# Truth table value
# =========================

@dataclass(frozen=True, slots=True)
class TruthTable:
    """
    Immutable truth table over ``n`` variables.

    Parameters
    ----------
    n : int
        Number of variables.
    bits : int
        Packed outputs; bit ``a`` is the output under assignment ``a``.

    Notes
    -----
    Two formulas are the same boolean function iff their tables are equal.
    ``str(table)`` lists the outputs in assignment order (``a = 0`` first).
    """
    n: int
    bits: int

    def __post_init__(self):
        _check_n(self.n)
        if self.bits < 0 or self.bits >> (1 << self.n):
            raise ValueError(f"bits {self.bits} do not fit a table over {self.n} variables")

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "TruthTable":
        """
        Build a table from its outputs listed in assignment order.

        >>> TruthTable.from_values([0, 0, 0, 1]).bits
        8
        """
        width = len(values)
        n = width.bit_length() - 1
        if width < 2 or (1 << n) != width:
            raise ValueError(f"a truth table needs 2**n outputs, got {width}")
        return cls(n, _pack(np.asarray(values, dtype=bool)))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "TruthTable":
        return cls.from_values(np.asarray(arr).ravel().tolist())

    @property
    def width(self) -> int:
        """Number of rows, ``2**n``."""
        return 1 << self.n

    @property
    def full_mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def is_constant(self) -> bool:
        return self.bits in (0, self.full_mask)

    def __len__(self) -> int:
        return self.width

    def __getitem__(self, assignment: int) -> int:
        if not 0 <= assignment < self.width:
            raise IndexError(f"assignment {assignment} out of range for n={self.n}")
        return (self.bits >> assignment) & 1

    def __iter__(self):
        return iter(self.values())

    def values(self) -> Tuple[int, ...]:
        return tuple((self.bits >> a) & 1 for a in range(self.width))

    def to_array(self) -> np.ndarray:
        """Outputs as a ``uint8`` numpy array in assignment order."""
        return np.array(self.values(), dtype=np.uint8)

    def complement(self) -> "TruthTable":
        return TruthTable(self.n, self.bits ^ self.full_mask)

    def __str__(self) -> str:
        return "".join(str(v) for v in self.values())


# =========================
# Evaluation
# =========================

def evaluate_assignment(formula: Formula, assignment: int) -> int:
    """
    Evaluate ``formula`` under a single assignment (0/1 result).

    Variable ``v`` takes bit ``v`` of ``assignment``. This is the reference
    semantics the packed evaluator agrees with.

    >>> from formula_catalog.forms.formula import Literal, BinaryOp, AND
    >>> evaluate_assignment(BinaryOp(AND, Literal(0), Literal(1)), 0b11)
    1
    """
    if isinstance(formula, Literal):
        return (assignment >> formula.index) & 1
    if isinstance(formula, Not):
        return 1 - evaluate_assignment(formula.operand, assignment)
    if isinstance(formula, BinaryOp):
        return formula.op.apply(
            evaluate_assignment(formula.left, assignment),
            evaluate_assignment(formula.right, assignment),
        )
    raise TypeError(f"not a formula: {formula!r}")


class TruthTableEvaluator:
    """
    Evaluate formulas over a fixed number of variables.

    Parameters
    ----------
    n : int
        Number of variables (1..5).
    memoize : bool, default True
        Keep the packed table of every formula evaluated so far. Formulas
        produced by the generator share subtrees from earlier size classes,
        so with memoization each node is evaluated once.

    Notes
    -----
    The memo holds a reference to every formula it has stored; call
    :meth:`clear` to release it. Evaluate formulas that will never be reused
    as subtrees with ``remember=False``. This class is not thread-safe.
    """

    def __init__(self, n: int, *, memoize: bool = True):
        _check_n(n)
        self.n = n
        self.memoize = memoize
        self._full = (1 << (1 << n)) - 1
        self._literals = tuple(literal_column(v, n) for v in range(n))
        self._memo: Dict[Formula, int] = {}

    def __len__(self) -> int:
        return len(self._memo)

    def clear(self) -> None:
        self._memo.clear()

    def bits(self, formula: Formula, *, remember: bool = True) -> int:
        """
        Packed truth table of ``formula``.

        With ``remember=False`` the result for ``formula`` itself (and for the
        operand chain of its negations) is not stored; binary operands are
        always stored since they are the shared subtrees.
        """
        if self.memoize:
            hit = self._memo.get(formula)
            if hit is not None:
                return hit
        if isinstance(formula, Literal):
            if formula.index >= self.n:
                raise ValueError(f"variable p{formula.index + 1} is out of range for n={self.n}")
            out = self._literals[formula.index]
        elif isinstance(formula, Not):
            out = self.bits(formula.operand, remember=remember) ^ self._full
        elif isinstance(formula, BinaryOp):
            out = formula.op.apply(self.bits(formula.left), self.bits(formula.right))
        else:
            raise TypeError(f"not a formula: {formula!r}")
        if self.memoize and remember:
            self._memo[formula] = out
        return out

    def evaluate(self, formula: Formula, *, remember: bool = True) -> TruthTable:
        return TruthTable(self.n, self.bits(formula, remember=remember))

    __call__ = evaluate


def evaluate(formula: Formula, n: int) -> TruthTable:
    """One-off evaluation of ``formula`` over ``n`` variables (no memo)."""
    return TruthTableEvaluator(n, memoize=False).evaluate(formula)

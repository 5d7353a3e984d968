# src/formula_catalog/forms/formula.py

"""
Immutable boolean formula trees over variables ``p1 .. pn``.

- Three node kinds: :class:`Literal`, :class:`Not`, :class:`BinaryOp`
- A fixed, enumerable connective alphabet: :data:`AND`, :data:`OR`, :data:`XOR`
- Size metric: ``operator_count`` = number of binary-operator nodes
  (negation is free)
- Structural equality and hashing; hashes are computed once at construction

Examples
--------
>>> from formula_catalog.forms.formula import Literal, BinaryOp, AND, XOR
>>> p1, p2 = Literal(0), Literal(1)
>>> f = BinaryOp(XOR, BinaryOp(AND, p1, p2), p2.negate())
>>> f.operator_count
2
>>> str(f)
'(p1 & p2) ^ ~p2'
>>> f == BinaryOp(XOR, BinaryOp(AND, Literal(0), Literal(1)), ~Literal(1))
True
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, FrozenSet, List
import operator

__all__ = [
    "Operator",
    "AND",
    "OR",
    "XOR",
    "DEFAULT_OPERATORS",
    "Formula",
    "Literal",
    "Not",
    "BinaryOp",
    "variable_name",
    "variable_names",
]


# =========================
# Connective alphabet
# =========================

class Operator(Enum):
    """
    Binary connectives used by the generator.

    Each member carries ``(ascii symbol, unicode symbol, truth function)``.
    The truth function is one of :func:`operator.and_`, :func:`operator.or_`,
    :func:`operator.xor`, so it applies equally to 0/1 ints, packed integer
    bit vectors and numpy boolean arrays.
    """
    AND = ("&", "∧", operator.and_)
    OR = ("|", "∨", operator.or_)
    XOR = ("^", "⊕", operator.xor)

    def __init__(self, ascii_symbol: str, unicode_symbol: str, fn: Callable):
        self.ascii_symbol = ascii_symbol
        self.unicode_symbol = unicode_symbol
        self.fn = fn

    def apply(self, a, b):
        """Apply the connective's truth function to two operands."""
        return self.fn(a, b)

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        for op in cls:
            if symbol in (op.ascii_symbol, op.unicode_symbol, op.name, op.name.lower()):
                return op
        raise ValueError(f"Unknown operator symbol: {symbol!r}")

    def __repr__(self) -> str:
        return f"Operator.{self.name}"


AND = Operator.AND
OR = Operator.OR
XOR = Operator.XOR

DEFAULT_OPERATORS = (AND, OR, XOR)


def variable_name(index: int) -> str:
    """Display name of variable ``index`` (``0 -> 'p1'``)."""
    return f"p{index + 1}"


def variable_names(n: int) -> List[str]:
    """
    Display names for ``n`` variables.

    >>> variable_names(3)
    ['p1', 'p2', 'p3']
    """
    return [variable_name(i) for i in range(n)]


# =========================
# Formula nodes
# =========================

class Formula:
    """
    Base class of the immutable formula tree.

    Subclasses are frozen dataclasses; every node exposes ``operator_count``
    and a precomputed structural hash. Formulas never change after
    construction, so the same subtree may be shared by many parents.

    ``~f`` is shorthand for :meth:`negate`.
    """
    __slots__ = ()

    operator_count: int

    def negate(self) -> "Not":
        """Wrap the formula in a negation (size unchanged)."""
        return Not(self)

    def __invert__(self) -> "Not":
        return self.negate()

    def variables(self) -> FrozenSet[int]:
        """Indices of the variables appearing in the formula."""
        raise NotImplementedError

    @property
    def depth(self) -> int:
        raise NotImplementedError

    def __str__(self) -> str:
        from .pretty import format_formula
        return format_formula(self)


@dataclass(frozen=True, slots=True)
class Literal(Formula):
    """A variable reference; ``index`` is 0-based."""
    index: int
    operator_count: int = field(default=0, init=False, repr=False, compare=False)
    _hash: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"variable index must be >= 0, got {self.index}")
        object.__setattr__(self, "_hash", hash(("lit", self.index)))

    def __hash__(self) -> int:
        return self._hash

    def variables(self) -> FrozenSet[int]:
        return frozenset((self.index,))

    @property
    def depth(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Negation of ``operand``. Does not count toward ``operator_count``."""
    operand: Formula
    operator_count: int = field(default=0, init=False, repr=False, compare=False)
    _hash: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "operator_count", self.operand.operator_count)
        object.__setattr__(self, "_hash", hash(("not", self.operand._hash)))

    def __hash__(self) -> int:
        return self._hash

    def variables(self) -> FrozenSet[int]:
        return self.operand.variables()

    @property
    def depth(self) -> int:
        return self.operand.depth + 1


@dataclass(frozen=True, slots=True)
class BinaryOp(Formula):
    """``left <op> right``; contributes one to ``operator_count``."""
    op: Operator
    left: Formula
    right: Formula
    operator_count: int = field(default=0, init=False, repr=False, compare=False)
    _hash: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.op, Operator):
            raise TypeError(f"op must be an Operator, got {self.op!r}")
        count = 1 + self.left.operator_count + self.right.operator_count
        object.__setattr__(self, "operator_count", count)
        object.__setattr__(self, "_hash", hash((self.op.name, self.left._hash, self.right._hash)))

    def __hash__(self) -> int:
        return self._hash

    def variables(self) -> FrozenSet[int]:
        return self.left.variables() | self.right.variables()

    @property
    def depth(self) -> int:
        return 1 + max(self.left.depth, self.right.depth)

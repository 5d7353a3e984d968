# src/formula_catalog/generators/formulas.py

"""
Exhaustive, size-ordered formula generation.

Formulas are produced by *size class*: class ``k`` holds every formula with
exactly ``k`` binary operators.

- Class 0: each literal ``p_v`` followed by its negation ``~p_v``.
- Class k > 0: for every split ``i + (k-1-i)``, every left formula of class
  ``i``, every right formula of class ``k-1-i`` and every connective, the
  formula ``left <op> right`` followed by its negation.

Every class is built only from fully produced smaller classes, which stay
resident in a :class:`SizeClassPool` for the whole run. The construction never
emits the same tree twice, so no deduplication pass is needed; nothing is
simplified either, semantic duplicates are the catalog's business.

Class sizes are known in advance (see :func:`count_size_class`), which lets
callers refuse a class that would not fit their budget before producing it.

Examples
--------
>>> from formula_catalog.generators.formulas import FormulaGenerator
>>> gen = FormulaGenerator(2, max_size=1)
>>> [str(f) for f in gen.size_class(0)]
['p1', '~p1', 'p2', '~p2']
>>> sum(1 for _ in gen)
100
>>> gen.projected_counts()
[4, 96]
"""

from __future__ import annotations
from functools import lru_cache
from typing import Iterator, List, Optional, Sequence, Tuple

from ..forms.formula import Formula, Literal, Not, BinaryOp, Operator, DEFAULT_OPERATORS
from ..forms.truth_table import MAX_VARIABLES

__all__ = [
    "SizeClassPool",
    "FormulaGenerator",
    "count_size_class",
]


@lru_cache(maxsize=None)
def count_size_class(n: int, k: int, n_operators: int = 3, include_negations: bool = True) -> int:
    """
    Exact number of formulas the generator emits in size class ``k``.

    ``C(0) = 2n`` (``n`` without negations) and
    ``C(k) = ops * 2 * sum_{i<k} C(i) * C(k-1-i)`` (factor 2 only with negations).

    >>> [count_size_class(3, k) for k in range(4)]
    [6, 216, 15552, 1399680]
    """
    neg = 2 if include_negations else 1
    if k == 0:
        return n * neg
    total = 0
    for i in range(k):
        total += (
            count_size_class(n, i, n_operators, include_negations)
            * count_size_class(n, k - 1 - i, n_operators, include_negations)
        )
    return n_operators * neg * total


class SizeClassPool:
    """
    Arena of frozen size classes.

    ``pool[k]`` is the tuple of every formula with ``k`` binary operators, in
    generation order. Classes are appended in order and never removed, so a
    formula is addressed by ``(size, index)`` and shared, not copied, by the
    larger formulas built on top of it.
    """

    def __init__(self):
        self._classes: List[Tuple[Formula, ...]] = []

    def __len__(self) -> int:
        """Number of frozen size classes."""
        return len(self._classes)

    def __getitem__(self, size: int) -> Tuple[Formula, ...]:
        return self._classes[size]

    def __iter__(self):
        return iter(self._classes)

    def freeze(self, size: int, formulas: Sequence[Formula]) -> Tuple[Formula, ...]:
        if size != len(self._classes):
            raise ValueError(f"size class {size} cannot be frozen before class {len(self._classes)}")
        frozen = tuple(formulas)
        self._classes.append(frozen)
        return frozen

    def get(self, size: int, index: int) -> Formula:
        return self._classes[size][index]

    @property
    def total(self) -> int:
        """Number of resident formulas across all classes."""
        return sum(len(c) for c in self._classes)

    def sizes(self) -> List[int]:
        return [len(c) for c in self._classes]


class FormulaGenerator:
    """
    Restartable, lazy generator of every formula over ``n`` variables up to
    ``max_size`` binary operators, in non-decreasing operator count.

    Parameters
    ----------
    n : int
        Number of variables (1..5).
    max_size : int
        Largest size class to produce (inclusive).
    operators : sequence of Operator, default (AND, OR, XOR)
        Connectives used to combine subformulas.
    include_negations : bool, default True
        Also emit the negation of every literal and of every combination.

    Notes
    -----
    Iterating twice replays the frozen classes and only builds what is still
    missing. A class abandoned halfway (the consumer stopped early) is not
    frozen and is rebuilt from scratch on the next iteration.
    """

    def __init__(
        self,
        n: int,
        *,
        max_size: int,
        operators: Sequence[Operator] = DEFAULT_OPERATORS,
        include_negations: bool = True,
    ):
        if not 1 <= n <= MAX_VARIABLES:
            raise ValueError(f"n must be between 1 and {MAX_VARIABLES}, got {n}")
        if max_size < 0:
            raise ValueError("max_size must be ≥ 0")
        if not operators:
            raise ValueError("at least one operator is required")
        self.n = n
        self.max_size = max_size
        self.operators = tuple(operators)
        self.include_negations = include_negations
        self.pool = SizeClassPool()

    def __repr__(self) -> str:
        ops = ",".join(op.name for op in self.operators)
        return f"FormulaGenerator(n={self.n}, max_size={self.max_size}, operators={ops})"

    # ---------- projections ----------
    def count_size_class(self, k: int) -> int:
        return count_size_class(self.n, k, len(self.operators), self.include_negations)

    def projected_counts(self, max_size: Optional[int] = None) -> List[int]:
        """Exact class sizes for ``0..max_size`` (defaults to the generator's ceiling)."""
        top = self.max_size if max_size is None else max_size
        return [self.count_size_class(k) for k in range(top + 1)]

    # ---------- generation ----------
    def _emit(self, f: Formula) -> Iterator[Formula]:
        yield f
        if self.include_negations:
            yield Not(f)

    def _build(self, k: int) -> Iterator[Formula]:
        if k == 0:
            for v in range(self.n):
                yield from self._emit(Literal(v))
            return
        for i in range(k):
            lefts, rights = self.pool[i], self.pool[k - 1 - i]
            for left in lefts:
                for right in rights:
                    for op in self.operators:
                        yield from self._emit(BinaryOp(op, left, right))

    def _ensure(self, k: int) -> None:
        # Drain any missing smaller classes so that class k has its building blocks.
        while len(self.pool) < k:
            for _ in self.size_class(len(self.pool)):
                pass

    def size_class(self, k: int) -> Iterator[Formula]:
        """
        Lazily yield size class ``k``; it is frozen into the pool once exhausted.
        """
        if k < len(self.pool):
            yield from self.pool[k]
            return
        self._ensure(k)
        buf: List[Formula] = []
        for f in self._build(k):
            buf.append(f)
            yield f
        self.pool.freeze(k, buf)

    def __iter__(self) -> Iterator[Formula]:
        for k in range(self.max_size + 1):
            yield from self.size_class(k)

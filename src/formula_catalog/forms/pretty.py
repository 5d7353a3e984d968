# src/formula_catalog/forms/pretty.py

"""
Formatting helpers (no monkey-patching).

Use:
    from formula_catalog.forms.pretty import format_formula
    print(format_formula(f))                    # p1 & ~(p2 | p3)
    print(format_formula(f, unicode_ops=True))  # p1 ∧ ¬(p2 ∨ p3)

Nested binary operations are always parenthesized, the top level never is, so
the output parses back unambiguously with
:func:`formula_catalog.forms.textparse.parse_formula`.
"""

from __future__ import annotations
from typing import Optional, Sequence

from .formula import Formula, Literal, Not, BinaryOp, variable_name
from .truth_table import TruthTable

__all__ = [
    "format_formula",
    "format_formulas",
    "format_table_rows",
]

NEGATION_ASCII = "~"
NEGATION_UNICODE = "¬"


def _name(index: int, names: Optional[Sequence[str]]) -> str:
    if names is None:
        return variable_name(index)
    return names[index]


def _fmt(f: Formula, names, unicode_ops: bool, nested: bool) -> str:
    if isinstance(f, Literal):
        return _name(f.index, names)
    if isinstance(f, Not):
        neg = NEGATION_UNICODE if unicode_ops else NEGATION_ASCII
        inner = _fmt(f.operand, names, unicode_ops, nested=True)
        return f"{neg}{inner}"
    if isinstance(f, BinaryOp):
        sym = f.op.unicode_symbol if unicode_ops else f.op.ascii_symbol
        L = _fmt(f.left, names, unicode_ops, nested=True)
        R = _fmt(f.right, names, unicode_ops, nested=True)
        s = f"{L} {sym} {R}"
        return f"({s})" if nested else s
    raise TypeError(f"not a formula: {f!r}")


def format_formula(
    f: Formula,
    names: Optional[Sequence[str]] = None,
    *,
    unicode_ops: bool = False,
) -> str:
    """
    Render a formula as text.

    Parameters
    ----------
    f : Formula
    names : sequence of str, optional
        Display names indexed by variable; defaults to ``p1 .. pn``.
    unicode_ops : bool, default False
        Use ``∧ ∨ ⊕ ¬`` instead of ``& | ^ ~``.

    Examples
    --------
    >>> from formula_catalog.forms.formula import Literal, BinaryOp, AND, OR
    >>> f = BinaryOp(AND, Literal(0), BinaryOp(OR, Literal(1), Literal(2)).negate())
    >>> format_formula(f)
    'p1 & ~(p2 | p3)'
    >>> format_formula(f, ["a", "b", "c"], unicode_ops=True)
    'a ∧ ¬(b ∨ c)'
    """
    return _fmt(f, names, unicode_ops, nested=False)


def format_formulas(formulas, names=None, *, unicode_ops: bool = False, sep: str = "; ") -> str:
    return sep.join(format_formula(f, names, unicode_ops=unicode_ops) for f in formulas)


def format_table_rows(
    table: TruthTable,
    *,
    true_text: str = "T",
    false_text: str = "F",
):
    """
    Yield ``(variable values..., output)`` rows of a truth table as text.

    Rows run in assignment order; the first column is ``p1``.

    >>> rows = list(format_table_rows(TruthTable.from_values([0, 1, 1, 0])))
    >>> rows[1]
    ('T', 'F', 'T')
    """
    def _tf(bit: int) -> str:
        return true_text if bit else false_text

    for a in range(table.width):
        cells = tuple(_tf((a >> v) & 1) for v in range(table.n))
        yield cells + (_tf(table[a]),)

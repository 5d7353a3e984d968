from __future__ import annotations

import re
from typing import List, Optional, Sequence

from .formula import Formula, Literal, Not, BinaryOp, Operator

"""
Parse the text notation produced by :func:`formula_catalog.forms.pretty.format_formula`.

Grammar
-------
    formula := unary (binop unary)*        binary chains associate to the left
    unary   := ("~" | "¬" | "!") unary | "(" formula ")" | name
    binop   := "&" | "|" | "^" | "∧" | "∨" | "⊕"
    name    := p1 .. pn, or one of the caller-supplied names

All binary connectives share one precedence level, so ``p1 & p2 | p3`` reads
as ``(p1 & p2) | p3``. The formatter parenthesizes every nested operation, so
formatted formulas always parse back to the same tree.

Examples
--------
>>> from formula_catalog.forms.textparse import parse_formula
>>> parse_formula("p1 ^ ~(p2 & p3)").operator_count
2
>>> parse_formula("a | b", names=["a", "b"])
BinaryOp(op=Operator.OR, left=Literal(index=0), right=Literal(index=1))
"""

__all__ = ["parse_formula", "strip_redundant_parens", "tokenize"]

TOKEN_RE = re.compile(r"\s*(?:(?P<name>[A-Za-z_][A-Za-z0-9_]*)|(?P<sym>[()~¬!&|^∧∨⊕]))")
NEGATIONS = {"~", "¬", "!"}
BINOPS = {"&", "|", "^", "∧", "∨", "⊕"}
DEFAULT_NAME_RE = re.compile(r"^p([1-9][0-9]*)$")


def strip_redundant_parens(s: str) -> str:
    """Peel *all* redundant outer parens that wrap the whole expression."""
    s = s.strip()
    while len(s) >= 2 and s[0] == '(' and s[-1] == ')':
        depth = 0
        encloses_all = True
        for i, ch in enumerate(s):
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
            if depth == 0 and i < len(s) - 1:
                encloses_all = False
                break
        if encloses_all:
            s = s[1:-1].strip()
        else:
            break
    return s


def tokenize(s: str) -> List[str]:
    tokens, pos = [], 0
    s = s.rstrip()
    while pos < len(s):
        m = TOKEN_RE.match(s, pos)
        if m is None:
            raise ValueError(f"Unexpected character {s[pos:].lstrip()[:1]!r} at position {pos} in {s!r}")
        tokens.append(m.group("name") or m.group("sym"))
        pos = m.end()
    return tokens


class _Parser:
    def __init__(self, tokens: List[str], names: Optional[Sequence[str]]):
        self.tokens = tokens
        self.pos = 0
        self.names = list(names) if names is not None else None

    def peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        tok = self.peek()
        if tok is None:
            raise ValueError("Unexpected end of formula")
        self.pos += 1
        return tok

    def literal(self, tok: str) -> Literal:
        if self.names is not None:
            if tok not in self.names:
                raise ValueError(f"Unknown variable {tok!r}; expected one of {self.names}")
            return Literal(self.names.index(tok))
        m = DEFAULT_NAME_RE.match(tok)
        if m is None:
            raise ValueError(f"Unknown variable {tok!r}; expected p1, p2, ...")
        return Literal(int(m.group(1)) - 1)

    def formula(self) -> Formula:
        f = self.unary()
        while self.peek() in BINOPS:
            op = Operator.from_symbol(self.take())
            f = BinaryOp(op, f, self.unary())
        return f

    def unary(self) -> Formula:
        tok = self.take()
        if tok in NEGATIONS:
            return Not(self.unary())
        if tok == "(":
            f = self.formula()
            if self.take() != ")":
                raise ValueError("Expected ')'")
            return f
        if tok in BINOPS or tok == ")":
            raise ValueError(f"Unexpected {tok!r}")
        return self.literal(tok)


def parse_formula(text: str, names: Optional[Sequence[str]] = None) -> Formula:
    """
    Parse ``text`` into a :class:`~formula_catalog.forms.formula.Formula`.

    Raises
    ------
    ValueError
        On unknown variables, stray symbols, unbalanced parentheses or
        trailing input.
    """
    tokens = tokenize(strip_redundant_parens(text))
    if not tokens:
        raise ValueError("Empty formula")
    p = _Parser(tokens, names)
    f = p.formula()
    if p.peek() is not None:
        raise ValueError(f"Unexpected {p.peek()!r} after end of formula")
    return f

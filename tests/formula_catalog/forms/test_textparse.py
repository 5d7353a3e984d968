import pytest

from formula_catalog.forms import (
    Literal, Not, BinaryOp, AND, OR, XOR,
    format_formula, parse_formula, strip_redundant_parens,
)
from formula_catalog.generators import FormulaGenerator


def test_parse_simple(p1, p2):
    assert parse_formula("p1 & p2") == BinaryOp(AND, p1, p2)
    assert parse_formula("~p1") == Not(p1)
    assert parse_formula("((p2))") == p2


def test_left_associative_chains(p1, p2, p3):
    assert parse_formula("p1 & p2 | p3") == BinaryOp(OR, BinaryOp(AND, p1, p2), p3)
    assert parse_formula("p1 & (p2 | p3)") == BinaryOp(AND, p1, BinaryOp(OR, p2, p3))


def test_unicode_and_alternative_negation(p1, p2):
    assert parse_formula("¬(p1 ⊕ p2)") == Not(BinaryOp(XOR, p1, p2))
    assert parse_formula("!p1 ∧ p2") == BinaryOp(AND, Not(p1), p2)


def test_custom_names(p1, p2):
    assert parse_formula("a | ~b", names=["a", "b"]) == BinaryOp(OR, p1, Not(p2))
    with pytest.raises(ValueError):
        parse_formula("a | c", names=["a", "b"])


@pytest.mark.parametrize("text", ["", "p1 &", "(p1", "p1 p2", "p0", "q", "p1 $ p2", "& p1", "p1)"])
def test_malformed_input_raises(text):
    with pytest.raises(ValueError):
        parse_formula(text)


def test_formatted_formulas_parse_back():
    gen = FormulaGenerator(3, max_size=2)
    for f in list(gen)[::97]:
        assert parse_formula(format_formula(f)) == f
        assert parse_formula(format_formula(f, unicode_ops=True)) == f


def test_strip_redundant_parens():
    assert strip_redundant_parens("((p1 & p2))") == "p1 & p2"
    assert strip_redundant_parens("(p1) & (p2)") == "(p1) & (p2)"

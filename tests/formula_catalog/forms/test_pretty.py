from formula_catalog.forms import (
    Literal, Not, BinaryOp, AND, OR, XOR, TruthTable,
    format_formula, format_formulas, format_table_rows,
)


def test_top_level_is_not_parenthesized(p1, p2):
    assert format_formula(BinaryOp(AND, p1, p2)) == "p1 & p2"


def test_nested_binary_ops_are_parenthesized(p1, p2, p3):
    f = BinaryOp(OR, BinaryOp(AND, p1, p2), BinaryOp(XOR, p2, p3))
    assert format_formula(f) == "(p1 & p2) | (p2 ^ p3)"


def test_negations(p1, p2):
    assert format_formula(Not(p1)) == "~p1"
    assert format_formula(Not(BinaryOp(AND, p1, p2))) == "~(p1 & p2)"
    assert format_formula(Not(Not(p1))) == "~~p1"


def test_unicode_and_custom_names(p1, p2):
    f = Not(BinaryOp(XOR, p1, Not(p2)))
    assert format_formula(f, ["a", "b"], unicode_ops=True) == "¬(a ⊕ ¬b)"


def test_format_formulas_joins(p1, p2):
    assert format_formulas([p1, Not(p2)]) == "p1; ~p2"


def test_table_rows_in_assignment_order():
    rows = list(format_table_rows(TruthTable.from_values([0, 0, 0, 1])))
    assert rows == [
        ("F", "F", "F"),
        ("T", "F", "F"),
        ("F", "T", "F"),
        ("T", "T", "T"),
    ]
    assert list(format_table_rows(TruthTable(1, 0b10), true_text="1", false_text="0")) == [
        ("0", "0"),
        ("1", "1"),
    ]

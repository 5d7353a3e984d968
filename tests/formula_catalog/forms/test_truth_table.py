import numpy as np
import pytest

from formula_catalog.forms import (
    Literal, Not, BinaryOp, AND, OR, XOR,
    TruthTable, TruthTableEvaluator, evaluate, evaluate_assignment,
    literal_column, table_count,
)
from formula_catalog.generators import FormulaGenerator


# -----------------------
# Canonical ordering (n=2, bit 0 = p1)
# -----------------------

def test_literal_tables_n2(p1, p2):
    assert evaluate(p1, 2).values() == (0, 1, 0, 1)
    assert evaluate(p2, 2).values() == (0, 0, 1, 1)
    assert evaluate(Not(p1), 2).values() == (1, 0, 1, 0)


def test_binary_tables_n2(p1, p2):
    assert evaluate(BinaryOp(AND, p1, p2), 2).values() == (0, 0, 0, 1)
    assert evaluate(BinaryOp(OR, p1, p2), 2).values() == (0, 1, 1, 1)
    assert evaluate(BinaryOp(XOR, p1, p2), 2).values() == (0, 1, 1, 0)


def test_constants_n1(p1):
    assert evaluate(BinaryOp(XOR, p1, p1), 1).values() == (0, 0)
    assert evaluate(BinaryOp(OR, p1, Not(p1)), 1).values() == (1, 1)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_table_length_is_two_to_n(n):
    f = BinaryOp(AND, Literal(0), Not(Literal(n - 1)))
    t = evaluate(f, n)
    assert len(t) == 2 ** n
    assert len(t.values()) == 2 ** n
    assert t.to_array().shape == (2 ** n,)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_packed_evaluation_matches_per_assignment(n):
    lits = [Literal(v) for v in range(n)]
    f = Not(BinaryOp(XOR, BinaryOp(OR, lits[0], Not(lits[-1])), BinaryOp(AND, lits[n // 2], lits[0])))
    t = evaluate(f, n)
    assert t.values() == tuple(evaluate_assignment(f, a) for a in range(2 ** n))


def test_literal_column_bits():
    assert literal_column(0, 2) == 0b1010
    assert literal_column(1, 2) == 0b1100
    assert literal_column(2, 3) == 0b11110000


def test_out_of_range_variable_rejected():
    with pytest.raises(ValueError):
        evaluate(Literal(2), 2)


# -----------------------
# TruthTable value
# -----------------------

def test_from_values_and_views():
    t = TruthTable.from_values([0, 1, 1, 0])
    assert t.n == 2 and t.bits == 0b0110
    assert str(t) == "0110"
    assert t[1] == 1 and t[3] == 0
    assert list(t) == [0, 1, 1, 0]
    np.testing.assert_array_equal(t.to_array(), np.array([0, 1, 1, 0], dtype=np.uint8))
    assert TruthTable.from_array(np.array([True, False])) == TruthTable(1, 0b01)


def test_complement_and_constants():
    t = TruthTable(2, 0b0001)
    assert t.complement() == TruthTable(2, 0b1110)
    assert TruthTable(2, 0).is_constant
    assert TruthTable(2, 0b1111).is_constant
    assert not t.is_constant


def test_invalid_tables():
    with pytest.raises(ValueError):
        TruthTable(2, 1 << 4)
    with pytest.raises(ValueError):
        TruthTable(0, 0)
    with pytest.raises(ValueError):
        TruthTable.from_values([0, 1, 1])
    with pytest.raises(IndexError):
        TruthTable(1, 0)[2]


def test_table_count():
    assert [table_count(n) for n in (1, 2, 3)] == [4, 16, 256]
    assert table_count(5) == 2 ** 32


# -----------------------
# Evaluator memo
# -----------------------

def test_memo_reuses_shared_subtrees(ev2, p1, p2):
    inner = BinaryOp(AND, p1, p2)
    outer = Not(BinaryOp(OR, inner, Not(inner)))
    t = ev2.evaluate(outer)
    assert t.values() == (0, 0, 0, 0)
    assert inner in ev2._memo
    assert ev2(outer) == t
    ev2.clear()
    assert len(ev2) == 0


def test_memo_and_plain_evaluation_agree(p1, p2):
    f = BinaryOp(XOR, Not(p1), BinaryOp(OR, p1, p2))
    assert TruthTableEvaluator(2, memoize=True).evaluate(f) == TruthTableEvaluator(2, memoize=False).evaluate(f)


def test_unremembered_formula_keeps_only_its_operands(ev2, p1, p2):
    f = Not(BinaryOp(AND, p1, p2))
    ev2.evaluate(f, remember=False)
    assert f not in ev2._memo
    assert f.operand not in ev2._memo
    assert p1 in ev2._memo and p2 in ev2._memo


def test_memo_holds_only_frozen_classes_during_generation():
    gen = FormulaGenerator(3, max_size=2)
    ev = TruthTableEvaluator(3)
    for k in range(3):
        for f in gen.size_class(k):
            ev.evaluate(f, remember=False)
        # every class below k is used as a left operand of class k
        assert len(ev) == sum(gen.pool.sizes()[:k])

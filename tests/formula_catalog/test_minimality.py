import pytest

from formula_catalog.forms import Not, BinaryOp, AND, OR
from formula_catalog.minimality import MinimalityPolicy, Verdict, DEFAULT_POLICY


def test_size_is_binary_operator_count(p1, p2):
    assert DEFAULT_POLICY.size(Not(Not(p1))) == 0
    assert DEFAULT_POLICY.size(Not(BinaryOp(AND, p1, BinaryOp(OR, p2, p1)))) == 2


@pytest.mark.parametrize("current, size, expected", [
    (None, 3, Verdict.FIRST),
    (2, 1, Verdict.DETHRONES),
    (1, 1, Verdict.TIES),
    (0, 1, Verdict.LOSES),
])
def test_judge(current, size, expected, p1):
    f = p1
    for _ in range(size):
        f = BinaryOp(AND, f, p1)
    assert MinimalityPolicy().judge(current, f) is expected


def test_verdict_is_minimal():
    assert Verdict.FIRST.is_minimal
    assert Verdict.TIES.is_minimal
    assert Verdict.DETHRONES.is_minimal
    assert not Verdict.LOSES.is_minimal

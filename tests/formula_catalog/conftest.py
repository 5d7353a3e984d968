import pytest

from formula_catalog.forms import Literal, TruthTableEvaluator
from formula_catalog.config import EnumerationConfig
from formula_catalog.pipeline import run_enumeration


@pytest.fixture
def p1():
    return Literal(0)


@pytest.fixture
def p2():
    return Literal(1)


@pytest.fixture
def p3():
    return Literal(2)


@pytest.fixture
def ev2():
    return TruthTableEvaluator(2)


@pytest.fixture(scope="session")
def run_n1():
    # n=1 is complete after one binary operator: 2 + 24 formulas, all 4 tables
    return run_enumeration(EnumerationConfig(n=1, max_size=1), verbose=False)


@pytest.fixture(scope="session")
def run_n2():
    # 4 + 96 + 4608 formulas
    return run_enumeration(EnumerationConfig(n=2, max_size=2), verbose=False)

import pytest

from proplogic.formula import Var, Not, And, Or, Xor, Const, parse
from proplogic.satisfiability import GeneralSatisfiability, Expectative

a, b = Var("a"), Var("b")
T, F = Const(True), Const(False)


def test_var_and_not():
    for expression in (a, Not(a)):
        check = expression.general_satisfiability()
        assert check.satisfies(Expectative.TRUE)
        assert check.satisfies(Expectative.FALSE)


def test_and():
    assert GeneralSatisfiability(And(a, b)).satisfies(Expectative.TRUE)
    assert GeneralSatisfiability(And(a, b)).satisfies(Expectative.FALSE)


def test_constants():
    assert T.general_satisfiability().satisfies(Expectative.TRUE)
    assert not T.general_satisfiability().satisfies(Expectative.FALSE)
    assert not F.general_satisfiability().satisfies(Expectative.TRUE)
    assert F.general_satisfiability().satisfies(Expectative.ANY)


@pytest.mark.parametrize("expression, expectative, result", [
    (And(a, F), Expectative.TRUE, False),
    (And(a, F), Expectative.FALSE, True),
    (Or(a, T), Expectative.FALSE, False),
    (Or(F, F), Expectative.TRUE, False),
    (Not(Or(F, F)), Expectative.TRUE, True),
    (Xor(T, T), Expectative.TRUE, False),
    (Xor(T, F), Expectative.FALSE, False),
    (Xor(T, a), Expectative.FALSE, True),
    (And(T, Not(T)), Expectative.ANY, True),
    (And(F, F), Expectative.ANY, True),
    (Xor(T, T), Expectative.ANY, True),
])
def test_combinations(expression, expectative, result):
    assert expression.general_satisfiability().satisfies(expectative) is result


def test_bool_expectative():
    assert not GeneralSatisfiability(F).satisfies(True)
    assert GeneralSatisfiability(F).satisfies(False)


def test_repeated_variables_are_not_tracked():
    # a & ¬a can never be true, the quick check does not see it
    assert parse("a & ¬a").general_satisfiability().satisfies(Expectative.TRUE)


def test_invalid_expectative():
    with pytest.raises(AssertionError):
        GeneralSatisfiability(a).satisfies("maybe")

import pytest

from proplogic.formula import Var, Not, And, Or, Xor, Const, parse
from proplogic.satisfiability import DynamicSatisfiability, Requirement, Expectative

R = Requirement
a, b, c = Var("a"), Var("b"), Var("c")


def satisfies(expression, expectative):
    return DynamicSatisfiability(expression).satisfies(expectative)


def test_var():
    assert satisfies(a, True) == R.var("a", True)
    assert satisfies(a, False) == R.var("a", False)


def test_not():
    assert satisfies(Not(a), True) == R.var("a", False)
    assert satisfies(Not(a), False) == R.var("a", True)


def test_and():
    assert satisfies(And(a, b), True) == R.All(R.var("a", True), R.var("b", True))
    assert satisfies(And(a, b), False) == R.Any(R.var("a", False), R.var("b", False))


def test_or():
    assert satisfies(Or(a, b), True) == R.Any(R.var("a", True), R.var("b", True))
    assert satisfies(Or(a, b), False) == R.All(R.var("a", False), R.var("b", False))


def test_not_and():
    assert satisfies(Not(And(a, b)), True) == R.Any(R.var("a", False), R.var("b", False))
    assert satisfies(Not(And(a, b)), False) == R.All(R.var("a", True), R.var("b", True))


def test_xor():
    assert satisfies(Xor(a, b), True) == R.Any(
        R.All(R.var("a", True), R.var("b", False)),
        R.All(R.var("a", False), R.var("b", True)),
    )
    assert satisfies(Xor(a, b), False) == R.Any(
        R.All(R.var("a", True), R.var("b", True)),
        R.All(R.var("a", False), R.var("b", False)),
    )


def test_xor_with_itself_is_never_true():
    assert satisfies(Xor(a, a), True) == R.never()
    assert satisfies(Xor(a, a), False) == R.always()


def test_constants():
    assert satisfies(Const(True), True) == R.always()
    assert satisfies(Const(True), False) == R.never()
    assert satisfies(Const(False), True) == R.never()
    assert satisfies(Const(False), False) == R.always()
    assert satisfies(And(a, Const(True)), True) == R.var("a", True)


def test_contradiction_and_tautology():
    assert satisfies(And(a, Not(a)), True) == R.never()
    assert satisfies(Or(a, Not(a)), True) == R.always()


def test_nested_disjunctions():
    expression = Or(a, Or(b, c)).de_morgan().optimize()
    assert satisfies(expression, True) == R.Any(R.var("a", True), R.Any(R.var("b", True), R.var("c", True)))


def test_end_to_end():
    expression = parse("(a&b)|¬c").optimize()
    requirement = DynamicSatisfiability(expression).satisfies(True)
    assert requirement == R.Any(R.All(R.var("a", True), R.var("b", True)), R.var("c", False))
    assert requirement.optimize() == requirement
    assert requirement.format() == "a, b\n¬c"


def test_distant_contradictions_need_normalize():
    # a & (b & ¬a): the two bindings of "a" are never combined directly
    requirement = satisfies(parse("a & (b & ¬a)"), True)
    assert requirement != R.never()
    assert requirement.normalize() == R.never()


def test_expectative_constants():
    assert satisfies(a, Expectative.TRUE) == R.var("a", True)
    assert satisfies(a, Expectative.FALSE) == R.var("a", False)
    assert satisfies(And(a, b), Expectative.FALSE) == satisfies(And(a, b), False)


def test_invalid_expectative():
    with pytest.raises(AssertionError):
        satisfies(a, Expectative.ANY)
    with pytest.raises(AssertionError):
        satisfies(a, "maybe")

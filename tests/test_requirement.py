import pytest

from proplogic.satisfiability import Requirement

R = Requirement
a, not_a = R.var("a", True), R.var("a", False)
b, not_b = R.var("b", True), R.var("b", False)
c, x = R.var("c", True), R.var("x", True)


def test_equality():
    assert R.var("a", True) == a
    assert a != not_a
    assert a != b
    assert R.All(a, b) == R.All(b, a)
    assert R.Any(a, b) == R.Any(b, a)
    assert R.All(a, b) != R.Any(a, b)
    assert R.always() == R.always()
    assert R.always() != R.never()


def test_binding_accessors():
    assert not_a.name == "a"
    assert not_a.value is False
    with pytest.raises(AssertionError):
        R.All(a, b).name
    with pytest.raises(AssertionError):
        R.never().value


class TestAll:

    def test_idempotent_law(self):
        assert R.all(a, a) == a

    def test_null_law(self):
        assert R.all(a, R.never()) == R.never()
        assert R.all(R.never(), a) == R.never()

    def test_identity_law(self):
        assert R.all(a, R.always()) == a
        assert R.all(R.always(), a) == a

    def test_contradiction_law(self):
        assert R.all(a, not_a) == R.never()
        assert R.all(not_a, a) == R.never()

    def test_no_law(self):
        assert R.all(a, b) == R.All(a, b)

    def test_right_distribution(self):
        assert R.all(x, R.Any(a, b)) == R.Any(R.All(x, a), R.All(x, b))

    def test_left_distribution(self):
        assert R.all(R.Any(a, b), x) == R.Any(R.All(a, x), R.All(b, x))

    def test_distribution_is_optimized_again(self):
        # a & (¬a | b)  ->  (a & ¬a) | (a & b)  ->  a & b
        assert R.all(a, R.Any(not_a, b)) == R.All(a, b)

    def test_distribution_of_two_disjunctions(self):
        out = R.all(R.Any(a, b), R.Any(c, x))
        assert out.alternatives() == [
            {"a": True, "c": True},
            {"b": True, "c": True},
            {"a": True, "x": True},
            {"b": True, "x": True},
        ]
        assert not any(n.T == "all" and any(ch.T == "any" for ch in n.C) for n in out.walk_nodes())


class TestAny:

    def test_idempotent_law(self):
        assert R.any(a, a) == a

    def test_null_law(self):
        assert R.any(R.never(), R.never()) == R.never()
        assert R.any(a, R.always()) == R.always()

    def test_identity_law(self):
        assert R.any(a, R.never()) == a
        assert R.any(R.never(), a) == a

    def test_tautology_law(self):
        assert R.any(a, not_a) == R.always()
        assert R.any(not_a, a) == R.always()

    def test_no_law(self):
        assert R.any(a, b) == R.Any(a, b)


class TestOptimize:

    def test_contradiction(self):
        assert R.All(a, not_a).optimize() == R.never()

    def test_tautology(self):
        assert R.Any(a, not_a).optimize() == R.always()

    def test_bottom_up(self):
        raw = R.Any(R.All(b, R.never()), R.All(a, R.Any(not_a, c)))
        assert raw.optimize() == R.All(a, c)

    def test_contradictions_are_found_only_between_direct_siblings(self):
        raw = R.All(R.All(a, b), not_a)
        assert raw.optimize() == raw
        assert raw.normalize() == R.never()


def test_format():
    assert R.Any(R.All(a, b), R.var("c", False)).format() == "a, b\n¬c"
    assert R.All(a, R.Any(b, c)).format() == "a, b\na, c"
    assert R.always().format() == "always"
    assert R.never().format() == "never"


def test_format_repeated_bindings():
    assert R.All(R.All(a, c), a).format() == "a, c"
    assert R.All(R.Any(a, b), R.Any(c, a)).format() == "a, c\na\nb, c\nb, a"


class TestAlternatives:

    def test_leaves(self):
        assert a.alternatives() == [{"a": True}]
        assert R.always().alternatives() == [{}]
        assert R.never().alternatives() == []

    def test_inconsistent_alternatives_are_dropped(self):
        raw = R.Any(R.All(R.All(a, b), not_a), R.All(b, c))
        assert raw.alternatives() == [{"b": True, "c": True}]

    def test_duplicates_are_removed(self):
        raw = R.Any(R.All(a, b), R.All(b, a))
        assert raw.alternatives() == [{"a": True, "b": True}]

    def test_normalize(self):
        raw = R.Any(R.All(R.All(a, b), not_a), R.All(b, c))
        assert raw.normalize() == R.All(b, c)
        assert R.Any(R.All(a, b), R.All(b, not_a)).normalize() == R.Any(R.All(a, b), R.All(b, not_a))
        assert R.always().normalize() == R.always()

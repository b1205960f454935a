from proplogic.common.trees import Descender

class Expectative(object):

    TRUE = "true"
    FALSE = "false"
    ANY = "any"

    @staticmethod
    def flip(expectative):
        return {
            Expectative.TRUE:   Expectative.FALSE,
            Expectative.FALSE:  Expectative.TRUE
        }.get(expectative, expectative)

    @staticmethod
    def from_bool(value):
        return Expectative.TRUE if value else Expectative.FALSE

class GeneralSatisfiability(Descender):

    #
    # Quick answer to "can the expression be made to evaluate to the expected value?"
    #
    # NOT a satisfiability check: every occurrence of a variable is treated as an independent
    # variable, so e.g. "a & ¬a" is reported as satisfiable. A False answer is reliable,
    # a True answer is not. Use DynamicSatisfiability for the precise answer.
    #

    def __init__(self, expression):
        self.Expression = expression

    def satisfies(self, expectative=Expectative.TRUE):
        if isinstance(expectative, bool):
            expectative = Expectative.from_bool(expectative)
        assert expectative in (Expectative.TRUE, Expectative.FALSE, Expectative.ANY), f"Invalid expectative {expectative}"
        return self.walk(self.Expression, expectative)

    def var(self, node, expectative):
        return True

    def true(self, node, expectative):
        return expectative != Expectative.FALSE

    def false(self, node, expectative):
        return expectative != Expectative.TRUE

    def neg(self, node, expectative):
        return self._walk(node.C[0], Expectative.flip(expectative))

    def _can(self, node, value):
        return self._walk(node, Expectative.from_bool(value))

    def _either(self, node):
        return self._walk(node, Expectative.TRUE) or self._walk(node, Expectative.FALSE)

    def conj(self, node, expectative):
        if expectative == Expectative.ANY:
            return self._either(node)
        left, right = node.C
        if expectative == Expectative.TRUE:
            return self._can(left, True) and self._can(right, True)
        return self._can(left, False) or self._can(right, False)

    def disj(self, node, expectative):
        if expectative == Expectative.ANY:
            return self._either(node)
        left, right = node.C
        if expectative == Expectative.TRUE:
            return self._can(left, True) or self._can(right, True)
        return self._can(left, False) and self._can(right, False)

    def xor(self, node, expectative):
        if expectative == Expectative.ANY:
            return self._either(node)
        left, right = node.C
        want = expectative == Expectative.TRUE
        return (self._can(left, True) and self._can(right, not want)) or \
            (self._can(left, False) and self._can(right, want))

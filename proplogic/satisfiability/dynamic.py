from proplogic.common.trees import Descender
from proplogic.logs import Logged
from .requirement import Requirement
from .general import Expectative

class DynamicSatisfiability(Descender, Logged):

    #
    # Derives the Requirement for the expression to evaluate to the expected value.
    # Walks the expression top down, the expected value is the walk context.
    #
    # Conflicting bindings of the same variable are detected only where the all/any smart
    # constructors combine two bindings directly. Use Requirement.normalize() for a globally
    # consistent result.
    #

    def __init__(self, expression):
        Logged.__init__(self, name="satisfies")
        self.Expression = expression

    def satisfies(self, expectative=True):
        if expectative in (Expectative.TRUE, Expectative.FALSE):
            expectative = expectative == Expectative.TRUE
        assert isinstance(expectative, bool), f"Invalid expectative {expectative}"
        requirement = self.walk(self.Expression, expectative)
        self.debug("expression:", self.Expression, "expected:", expectative, "requirement:", repr(requirement))
        return requirement

    def var(self, node, expectative):
        return Requirement.var(node["name"], expectative)

    def true(self, node, expectative):
        return Requirement.always() if expectative else Requirement.never()

    def false(self, node, expectative):
        return Requirement.never() if expectative else Requirement.always()

    def neg(self, node, expectative):
        return self._walk(node.C[0], not expectative)

    def conj(self, node, expectative):
        left, right = [self._walk(c, expectative) for c in node.C]
        if expectative:
            return Requirement.all(left, right)
        else:
            return Requirement.any(left, right)

    def disj(self, node, expectative):
        left, right = [self._walk(c, expectative) for c in node.C]
        if expectative:
            return Requirement.any(left, right)
        else:
            return Requirement.all(left, right)

    def xor(self, node, expectative):
        left, right = node.C
        left_true, left_false = self._walk(left, True), self._walk(left, False)
        right_true, right_false = self._walk(right, True), self._walk(right, False)
        if expectative:
            return Requirement.any(
                Requirement.all(left_true, right_false),
                Requirement.all(left_false, right_true)
            )
        else:
            return Requirement.any(
                Requirement.all(left_true, right_true),
                Requirement.all(left_false, right_false)
            )

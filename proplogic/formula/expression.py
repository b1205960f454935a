from proplogic.common.trees import Node, Ascender, Descender
from proplogic.logs import Logged
from proplogic.satisfiability.general import GeneralSatisfiability

VAR, NOT, AND, OR, XOR, TRUE, FALSE = "var", "neg", "conj", "disj", "xor", "true", "false"

# binding strength used when rendering, higher binds tighter
Precedence = {
    OR:     1,
    AND:    2,
    XOR:    3
}
AtomPrecedence = 4

Operators = {
    OR:     "|",
    AND:    "&",
    XOR:    "^"
}

def equal(a, b):
    #
    # Structural equality, commutative for conjunction and disjunction only
    #
    if not isinstance(a, Expression) or not isinstance(b, Expression):
        return False
    if a.T != b.T:
        return False
    if a.T == VAR:
        return a["name"] == b["name"]
    if a.T in (AND, OR):
        (ll, lr), (rl, rr) = a.C, b.C
        return (equal(ll, rl) and equal(lr, rr)) or (equal(ll, rr) and equal(lr, rl))
    return len(a.C) == len(b.C) and all(equal(x, y) for x, y in zip(a.C, b.C))

class Expression(Node):

    def __eq__(self, other):
        return equal(self, other)

    def __ne__(self, other):
        return not equal(self, other)

    __hash__ = None

    def __str__(self):
        text, _ = _TextFormatter()(self)
        return text

    def __repr__(self):
        return f"Expression({self})"

    @property
    def name(self):
        assert self.T == VAR, f"Expression of type {self.T} has no name"
        return self["name"]

    @staticmethod
    def from_expressions(expressions):
        # conjunction of all the expressions, None if there are none
        out = None
        for e in expressions:
            out = e if out is None else And(out, e)
        return out

    def optimize(self):
        """
        Applies Boolean algebra laws bottom up. Never increases the number of nodes.
        """
        return _Optimizer()(self)

    def de_morgan(self):
        """
        Rewrites negated conjunctions and disjunctions into their duals:

            ¬(a & b)  ->  ¬a | ¬b
            ¬(a | b)  ->  ¬a & ¬b

        Negations are rewritten wherever they occur in the tree, including under other
        connectives, e.g. c | ¬(a & b)  ->  c | (¬a | ¬b). Operands of a rewritten node are
        not rewritten again.
        """
        return _DeMorgan()(self)

    def simplify(self):
        """
        Expresses the formula using negation and disjunction only. May introduce new nodes,
        meant to be followed by optimize()
        """
        return _Simplifier()(self)

    def apply(self):
        return self.optimize().simplify().optimize()

    def node_count(self):
        return sum(1 for _ in self.walk_nodes())

    def variables(self):
        return sorted(set(n["name"] for n in self.find_all(VAR)))

    def evaluate(self, assignment):
        if self.T == VAR:
            return bool(assignment[self["name"]])
        elif self.T == TRUE:
            return True
        elif self.T == FALSE:
            return False
        elif self.T == NOT:
            return not self.C[0].evaluate(assignment)
        left, right = (c.evaluate(assignment) for c in self.C)
        if self.T == AND:
            return left and right
        elif self.T == OR:
            return left or right
        elif self.T == XOR:
            return left != right
        raise ValueError(f"Unknown expression type {self.T}")

    def general_satisfiability(self):
        return GeneralSatisfiability(self)

def Var(name):
    return Expression(VAR, name=name)

def Not(expression):
    return Expression(NOT, [expression])

def And(left, right):
    return Expression(AND, [left, right])

def Or(left, right):
    return Expression(OR, [left, right])

def Xor(left, right):
    return Expression(XOR, [left, right])

def Const(value):
    return Expression(TRUE if value else FALSE)

class _Optimizer(Ascender, Logged):

    def __init__(self):
        Logged.__init__(self, name="optimize")

    def law(self, name, node, result):
        self.debug(name, "law:", node, "->", result)
        return result

    def conj(self, node, left, right):
        if left == right:
            return self.law("idempotent", node, left)

        if right.T == TRUE:
            return self.law("identity", node, left)
        if left.T == TRUE:
            return self.law("identity", node, right)

        if left.T == FALSE or right.T == FALSE:
            return self.law("null", node, Const(False))

        if (right.T == NOT and left == right.C[0]) or (left.T == NOT and right == left.C[0]):
            return self.law("complement", node, Const(False))

        if left.T == OR and right in left.C:
            return self.law("absorption", node, right)
        if right.T == OR and left in right.C:
            return self.law("absorption", node, left)

        return node

    def disj(self, node, left, right):
        if left == right:
            return self.law("idempotent", node, left)

        if right.T == FALSE:
            return self.law("identity", node, left)
        if left.T == FALSE:
            return self.law("identity", node, right)

        if left.T == TRUE or right.T == TRUE:
            return self.law("null", node, Const(True))

        if (right.T == NOT and left == right.C[0]) or (left.T == NOT and right == left.C[0]):
            return self.law("complement", node, Const(True))

        if left.T == AND and right.T == AND:
            for i in (0, 1):
                for j in (0, 1):
                    if left.C[i] == right.C[j]:
                        factored = And(left.C[i], Or(left.C[1-i], right.C[1-j]))
                        return self.law("anti-distributive", node, self._walk(factored))

        if left.T == AND and right in left.C:
            return self.law("absorption", node, right)
        if right.T == AND and left in right.C:
            return self.law("absorption", node, left)

        return node

    def neg(self, node, inner):
        if inner.T == TRUE:
            return self.law("negation", node, Const(False))
        if inner.T == FALSE:
            return self.law("negation", node, Const(True))
        if inner.T == NOT:
            return self.law("double negation", node, inner.C[0])
        return node

class _DeMorgan(Descender):

    def neg(self, node, context):
        inner = self._walk(node.C[0], context)
        if inner.T == AND:
            left, right = inner.C
            return Or(Not(left), Not(right))
        elif inner.T == OR:
            left, right = inner.C
            return And(Not(left), Not(right))
        return node.clone([inner])

class _Simplifier(Descender):

    def conj(self, node, context):
        left, right = [self._walk(c, context) for c in node.C]
        return Not(Or(Not(left), Not(right)))

    def xor(self, node, context):
        left, right = node.C
        expanded = Or(And(left, Not(right)), And(Not(left), right))
        return self._walk(expanded, context)

class _TextFormatter(Ascender):

    #
    # Produces (text, precedence) pairs, adding parenthesis only where the grammar needs them.
    # Binary operators are left associative, so a right operand of the same precedence is parenthesized
    #

    def wrap(self, item, precedence, right_side=False):
        text, p = item
        if p < precedence or (right_side and p == precedence):
            return f"({text})"
        return text

    def var(self, node, name=None):
        return name, AtomPrecedence

    def true(self, node):
        return "1", AtomPrecedence

    def false(self, node):
        return "0", AtomPrecedence

    def neg(self, node, inner):
        return "¬" + self.wrap(inner, AtomPrecedence), AtomPrecedence

    def _binary(self, node, left, right):
        p = Precedence[node.T]
        return "%s %s %s" % (self.wrap(left, p), Operators[node.T], self.wrap(right, p, True)), p

    conj = disj = xor = _binary

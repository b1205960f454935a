from proplogic.common.trees import Node, Ascender

BINDING, ALL, ANY, ALWAYS, NEVER = "binding", "all", "any", "always", "never"

def equal(a, b):
    # structural, commutative for "all" and "any"
    if not isinstance(a, Requirement) or not isinstance(b, Requirement):
        return False
    if a.T != b.T:
        return False
    if a.T == BINDING:
        return a["name"] == b["name"] and a["value"] == b["value"]
    if a.T in (ALL, ANY):
        (ll, lr), (rl, rr) = a.C, b.C
        return (equal(ll, rl) and equal(lr, rr)) or (equal(ll, rr) and equal(lr, rl))
    return True

class Requirement(Node):

    #
    # Variable bindings making an expression evaluate to the expected value:
    #
    #   binding(name, value)    - the variable must have the value
    #   all(a, b)               - both a and b
    #   any(a, b)               - at least one of a, b
    #   always, never
    #

    def __eq__(self, other):
        return equal(self, other)

    def __ne__(self, other):
        return not equal(self, other)

    __hash__ = None

    def __repr__(self):
        if self.T == BINDING:
            return "Var(%r, %s)" % (self["name"], self["value"])
        elif self.T in (ALL, ANY):
            return "%s(%r, %r)" % (self.T.capitalize(), self.C[0], self.C[1])
        return self.T.capitalize()

    __str__ = __repr__

    @property
    def name(self):
        assert self.T == BINDING, f"Requirement of type {self.T} is not a binding"
        return self["name"]

    @property
    def value(self):
        assert self.T == BINDING, f"Requirement of type {self.T} is not a binding"
        return self["value"]

    #
    # raw constructors, no laws applied
    #

    @staticmethod
    def var(name, value):
        return Requirement(BINDING, name=name, value=bool(value))

    @staticmethod
    def All(left, right):
        return Requirement(ALL, [left, right])

    @staticmethod
    def Any(left, right):
        return Requirement(ANY, [left, right])

    @staticmethod
    def always():
        return Requirement(ALWAYS)

    @staticmethod
    def never():
        return Requirement(NEVER)

    #
    # smart constructors
    #

    @staticmethod
    def all(left, right):
        if left == right:
            return left
        if left.T == NEVER or right.T == NEVER:
            return Requirement.never()
        if left.T == ALWAYS:
            return right
        if right.T == ALWAYS:
            return left
        if left.T == BINDING and right.T == BINDING and left.name == right.name:
            # same name, different values
            return Requirement.never()
        # distribute over a disjunction, driving the tree towards DNF
        if right.T == ANY:
            a, b = right.C
            return Requirement.any(Requirement.all(left, a), Requirement.all(left, b))
        if left.T == ANY:
            a, b = left.C
            return Requirement.any(Requirement.all(a, right), Requirement.all(b, right))
        return Requirement.All(left, right)

    @staticmethod
    def any(left, right):
        if left == right:
            return left
        if left.T == NEVER:
            return right
        if right.T == NEVER:
            return left
        if left.T == ALWAYS or right.T == ALWAYS:
            return Requirement.always()
        if left.T == BINDING and right.T == BINDING and left.name == right.name:
            return Requirement.always()
        return Requirement.Any(left, right)

    def optimize(self):
        return _Optimizer()(self)

    def format(self):
        """
        One line per alternative, bindings of one alternative separated with commas, e.g.:

            a, b
            ¬c
        """
        return "\n".join(", ".join(line) for line in _Formatter()(self))

    def alternatives(self):
        """
        Flattens the requirement into the list of alternative assignments, each a dict {name: value}.
        Alternatives binding the same name to both values are dropped, duplicates are removed.
        Unlike optimize(), this catches contradictions between bindings in unrelated branches.
        """
        return _Alternatives()(self)

    def normalize(self):
        out = None
        for alternative in self.alternatives():
            term = None
            for name, value in alternative.items():
                binding = Requirement.var(name, value)
                term = binding if term is None else Requirement.all(term, binding)
            if term is None:
                term = Requirement.always()
            out = term if out is None else Requirement.any(out, term)
        return Requirement.never() if out is None else out

class _Optimizer(Ascender):

    def all(self, node, left, right):
        return Requirement.all(left, right)

    def any(self, node, left, right):
        return Requirement.any(left, right)

class _Formatter(Ascender):

    def binding(self, node, name=None, value=None):
        return [[name if value else "¬" + name]]

    def always(self, node):
        return [["always"]]

    def never(self, node):
        return [["never"]]

    def all(self, node, left, right):
        return [_unique(l + r) for l in left for r in right]

    def any(self, node, left, right):
        return left + right

def _unique(items):
    out = []
    for item in items:
        if item not in out:
            out.append(item)
    return out

class _Alternatives(Ascender):

    def binding(self, node, name=None, value=None):
        return [{name: value}]

    def always(self, node):
        return [{}]

    def never(self, node):
        return []

    def any(self, node, left, right):
        return _unique(left + right)

    def all(self, node, left, right):
        out = []
        for l in left:
            for r in right:
                if all(l.get(name, value) == value for name, value in r.items()):
                    merged = dict(l)
                    merged.update(r)
                    out.append(merged)
        return _unique(out)

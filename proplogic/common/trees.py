from textwrap import dedent

class SyntaxTreeConversionError(Exception):
    pass

class Node(object):

    #
    # Generic tree node: type T, children C, named data D, optional meta M
    # Subclasses must keep the constructor signature, clone() relies on it
    #

    def __init__(self, typ, children=[], _data=None, _meta=None, **kw):
        self.T = typ
        self.M = _meta
        self.C = list(children)
        self.D = {}
        self.D.update(_data or {})
        self.D.update(kw)

    def __str__(self):
        return "Node(%s (%d children) (%d data) meta:%s)" % (self.T, len(self.C), len(self.D), self.M)

    __repr__ = __str__

    def __getitem__(self, name):
        return self.D[name]

    def get(self, name, default=None):
        return self.D.get(name, default)

    def clone(self, children=None, **kw):
        if children is None:    children = self.C[:]
        d = {}
        d.update(self.D)
        d.update(kw)
        return self.__class__(self.T, children, _data=d, _meta=self.M)

    def _pretty(self, indent=""):
        out = []
        items = list(self.D.items())
        nitems = len(items)
        nc = len(self.C)
        for i, (k, v) in enumerate(items):
            key = f"{k} = "
            if isinstance(v, Node):
                key_len = len(key)
                prefix = "|  " if i < nitems - 1 else "   "
                head, lines = v._pretty(indent + prefix + " "*key_len + " ")
                out.append(indent + "+   " + key + head)
                out += lines
            else:
                str_v = dedent(str(v))
                lines = str_v.split("\n")
                if len(lines) > 1:
                    out.append(indent + "+   " + key)
                    prefix = "|   " if i < nitems-1 or nc else "    "
                    for l in lines:
                        out.append(indent + prefix + " " + l)
                else:
                    out.append(indent + "+   " + key + str(v))

        for i, c in enumerate(self.C):
            child_indent = indent + (' ' if i == nc-1 else '|') + "  "
            if isinstance(c, Node):
                head, lines = c._pretty(child_indent)
                out.append(indent + "+- " + head)
                out.extend(lines)
            else:
                out.append(indent + "+- " + str(c))

        head = self.T
        if self.M is not None:
            head += f" m:{self.M}"

        return head, out

    def pretty(self, indent=""):
        head, lines = self._pretty(indent)
        return "\n".join([indent + head] + lines)

    def walk_nodes(self, top_down=True):
        if top_down:
            yield self
        for c in self.C:
            if isinstance(c, Node):
                yield from c.walk_nodes(top_down)
        if not top_down:
            yield self

    def find_all(self, node_type=None, predicate=None, top_down=True):
        def match(c):
            return (node_type is not None and c.T == node_type) or (predicate is not None and predicate(c))
        for n in self.walk_nodes(top_down):
            if match(n):
                yield n

class Traveler(object):

    def __call__(self, *params, **args):
        return self.walk(*params, **args)

    def handler(self, node_type):
        return getattr(self, node_type, None)

class Descender(Traveler):

    #
    # Descends nodes top to bottom, possibly replacing them
    # If a user method is defined for the node type, it has to explicitly call visit_children(node, context)
    # or walk the children itself.
    # Default method visits children
    # The tree passed in is never modified, visit_children returns a modified clone
    #

    def walk(self, tree, context=None, level=0):
        self.WalkLevel = level
        try:
            return self._walk(tree, context)
        finally:
            self.WalkLevel = level

    def _walk(self, node, context=None):
        self.WalkLevel += 1
        try:
            if not isinstance(node, Node):
                return node

            node_type = node.T
            method = self.handler(node_type)
            try:
                if method is not None:
                    new_node = method(node, context)
                else:
                    new_node = self._default(node, context)
            except SyntaxTreeConversionError:
                raise
            except Exception as e:
                raise SyntaxTreeConversionError(f"Error while processing node {node_type}") from e

            return new_node

        finally:
            self.WalkLevel -= 1

    def visit_children(self, node, context):
        return node.clone([self._walk(c, context) for c in node.C])

    def _default(self, node, context):
        return self.visit_children(node, context)

class Ascender(Traveler):

    #
    # Walks the tree bottom up. Calls the method for the node type with the clone of the node
    # and the already converted children, positional and named
    #

    def walk(self, tree, level=0):
        self.WalkLevel = level
        try:
            return self._walk(tree)
        finally:
            self.WalkLevel = level

    def _walk(self, node):
        self.WalkLevel += 1
        try:
            if not isinstance(node, Node):
                return node
            node_type = node.T
            assert isinstance(node_type, str)

            method = self.handler(node_type) or self._default
            named_children = {
                name:(self._walk(c) if isinstance(c, Node) else c)
                for name, c in node.D.items()
            }
            children = [self._walk(c) for c in node.C]
            node = node.clone(children)
            try:
                return method(node, *children, **named_children)
            except SyntaxTreeConversionError:
                raise
            except Exception as e:
                raise SyntaxTreeConversionError(f"Error while processing node {node_type}") from e
        finally:
            self.WalkLevel -= 1

    def _default(self, node, *children, **named):
        return node

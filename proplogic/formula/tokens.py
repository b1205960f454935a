class Token(object):

    VAR = "var"
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    LPAREN = "lparen"
    RPAREN = "rparen"

    Symbols = {
        "&":    AND,
        "∧":    AND,
        "|":    OR,
        "∨":    OR,
        "^":    XOR,
        "⊕":    XOR,
        "¬":    NOT,
        "(":    LPAREN,
        ")":    RPAREN,
    }

    Display = {
        AND:    "&",
        OR:     "|",
        XOR:    "^",
        NOT:    "¬",
        LPAREN: "(",
        RPAREN: ")"
    }

    def __init__(self, typ, value=None, position=None):
        self.T = typ
        self.V = value
        self.Position = position

    def __str__(self):
        if self.T == self.VAR:
            return "Token(%s, %s)" % (self.T, self.V)
        return "Token(%s)" % (self.T,)

    __repr__ = __str__

    # position is not part of the token identity
    def __eq__(self, other):
        return isinstance(other, Token) and self.T == other.T and self.V == other.V

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.T, self.V))

    def text(self):
        return self.V if self.T == self.VAR else self.Display[self.T]

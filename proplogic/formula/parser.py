from .tokens import Token
from .lexer import Lexer, LexerError
from .expression import Var, Not, And, Or, Xor

class ParserError(Exception):

    def __init__(self, message, position=None):
        Exception.__init__(self, message, position)
        self.Message = message
        self.Position = position

    def __str__(self):
        if self.Position is None:
            return f"Syntax error: {self.Message}"
        return f"Syntax error at position {self.Position}: {self.Message}"

class LexicalError(ParserError):

    def __init__(self, error):
        ParserError.__init__(self, str(error), getattr(error, "Position", None))
        self.Error = error

class ExpectedToken(ParserError):

    def __init__(self, token, position=None):
        ParserError.__init__(self, f"expected '{token.text()}'", position)
        self.Token = token

class UnexpectedToken(ParserError):

    def __init__(self, token):
        ParserError.__init__(self, f"unexpected '{token.text()}'", token.Position)
        self.Token = token

class ExpectedEndOfInput(UnexpectedToken):

    def __init__(self, token):
        UnexpectedToken.__init__(self, token)
        self.Message = f"expected end of input, found '{token.text()}'"

class UnexpectedEndOfInput(ParserError):

    def __init__(self, position=None):
        ParserError.__init__(self, "unexpected end of input", position)

class Parser(object):

    #
    # Recursive descent, one token lookahead, lowest precedence first:
    #
    #   expr   := or
    #   or     := and ( '|' and )*
    #   and    := xor ( '&' xor )*
    #   xor    := atom ( '^' atom )*
    #   atom   := VAR | '¬' atom | '(' expr ')'
    #

    def __init__(self, lexer):
        if isinstance(lexer, str):
            lexer = Lexer(lexer)
        self.Lexer = lexer
        self.Lookahead = []

    def end_position(self):
        return len(self.Lexer.Text)

    def peek(self):
        if not self.Lookahead:
            try:
                token = next(self.Lexer)
            except StopIteration:
                return None
            except LexerError as e:
                raise LexicalError(e) from e
            self.Lookahead.append(token)
        return self.Lookahead[0]

    def next(self):
        token = self.peek()
        if token is not None:
            self.Lookahead.pop(0)
        return token

    def parse(self):
        expression = self.parse_or()
        token = self.next()
        if token is not None:
            raise ExpectedEndOfInput(token)
        return expression

    def _parse_binary(self, token_type, operand, constructor):
        left = operand()
        while True:
            token = self.peek()
            if token is None or token.T != token_type:
                return left
            self.next()
            right = operand()
            left = constructor(left, right)

    def parse_or(self):
        return self._parse_binary(Token.OR, self.parse_and, Or)

    def parse_and(self):
        return self._parse_binary(Token.AND, self.parse_xor, And)

    def parse_xor(self):
        return self._parse_binary(Token.XOR, self.parse_atom, Xor)

    def parse_atom(self):
        token = self.next()
        if token is None:
            raise UnexpectedEndOfInput(self.end_position())
        if token.T == Token.VAR:
            return Var(token.V)
        elif token.T == Token.NOT:
            return Not(self.parse_atom())
        elif token.T == Token.LPAREN:
            expression = self.parse_or()
            closing = self.next()
            if closing is None or closing.T != Token.RPAREN:
                position = self.end_position() if closing is None else closing.Position
                raise ExpectedToken(Token(Token.RPAREN), position)
            return expression
        else:
            raise UnexpectedToken(token)

def parse(text):
    return Parser(Lexer(text)).parse()

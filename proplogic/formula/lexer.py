from .tokens import Token

class LexerError(Exception):
    pass

class UnexpectedCharacter(LexerError):

    def __init__(self, char, position):
        LexerError.__init__(self, char, position)
        self.Char = char
        self.Position = position

    def __str__(self):
        return f"Unexpected character '{self.Char}' at position {self.Position}"

    def __eq__(self, other):
        return isinstance(other, UnexpectedCharacter) and self.Char == other.Char

    def __hash__(self):
        return hash(self.Char)

class Lexer(object):

    #
    # Iterator over the tokens of the source text.
    # On an unrecognized character, next() raises UnexpectedCharacter after moving past it,
    # so the caller may keep iterating.
    #

    def __init__(self, text):
        self.Text = text
        self.Position = 0

    def __iter__(self):
        return self

    def skip_whitespace(self):
        while self.Position < len(self.Text) and self.Text[self.Position].isspace():
            self.Position += 1

    def __next__(self):
        self.skip_whitespace()
        if self.Position >= len(self.Text):
            raise StopIteration()

        start = self.Position
        ch = self.Text[start]
        typ = Token.Symbols.get(ch)
        if typ is not None:
            self.Position += 1
            return Token(typ, position=start)

        if ch.isalnum():
            end = start + 1
            while end < len(self.Text) and self.Text[end].isalnum():
                end += 1
            self.Position = end
            return Token(Token.VAR, self.Text[start:end], position=start)

        self.Position += 1
        raise UnexpectedCharacter(ch, start)


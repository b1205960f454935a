from .tokens import Token
from .lexer import Lexer, LexerError, UnexpectedCharacter
from .expression import Expression, Var, Not, And, Or, Xor, Const
from .parser import Parser, parse, ParserError, LexicalError, ExpectedToken, UnexpectedToken, \
        ExpectedEndOfInput, UnexpectedEndOfInput

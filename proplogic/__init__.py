from .version import Version
from .formula import Expression, Var, Not, And, Or, Xor, Const, Lexer, Parser, parse, ParserError, LexerError
from .satisfiability import Requirement, DynamicSatisfiability, GeneralSatisfiability, Expectative

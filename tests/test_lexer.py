import pytest

from proplogic.formula import Lexer, Token, UnexpectedCharacter


def types(text):
    return [t.T for t in Lexer(text)]


def test_symbols():
    assert types("&|^¬()") == [Token.AND, Token.OR, Token.XOR, Token.NOT, Token.LPAREN, Token.RPAREN]


def test_alternative_symbols():
    assert types("a ∧ b ∨ c ⊕ d") == [Token.VAR, Token.AND, Token.VAR, Token.OR, Token.VAR, Token.XOR, Token.VAR]


def test_identifiers_are_maximal_alphanumeric_runs():
    tokens = list(Lexer("abc1&x2y (z)"))
    assert [t.V for t in tokens if t.T == Token.VAR] == ["abc1", "x2y", "z"]


def test_whitespace_is_skipped():
    assert list(Lexer("  a \t&\n b  ")) == [Token(Token.VAR, "a"), Token(Token.AND), Token(Token.VAR, "b")]
    assert list(Lexer("   ")) == []


def test_positions():
    tokens = list(Lexer(" ab & c"))
    assert [t.Position for t in tokens] == [1, 4, 6]


def test_unexpected_character_does_not_stop_the_lexer():
    lexer = Lexer("a@b")
    assert next(lexer) == Token(Token.VAR, "a")
    with pytest.raises(UnexpectedCharacter) as exc:
        next(lexer)
    assert exc.value.Char == "@"
    assert exc.value.Position == 1
    assert next(lexer) == Token(Token.VAR, "b")
    with pytest.raises(StopIteration):
        next(lexer)


def test_error_message_names_character_and_position():
    with pytest.raises(UnexpectedCharacter) as exc:
        list(Lexer("a & $"))
    assert str(exc.value) == "Unexpected character '$' at position 4"

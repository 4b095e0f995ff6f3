"""Tests for the Token value type and the keyword table."""

import dataclasses

import pytest

from tokens import KEYWORDS, Token, TokenType, keyword_type


def test_keyword_table_covers_reserved_words():
    assert len(KEYWORDS) == 16
    for word, kind in KEYWORDS.items():
        assert word == word.lower()
        assert kind.name == word.upper()


def test_keyword_type_lookup():
    assert keyword_type("while") == TokenType.WHILE
    assert keyword_type("whilst") is None


def test_token_is_immutable():
    tok = Token(TokenType.PLUS, "+", None, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.lexeme = "-"


@pytest.mark.parametrize(
    "kind,literal",
    [
        (TokenType.NUMBER, None),
        (TokenType.NUMBER, "1"),
        (TokenType.STRING, None),
        (TokenType.STRING, 1.0),
        (TokenType.IDENTIFIER, "x"),
        (TokenType.EOF, 0.0),
    ],
)
def test_literal_must_match_kind(kind, literal):
    with pytest.raises(ValueError):
        Token(kind, "x", literal, 1)


def test_literal_bearing_tokens():
    num = Token(TokenType.NUMBER, "3", 3.0, 1)
    text = Token(TokenType.STRING, '"hi"', "hi", 2)
    assert num.has_literal
    assert text.has_literal
    assert not Token(TokenType.DOT, ".", None, 1).has_literal


def test_token_str_and_repr():
    tok = Token(TokenType.NUMBER, "3.5", 3.5, 7)
    assert str(tok) == "NUMBER 3.5 3.5"
    assert repr(tok) == "Token(NUMBER, '3.5', 3.5, line=7)"
    assert str(Token(TokenType.EOF, "", None, 1)) == "EOF  None"

"""Token definitions for the scanner.

This module defines the `TokenType` enum for all token kinds recognized by
the scanner, the `KEYWORDS` table used to tell reserved words apart from
identifiers, and a small immutable `Token` dataclass. Tokens are the atomic
units produced by the scanner and consumed by whatever reads the stream
(a parser, the pretty printer, the JSON dump).
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional, Union


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

Literal = Union[float, str, None]


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    literal: Literal = None
    line: int = 1

    def __post_init__(self) -> None:
        # The kind decides the payload: NUMBER carries a float, STRING a str,
        # everything else nothing.
        if self.type == TokenType.NUMBER:
            ok = isinstance(self.literal, float)
        elif self.type == TokenType.STRING:
            ok = isinstance(self.literal, str)
        else:
            ok = self.literal is None
        if not ok:
            raise ValueError(
                f"Invalid literal {self.literal!r} for token type {self.type}"
            )

    def __str__(self) -> str:
        return f"{self.type} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.lexeme)}, {repr(self.literal)}, line={self.line})"

    @property
    def has_literal(self) -> bool:
        return self.literal is not None


def keyword_type(text: str) -> Optional[TokenType]:
    """Return the keyword kind for `text`, or None for a plain identifier."""
    return KEYWORDS.get(text)

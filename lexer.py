"""
Scanner for the Lox scripting language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes the single-character punctuation, the one-or-two character
    operators (`!`, `!=`, `=`, `==`, `<`, `<=`, `>`, `>=`), string and number
    literals, identifiers and the reserved keywords, and skips whitespace and
    single-line comments starting with `//`.
- Lexical errors do not stop the scan. They are handed to an
    `ErrorReporter` and scanning resumes with the next character.

Examples:
    Input:  "var x = 1.5;"
    Tokens: [VAR, IDENTIFIER('x'), EQUAL, NUMBER(1.5), SEMICOLON, EOF]

Implementation notes:
- The scanner keeps three cursor fields: `_start` marks the first character
    of the lexeme being scanned, `_current` the next unconsumed character and
    `_line` the current line number.
- Tokens are produced lazily by a generator. The generator is created once
    per scanner, so the stream is one-shot: once EOF has been yielded the
    scanner produces nothing more.
- Lookahead (`peek`, `peek_next`) only reads; it never moves `_current`.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from error_reporter import ErrorReporter, UNEXPECTED_CHARACTER, UNTERMINATED_STRING
from tokens import Literal, Token, TokenType, keyword_type

NUL = "\0"

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (kind without trailing '=', kind with trailing '=')
EQUAL_PAIRS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}


def is_digit(c: str) -> bool:
    """ASCII digits only; other Unicode digits are not numbers here."""
    return "0" <= c <= "9"


def is_alpha(c: str) -> bool:
    """ASCII letters and underscore."""
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def is_alpha_numeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    """Single-use scanner producing Lox tokens from one source string."""

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()

        self._start = 0
        self._current = 0
        self._line = 1

        self._tokens = self._scan()

    def is_at_end(self) -> bool:
        """Return True once every character has been consumed."""
        return self._current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the next character."""
        c = self.source[self._current]
        self._current += 1
        return c

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.is_at_end():
            return False
        if self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.is_at_end():
            return NUL
        return self.source[self._current]

    def peek_next(self) -> str:
        """Look one character past the current one without consuming anything."""
        next_pos = self._current + 1
        if next_pos >= len(self.source):
            return NUL
        return self.source[next_pos]

    def make_token(self, token_type: TokenType, literal: Literal = None) -> Token:
        """Build a token from the lexeme between `_start` and `_current`."""
        text = self.source[self._start : self._current]
        return Token(token_type, text, literal, self._line)

    def string(self) -> Optional[Token]:
        """Scan a string literal; the opening quote is already consumed."""
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self._line += 1
            self.advance()

        if self.is_at_end():
            self.reporter.report(self._line, UNTERMINATED_STRING)
            return None

        # closing quote
        self.advance()

        value = self.source[self._start + 1 : self._current - 1]
        return self.make_token(TokenType.STRING, value)

    def number(self) -> Token:
        """Scan a number literal; the first digit is already consumed."""
        while is_digit(self.peek()):
            self.advance()

        # A fractional part needs at least one digit after the dot.
        if self.peek() == "." and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        text = self.source[self._start : self._current]
        return self.make_token(TokenType.NUMBER, float(text))

    def identifier(self) -> Token:
        """Scan an identifier or keyword."""
        while is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self._start : self._current]
        token_type = keyword_type(text) or TokenType.IDENTIFIER
        return self.make_token(token_type)

    def scan_token(self) -> Optional[Token]:
        """Scan one lexeme starting at `_start`.

        Returns the token, or None when the lexeme produced no token
        (whitespace, comments and reported errors).
        """
        c = self.advance()

        if c in SINGLE_CHAR_TOKENS:
            return self.make_token(SINGLE_CHAR_TOKENS[c])

        if c in EQUAL_PAIRS:
            single, double = EQUAL_PAIRS[c]
            return self.make_token(double if self.match("=") else single)

        match c:
            case "/":
                if self.match("/"):
                    # Comment runs to end of line; the newline is left for
                    # the next lexeme so the line counter sees it.
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                    return None
                return self.make_token(TokenType.SLASH)
            case " " | "\r" | "\t":
                return None
            case "\n":
                self._line += 1
                return None
            case '"':
                return self.string()

        if is_digit(c):
            return self.number()

        if is_alpha(c):
            return self.identifier()

        self.reporter.report(self._line, UNEXPECTED_CHARACTER)
        return None

    def _scan(self) -> Iterator[Token]:
        """Generate tokens until the source is exhausted, then EOF."""
        while not self.is_at_end():
            self._start = self._current
            token = self.scan_token()
            if token is not None:
                yield token

        self._start = self._current
        yield Token(TokenType.EOF, "", None, self._line)

    def scan_tokens(self) -> Iterator[Token]:
        """Return the lazy token stream (the same one-shot generator every call)."""
        return self._tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over the same one-shot token stream."""
        return self._tokens

    def get_next_token(self) -> Optional[Token]:
        """Pull one token, or None once EOF has already been produced."""
        return next(self._tokens, None)

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens from the input string."""
        return list(self._tokens)

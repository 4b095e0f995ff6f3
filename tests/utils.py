from error_reporter import ErrorReporter
from lexer import Scanner
from tokens import TokenType


def scan(text: str):
    """Scan `text` with a fresh recording reporter; return (tokens, reporter)."""
    reporter = ErrorReporter()
    tokens = Scanner(text, reporter).tokenize()
    return tokens, reporter


def types_of(text: str):
    """Convenience: token kinds for `text`, EOF included."""
    tokens, _ = scan(text)
    return [t.type for t in tokens]


def without_eof(tokens):
    return [t for t in tokens if t.type != TokenType.EOF]

"""Pretty-printer for token streams.

Provides `PrettyPrinter.print_tokens(tokens)` which renders a token list as
one token per line, and `PrettyPrinter.print_table(tokens)` which lays the
same tokens out in aligned columns with their line numbers. The printer is
intended for debugging, tests and the command-line harness.

Examples:
    PrettyPrinter.print_tokens(Scanner("1 + 2").tokenize())
"""

from __future__ import annotations
from typing import Iterable, List, Optional
from error_reporter import ScanError
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_token(token: Token) -> str:
        """Render a single token as `TYPE lexeme literal`."""
        return str(token)

    @staticmethod
    def print_tokens(tokens: Iterable[Token]) -> str:
        return "\n".join(PrettyPrinter.print_token(t) for t in tokens)

    @staticmethod
    def print_table(
        tokens: Iterable[Token], errors: Optional[List[ScanError]] = None
    ) -> str:
        """Render tokens as aligned columns: index, line, type, lexeme, literal.

        Any errors are appended after the table in the reporter's format.
        """
        tokens = list(tokens)
        lines = []
        width = max((len(str(t.type)) for t in tokens), default=0)
        lines.append(f"Tokens ({len(tokens)}):")
        for i, t in enumerate(tokens):
            row = f"  {i:3}: [line {t.line}] {str(t.type):<{width}} {t.lexeme!r}"
            if t.has_literal:
                row += f" = {t.literal!r}"
            lines.append(row)

        if errors:
            lines.append(f"Errors ({len(errors)}):")
            for err in errors:
                lines.append(f"  {err}")
        return "\n".join(lines)

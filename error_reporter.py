"""Error reporting for the scanner.

The scanner never raises on bad input. Instead each lexical error is handed
to an `ErrorReporter`, which records it, raises its `had_error` flag and
optionally writes a one-line diagnostic to a stream:

    [line 3] Error: Unexpected character.

The caller owns the reporter and checks `had_error` after the token stream
has been drained to decide whether later stages should run.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True)
class ScanError:
    line: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    def __init__(self, stream: Optional[TextIO] = None, use_stderr: bool = False):
        self.stream = stream
        # Look up sys.stderr on every write so redirected streams are honored.
        self.use_stderr = use_stderr
        self.errors: List[ScanError] = []
        self.had_error = False

    @classmethod
    def to_stderr(cls) -> "ErrorReporter":
        return cls(use_stderr=True)

    def error(self, line: int, message: str) -> None:
        self.report(line, message)

    def report(self, line: int, message: str, where: str = "") -> None:
        """Record a lexical error and print it if an output stream is set."""
        err = ScanError(line=line, message=message, where=where)
        self.errors.append(err)
        self.had_error = True

        out = sys.stderr if self.use_stderr else self.stream
        if out is not None:
            print(str(err), file=out)

    def reset(self) -> None:
        self.errors = []
        self.had_error = False

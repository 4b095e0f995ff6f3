"""Convert tokens into JSON-serializable structures.

This module provides `token_to_json(token)` which returns a flat dict
describing one token, and `tokens_to_json(tokens, errors)` which wraps a
whole scan (tokens plus any reported errors). `dump_tokens` writes the
result to disk. The encoding is intentionally simple: the token type is
stored by name and literals keep their Python type (float or str).
"""

from typing import Any, Dict, Iterable, List, Optional
import json
from error_reporter import ScanError
from tokens import Token


def token_to_json(token: Token) -> Dict[str, Any]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def error_to_json(err: ScanError) -> Dict[str, Any]:
    return {"line": err.line, "message": err.message}


def tokens_to_json(
    tokens: Iterable[Token], errors: Optional[List[ScanError]] = None
) -> Dict[str, Any]:
    return {
        "tokens": [token_to_json(t) for t in tokens],
        "errors": [error_to_json(e) for e in (errors or [])],
    }


def dump_tokens(
    tokens: Iterable[Token], path: str, errors: Optional[List[ScanError]] = None
) -> None:
    export = tokens_to_json(tokens, errors)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(export, fh, indent=2)

"""Graphviz visualization helpers for token streams.

Provides `render_tokens_dot(tokens)` which returns a `graphviz.Digraph`
object (not rendered). Optionally `write_and_render` can write the file to
disk.

Layout: tokens are grouped into one cluster per source line. Each token is
an HTML-like table node showing its kind, its lexeme and (for literals) its
value. Edges follow the order in which the scanner produced the tokens.
"""

from typing import Iterable, List
from graphviz import Digraph
from tokens import Token
import html


def _escape(text: str) -> str:
    escaped = html.escape(text).replace("\n", "<br/>")
    # Avoid empty FONT elements which some Graphviz versions reject
    if not escaped.strip():
        escaped = "&nbsp;"
    return escaped


def _token_html(token: Token) -> str:
    rows = [
        f'<TR><TD><B>{html.escape(str(token.type))}</B></TD></TR>',
        f'<TR><TD><FONT POINT-SIZE="10">{_escape(token.lexeme)}</FONT></TD></TR>',
    ]
    if token.has_literal:
        rows.append(
            f'<TR><TD><FONT POINT-SIZE="8">{_escape(repr(token.literal))}</FONT></TD></TR>'
        )
    return f'<<TABLE BORDER="0" CELLBORDER="1" CELLSPACING="0">{"".join(rows)}</TABLE>>'


def render_tokens_dot(tokens: Iterable[Token]) -> Digraph:
    """Return a graphviz.Digraph for the given tokens.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    tokens = list(tokens)
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="LR")

    # Group token indices by line, keeping first-seen line order
    by_line = {}
    for i, tok in enumerate(tokens):
        by_line.setdefault(tok.line, []).append(i)

    for line, indices in by_line.items():
        with dot.subgraph(name=f"cluster_line_{line}") as c:
            c.attr(label=f"line {line}", style="rounded", color="gray")
            for i in indices:
                c.node(f"tok_{i}", label=_token_html(tokens[i]), shape="plaintext")

    for i in range(len(tokens) - 1):
        dot.edge(f"tok_{i}", f"tok_{i + 1}")

    return dot


def write_and_render(tokens: List[Token], out_path: str, fmt: str = "svg") -> None:
    """Write and render the token stream to the given path (without extension).

    Example: write_and_render(tokens, 'out/tokens', fmt='png') will create
    out/tokens.png (requires Graphviz)."""
    dot = render_tokens_dot(tokens)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)

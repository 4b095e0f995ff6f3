"""Tests for token_viz: ensure a Digraph is produced with per-line clusters."""

import graphviz
import pytest

from token_viz import render_tokens_dot, write_and_render
from tests.utils import scan


def test_token_viz_dot_source():
    tokens, _ = scan('var s = "a<b";\nprint s;')
    dot = render_tokens_dot(tokens)
    src = dot.source
    assert "cluster_line_1" in src
    assert "cluster_line_2" in src
    assert "IDENTIFIER" in src
    assert "tok_0 -> tok_1" in src
    # lexemes are HTML-escaped inside the labels
    assert "a&lt;b" in src


def test_token_viz_single_eof():
    tokens, _ = scan("")
    src = render_tokens_dot(tokens).source
    assert "tok_0" in src
    assert "->" not in src


def test_write_and_render_sets_format_and_path(monkeypatch):
    calls = []

    def fake_render(self, out_path, cleanup=False):
        calls.append((self.format, out_path, cleanup))

    monkeypatch.setattr(graphviz.Digraph, "render", fake_render)
    tokens, _ = scan("1")
    write_and_render(tokens, "out/tokens", fmt="png")
    assert calls == [("png", "out/tokens", True)]


def test_write_and_render_rejects_unknown_format():
    tokens, _ = scan("1")
    with pytest.raises(ValueError):
        write_and_render(tokens, "out/tokens", fmt="bogus")

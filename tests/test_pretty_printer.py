from pretty_printer import PrettyPrinter
from tests.utils import scan


def test_print_tokens_one_per_line():
    tokens, _ = scan('print "hi";')
    out = PrettyPrinter.print_tokens(tokens)
    assert out.splitlines() == [
        "PRINT print None",
        'STRING "hi" hi',
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_print_table_includes_lines_literals_and_errors():
    tokens, reporter = scan("x = 1\n@")
    out = PrettyPrinter.print_table(tokens, reporter.errors)
    lines = out.splitlines()
    assert lines[0] == "Tokens (4):"
    assert "[line 1] IDENTIFIER 'x'" in lines[1]
    assert lines[3].endswith("'1' = 1.0")
    assert "[line 2] EOF" in lines[4]
    assert lines[5] == "Errors (1):"
    assert lines[6] == "  [line 2] Error: Unexpected character."


def test_print_table_empty():
    assert PrettyPrinter.print_table([]) == "Tokens (0):"

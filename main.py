from __future__ import annotations
import sys
from typing import List, Optional
from graphviz import FORMATS, CalledProcessError, ExecutableNotFound
from error_reporter import ErrorReporter
from lexer import Scanner
from tokens import Token
from pretty_printer import PrettyPrinter
from token_json import dump_tokens
from token_viz import render_tokens_dot, write_and_render

# Exit statuses (BSD sysexits)
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: cream-cheese [script]"


def lex(text: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Tokenize input string."""
    return Scanner(text, reporter).tokenize()


def run(
    source: str,
    reporter: ErrorReporter,
    *,
    print_tokens: bool = True,
    print_table: bool = False,
    dump_tokens_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> List[Token]:
    """Scan a single program and print or export the tokens.

    Flags control which outputs are produced. Lexical errors go to
    `reporter`; the caller checks `reporter.had_error` afterwards.
    """
    tokens = Scanner(source, reporter).tokenize()

    if print_table:
        print(PrettyPrinter.print_table(tokens, reporter.errors))
    elif print_tokens:
        for token in tokens:
            print(PrettyPrinter.print_token(token))

    if dump_tokens_path:
        try:
            dump_tokens(tokens, dump_tokens_path, errors=reporter.errors)
            print(f"Wrote tokens JSON to {dump_tokens_path}")
        except OSError as e:
            print(f"Failed to write tokens JSON to {dump_tokens_path}: {e}", file=sys.stderr)

    if viz_path:
        try:
            write_and_render(tokens, viz_path, fmt=viz_format)
            print(f"Wrote token visualization to {viz_path}.{viz_format}")
        except (ExecutableNotFound, CalledProcessError, ValueError) as e:
            print(f"Failed to render token visualization: {e}", file=sys.stderr)
            # fallback: write dot source
            try:
                with open(f"{viz_path}.dot", "w", encoding="utf-8") as fh:
                    fh.write(render_tokens_dot(tokens).source)
                print(f"Wrote DOT to {viz_path}.dot ({viz_format} render failed)")
            except OSError as err:
                print(f"Failed to write DOT to {viz_path}.dot: {err}", file=sys.stderr)

    return tokens


def run_file(path: str, reporter: Optional[ErrorReporter] = None, **options) -> int:
    """Scan the file at `path`; return the process exit status."""
    if reporter is None:
        reporter = ErrorReporter.to_stderr()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read file {path}: {e}", file=sys.stderr)
        return EX_NOINPUT

    run(text, reporter, **options)

    if reporter.had_error:
        return EX_DATAERR
    return 0


def run_prompt(reporter: Optional[ErrorReporter] = None, **options) -> int:
    """Run an interactive REPL reading one program per line from stdin.

    A blank line or end of input ends the session. Errors on one line do
    not carry over to the next.
    """
    if reporter is None:
        reporter = ErrorReporter.to_stderr()

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line.strip():
            break

        run(line, reporter, **options)
        reporter.reset()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="cream-cheese",
        description="Scan a Lox script (or REPL lines from stdin) and print its tokens",
    )
    parser.add_argument("scripts", nargs="*", help="Path to source file to scan")
    parser.add_argument(
        "--table",
        dest="print_table",
        action="store_true",
        help="Print tokens as an aligned table with line numbers",
    )
    parser.add_argument(
        "--no-tokens",
        dest="print_tokens",
        action="store_false",
        help="Do not print tokens",
    )
    parser.add_argument(
        "--dump-tokens", dest="dump_tokens", help="Path to write tokens JSON"
    )
    parser.add_argument(
        "--viz-tokens",
        dest="viz_tokens",
        help="Path (without extension) to write Graphviz visualization of tokens",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        choices=sorted(FORMATS),
        metavar="FMT",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    # default behavior: print every token
    parser.set_defaults(print_tokens=True, print_table=False)

    args = parser.parse_args(argv)

    if len(args.scripts) > 1:
        print(USAGE, file=sys.stderr)
        return EX_USAGE

    options = dict(
        print_tokens=args.print_tokens,
        print_table=args.print_table,
        dump_tokens_path=args.dump_tokens,
        viz_path=args.viz_tokens,
        viz_format=args.viz_format,
    )

    if args.scripts:
        return run_file(args.scripts[0], **options)

    # exports only make sense for a whole file
    options.update(dump_tokens_path=None, viz_path=None)
    return run_prompt(**options)


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the ErrorReporter sink."""

import io

from error_reporter import ErrorReporter, ScanError


def test_report_records_and_sets_flag():
    reporter = ErrorReporter()
    assert not reporter.had_error
    reporter.report(3, "Unexpected character.")
    assert reporter.had_error
    assert reporter.errors == [ScanError(3, "Unexpected character.")]


def test_error_is_report_without_location_context():
    reporter = ErrorReporter()
    reporter.error(1, "Unterminated string.")
    assert reporter.errors[0].where == ""


def test_report_writes_to_stream():
    out = io.StringIO()
    reporter = ErrorReporter(stream=out)
    reporter.report(2, "Unexpected character.")
    reporter.report(5, "Unterminated string.", where=" at end")
    assert out.getvalue().splitlines() == [
        "[line 2] Error: Unexpected character.",
        "[line 5] Error at end: Unterminated string.",
    ]


def test_to_stderr_reporter(capsys):
    reporter = ErrorReporter.to_stderr()
    reporter.error(1, "Unexpected character.")
    captured = capsys.readouterr()
    assert captured.err == "[line 1] Error: Unexpected character.\n"
    assert captured.out == ""


def test_reset_clears_state():
    reporter = ErrorReporter()
    reporter.error(1, "Unexpected character.")
    reporter.reset()
    assert not reporter.had_error
    assert reporter.errors == []

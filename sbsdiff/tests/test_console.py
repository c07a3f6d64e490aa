# sbsdiff/tests/test_console.py
"""Tests for status message output."""

import io

from ..console import print_error, print_info


def test_info_prefix():
    stream = io.StringIO()
    print_info("No differences", file=stream)
    assert stream.getvalue() == "[INFO] No differences\n"


def test_error_prefix():
    stream = io.StringIO()
    print_error("git failed", file=stream)
    assert stream.getvalue() == "[ERROR] git failed\n"


def test_brackets_not_treated_as_markup():
    stream = io.StringIO()
    print_info("[bold]literal[/bold]", file=stream)
    assert stream.getvalue() == "[INFO] [bold]literal[/bold]\n"


def test_error_defaults_to_stderr(capsys):
    print_error("boom")
    captured = capsys.readouterr()
    assert "[ERROR] boom" in captured.err
    assert captured.out == ""

import io

import pytest

from checkers.console import (
    print_help,
    print_separator,
    print_title,
    print_welcome,
    read_input,
)


def test_read_input_strips_line():
    assert read_input(io.StringIO("  5,0:4,1 \n")) == "5,0:4,1"


def test_read_input_reads_one_line_at_a_time():
    stream = io.StringIO("help\nquit\n")
    assert read_input(stream) == "help"
    assert read_input(stream) == "quit"


def test_read_input_at_end_of_stream_raises():
    with pytest.raises(EOFError, match="failed to read input"):
        read_input(io.StringIO(""))


def test_read_input_without_newline_raises():
    with pytest.raises(EOFError):
        read_input(io.StringIO("5,0:4,1"))


def test_read_input_uses_stdin_by_default(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert read_input() == "q"


def test_print_separator(capsys):
    print_separator()
    out = capsys.readouterr().out
    assert out == "=" * 51 + "\n"


def test_print_title(capsys):
    print_title()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "CHECKERS GAME"
    assert lines[0] == lines[2]
    assert set(lines[0]) == {"="}


def test_print_welcome_mentions_move_format(capsys):
    print_welcome()
    out = capsys.readouterr().out
    assert "White moves first!" in out
    assert "'5,0:4,1'" in out


def test_print_help(capsys):
    print_help()
    out = capsys.readouterr().out
    assert "=== HELP ===" in out
    assert "  quit, q     - Quit the game" in out
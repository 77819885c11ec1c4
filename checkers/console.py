"""Console input and the fixed messages shown to the player."""

from __future__ import annotations

import sys
from typing import TextIO

_SEPARATOR = "=" + "=" * 50

_WELCOME_LINES = (
    "You are playing as White (W) against the Computer Black (B)",
    "White moves first!",
    "\nMove format: fromRow,fromCol:toRow,toCol (e.g., '5,0:4,1')",
    "Enter 'help' for available commands, 'quit' to exit",
    "",
)

_HELP_LINES = (
    "\n=== HELP ===",
    "Commands:",
    "  help, h     - Show this help",
    "  moves, m    - Show all valid moves",
    "  quit, q     - Quit the game",
    "",
    "Move format: fromRow,fromCol:toRow,toCol",
    "Example: '5,0:4,1' moves piece from (5,0) to (4,1)",
    "",
    "Board coordinates:",
    "  Rows: 0-7 (top to bottom)",
    "  Cols: 0-7 (left to right)",
    "  W = White pieces (yours)",
    "  B = Black pieces (computer)",
    "  . = Empty dark squares (playable)",
    "      = Empty light squares (not playable)",
    "",
)


def _emit(lines: tuple[str, ...] | list[str]) -> str:
    """Write the lines to stdout, each followed by a newline, and return the text."""
    text = "".join(f"{line}\n" for line in lines)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def read_input(stream: TextIO | None = None) -> str:
    """Read one line from the stream (stdin by default), stripped of whitespace.

    Raises EOFError when the stream ends before a newline is read.
    """
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if not line.endswith("\n"):
        raise EOFError("failed to read input: EOF")
    return line.strip()


def print_separator() -> str:
    """Print a line of '=' characters and return what was printed."""
    return _emit([_SEPARATOR])


def print_title() -> str:
    """Print the game title between separators and return what was printed."""
    return _emit([_SEPARATOR, "CHECKERS GAME", _SEPARATOR])


def print_welcome() -> str:
    """Print the welcome message and return what was printed."""
    return _emit(_WELCOME_LINES)


def print_help() -> str:
    """Print the help text and return what was printed."""
    return _emit(_HELP_LINES)
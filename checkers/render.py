"""Text rendering of a checkers board."""

from __future__ import annotations

from .domain import BOARD_SIZE, Board, Position


def render_board(board: Board) -> str:
    """Draw the board with row and column numbers, one line per row."""
    lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE)) + "\n"]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.get(Position(row, col))
            if piece is not None:
                cells.append(piece.symbol())
            elif (row + col) % 2 == 1:
                cells.append(".")
            else:
                cells.append(" ")
        lines.append(f"{row} " + "".join(cell + " " for cell in cells) + "\n")
    return "".join(lines)
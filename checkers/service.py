"""Game operations used by the interactive handler."""

from __future__ import annotations

import re

from .domain import Game, Move, Player, Position
from .render import render_board

_FORMAT_MESSAGE = "invalid move format, expected 'fromRow,fromCol:toRow,toCol'"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MoveFormatError(ValueError):
    """Raised when text cannot be read as a move."""


def _parse_int(text: str, what: str) -> int:
    value = text.strip()
    if not _INTEGER.fullmatch(value):
        raise MoveFormatError(f"invalid {what}: invalid syntax {value!r}")
    return int(value)


def parse_move(text: str) -> Move:
    """Read a move written as 'fromRow,fromCol:toRow,toCol'."""
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise MoveFormatError(_FORMAT_MESSAGE)
    start_parts = parts[0].split(",")
    end_parts = parts[1].split(",")
    if len(start_parts) != 2 or len(end_parts) != 2:
        raise MoveFormatError(_FORMAT_MESSAGE)

    from_row = _parse_int(start_parts[0], "from row")
    from_col = _parse_int(start_parts[1], "from column")
    to_row = _parse_int(end_parts[0], "to row")
    to_col = _parse_int(end_parts[1], "to column")
    return Move(Position(from_row, from_col), Position(to_row, to_col))


def game_status(game: Game) -> str:
    """A one-line description of who is to move or how the game ended."""
    if game.is_over():
        winner = game.winner()
        if winner is not None:
            return f"Game Over! {winner} wins!"
        return "Game Over! It's a draw!"
    return f"Current player: {game.current_player}"


class GameService:
    """Creates games and carries out the operations the handler needs."""

    def new_game(self) -> Game:
        return Game()

    def parse_move(self, text: str) -> Move:
        return parse_move(text)

    def make_move(self, game: Game, move: Move) -> None:
        game.make_move(move)

    def board_text(self, game: Game) -> str:
        return render_board(game.board)

    def valid_moves(self, game: Game) -> list[Move]:
        return game.valid_moves()

    def is_game_over(self, game: Game) -> bool:
        return game.is_over()

    def current_player(self, game: Game) -> Player:
        return game.current_player

    def status(self, game: Game) -> str:
        return game_status(game)
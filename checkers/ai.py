"""The computer opponent."""

from __future__ import annotations

import random

from .domain import Game, Move


class NoMovesError(Exception):
    """Raised when the player to move has no legal move."""


class AIService:
    """Picks a move at random, preferring captures."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def best_move(self, game: Game) -> Move:
        """Choose a move for the current player."""
        moves = game.valid_moves()
        if not moves:
            raise NoMovesError("no valid moves available")
        captures = [move for move in moves if move.is_capture()]
        return self._rng.choice(captures or moves)
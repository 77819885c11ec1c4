"""Command-line entry point for a game against the computer."""

from __future__ import annotations

import sys
from typing import Sequence

from .ai import AIService, NoMovesError
from .domain import InvalidMoveError
from .handler import GameHandler, GameQuit
from .service import GameService


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on the console."""
    handler = GameHandler(GameService(), AIService())
    try:
        handler.run()
    except (GameQuit, EOFError, NoMovesError, InvalidMoveError) as exc:
        print(f"Game ended with error: {exc}", file=sys.stderr)
        return 0
    print("Game completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
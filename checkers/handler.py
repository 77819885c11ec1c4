"""The interactive game loop: a human plays White against the computer."""

from __future__ import annotations

from typing import TextIO

from .ai import AIService
from .console import print_help, print_title, print_welcome, read_input
from .domain import Game, InvalidMoveError, Player
from .service import GameService, MoveFormatError

_QUIT_COMMANDS = {"quit", "exit", "q"}
_HELP_COMMANDS = {"help", "h"}


class GameQuit(Exception):
    """Raised when the player asks to leave the game."""


class GameHandler:
    """Runs a game on the console, alternating human and computer turns."""

    def __init__(
        self,
        game_service: GameService | None = None,
        ai_service: AIService | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._games = game_service if game_service is not None else GameService()
        self._ai = ai_service if ai_service is not None else AIService()
        self._stream = stream

    def run(self) -> None:
        """Play a game to its end.

        Raises GameQuit if the player quits, EOFError if input runs out and
        the computer's errors if it cannot move.
        """
        game = self._games.new_game()

        print_title()
        print_welcome()

        while not self._games.is_game_over(game):
            print(self._games.board_text(game))
            print(self._games.status(game))
            if self._games.current_player(game) is Player.WHITE:
                self._human_turn(game)
            else:
                self._computer_turn(game)

        print(self._games.board_text(game))
        print(self._games.status(game))
        print("Game over!")

    def _human_turn(self, game: Game) -> None:
        while True:
            print("\nYour move (White): ", end="", flush=True)
            text = read_input(self._stream)
            command = text.lower()
            if command in _QUIT_COMMANDS:
                raise GameQuit("game quit by user")
            if command in _HELP_COMMANDS:
                print_help()
                continue
            if not text:
                print("Please enter a move.")
                continue

            try:
                move = self._games.parse_move(text)
            except MoveFormatError as exc:
                print(f"Invalid move format: {exc}")
                continue
            try:
                self._games.make_move(game, move)
            except InvalidMoveError as exc:
                print(f"Invalid move: {exc}")
                continue

            print(f"You moved: {move}")
            return

    def _computer_turn(self, game: Game) -> None:
        print("\nComputer is thinking...")
        move = self._ai.best_move(game)
        self._games.make_move(game, move)
        print(f"Computer moved: {move}")
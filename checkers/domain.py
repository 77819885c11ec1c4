"""Board, pieces, moves and the rules of a game of checkers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

BOARD_SIZE = 8

_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Player(Enum):
    """The two sides of the game."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return "White (human)" if self is Player.WHITE else "Black (AI)"

    def symbol(self) -> str:
        """Single-letter board symbol for this player."""
        return "W" if self is Player.WHITE else "B"

    def opponent(self) -> Player:
        """The other player."""
        return Player.BLACK if self is Player.WHITE else Player.WHITE


class PieceType(Enum):
    """Kind of piece; kings are recognised but never promoted to."""

    REGULAR = 0
    KING = 1


@dataclass
class Piece:
    """A piece belonging to a player."""

    player: Player
    type: PieceType = PieceType.REGULAR

    def is_king(self) -> bool:
        return self.type is PieceType.KING

    def symbol(self) -> str:
        return self.player.symbol()


@dataclass(frozen=True)
class Position:
    """A square on the board, addressed by row and column."""

    row: int
    col: int

    def is_valid(self) -> bool:
        """True when the square lies on the board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def _is_dark(self) -> bool:
        return (self.row + self.col) % 2 == 1


class Board:
    """An 8x8 board holding pieces on its squares."""

    def __init__(self, setup: bool = True) -> None:
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        if setup:
            self._setup_initial_position()

    def _setup_initial_position(self) -> None:
        for row, player in [(r, Player.BLACK) for r in range(3)] + [
            (r, Player.WHITE) for r in range(5, BOARD_SIZE)
        ]:
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 1:
                    self._squares[row][col] = Piece(player)

    def get(self, pos: Position) -> Piece | None:
        """The piece on a square, or None if it is empty or off the board."""
        if not pos.is_valid():
            return None
        return self._squares[pos.row][pos.col]

    def set(self, pos: Position, piece: Piece | None) -> None:
        """Place a piece on a square; positions off the board are ignored."""
        if pos.is_valid():
            self._squares[pos.row][pos.col] = piece

    def remove(self, pos: Position) -> None:
        """Clear a square; positions off the board are ignored."""
        self.set(pos, None)

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is None

    def _occupied(self) -> Iterator[tuple[Position, Piece]]:
        for row, line in enumerate(self._squares):
            for col, piece in enumerate(line):
                if piece is not None:
                    yield Position(row, col), piece


@dataclass(frozen=True)
class Move:
    """A move of a piece from one square to another."""

    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start.row},{self.start.col}:{self.end.row},{self.end.col}"

    def is_capture(self) -> bool:
        """True for a two-square jump."""
        return abs(self.end.row - self.start.row) == 2

    @property
    def _middle(self) -> Position:
        return Position(
            self.start.row + (self.end.row - self.start.row) // 2,
            self.start.col + (self.end.col - self.start.col) // 2,
        )


class GameState(Enum):
    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class InvalidMoveError(ValueError):
    """Raised when a move breaks the rules."""


@dataclass
class Game:
    """A game in progress: the board, whose turn it is and what has been played."""

    board: Board = field(default_factory=Board)
    current_player: Player = Player.WHITE
    state: GameState = GameState.IN_PROGRESS
    history: list[Move] = field(default_factory=list)

    def validate_move(self, move: Move) -> None:
        """Raise InvalidMoveError unless the current player may make this move."""
        if not move.start.is_valid() or not move.end.is_valid():
            raise InvalidMoveError("invalid positions")

        piece = self.board.get(move.start)
        if piece is None:
            raise InvalidMoveError("no piece at source position")
        if piece.player is not self.current_player:
            raise InvalidMoveError("not your piece")
        if not self.board.is_empty(move.end):
            raise InvalidMoveError("destination is occupied")
        if not move.start._is_dark or not move.end._is_dark:
            raise InvalidMoveError("can only move on dark squares")

        row_diff = move.end.row - move.start.row
        col_diff = abs(move.end.col - move.start.col)
        if col_diff != abs(row_diff):
            raise InvalidMoveError("must move diagonally")

        if not piece.is_king():
            if piece.player is Player.WHITE and row_diff > 0:
                raise InvalidMoveError("white pieces can only move up (towards row 0)")
            if piece.player is Player.BLACK and row_diff < 0:
                raise InvalidMoveError(
                    "black pieces can only move down (towards row 7)"
                )

        distance = abs(row_diff)
        if distance == 1:
            return
        if distance == 2:
            captured = self.board.get(move._middle)
            if captured is None:
                raise InvalidMoveError("no piece to capture")
            if captured.player is piece.player:
                raise InvalidMoveError("cannot capture your own piece")
            return
        raise InvalidMoveError("invalid move distance")

    def make_move(self, move: Move) -> None:
        """Play a move, pass the turn and update the game state."""
        try:
            self.validate_move(move)
        except InvalidMoveError as exc:
            raise InvalidMoveError(f"invalid move: {exc}") from exc

        piece = self.board.get(move.start)
        if move.is_capture():
            self.board.remove(move._middle)
        self.board.remove(move.start)
        self.board.set(move.end, piece)

        self.history.append(move)
        self.current_player = self.current_player.opponent()
        self._update_state()

    def valid_moves(self) -> list[Move]:
        """Every legal move of the current player, scanning the board row by row."""
        moves: list[Move] = []
        for start, piece in self.board._occupied():
            if piece.player is not self.current_player:
                continue
            for d_row, d_col in _DIRECTIONS:
                for step in (1, 2):
                    move = Move(
                        start,
                        Position(start.row + d_row * step, start.col + d_col * step),
                    )
                    try:
                        self.validate_move(move)
                    except InvalidMoveError:
                        continue
                    moves.append(move)
        return moves

    def _update_state(self) -> None:
        players = [piece.player for _, piece in self.board._occupied()]
        if Player.WHITE not in players:
            self.state = GameState.BLACK_WINS
        elif Player.BLACK not in players:
            self.state = GameState.WHITE_WINS
        elif not self.valid_moves():
            self.state = (
                GameState.BLACK_WINS
                if self.current_player is Player.WHITE
                else GameState.WHITE_WINS
            )
        else:
            self.state = GameState.IN_PROGRESS

    def is_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS

    def winner(self) -> Player | None:
        """The winning player, or None while in progress or on a draw."""
        if self.state is GameState.WHITE_WINS:
            return Player.WHITE
        if self.state is GameState.BLACK_WINS:
            return Player.BLACK
        return None
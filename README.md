# checkers

Checkers in the terminal. You play White; the computer plays Black.

## Installing

```
pip install .
```

## Playing

```
checkers
```

The same game starts with `python -m checkers.cli`.

The board is printed with row numbers down the left and column numbers across
the top:

```
  0 1 2 3 4 5 6 7
0   B   B   B   B
1 B   B   B   B
2   B   B   B   B
3 .   .   .   .
4   .   .   .   .
5 W   W   W   W
6   W   W   W   W
7 W   W   W   W
```

- `W` is a White piece (yours), `B` is a Black piece (the computer's).
- `.` is an empty dark square; pieces only ever stand on dark squares.
- White moves first, towards row 0. Black moves towards row 7.

Enter a move as `fromRow,fromCol:toRow,toCol`, for example `5,0:4,1`.
A move is one square diagonally forward, or a jump of two squares diagonally
forward over an opponent's piece, which takes that piece off the board.
An illegal or malformed move is reported and you are asked again.

Other commands at the prompt:

- `help` or `h` shows the help text.
- `quit`, `exit` or `q` ends the game.

The computer takes a capture whenever one is available and otherwise picks a
random legal move.

A side wins when the other side has no pieces left or has no legal move on its
turn.

## What the game does not do

The rules are a simplified form of checkers:

- Pieces are never crowned. A piece that reaches the far row stays a regular
  piece and still moves only forward.
- Each turn is a single step or a single jump; there are no multi-jump chains.
- Captures are never compulsory for you.
- There is no draw rule, so a game ends only when one side wins.
- The help text lists a `moves` command, but the prompt does not accept it.

## Using the library

The game rules can be used without the console:

```python
from checkers.domain import Game, Move, Position
from checkers.render import render_board
from checkers.ai import AIService

game = Game()
game.make_move(Move(Position(5, 0), Position(4, 1)))
print(render_board(game.board))

reply = AIService().best_move(game)
game.make_move(reply)
print(game.is_over(), game.winner())
```

- `Game.validate_move` and `Game.make_move` raise `InvalidMoveError` for an
  illegal move; `Game.valid_moves` lists every legal move of the player to move.
- `checkers.service.parse_move` turns text such as `"5,0:4,1"` into a `Move`,
  raising `MoveFormatError` when the text is malformed, and
  `checkers.service.game_status` describes whose turn it is or who won.
- `AIService` takes an optional `random.Random` for repeatable choices, and
  `best_move` raises `NoMovesError` when there is no legal move.
- `checkers.handler.GameHandler` runs the console game; it takes an optional
  input stream in place of standard input and raises `GameQuit` when the
  player quits.

## Running the tests

```
pip install ".[test]"
pytest
```
# chessmoves

chessmoves is a small chess model. It has board squares and pieces that
list the moves open to them. It has a compact text notation for moves. It
also has a board that carries moves out. The board handles captures, en
passant, promotion to a queen and castling on either side.

## What it does not do

- It does not test for check or checkmate. The moves of a piece are the
  squares its movement rules allow on the current board.
- It does not draw the board.
- It has no interactive game loop and no command to run.
- It does not check whose turn it is when a move is made.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Squares

`chessmoves.position.Position` names a square by column and row. Both count
from 0, so `a1` is `(0, 0)` and `h8` is `(7, 7)`.

```python
from chessmoves.position import Position

pos = Position.from_text("d5")
pos.col, pos.row           # (3, 4)
pos.is_valid()             # True
str(pos)                   # "d5"
pos.location               # row * 8 + col, here 35
pos.offset(1, 1)           # e6
Position.from_location(35) # d5
Position.invalid()         # a square off the board
```

A square given coordinates outside the board is invalid. An invalid square
reports `-1` for its column and row, and prints as `"error"`. An offset from
an invalid square stays invalid. `Position.from_text` raises `ValueError`
when the text is shorter than two characters. Positions compare equal by
square, and they can be sorted and hashed.

## Moves

`chessmoves.move` defines `PieceType`, `MoveType` and `Move`.

The text of a move is the source square, then the destination square, then
optional letters:

| suffix                       | meaning                      |
|------------------------------|------------------------------|
| `p`, `n`, `b`, `r`, `q`, `k` | the kind of piece captured   |
| `E`                          | en passant                   |
| `Q`                          | promotion to a queen         |
| `c`                          | castle on the king's side    |
| `C`                          | castle on the queen's side   |

```python
from chessmoves.move import Move, MoveType, PieceType
from chessmoves.position import Position

move = Move.parse("e5c6r")          # is_white defaults to True
move.source, move.dest              # e5, c6
move.capture                        # PieceType.ROOK
move.move_type                      # MoveType.MOVE
move.text                           # "e5c6r"
str(move)                           # "e5c6r"

built = Move(Position.from_text("a7"), Position.from_text("a8"),
             PieceType.QUEEN, PieceType.SPACE, MoveType.MOVE, True)
built.text                          # "a7a8Q"
```

`Move.parse` raises `ValueError` when the text is shorter than four
characters. Moves sort and hash by their text, so you can find a parsed move
in the set that a piece generates. Equality compares every field.
`Move.from_possible(source, dest, possible)` returns the move in `possible`
that goes from `source` to `dest`. If no move matches, it returns a blank
move.

`PieceType.from_letter` maps a letter of either case to a piece type.
Unknown letters give `PieceType.INVALID`. `PieceType.letter()` returns the
lower-case letter for a piece type, or `""` when the type has none.

## Pieces

`chessmoves.piece.Piece` is the abstract base class for all pieces.
`Space` is an empty square. The concrete pieces are:

- `Bishop`, `Knight`, `Rook` and `Queen`, in `chessmoves.pieces`
- `King`, in `chessmoves.king`
- `Pawn`, in `chessmoves.pawn`

Each piece takes a square and a colour, with `True` for white. A piece has
these attributes:

- `position`
- `white`
- `n_moves`
- `last_move`
- `piece_type`
- `is_moved`

`get_moves(board)` returns the set of moves open to the piece. A piece also
compares equal to its own `PieceType`, so `piece == PieceType.ROOK` works.

## The board

```python
from chessmoves.board import Board
from chessmoves.move import Move
from chessmoves.position import Position

board = Board()                          # standard starting layout
knight = board[Position.from_text("g1")]
moves = knight.get_moves(board)          # set of Move
board.move(Move.parse("g1f3"))
board.current_move                       # 1
board.white_turn                         # False
list(board.pieces())                     # every piece that is not a Space
```

`Board(empty=True)` gives a board where every square holds a `Space`.
`board[pos] = piece` places a piece on a square and sets the piece's
`position`. `clear()` empties the board. `reset()` sets up the starting
layout again. Indexing with an invalid square raises `IndexError`.

`move(move)` works as follows:

- It counts the move and records it on the moving piece.
- It clears a captured piece.
- On an en passant capture, it removes the pawn that was taken.
- It turns a pawn that reaches the first or last row into a queen.
- On castling, it moves the rook beside the king.
"""The chess board: a grid of pieces and the count of moves made."""

from __future__ import annotations

from typing import Iterator

from chessmoves.king import King
from chessmoves.move import Move, MoveType, PieceType
from chessmoves.pawn import Pawn
from chessmoves.piece import Piece, Space
from chessmoves.pieces import Bishop, Knight, Queen, Rook
from chessmoves.position import Position

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


class Board:
    """An eight by eight board of pieces.

    Every square holds a piece; empty squares hold a :class:`Space`.
    ``num_moves`` counts the moves made so far, and white moves when it is even.
    """

    def __init__(self, empty: bool = False) -> None:
        self.num_moves = 0
        self._grid: list[list[Piece]] = []
        if empty:
            self.clear()
        else:
            self.reset()

    def clear(self) -> None:
        """Remove every piece, leaving only empty squares."""
        self._grid = [[Space(Position(col, row)) for row in range(8)] for col in range(8)]

    def reset(self) -> None:
        """Set up the starting position."""
        self.clear()
        for col, piece_class in enumerate(_BACK_RANK):
            self._grid[col][0] = piece_class(Position(col, 0), True)
            self._grid[col][7] = piece_class(Position(col, 7), False)
            self._grid[col][1] = Pawn(Position(col, 1), True)
            self._grid[col][6] = Pawn(Position(col, 6), False)

    def _check(self, pos: Position) -> None:
        if not pos.is_valid():
            raise IndexError(f"position off the board: {pos!r}")

    def __getitem__(self, pos: Position) -> Piece:
        self._check(pos)
        return self._grid[pos.col][pos.row]

    def __setitem__(self, pos: Position, piece: Piece) -> None:
        self._check(pos)
        piece.position = pos
        self._grid[pos.col][pos.row] = piece

    @property
    def current_move(self) -> int:
        """The number of moves made so far."""
        return self.num_moves

    @property
    def white_turn(self) -> bool:
        """Whether it is white's turn to move."""
        return self.num_moves % 2 == 0

    def _swap(self, a: Position, b: Position) -> None:
        first, second = self[a], self[b]
        self[a] = second
        self[b] = first

    def move(self, move: Move) -> None:
        """Carry out ``move``, including captures, en passant, promotion and castling."""
        self.num_moves += 1
        source = move.source
        dest = move.dest
        self._check(source)
        self._check(dest)

        mover = self[source]
        mover.record_move(self.current_move)

        if move.capture is not PieceType.SPACE:
            self[dest] = Space(dest)

        if move.move_type is MoveType.ENPASSANT:
            taken = dest.offset(0, -1 if move.is_white else 1)
            if taken.is_valid():
                self[taken] = Space(taken)

        if mover.piece_type is PieceType.PAWN and dest.row in (0, 7):
            queen = Queen(source, mover.white)
            queen.n_moves = mover.n_moves
            queen.last_move = mover.last_move
            self[source] = queen
            mover = queen

        if mover.piece_type is PieceType.KING:
            if move.move_type is MoveType.CASTLE_KING:
                self._swap(source.offset(3, 0), source.offset(1, 0))
            elif move.move_type is MoveType.CASTLE_QUEEN:
                self._swap(source.offset(-4, 0), source.offset(-1, 0))

        self._swap(source, dest)

    def pieces(self) -> Iterator[Piece]:
        """Yield every piece on the board that is not an empty square."""
        for column in self._grid:
            for piece in column:
                if piece.piece_type is not PieceType.SPACE:
                    yield piece

    def __repr__(self) -> str:
        return f"Board(num_moves={self.num_moves})"
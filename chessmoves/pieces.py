"""The bishop, knight, rook and queen."""

from __future__ import annotations

from chessmoves.move import Move, PieceType
from chessmoves.piece import Piece

_DIAGONALS = ((-1, 1), (1, 1), (-1, -1), (1, -1))
_STRAIGHTS = ((0, 1), (-1, 0), (1, 0), (0, -1))
_KNIGHT_JUMPS = (
    (-1, 2), (1, 2),
    (-2, 1), (2, 1),
    (-2, -1), (2, -1),
    (-1, -2), (1, -2),
)


class Bishop(Piece):
    """Slides along diagonals."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.BISHOP

    def get_moves(self, board) -> set[Move]:
        return self._slide_moves(board, _DIAGONALS)


class Knight(Piece):
    """Jumps in an L shape over anything in the way."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.KNIGHT

    def get_moves(self, board) -> set[Move]:
        return self._step_moves(board, _KNIGHT_JUMPS)


class Rook(Piece):
    """Slides along ranks and files."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.ROOK

    def get_moves(self, board) -> set[Move]:
        return self._slide_moves(board, _STRAIGHTS)


class Queen(Piece):
    """Slides along ranks, files and diagonals."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.QUEEN

    def get_moves(self, board) -> set[Move]:
        return self._slide_moves(board, _DIAGONALS + _STRAIGHTS)
"""The king."""

from __future__ import annotations

from chessmoves.move import Move, MoveType, PieceType
from chessmoves.piece import Piece
from chessmoves.position import Position

_KING_STEPS = (
    (-1, 1), (0, 1), (1, 1),
    (-1, 0), (1, 0),
    (-1, -1), (0, -1), (1, -1),
)


class King(Piece):
    """Steps one square in any direction and may castle while unmoved."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.KING

    def get_moves(self, board) -> set[Move]:
        moves = self._step_moves(board, _KING_STEPS)
        if self.n_moves != 0:
            return moves

        rook = self.position.offset(3, 0)
        landing = self.position.offset(2, 0)
        between = self.position.offset(1, 0)
        if self._castle_allowed(board, rook, (between, landing)):
            moves.add(self._castle_move(landing, MoveType.CASTLE_KING))

        rook = self.position.offset(-4, 0)
        beside_rook = self.position.offset(-3, 0)
        landing = self.position.offset(-2, 0)
        between = self.position.offset(-1, 0)
        if self._castle_allowed(board, rook, (between, landing, beside_rook)):
            moves.add(self._castle_move(landing, MoveType.CASTLE_QUEEN))

        return moves

    @staticmethod
    def _castle_allowed(board, rook: Position, empties: tuple[Position, ...]) -> bool:
        if not rook.is_valid() or not all(square.is_valid() for square in empties):
            return False
        rook_piece = board[rook]
        if rook_piece.piece_type is not PieceType.ROOK or rook_piece.n_moves != 0:
            return False
        return all(board[square].piece_type is PieceType.SPACE for square in empties)

    def _castle_move(self, dest: Position, castle_type: MoveType) -> Move:
        if castle_type not in (MoveType.CASTLE_KING, MoveType.CASTLE_QUEEN):
            raise ValueError(f"not a castling move type: {castle_type}")
        return Move(
            self.position,
            dest,
            PieceType.INVALID,
            PieceType.SPACE,
            castle_type,
            self.white,
        )
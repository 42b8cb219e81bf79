"""The pawn."""

from __future__ import annotations

from chessmoves.move import Move, MoveType, PieceType
from chessmoves.piece import Piece
from chessmoves.position import Position


class Pawn(Piece):
    """Advances straight ahead, captures diagonally, takes en passant and promotes."""

    @property
    def piece_type(self) -> PieceType:
        return PieceType.PAWN

    def get_moves(self, board) -> set[Move]:
        forward = 1 if self.white else -1
        start_row = 1 if self.white else 6
        last_row = 7 if self.white else 0
        passant_row = 4 if self.white else 3
        moves: set[Move] = set()

        # two squares forward from the starting row
        if self.position.row == start_row:
            target = self.position.offset(0, 2 * forward)
            if target.is_valid() and board[target].piece_type is PieceType.SPACE:
                moves.add(self.create_move(target, board))

        ahead = self.position.offset(0, forward)
        if (
            ahead.is_valid()
            and ahead.row != last_row
            and board[ahead].piece_type is PieceType.SPACE
        ):
            moves.add(self.create_move(ahead, board))

        for dcol in (-1, 1):
            target = self.position.offset(dcol, forward)
            if (
                target.is_valid()
                and target.row != last_row
                and self._is_enemy(board[target])
            ):
                moves.add(self.create_move(target, board))

        if self.position.row == passant_row:
            for dcol in (-1, 1):
                side = self.position.offset(dcol, 0)
                if not side.is_valid():
                    continue
                neighbour = board[side]
                if (
                    neighbour.piece_type is PieceType.PAWN
                    and neighbour.white != self.white
                    and neighbour.last_move == board.current_move
                ):
                    moves.add(self._en_passant_move(side.offset(0, forward), board))

        if (
            ahead.is_valid()
            and ahead.row == last_row
            and board[ahead].piece_type is PieceType.SPACE
        ):
            moves.add(self._promote_move(ahead, board))
        for dcol in (-1, 1):
            target = self.position.offset(dcol, forward)
            if (
                target.is_valid()
                and target.row == last_row
                and self._is_enemy(board[target])
            ):
                moves.add(self._promote_move(target, board))

        return moves

    def _is_enemy(self, occupant: Piece) -> bool:
        return occupant.piece_type is not PieceType.SPACE and occupant.white != self.white

    def _en_passant_move(self, dest: Position, board) -> Move:
        return Move(
            self.position,
            dest,
            PieceType.INVALID,
            board[dest].piece_type,
            MoveType.ENPASSANT,
            self.white,
        )

    def _promote_move(self, dest: Position, board) -> Move:
        return Move(
            self.position,
            dest,
            PieceType.QUEEN,
            board[dest].piece_type,
            MoveType.MOVE,
            self.white,
        )
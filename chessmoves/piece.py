"""The abstract chess piece and the empty square."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Iterable, Protocol

from chessmoves.move import Move, MoveType, PieceType
from chessmoves.position import Position

if TYPE_CHECKING:

    class _BoardLike(Protocol):
        def __getitem__(self, pos: Position) -> Piece: ...


class Piece(abc.ABC):
    """A piece standing on a square of the board.

    ``n_moves`` counts how often the piece has moved and ``last_move`` is the
    board move number at which it last moved.
    """

    def __init__(self, position: Position, white: bool = True) -> None:
        self.position = position
        self.white = white
        self.n_moves = 0
        self.last_move = 0

    @property
    @abc.abstractmethod
    def piece_type(self) -> PieceType:
        """The kind of this piece."""

    @property
    def is_moved(self) -> bool:
        return self.n_moves != 0

    def just_moved(self, current_move: int) -> bool:
        """Whether this piece made the move just before ``current_move``."""
        return self.last_move == current_move - 1

    def record_move(self, current_move: int) -> None:
        """Note that this piece moved at ``current_move``."""
        self.last_move = current_move
        self.n_moves += 1

    def create_move(self, dest: Position, board: _BoardLike) -> Move:
        """A plain move of this piece to ``dest``, capturing whatever stands there."""
        return Move(
            self.position,
            dest,
            PieceType.INVALID,
            board[dest].piece_type,
            MoveType.MOVE,
            self.white,
        )

    def get_moves(self, board: _BoardLike) -> set[Move]:
        """All moves this piece can make on ``board``."""
        return set()

    def _can_enter(self, occupant: Piece) -> bool:
        return occupant.piece_type is PieceType.SPACE or occupant.white != self.white

    def _slide_moves(
        self, board: _BoardLike, directions: Iterable[tuple[int, int]]
    ) -> set[Move]:
        moves: set[Move] = set()
        for dcol, drow in directions:
            target = self.position.offset(dcol, drow)
            while target.is_valid() and board[target].piece_type is PieceType.SPACE:
                moves.add(self.create_move(target, board))
                target = target.offset(dcol, drow)
            if target.is_valid() and self._can_enter(board[target]):
                moves.add(self.create_move(target, board))
        return moves

    def _step_moves(
        self, board: _BoardLike, offsets: Iterable[tuple[int, int]]
    ) -> set[Move]:
        moves: set[Move] = set()
        for dcol, drow in offsets:
            target = self.position.offset(dcol, drow)
            if target.is_valid() and self._can_enter(board[target]):
                moves.add(self.create_move(target, board))
        return moves

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PieceType):
            return self.piece_type is other
        return NotImplemented

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        colour = "white" if self.white else "black"
        return f"{type(self).__name__}({self.position}, {colour})"


class Space(Piece):
    """An empty square."""

    def __init__(self, position: Position) -> None:
        super().__init__(position, False)

    @property
    def piece_type(self) -> PieceType:
        return PieceType.SPACE
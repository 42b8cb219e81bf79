"""A single chess move and its textual notation."""

from __future__ import annotations

import enum
from typing import Iterable

from chessmoves.position import Position


class PieceType(enum.Enum):
    """The kinds of thing that can stand on a square."""

    SPACE = "space"
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"
    INVALID = "invalid"

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        """Map a letter of either case to a piece type; unknown letters give INVALID."""
        return _TYPE_BY_LETTER.get(letter.lower(), cls.INVALID)

    def letter(self) -> str:
        """The lower-case letter of this piece type, or an empty string."""
        return _LETTER_BY_TYPE.get(self, "")


_LETTER_BY_TYPE = {
    PieceType.PAWN: "p",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPE_BY_LETTER = {letter: pt for pt, letter in _LETTER_BY_TYPE.items()}


class MoveType(enum.Enum):
    MOVE = 0
    ENPASSANT = 1
    CASTLE_KING = 2
    CASTLE_QUEEN = 3
    MOVE_ERROR = 4


class Move:
    """One move across the board.

    Moves order and hash by their notation, such as ``"e2e4"`` or ``"c2b1p"``.
    """

    __slots__ = ("_source", "_dest", "_promote", "_capture", "_move_type", "_is_white", "_text")

    def __init__(
        self,
        source: Position | None = None,
        dest: Position | None = None,
        promote: PieceType = PieceType.INVALID,
        capture: PieceType = PieceType.INVALID,
        move_type: MoveType = MoveType.MOVE,
        is_white: bool = True,
    ) -> None:
        self._source = source if source is not None else Position.invalid()
        self._dest = dest if dest is not None else Position.invalid()
        self._promote = promote
        self._capture = capture
        self._move_type = move_type
        self._is_white = is_white
        if source is None and dest is None:
            self._text = ""
        else:
            self._text = self._render()

    @classmethod
    def parse(cls, text: str, is_white: bool = True) -> Move:
        """Read a move from notation such as ``"e2e4"``, ``"b7a8rQ"`` or ``"e1g1c"``."""
        if len(text) < 4:
            raise ValueError(f"move text too short: {text!r}")
        move = cls()
        move._source = Position.from_text(text[0:2])
        move._dest = Position.from_text(text[2:4])
        move._move_type = MoveType.MOVE
        move._promote = PieceType.INVALID
        move._capture = PieceType.SPACE
        move._is_white = is_white
        move._text = text

        notes = text[4:11]
        for character in notes:
            if character.islower():
                if character != "c":
                    # the capture is always named by the first note letter
                    move._capture = PieceType.from_letter(text[4])
                else:
                    move._move_type = MoveType.CASTLE_KING
            elif character == "Q":
                move._move_type = MoveType.MOVE
                move._promote = PieceType.QUEEN
            elif character == "E":
                move._move_type = MoveType.ENPASSANT
            elif character == "C":
                move._move_type = MoveType.CASTLE_QUEEN
        return move

    @classmethod
    def from_possible(cls, source: Position, dest: Position, possible: Iterable[Move]) -> Move:
        """Return the move among ``possible`` from ``source`` to ``dest``.

        When none matches, a blank move is returned.
        """
        found = cls()
        for candidate in sorted(possible):
            if candidate.source == source and candidate.dest == dest:
                found = candidate
        return found

    @property
    def source(self) -> Position:
        return self._source

    @property
    def dest(self) -> Position:
        return self._dest

    @property
    def promote(self) -> PieceType:
        return self._promote

    @property
    def capture(self) -> PieceType:
        return self._capture

    @property
    def move_type(self) -> MoveType:
        return self._move_type

    @property
    def is_white(self) -> bool:
        return self._is_white

    @property
    def text(self) -> str:
        """The notation of this move."""
        return self._text

    def _render(self) -> str:
        parts = [
            chr(ord("a") + self._source.col),
            chr(ord("1") + self._source.row),
            chr(ord("a") + self._dest.col),
            chr(ord("1") + self._dest.row),
        ]
        if (
            self._capture not in (PieceType.INVALID, PieceType.SPACE)
            and self._move_type is not MoveType.ENPASSANT
        ):
            parts.append(self._capture.letter())
        if self._move_type is MoveType.ENPASSANT:
            parts.append("E")
        if self._promote is not PieceType.INVALID:
            parts.append(self._promote.letter().upper())
        if self._move_type is MoveType.CASTLE_KING:
            parts.append("c")
        elif self._move_type is MoveType.CASTLE_QUEEN:
            parts.append("C")
        return "".join(parts)

    def _key(self) -> tuple:
        return (
            self._source,
            self._dest,
            self._promote,
            self._capture,
            self._move_type,
            self._is_white,
            self._text,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._text < other._text

    def __le__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._text <= other._text

    def __gt__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._text > other._text

    def __ge__(self, other: Move) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._text >= other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Move.parse({self._text!r}, is_white={self._is_white})"

    def __str__(self) -> str:
        return self._text
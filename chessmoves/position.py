"""Squares on an eight by eight chess board."""

from __future__ import annotations

_INVALID_CODE = 0xFF


class Position:
    """A square given by column (0..7, file a..h) and row (0..7, rank 1..8).

    Any coordinate outside the board makes the position invalid; an invalid
    position reports -1 for both its column and its row.
    """

    __slots__ = ("_col", "_row")

    def __init__(self, col: int, row: int) -> None:
        if 0 <= col < 8 and 0 <= row < 8:
            self._col = col
            self._row = row
        else:
            self._col = -1
            self._row = -1

    @classmethod
    def from_text(cls, text: str) -> Position:
        """Build a position from coordinates such as ``"d4"``."""
        if len(text) < 2:
            raise ValueError(f"position text too short: {text!r}")
        return cls(ord(text[0]) - ord("a"), ord(text[1]) - ord("1"))

    @classmethod
    def from_location(cls, location: int) -> Position:
        """Build a position from a location 0..63, counted row by row from a1."""
        return cls(location % 8, location // 8)

    @classmethod
    def invalid(cls) -> Position:
        """Return a position that is off the board."""
        return cls(-1, -1)

    @property
    def col(self) -> int:
        return self._col

    @property
    def row(self) -> int:
        return self._row

    def is_valid(self) -> bool:
        return self._col >= 0

    @property
    def location(self) -> int:
        """The location 0..63 of this square, row by row from a1."""
        return self._row * 8 + self._col

    def offset(self, dcol: int, drow: int) -> Position:
        """Return the position moved by the given column and row deltas."""
        if not self.is_valid():
            return Position.invalid()
        return Position(self._col + dcol, self._row + drow)

    @property
    def _code(self) -> int:
        if not self.is_valid():
            return _INVALID_CODE
        return (self._col << 4) | self._row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __repr__(self) -> str:
        return f"Position({self._col}, {self._row})"

    def __str__(self) -> str:
        if not self.is_valid():
            return "error"
        return chr(ord("a") + self._col) + chr(ord("1") + self._row)
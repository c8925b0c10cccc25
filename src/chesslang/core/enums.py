"""Cell contents of the simplified board."""

from __future__ import annotations

from enum import IntEnum


class PieceType(IntEnum):
    """What a single board cell holds.

    There is no colour: a knight is just a knight.
    """

    EMPTY = 0
    KNIGHT = 1
    QUEEN = 2
    KING = 3
    PAWN = 4
    ROOK = 5
    BISHOP = 6

    def __str__(self) -> str:
        """Display character, ``.`` for an empty cell."""
        return _CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> PieceType:
        """Parse a display character, e.g. ``'N'`` → ``KNIGHT``."""
        try:
            return _CHARS_REV[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None


_CHARS: dict[PieceType, str] = {
    PieceType.EMPTY: ".",
    PieceType.KNIGHT: "N",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
}
_CHARS_REV: dict[str, PieceType] = {v: k for k, v in _CHARS.items()}

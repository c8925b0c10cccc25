"""Square type alias and coordinate helpers.

Board layout (row-major, rank 8 on top):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

from chesslang.core.errors import OutOfBoundsError

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


def is_on_board(row: int, col: int) -> bool:
    """Check whether (*row*, *col*) lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def parse_square(name: str) -> Square:
    """Parse an algebraic position, e.g. 'b8' → (0, 1).

    Raises:
        OutOfBoundsError: *name* is not exactly a file a–h followed by a rank 1–8.
    """
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise OutOfBoundsError(name)
    return BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a")


def square_name(row: int, col: int) -> str:
    """Human-readable name, e.g. (7, 2) → 'c1'."""
    if not is_on_board(row, col):
        raise OutOfBoundsError(f"({row}, {col})")
    return FILES[col] + str(BOARD_SIZE - row)

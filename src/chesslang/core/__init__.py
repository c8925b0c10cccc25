"""Core domain layer — board state with zero external dependencies.

Quick start::

    from chesslang.core import Board

    board = Board.initial()
    board.move_piece("c1", "h1")
    print(board.is_king_in_check())
"""

from chesslang.core.board import Board
from chesslang.core.enums import PieceType
from chesslang.core.errors import (
    ChessLangError,
    CommandParseError,
    NoKingFoundError,
    OutOfBoundsError,
)
from chesslang.core.move import MoveRecord
from chesslang.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveRecord",
    # Errors
    "ChessLangError",
    "CommandParseError",
    "NoKingFoundError",
    "OutOfBoundsError",
]

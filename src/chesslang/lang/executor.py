"""Command executor: applies a parsed command to a board."""

from __future__ import annotations

import logging
from typing import assert_never

from chesslang.core.board import Board
from chesslang.lang.commands import CheckCommand, Command, MoveCommand, UndoCommand

_LOGGER = logging.getLogger(__name__)

MSG_IN_CHECK = "King is in check!"
MSG_SAFE = "King is safe."
MSG_NOTHING_TO_UNDO = "No moves to undo."


def execute(command: Command, board: Board) -> str:
    """Run *command* against *board* and return the text to show the user.

    Raises:
        OutOfBoundsError: a move names a square outside the board.
        NoKingFoundError: ``check`` on a board without a king.
    """
    match command:
        case MoveCommand(from_sq=start, to_sq=end):
            if board.move_piece(start, end) is None:
                return f"No piece at {start}"
            return f"Moved from {start} to {end}"
        case UndoCommand():
            record = board.undo_move()
            if record is None:
                return MSG_NOTHING_TO_UNDO
            return f"Undid move from {record.to_sq} back to {record.from_sq}"
        case CheckCommand():
            in_check = board.is_king_in_check()
            _LOGGER.debug("Check query: in_check=%s", in_check)
            return MSG_IN_CHECK if in_check else MSG_SAFE
        case _:
            assert_never(command)

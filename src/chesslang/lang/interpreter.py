"""Interpreter — runs one line of input through lexer, parser and executor."""

from __future__ import annotations

import logging

from chesslang.core.board import Board
from chesslang.core.errors import CommandParseError, NoKingFoundError, OutOfBoundsError
from chesslang.lang.executor import execute
from chesslang.lang.lexer import tokenize
from chesslang.lang.parser import parse

_LOGGER = logging.getLogger(__name__)

MSG_INVALID_COMMAND = "Invalid command!"
MSG_NO_KING = "No king on board."


class Interpreter:
    """Stateless line interpreter; the board is passed in on every call."""

    def interpret(self, line: str, board: Board) -> str | None:
        """Execute *line* against *board*.

        Returns the message for the user, or ``None`` when the line was
        blank or only a comment. Errors never escape: they become messages
        and the board is left as it was.
        """
        tokens = tokenize(line)
        try:
            command = parse(tokens)
        except CommandParseError as exc:
            _LOGGER.warning("Rejected line %r: %s", line, exc)
            return MSG_INVALID_COMMAND

        if command is None:
            return None

        try:
            return execute(command, board)
        except OutOfBoundsError as exc:
            _LOGGER.warning("Rejected %s: %s", command, exc)
            return f"Invalid position: {exc.position}"
        except NoKingFoundError:
            _LOGGER.warning("Check requested on a board without a king")
            return MSG_NO_KING

"""Shell — the read-eval-print loop around the interpreter.

Reads one line at a time, interprets it against a single board owned by the
shell and echoes the board after every line. ``exit`` or end of input stops
the loop.
"""

from __future__ import annotations

import logging
from typing import TextIO

from chesslang.core.board import Board
from chesslang.lang.interpreter import Interpreter
from chesslang.shell.render import render_board
from chesslang.shell.settings import ShellSettings

_LOGGER = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class Shell:
    """Interactive session bound to one input and one output stream."""

    __slots__ = ("_board", "_interpreter", "_settings", "_stdin", "_stdout")

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        settings: ShellSettings | None = None,
        board: Board | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._settings = settings or ShellSettings()
        self._board = board if board is not None else Board.initial()
        self._interpreter = Interpreter()

    @property
    def board(self) -> Board:
        return self._board

    def run(self) -> int:
        """Loop until ``exit`` or end of input. Returns the number of lines run."""
        handled = 0
        while True:
            self._write(self._settings.prompt, newline=False)
            line = self._stdin.readline()
            if not line:
                _LOGGER.debug("End of input after %d lines", handled)
                break
            line = line.rstrip("\r\n")
            if line.strip() == EXIT_COMMAND:
                break
            self.handle_line(line)
            handled += 1
        return handled

    def handle_line(self, line: str) -> str | None:
        """Interpret one line, print the result and (optionally) the board."""
        message = self._interpreter.interpret(line, self._board)
        if message is not None:
            self._write(message)
        if self._settings.show_board:
            self._write(render_board(self._board.snapshot()))
        return message

    def _write(self, text: str, *, newline: bool = True) -> None:
        if not text:
            return
        self._stdout.write(text + "\n" if newline else text)
        self._stdout.flush()

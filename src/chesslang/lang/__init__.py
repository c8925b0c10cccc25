"""Command language layer — lexer, parser, executor, interpreter.

Quick start::

    from chesslang.core import Board
    from chesslang.lang import Interpreter

    board = Board.initial()
    print(Interpreter().interpret("move from c1 to h1", board))
"""

from chesslang.lang.commands import CheckCommand, Command, MoveCommand, UndoCommand
from chesslang.lang.executor import execute
from chesslang.lang.interpreter import Interpreter
from chesslang.lang.lexer import tokenize
from chesslang.lang.parser import parse

__all__ = [
    # Commands
    "CheckCommand",
    "Command",
    "MoveCommand",
    "UndoCommand",
    # Pipeline
    "Interpreter",
    "execute",
    "parse",
    "tokenize",
]

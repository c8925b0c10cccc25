"""Text shell layer — REPL, board rendering and settings."""

from chesslang.shell.render import render_board
from chesslang.shell.repl import Shell
from chesslang.shell.settings import ShellSettings

__all__ = [
    "Shell",
    "ShellSettings",
    "render_board",
]

"""Shell settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PROMPT = "ChessLang> "


@dataclass
class ShellSettings:
    """All user-configurable shell settings."""

    prompt: str = DEFAULT_PROMPT
    show_board: bool = True  # echo the board after every line
    log_level: str = "WARNING"

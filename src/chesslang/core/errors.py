"""Exception hierarchy shared by the board and the command language."""

from __future__ import annotations


class ChessLangError(Exception):
    """Base class for every recoverable ChessLang error."""


class CommandParseError(ChessLangError, ValueError):
    """A line of input is not a recognised command."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = list(tokens)
        super().__init__(f"Invalid command: {' '.join(tokens)!r}")


class OutOfBoundsError(ChessLangError, ValueError):
    """An algebraic position does not name one of the 64 squares."""

    def __init__(self, position: str) -> None:
        self.position = position
        super().__init__(f"Invalid position: {position!r}")


class NoKingFoundError(ChessLangError, LookupError):
    """Check detection ran on a board without a king."""

    def __init__(self) -> None:
        super().__init__("No king on board")

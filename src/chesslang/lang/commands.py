"""Parsed command variants.

A :data:`Command` is one of a closed set of frozen value objects; the
executor dispatches on them with a ``match`` statement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """``move from <from_sq> to <to_sq>``; positions are kept verbatim."""

    from_sq: str
    to_sq: str


@dataclass(frozen=True, slots=True)
class UndoCommand:
    """``undo``"""


@dataclass(frozen=True, slots=True)
class CheckCommand:
    """``check``"""


Command: TypeAlias = MoveCommand | UndoCommand | CheckCommand

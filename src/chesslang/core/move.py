"""Move record kept on the board's undo history."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single applied move, stored as the positions the user typed."""

    from_sq: str
    to_sq: str

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to_sq}"

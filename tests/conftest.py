"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesslang.core.board import Board
from chesslang.core.enums import PieceType


@pytest.fixture
def board() -> Board:
    """The session starting placement: knight b8, king d2, queen c1."""
    return Board.initial()


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build an empty board with pieces placed by algebraic position.

    ``make_board(d4="K", d8="Q")``
    """

    def _make(**placements: str) -> Board:
        b = Board()
        for position, char in placements.items():
            b.place(position, PieceType.from_char(char))
        return b

    return _make

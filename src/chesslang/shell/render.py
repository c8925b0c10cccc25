"""Plain-text board rendering."""

from __future__ import annotations

from collections.abc import Sequence

from chesslang.core.enums import PieceType

FILE_FOOTER = "  a b c d e f g h"


def render_board(cells: Sequence[Sequence[PieceType]]) -> str:
    """Render a board snapshot as 8 rows (rank 8 first) plus a file footer."""
    rows = [" ".join(str(piece) for piece in row) for row in cells]
    rows.append(FILE_FOOTER)
    return "\n".join(rows)

"""Board - piece placement on an 8x8 grid with an undo history."""

from __future__ import annotations

import logging

from chesslang.core.enums import PieceType
from chesslang.core.errors import NoKingFoundError, OutOfBoundsError
from chesslang.core.move import MoveRecord
from chesslang.core.types import BOARD_SIZE, Square, is_on_board, parse_square

_LOGGER = logging.getLogger(__name__)

_DIAGONALS: tuple[Square, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_KNIGHT_OFFSETS: tuple[Square, ...] = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)


class Board:
    """Mutable 8x8 board of :class:`PieceType` cells plus a LIFO move log.

    Cells are addressed by ``(row, col)`` with row 0 holding rank 8.
    Moves are free-form: any piece may go to any square and whatever
    stood on the destination is overwritten.
    """

    __slots__ = ("_cells", "_history")

    def __init__(self) -> None:
        self._cells: list[list[PieceType]] = [
            [PieceType.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._history: list[MoveRecord] = []

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceType:
        row, col = sq
        if not is_on_board(row, col):
            raise OutOfBoundsError(f"({row}, {col})")
        return self._cells[row][col]

    def __setitem__(self, sq: Square, piece: PieceType) -> None:
        row, col = sq
        if not is_on_board(row, col):
            raise OutOfBoundsError(f"({row}, {col})")
        self._cells[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] == PieceType.EMPTY

    def piece_at(self, position: str) -> PieceType:
        """Cell contents at an algebraic *position*, e.g. ``'d2'``."""
        return self[parse_square(position)]

    def place(self, position: str, piece: PieceType) -> None:
        """Put *piece* on an algebraic *position*; does not touch history."""
        self[parse_square(position)] = piece

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        """Applied moves, oldest first."""
        return tuple(self._history)

    def snapshot(self) -> tuple[tuple[PieceType, ...], ...]:
        """Read-only copy of the grid, row 0 (rank 8) first."""
        return tuple(tuple(row) for row in self._cells)

    # -- Moves --------------------------------------------------------------

    def move_piece(self, start: str, end: str) -> MoveRecord | None:
        """Move whatever stands on *start* to *end*.

        Returns the recorded move, or ``None`` when *start* is empty
        (the board is left untouched in that case).

        Raises:
            OutOfBoundsError: either position is not a board square.
        """
        start_sq = parse_square(start)
        end_sq = parse_square(end)

        piece = self[start_sq]
        if piece == PieceType.EMPTY:
            _LOGGER.debug("No piece at %s, move ignored", start)
            return None

        self[end_sq] = piece
        self[start_sq] = PieceType.EMPTY
        record = MoveRecord(start, end)
        self._history.append(record)
        _LOGGER.debug("Moved %s %s", piece.name, record)
        return record

    def undo_move(self) -> MoveRecord | None:
        """Reverse the most recent move. Returns it, or ``None`` if history is empty.

        Whatever currently stands on the recorded destination goes back to
        the source, and the destination is cleared. A piece captured by the
        original move is not restored.
        """
        if not self._history:
            return None

        record = self._history.pop()
        start_sq = parse_square(record.from_sq)
        end_sq = parse_square(record.to_sq)

        self[start_sq] = self[end_sq]
        self[end_sq] = PieceType.EMPTY
        _LOGGER.debug("Undid %s", record)
        return record

    # -- Check detection ----------------------------------------------------

    def king_square(self) -> Square:
        """First king found scanning rows top to bottom, columns left to right."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self._cells[row][col] == PieceType.KING:
                    return row, col
        raise NoKingFoundError()

    def is_king_in_check(self) -> bool:
        """Whether a queen, rook, bishop or knight attacks the king.

        Lines are never blocked: a slider anywhere on a shared rank, file or
        diagonal counts. Pawns never give check.

        Raises:
            NoKingFoundError: the board has no king.
        """
        king_row, king_col = self.king_square()
        cells = self._cells

        for i in range(BOARD_SIZE):
            on_rank = cells[king_row][i]
            if on_rank == PieceType.QUEEN or (on_rank == PieceType.ROOK and i != king_col):
                return True
            on_file = cells[i][king_col]
            if on_file == PieceType.QUEEN or (on_file == PieceType.ROOK and i != king_row):
                return True

        for distance in range(1, BOARD_SIZE):
            for d_row, d_col in _DIAGONALS:
                row = king_row + d_row * distance
                col = king_col + d_col * distance
                if is_on_board(row, col) and cells[row][col] in (
                    PieceType.QUEEN,
                    PieceType.BISHOP,
                ):
                    return True

        for d_row, d_col in _KNIGHT_OFFSETS:
            row = king_row + d_row
            col = king_col + d_col
            if is_on_board(row, col) and cells[row][col] == PieceType.KNIGHT:
                return True

        return False

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        b._history = self._history.copy()
        return b

    def clear(self) -> None:
        self._cells = [[PieceType.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._history.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Session starting placement: knight b8, king d2, queen c1."""
        b = cls()
        b.place("b8", PieceType.KNIGHT)
        b.place("d2", PieceType.KING)
        b.place("c1", PieceType.QUEEN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = " ".join(str(p) for p in self._cells[row])
            rows.append(f"{BOARD_SIZE - row} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

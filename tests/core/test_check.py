"""Tests for king location and check detection."""

from collections.abc import Callable

import pytest

from chesslang.core.board import Board
from chesslang.core.errors import NoKingFoundError

MakeBoard = Callable[..., Board]


class TestKingSquare:
    def test_initial(self, board: Board) -> None:
        assert board.king_square() == (6, 3)

    def test_missing_raises(self) -> None:
        with pytest.raises(NoKingFoundError, match="No king"):
            Board().king_square()

    def test_first_in_row_major_order(self, make_board: MakeBoard) -> None:
        b = make_board(h1="K", c7="K", a7="K")
        assert b.king_square() == (1, 0)


class TestInitialScenario:
    def test_queen_diagonally_adjacent(self, board: Board) -> None:
        # King d2 = (6, 3), queen c1 = (7, 2): one step down-left.
        assert board.is_king_in_check()

    def test_queen_on_same_file(self, board: Board) -> None:
        board.move_piece("c1", "d1")
        assert board.is_king_in_check()

    def test_queen_out_of_line(self, board: Board) -> None:
        board.move_piece("c1", "h1")
        assert not board.is_king_in_check()

    def test_check_does_not_mutate(self, board: Board) -> None:
        board.is_king_in_check()
        assert board == Board.initial()
        assert board.history == ()


class TestRankAndFile:
    def test_queen_on_rank_through_pieces(self, make_board: MakeBoard) -> None:
        b = make_board(a4="K", c4="P", e4="N", h4="Q")
        assert b.is_king_in_check()

    def test_queen_on_file(self, make_board: MakeBoard) -> None:
        assert make_board(d4="K", d8="Q").is_king_in_check()

    def test_rook_on_rank(self, make_board: MakeBoard) -> None:
        assert make_board(d4="K", a4="R").is_king_in_check()

    def test_rook_on_file_through_piece(self, make_board: MakeBoard) -> None:
        assert make_board(d4="K", d3="B", d1="R").is_king_in_check()

    def test_bishop_on_rank_is_safe(self, make_board: MakeBoard) -> None:
        assert not make_board(d4="K", h4="B").is_king_in_check()

    def test_rook_on_diagonal_is_safe(self, make_board: MakeBoard) -> None:
        assert not make_board(d4="K", f6="R").is_king_in_check()


class TestDiagonals:
    @pytest.mark.parametrize("square", ["a7", "g7", "a1", "g1", "h8"])
    def test_bishop_on_each_diagonal(self, make_board: MakeBoard, square: str) -> None:
        assert make_board(d4="K", **{square: "B"}).is_king_in_check()

    def test_queen_on_diagonal_through_piece(self, make_board: MakeBoard) -> None:
        assert make_board(d4="K", e5="N", h8="Q").is_king_in_check()

    def test_king_in_corner(self, make_board: MakeBoard) -> None:
        assert make_board(a1="K", h8="B").is_king_in_check()
        assert not make_board(a1="K", h7="B").is_king_in_check()


class TestKnights:
    @pytest.mark.parametrize(
        "square", ["e6", "c6", "e2", "c2", "f5", "b5", "f3", "b3"]
    )
    def test_every_knight_offset(self, make_board: MakeBoard, square: str) -> None:
        assert make_board(d4="K", **{square: "N"}).is_king_in_check()

    def test_offset_two_one(self, make_board: MakeBoard) -> None:
        # King (4, 4) = e4, knight (6, 5) = f2.
        assert make_board(e4="K", f2="N").is_king_in_check()

    def test_offset_two_two_is_safe(self, make_board: MakeBoard) -> None:
        # King (4, 4) = e4, knight (6, 6) = g2.
        assert not make_board(e4="K", g2="N").is_king_in_check()

    def test_knight_near_edge(self, make_board: MakeBoard) -> None:
        assert make_board(a8="K", b6="N").is_king_in_check()
        assert not make_board(a8="K", h1="N").is_king_in_check()


class TestNoThreat:
    def test_lone_king(self, make_board: MakeBoard) -> None:
        assert not make_board(e4="K").is_king_in_check()

    def test_pawns_never_check(self, make_board: MakeBoard) -> None:
        assert not make_board(e4="K", d5="P", f5="P", d3="P", f3="P").is_king_in_check()

    def test_no_king_raises(self, make_board: MakeBoard) -> None:
        with pytest.raises(NoKingFoundError):
            make_board(e4="Q").is_king_in_check()


class TestMultipleKings:
    def test_threat_to_first_king(self, make_board: MakeBoard) -> None:
        assert make_board(a8="K", h1="K", f8="Q").is_king_in_check()

    def test_threat_to_later_king_ignored(self, make_board: MakeBoard) -> None:
        assert not make_board(a8="K", h1="K", d1="Q").is_king_in_check()

"""Tests for FEN helpers and piece glyphs."""

import pytest

from termchess.core.notation import STARTING_FEN, fen_grid, is_valid_fen
from termchess.core.piece import Piece, to_pieces


class TestIsValidFen:
    def test_starting_position(self) -> None:
        assert is_valid_fen(STARTING_FEN)

    def test_custom_position(self) -> None:
        assert is_valid_fen("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")

    def test_loose_castling_rights_accepted(self) -> None:
        assert is_valid_fen("4k3/8/8/8/8/8/8/R3K3 w KQkq - 0 1")

    def test_side_not_to_move_in_check_accepted(self) -> None:
        assert is_valid_fen("4k3/8/8/8/8/8/4R3/4K3 w - - 0 1")

    def test_two_white_kings_rejected(self) -> None:
        assert not is_valid_fen("4k3/8/8/8/8/8/8/K3K3 w - - 0 1")

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "not a fen",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",  # 7 ranks
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "8/8/8/8/8/8/8/8 w - - 0 1",  # no kings
        ],
    )
    def test_invalid(self, fen: str) -> None:
        assert not is_valid_fen(fen)


class TestFenGrid:
    def test_starting_position(self) -> None:
        grid = fen_grid(STARTING_FEN)
        assert grid[0] == "rnbqkbnr"
        assert grid[1] == "pppppppp"
        assert grid[2] == " " * 8
        assert grid[7] == "RNBQKBNR"

    def test_mixed_rank(self) -> None:
        grid = fen_grid("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        assert grid[0] == "    k   "
        assert grid[3] == "   p    "
        assert grid[4] == "    P   "

    def test_bad_width_raises(self) -> None:
        with pytest.raises(ValueError):
            fen_grid("4k4/8/8/8/8/8/8/4K3 w - - 0 1")


class TestPiece:
    def test_predicates(self) -> None:
        king = Piece.from_char("K")
        assert king.is_king and king.is_white and not king.is_black
        pawn = Piece.from_char("p")
        assert pawn.is_black and not pawn.is_king
        assert Piece().is_empty

    def test_glyphs(self) -> None:
        assert Piece.from_char("K").display() == "♚"
        assert Piece.from_char("k").display() == "♔"
        assert Piece.from_char("n").display("ascii") == "n"
        assert Piece().display() == " "

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_to_pieces(self) -> None:
        row = to_pieces("r   k  r")
        assert len(row) == 8
        assert row[4].is_king
        assert row[1].is_empty

"""Tests for Board and the Square helpers."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import A1, D1, E1, E4, E8, H8, Square, parse_square


class TestSquare:
    def test_name(self) -> None:
        assert Square(0, 4).name == "E1"
        assert str(H8) == "H8"

    def test_parse_case_insensitive(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square(" E4 ") == E4

    @pytest.mark.parametrize("text", ["", "E", "I1", "A9", "E44", "4E"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_square(text)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            Square(8, 0)

    def test_offset_off_board(self) -> None:
        assert A1.offset(-1, 0) is None
        assert A1.offset(1, 1) == Square(1, 1)

    def test_offset_top_edge(self) -> None:
        assert H8.offset(0, 1) is None
        assert H8.offset(1, 0) is None
        assert H8.offset(-1, -1) == Square(6, 6)

    def test_hashable(self) -> None:
        assert len({E4, Square(3, 4)}) == 1


class TestInitialBoard:
    def test_new_board_is_empty(self) -> None:
        assert Board().count() == 0
        assert Board() != Board.initial()

    def test_piece_count(self) -> None:
        assert Board.initial().count() == 32

    def test_back_ranks(self) -> None:
        b = Board.initial()
        assert b[E1] == Piece(Color.WHITE, PieceType.KING)
        assert b[D1] == Piece(Color.WHITE, PieceType.QUEEN)
        assert b[E8] == Piece(Color.BLACK, PieceType.KING)
        assert b[H8] == Piece(Color.BLACK, PieceType.ROOK)

    def test_pawn_ranks(self) -> None:
        b = Board.initial()
        assert len(b.pieces(Color.WHITE, PieceType.PAWN)) == 8
        assert all(sq.row == 1 for sq in b.pieces(Color.WHITE, PieceType.PAWN))
        assert all(sq.row == 6 for sq in b.pieces(Color.BLACK, PieceType.PAWN))

    def test_middle_empty(self) -> None:
        b = Board.initial()
        assert all(b.is_empty(Square(r, c)) for r in range(2, 6) for c in range(8))

    def test_find_king(self) -> None:
        b = Board.initial()
        assert b.find_king(Color.WHITE) == E1
        assert b.find_king(Color.BLACK) == E8

    def test_find_king_missing(self) -> None:
        with pytest.raises(ValueError):
            Board().find_king(Color.WHITE)


class TestCopy:
    def test_copy_is_independent(self) -> None:
        b = Board.initial()
        c = b.copy()
        c[E4] = c[Square(1, 4)]
        c[Square(1, 4)] = None
        assert b != c
        assert b[E4] is None

    def test_equal_copies(self) -> None:
        assert Board.initial() == Board.initial().copy()


class TestDiagram:
    def test_roundtrip_repr(self) -> None:
        b = Board.initial()
        assert Board.from_diagram(repr(b)) == b

    def test_simple_diagram(self) -> None:
        b = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ........
            ....K..R
            """
        )
        assert b.count() == 3
        assert b[E8] == Piece(Color.BLACK, PieceType.KING)
        assert b[Square(0, 7)] == Piece(Color.WHITE, PieceType.ROOK)

    def test_wrong_shape(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("....k...\n........")

    def test_bad_letter(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))

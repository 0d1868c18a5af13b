"""Tests for Position — bookkeeping and the move executor."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, CastlingSide, Color, GameResult, PieceType
from chessrules.core.errors import ContractViolation
from chessrules.core.move import Move, MoveCheck
from chessrules.core.notation import parse_move
from chessrules.core.piece import Piece
from chessrules.core.position import Position, Round
from chessrules.core.types import A1, A2, A7, A8, E1, E2, E4, E7, E8, F1, G1
from chessrules.core.validator import MoveValidator


def _apply(pos: Position, token: str) -> Piece | None:
    move = parse_move(token)
    check = MoveValidator.validate(pos, move.from_sq, move.to_sq)
    assert check.legal, check.reason
    if check.promotion.applied:
        assert move.promotion is not None
        check.promotion.piece_after = Piece(pos.side_to_move, move.promotion)
    return pos.apply_move(move, check)


class TestInitialPosition:
    def test_defaults(self) -> None:
        pos = Position()
        assert pos.board == Board.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.rounds == []
        assert pos.captured_by_white == [] and pos.captured_by_black == []
        assert not pos.finished
        assert pos.winner is None
        assert pos.result == GameResult.IN_PROGRESS

    def test_castling_allowed(self) -> None:
        pos = Position()
        for color in Color:
            for side in CastlingSide:
                assert pos.castling_allowed(side, color)

    def test_last_move_before_any(self) -> None:
        assert Position().last_move() is None


class TestMoveLog:
    def test_round_opened_and_completed(self) -> None:
        pos = Position()
        _apply(pos, "E2-E4")
        assert pos.rounds == [Round("E2-E4")]
        assert pos.side_to_move == Color.BLACK
        _apply(pos, "E7-E5")
        assert pos.rounds == [Round("E2-E4", "E7-E5")]
        assert pos.side_to_move == Color.WHITE

    def test_last_move_reparsed(self) -> None:
        pos = Position()
        _apply(pos, "E2-E4")
        assert pos.last_move() == Move(E2, E4)
        _apply(pos, "E7-E5")
        assert pos.last_move() == parse_move("E7-E5")

    def test_black_moves_first(self) -> None:
        pos = Position(side_to_move=Color.BLACK)
        _apply(pos, "E7-E5")
        assert pos.rounds == [Round("", "E7-E5")]
        assert pos.last_move() == parse_move("E7-E5")
        _apply(pos, "E2-E4")
        assert pos.rounds[-1] == Round("E2-E4")

    def test_promotion_logged_with_letter(self) -> None:
        pos = Position(
            Board.from_diagram(
                """
                k.......
                ....P...
                ........
                ........
                ........
                ........
                ........
                K.......
                """
            ),
            castling=CastlingRights.NONE,
        )
        _apply(pos, "E7-E8=N")
        assert pos.rounds == [Round("E7-E8=N")]
        assert pos.board[E8] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.board[E7] is None


class TestCaptures:
    def test_capture_recorded_for_capturer(self) -> None:
        pos = Position()
        for token in ("E2-E4", "D7-D5"):
            _apply(pos, token)
        captured = _apply(pos, "E4-D5")
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.captured_by_white == [captured]
        assert pos.captured_by_black == []
        assert pos.captured_by(Color.WHITE) is pos.captured_by_white

    def test_same_color_capture_is_contract_violation(self) -> None:
        pos = Position()
        with pytest.raises(ContractViolation):
            pos.apply_move(Move(A1, A2), MoveCheck(legal=True))
        assert pos.rounds == []
        assert pos.board == Board.initial()
        assert pos.captured_by_white == []
        assert pos.side_to_move == Color.WHITE

    def test_missing_promotion_piece(self) -> None:
        pos = Position(
            Board.from_diagram("\n".join(["....k..."] + ["P......."] + ["........"] * 5 + ["....K..."]))
        )
        check = MoveValidator.validate(pos, A7, A8)
        assert check.promotion.applied
        with pytest.raises(ContractViolation):
            pos.apply_move(Move(A7, A8), check)
        assert pos.rounds == []
        assert pos.board[A7] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[A8] is None
        assert pos.side_to_move == Color.WHITE


class TestCastlingRights:
    def test_king_move_clears_both(self) -> None:
        pos = Position()
        for token in ("E2-E4", "E7-E5", "E1-E2"):
            _apply(pos, token)
        assert not pos.castling & CastlingRights.WHITE_BOTH
        assert pos.castling & CastlingRights.BLACK_BOTH == CastlingRights.BLACK_BOTH

    def test_rook_move_clears_one_side(self) -> None:
        pos = Position()
        for token in ("H2-H4", "A7-A5", "H1-H3", "A8-A6"):
            _apply(pos, token)
        assert not pos.castling_allowed(CastlingSide.KING_SIDE, Color.WHITE)
        assert pos.castling_allowed(CastlingSide.QUEEN_SIDE, Color.WHITE)
        assert not pos.castling_allowed(CastlingSide.QUEEN_SIDE, Color.BLACK)
        assert pos.castling_allowed(CastlingSide.KING_SIDE, Color.BLACK)

    def test_rights_never_come_back(self) -> None:
        pos = Position()
        for token in ("H2-H4", "A7-A6", "H1-H3", "A6-A5", "H3-H1"):
            _apply(pos, token)
        assert not pos.castling_allowed(CastlingSide.KING_SIDE, Color.WHITE)

    def test_castling_moves_rook(self) -> None:
        pos = Position()
        for token in ("E2-E4", "E7-E5", "G1-F3", "B8-C6", "F1-C4", "G8-F6"):
            _apply(pos, token)
        _apply(pos, "E1-G1")
        board = pos.board
        assert board[E1] is None
        assert str(board[G1]) == "K"
        assert str(board[F1]) == "R"
        assert not pos.castling & CastlingRights.WHITE_BOTH


class TestCopy:
    def test_independent(self) -> None:
        pos = Position()
        _apply(pos, "E2-E4")
        clone = pos.copy()
        _apply(clone, "E7-E5")
        assert len(pos.rounds[0].black_move) == 0
        assert pos.side_to_move == Color.BLACK
        assert pos.board[E7] is not None
        assert clone.board[E7] is None

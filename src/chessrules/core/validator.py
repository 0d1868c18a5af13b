"""Move legality: per-kind movement rules plus the universal vetoes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.attacks import attacks_on, is_king_attacked
from chessrules.core.enums import CastlingSide, Color, Direction, PieceType
from chessrules.core.errors import UnknownPieceError
from chessrules.core.move import Castling, EnPassant, IntendedMove, MoveCheck, Promotion
from chessrules.core.paths import direction_between, is_path_free
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
# Row a pawn must stand on to capture en passant
_EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 4, Color.BLACK: 3}
_KING_HOME_COLUMN = 4

_KindRule = Callable[["Position", Piece, Square, Square, MoveCheck], bool]


def _reject(check: MoveCheck, reason: str) -> MoveCheck:
    check.legal = False
    check.reason = reason
    check.en_passant = EnPassant()
    check.castling = Castling()
    check.promotion = Promotion()
    _LOGGER.debug("Move rejected: %s", reason)
    return check


class MoveValidator:
    """Static rule-checker: ``(position, from, to)`` in, verdict out.

    Validation never mutates the position. Hypothetical positions are read
    through an :class:`IntendedMove` overlay.
    """

    @staticmethod
    def validate(position: Position, from_sq: Square, to_sq: Square) -> MoveCheck:
        check = MoveCheck()
        board = position.board

        piece = board[from_sq]
        if piece is None:
            return _reject(check, f"There is no piece on {from_sq.name}")
        if from_sq == to_sq:
            return _reject(check, "You picked the same square")

        rule = _KIND_RULES.get(piece.piece_type)
        if rule is None:
            raise UnknownPieceError(f"No movement rule for {piece!r}")

        if not rule(position, piece, from_sq, to_sq, check):
            return _reject(
                check,
                check.reason or f"{piece.describe()} can not move to {to_sq.name}",
            )

        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return _reject(check, "Position is already taken by a piece of the same color")

        overlay = IntendedMove(piece, from_sq, to_sq, check.en_passant.captured_square)
        if is_king_attacked(board, piece.color, overlay):
            return _reject(check, "Move would put player's king in check")

        check.legal = True
        check.reason = None
        return check

    # ── Per-kind rules ───────────────────────────────────────────────────

    @staticmethod
    def _pawn(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        board = position.board
        forward = piece.color.pawn_direction
        d_row = to_sq.row - from_sq.row
        d_column = to_sq.column - from_sq.column
        target = board[to_sq]

        if d_column == 0:
            if d_row == forward:
                ok = target is None
            elif d_row == 2 * forward:
                between = from_sq.offset(forward, 0)
                ok = (
                    from_sq.row == _PAWN_HOME_ROW[piece.color]
                    and between is not None
                    and board[between] is None
                    and target is None
                )
            else:
                ok = False
        elif abs(d_column) == 1 and d_row == forward:
            if target is not None:
                ok = True
            elif from_sq.row == _EN_PASSANT_ROW[piece.color]:
                ok = MoveValidator._en_passant(position, piece, from_sq, to_sq, check)
            else:
                ok = False
        else:
            ok = False

        if ok and to_sq.row == piece.color.opposite.home_row:
            check.promotion.applied = True
        return ok

    @staticmethod
    def _en_passant(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        last = position.last_move()
        if last is None:
            return False
        moved = position.board[last.to_sq]
        if (
            moved is None
            or moved.piece_type != PieceType.PAWN
            or moved.color == piece.color
        ):
            return False
        # The opponent's previous ply must be a two-square advance that ended
        # right beside this pawn, on the file it is capturing towards.
        if (
            abs(last.to_sq.row - last.from_sq.row) != 2
            or last.from_sq.column != last.to_sq.column
            or last.to_sq != Square(from_sq.row, to_sq.column)
        ):
            return False

        captured = Square(to_sq.row - piece.color.pawn_direction, to_sq.column)
        check.en_passant.applied = True
        check.en_passant.captured_square = captured
        _LOGGER.debug("En passant: %s-%s takes %s", from_sq.name, to_sq.name, captured.name)
        return True

    @staticmethod
    def _knight(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        d_row = abs(to_sq.row - from_sq.row)
        d_column = abs(to_sq.column - from_sq.column)
        return (d_row, d_column) in ((1, 2), (2, 1))

    @staticmethod
    def _bishop(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        if direction_between(from_sq, to_sq) != Direction.DIAGONAL:
            return False
        return is_path_free(position.board, from_sq, to_sq, Direction.DIAGONAL)

    @staticmethod
    def _rook(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        direction = direction_between(from_sq, to_sq)
        if direction not in (Direction.HORIZONTAL, Direction.VERTICAL):
            return False
        return is_path_free(position.board, from_sq, to_sq, direction)

    @staticmethod
    def _queen(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        direction = direction_between(from_sq, to_sq)
        if direction is None:
            return False
        return is_path_free(position.board, from_sq, to_sq, direction)

    @staticmethod
    def _king(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        d_row = to_sq.row - from_sq.row
        d_column = to_sq.column - from_sq.column
        if max(abs(d_row), abs(d_column)) == 1:
            return True
        if d_row == 0 and abs(d_column) == 2:
            return MoveValidator._castling(position, piece, from_sq, to_sq, check)
        return False

    @staticmethod
    def _castling(position: Position, piece: Piece, from_sq: Square, to_sq: Square, check: MoveCheck) -> bool:
        board = position.board
        color = piece.color
        step = 1 if to_sq.column > from_sq.column else -1
        side = CastlingSide.KING_SIDE if step > 0 else CastlingSide.QUEEN_SIDE
        side_name = "king" if side == CastlingSide.KING_SIDE else "queen"

        if from_sq != Square(color.home_row, _KING_HOME_COLUMN):
            check.reason = "Castling is only possible from the king's home square"
            return False
        if is_king_attacked(board, color):
            check.reason = "Castling is not allowed while the king is in check"
            return False

        rook_sq = Square(from_sq.row, 7 if step > 0 else 0)
        if not is_path_free(board, from_sq, rook_sq, Direction.HORIZONTAL):
            check.reason = f"Castling to the {side_name} side is blocked"
            return False
        if not position.castling_allowed(side, color):
            check.reason = f"Castling to the {side_name} side is not allowed"
            return False
        if board[rook_sq] != Piece(color, PieceType.ROOK):
            check.reason = f"There is no rook to castle with on {rook_sq.name}"
            return False

        crossed = Square(from_sq.row, from_sq.column + step)
        if attacks_on(board, crossed, color).under_attack:
            check.reason = f"The king can not castle through the attacked square {crossed.name}"
            return False

        check.castling.applied = True
        check.castling.rook_before = rook_sq
        check.castling.rook_after = crossed
        return True


_KIND_RULES: dict[PieceType, _KindRule] = {
    PieceType.PAWN: MoveValidator._pawn,
    PieceType.KNIGHT: MoveValidator._knight,
    PieceType.BISHOP: MoveValidator._bishop,
    PieceType.ROOK: MoveValidator._rook,
    PieceType.QUEEN: MoveValidator._queen,
    PieceType.KING: MoveValidator._king,
}

"""High-level chess rules: check and checkmate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.attacks import KING_TARGETS, attacks_on, is_king_attacked, reachable_by
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import UnknownPieceError
from chessrules.core.move import IntendedMove, Move
from chessrules.core.paths import can_be_blocked
from chessrules.core.types import ALL_SQUARES
from chessrules.core.validator import MoveValidator

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy: checkmate is the only way a game ends. Stalemate,
    # repetition and move-count draws are not detected.

    @staticmethod
    def king_in_check(
        position: Position, color: Color, overlay: IntendedMove | None = None
    ) -> bool:
        return is_king_attacked(position.board, color, overlay)

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return Rules.king_in_check(position, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        """Is the side to move checkmated? Marks the position finished if so.

        1. No check, no mate.
        2. A king step to a free or capturable neighbour that is not attacked
           afterwards escapes.
        3. A single checker may still be captured or, when it slides, blocked.
           Two checkers can only be answered by the king, ruled out above.
        """
        if position.finished:
            return position.winner is not None

        board = position.board
        color = position.side_to_move
        if not Rules.king_in_check(position, color):
            return False

        king_sq = board.find_king(color)
        king = board[king_sq]
        assert king is not None

        for to_sq in KING_TARGETS[king_sq]:
            occupant = board[to_sq]
            if occupant is not None and occupant.color == color:
                continue
            overlay = IntendedMove(king, king_sq, to_sq)
            if not attacks_on(board, to_sq, color, overlay).under_attack:
                return False

        checkers = attacks_on(board, king_sq, color).attackers
        mate = True
        if len(checkers) == 1:
            checker = checkers[0]
            attacker = board[checker.square]
            assert attacker is not None

            if reachable_by(board, checker.square, color):
                mate = False
            elif Rules._en_passant_rescue(position):
                mate = False
            elif attacker.piece_type in (PieceType.PAWN, PieceType.KNIGHT, PieceType.KING):
                mate = True
            elif attacker.is_slider:
                assert checker.direction is not None
                mate = not can_be_blocked(board, checker.square, king_sq, checker.direction)
            else:
                raise UnknownPieceError(f"Unexpected checking piece {attacker!r}")

        if mate:
            position.finished = True
            position.winner = color.opposite
            _LOGGER.info("Checkmate: %s wins", color.opposite)
        return mate

    @staticmethod
    def _en_passant_rescue(position: Position) -> bool:
        """Does an en passant capture get the king out of check?

        Covers both taking a pawn that checks after its double step and
        landing on the checking line. The validator's self-check veto decides.
        """
        last = position.last_move()
        if last is None:
            return False
        color = position.side_to_move
        behind = last.to_sq.offset(color.pawn_direction, 0)
        if behind is None:
            return False
        for d_column in (-1, 1):
            from_sq = last.to_sq.offset(0, d_column)
            if from_sq is None:
                continue
            piece = position.board[from_sq]
            if piece is None or piece.color != color or piece.piece_type != PieceType.PAWN:
                continue
            if MoveValidator.validate(position, from_sq, behind).en_passant.applied:
                return True
        return False

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        """Every move the validator accepts for the side to move.

        A promoting move is listed once per promotion choice.
        """
        board = position.board
        color = position.side_to_move
        moves: list[Move] = []
        for from_sq, piece in list(board.occupied()):
            if piece.color != color:
                continue
            for to_sq in ALL_SQUARES:
                if to_sq == from_sq:
                    continue
                occupant = board[to_sq]
                if occupant is not None and occupant.color == color:
                    continue
                check = MoveValidator.validate(position, from_sq, to_sq)
                if not check.legal:
                    continue
                if check.promotion.applied:
                    moves.extend(Move(from_sq, to_sq, pt) for pt in _PROMOTION_TYPES)
                else:
                    moves.append(Move(from_sq, to_sq))
        return moves

    @staticmethod
    def game_result(position: Position) -> GameResult:
        return position.result

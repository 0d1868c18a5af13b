"""Game state machine — turn sequencing, outcomes and the query surface."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameResult, PieceType
from chessrules.core.errors import NotationError
from chessrules.core.move import Move
from chessrules.core.notation import PROMOTION_LETTERS, parse_move, parse_promotion
from chessrules.core.piece import Piece, describe, letter_of
from chessrules.core.position import Position, Round
from chessrules.core.rules import Rules
from chessrules.core.types import Square
from chessrules.core.validator import MoveValidator
from chessrules.game.interfaces import GamePhase, MoveOutcome, MoveStatus


def _side_name(color: Color) -> str:
    return color.name  # WHITE / BLACK


@dataclass
class GameState:
    """Owns one game: validates attempts, applies them, reports outcomes.

    This is a pure data/logic class — no I/O, no UI. A rejected attempt
    leaves every part of the state untouched.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        """Initialise (or reset) the game, by default to the standard start."""
        self.position = Position(board, side_to_move, castling)
        self.phase = GamePhase.AWAITING_MOVE

    # ── Commands ─────────────────────────────────────────────────────────

    def attempt_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: str | PieceType | None = None,
    ) -> MoveOutcome:
        """Try to move the piece on *from_sq* to *to_sq*.

        *promotion* names the replacement piece (``"Q"``, ``"r"``,
        ``PieceType.KNIGHT`` …) and is required exactly when a pawn reaches
        the last rank.
        """
        if self.phase == GamePhase.NOT_STARTED:
            return MoveOutcome.rejected("No game running")
        if self.phase == GamePhase.GAME_OVER:
            return MoveOutcome.rejected("This game has already finished")

        position = self.position
        color = position.side_to_move
        piece = position.piece_at(from_sq)
        if piece is None:
            return MoveOutcome.rejected(f"You picked an EMPTY square ({from_sq.name})")
        if piece.color != color:
            return MoveOutcome.rejected(
                f"It is {_side_name(color)}'s turn and you picked a "
                f"{_side_name(piece.color)} piece"
            )

        check = MoveValidator.validate(position, from_sq, to_sq)
        if not check.legal:
            return MoveOutcome.rejected(f"[Invalid] {check.reason}")

        promoted_to: PieceType | None = None
        if check.promotion.applied:
            if promotion is None:
                return MoveOutcome.rejected(
                    f"Pawn must be promoted: choose one of {', '.join(PROMOTION_LETTERS)}"
                )
            try:
                promoted_to = self._promotion_choice(promotion)
            except NotationError as exc:
                return MoveOutcome.rejected(str(exc))
            check.promotion.piece_after = Piece(color, promoted_to)
        elif promotion is not None:
            return MoveOutcome.rejected("Only a pawn reaching the last rank can be promoted")

        move = Move(from_sq, to_sq, promoted_to)
        captured = position.apply_move(move, check)

        outcome = MoveOutcome(
            MoveStatus.MOVED,
            move=move,
            captured=captured,
            promoted_to=promoted_to,
            castled=check.castling.applied,
            en_passant=check.en_passant.applied,
        )
        if check.en_passant.applied:
            outcome.messages.append('Pawn captured by "en passant" move!')
        elif captured is not None:
            outcome.messages.append(f"{describe(captured)} captured!")
        if check.castling.applied:
            outcome.messages.append("Castling applied!")
        if promoted_to is not None:
            outcome.messages.append(f"Pawn promoted to {describe(Piece(color, promoted_to)).lower()}")

        self._announce_check(outcome)
        return outcome

    def submit(self, notation: str) -> MoveOutcome:
        """Attempt a move written as ``E2-E4`` or ``E7-E8=Q``."""
        try:
            move = parse_move(notation)
        except NotationError as exc:
            return MoveOutcome.rejected(str(exc))
        return self.attempt_move(move.from_sq, move.to_sq, move.promotion)

    def requires_promotion(self, from_sq: Square, to_sq: Square) -> bool:
        """Would this (legal) move need a promotion choice?"""
        check = MoveValidator.validate(self.position, from_sq, to_sq)
        return check.legal and check.promotion.applied

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.position.piece_at(sq)

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def result(self) -> GameResult:
        return self.position.result

    @property
    def rounds(self) -> list[Round]:
        return self.position.rounds

    def last_rounds(self, count: int) -> list[tuple[int, Round]]:
        """The newest *count* rounds with their 1-based numbers, newest first."""
        rounds = self.position.rounds
        start = max(0, len(rounds) - count)
        return [(n + 1, rounds[n]) for n in range(len(rounds) - 1, start - 1, -1)]

    @property
    def captured_by_white(self) -> list[Piece]:
        return self.position.captured_by_white

    @property
    def captured_by_black(self) -> list[Piece]:
        return self.position.captured_by_black

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return sum(bool(r.white_move) + bool(r.black_move) for r in self.position.rounds)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return Rules.legal_moves(self.position)

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _promotion_choice(promotion: str | PieceType) -> PieceType:
        if isinstance(promotion, PieceType):
            if letter_of(promotion) not in PROMOTION_LETTERS:
                raise NotationError(f"Can not promote to {promotion.name.lower()}")
            return promotion
        return parse_promotion(promotion)

    def _announce_check(self, outcome: MoveOutcome) -> None:
        position = self.position
        defender = position.side_to_move
        if not Rules.is_in_check(position):
            return
        if Rules.is_checkmate(position):
            outcome.status = MoveStatus.CHECKMATE
            winner = "White" if defender == Color.BLACK else "Black"
            outcome.messages.append(f"Checkmate! {winner} wins the game!")
            self.phase = GamePhase.GAME_OVER
        else:
            outcome.status = MoveStatus.CHECK
            outcome.messages.append(f"{defender.name.capitalize()} king is in check!")

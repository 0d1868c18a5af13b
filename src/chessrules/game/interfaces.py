"""Game-layer enumerations and result types shared with front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessrules.core.enums import PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class MoveStatus(IntEnum):
    """How a move attempt ended."""

    REJECTED = auto()
    MOVED = auto()
    CHECK = auto()  # moved, and the opponent is now in check
    CHECKMATE = auto()


# ── Outcome of a move attempt ────────────────────────────────────────────────


@dataclass
class MoveOutcome:
    """Everything a front-end needs to report a move attempt.

    ``messages`` are human-readable lines in the order they happened.
    """

    status: MoveStatus
    messages: list[str] = field(default_factory=list)
    move: Move | None = None
    captured: Piece | None = None
    promoted_to: PieceType | None = None
    castled: bool = False
    en_passant: bool = False

    @property
    def accepted(self) -> bool:
        return self.status != MoveStatus.REJECTED

    @property
    def reason(self) -> str | None:
        """Rejection reason, if the move was refused."""
        if self.status == MoveStatus.REJECTED and self.messages:
            return self.messages[0]
        return None

    @classmethod
    def rejected(cls, reason: str) -> MoveOutcome:
        return cls(MoveStatus.REJECTED, [reason])

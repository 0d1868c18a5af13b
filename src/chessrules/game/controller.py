"""GameController — the entry point front-ends talk to.

Owns the current :class:`GameState` and emits events via simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameResult, PieceType
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase, MoveOutcome, MoveStatus
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, GameState], None]
RejectedCallback = Callable[[MoveOutcome], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Starts games, forwards move attempts, notifies listeners.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def has_game(self) -> bool:
        return self._state.phase != GamePhase.NOT_STARTED

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> GameState:
        """Discard the current game and start a fresh one."""
        self._state = GameState()
        self._state.setup(board, side_to_move, castling)
        _LOGGER.info("New game started, %s to move", side_to_move)
        return self._state

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: str | PieceType | None = None,
    ) -> MoveOutcome:
        outcome = self._state.attempt_move(from_sq, to_sq, promotion)
        self._dispatch(outcome)
        return outcome

    def submit(self, notation: str) -> MoveOutcome:
        outcome = self._state.submit(notation)
        self._dispatch(outcome)
        return outcome

    # ── Internal helpers ─────────────────────────────────────────────────

    def _dispatch(self, outcome: MoveOutcome) -> None:
        if not outcome.accepted:
            _LOGGER.debug("Move refused: %s", outcome.reason)
            for cb in self.events.on_rejected:
                cb(outcome)
            return

        _LOGGER.info("Played %s (%s)", outcome.move, outcome.status.name.lower())
        for cb in self.events.on_move:
            cb(outcome, self._state)

        if outcome.status == MoveStatus.CHECKMATE:
            result = self._state.result
            _LOGGER.info("Game over: %s", result.name)
            for cb in self.events.on_game_over:
                cb(result)

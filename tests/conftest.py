"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.position import Position
from chessrules.game.interfaces import MoveOutcome
from chessrules.game.state import GameState

PlayFn = Callable[..., list[MoveOutcome]]
PositionFn = Callable[..., Position]


@pytest.fixture
def state() -> GameState:
    """A game set up at the standard starting position."""
    gs = GameState()
    gs.setup()
    return gs


@pytest.fixture
def play() -> PlayFn:
    """Submit notation tokens in order, failing on the first rejected one."""

    def _play(gs: GameState, *tokens: str) -> list[MoveOutcome]:
        outcomes = []
        for token in tokens:
            outcome = gs.submit(token)
            assert outcome.accepted, f"{token}: {outcome.reason}"
            outcomes.append(outcome)
        return outcomes

    return _play


@pytest.fixture
def position_from() -> PositionFn:
    """Build a position from a board diagram (rank 8 first)."""

    def _position_from(
        diagram: str,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
    ) -> Position:
        return Position(Board.from_diagram(diagram), side_to_move, castling)

    return _position_from

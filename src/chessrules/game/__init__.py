"""Game management layer — state machine, controller, outcomes.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    outcome = ctrl.submit("E2-E4")
    print(outcome.status, outcome.messages)
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, MoveOutcome, MoveStatus
from chessrules.game.state import GameState

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveOutcome",
    "MoveStatus",
]

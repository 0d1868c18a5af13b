"""Tests for GameController — the orchestrator."""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameResult
from chessrules.core.types import E2, E4, E5
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase, MoveOutcome, MoveStatus
from chessrules.game.state import GameState


def _make_controller() -> GameController:
    ctrl = GameController()
    ctrl.new_game()
    return ctrl


class TestNewGame:
    def test_no_game_before_start(self) -> None:
        ctrl = GameController()
        assert not ctrl.has_game
        assert ctrl.state.phase == GamePhase.NOT_STARTED
        assert not ctrl.submit("E2-E4").accepted

    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.has_game
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_new_game_resets(self) -> None:
        ctrl = _make_controller()
        ctrl.submit("E2-E4")
        old = ctrl.state
        state = ctrl.new_game()
        assert state is ctrl.state
        assert state is not old
        assert state.rounds == []
        assert state.side_to_move == Color.WHITE

    def test_custom_board(self) -> None:
        board = Board.from_diagram("\n".join(["....k..."] + ["........"] * 6 + ["....K..."]))
        ctrl = GameController()
        ctrl.new_game(board, Color.BLACK, CastlingRights.NONE)
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.state.position.board.count() == 2


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        outcome = ctrl.submit_move(E2, E4)
        assert outcome.accepted
        assert outcome.status == MoveStatus.MOVED
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        outcome = ctrl.submit_move(E2, E5)
        assert not outcome.accepted
        assert ctrl.state.side_to_move == Color.WHITE


class TestEvents:
    def test_on_move(self) -> None:
        ctrl = _make_controller()
        seen: list[tuple[MoveOutcome, GameState]] = []
        ctrl.events.on_move.append(lambda outcome, state: seen.append((outcome, state)))
        ctrl.submit("E2-E4")
        assert len(seen) == 1
        assert str(seen[0][0].move) == "E2-E4"
        assert seen[0][1] is ctrl.state

    def test_on_rejected(self) -> None:
        ctrl = _make_controller()
        moved: list[MoveOutcome] = []
        rejected: list[MoveOutcome] = []
        ctrl.events.on_move.append(lambda outcome, state: moved.append(outcome))
        ctrl.events.on_rejected.append(rejected.append)
        ctrl.submit("E2-E5")
        assert moved == []
        assert len(rejected) == 1
        assert rejected[0].reason is not None

    def test_on_game_over(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)
        for token in ("F2-F3", "E7-E5", "G2-G4"):
            ctrl.submit(token)
        assert results == []
        ctrl.submit("D8-H4")
        assert results == [GameResult.BLACK_WINS]

    def test_multiple_handlers(self) -> None:
        ctrl = _make_controller()
        calls: list[str] = []
        ctrl.events.on_move.append(lambda o, s: calls.append("a"))
        ctrl.events.on_move.append(lambda o, s: calls.append("b"))
        ctrl.submit("E2-E4")
        assert calls == ["a", "b"]

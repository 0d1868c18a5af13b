"""Tests for path walking and line blocking."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Direction
from chessrules.core.errors import ContractViolation, PathGeometryError
from chessrules.core.paths import can_be_blocked, direction_between, is_path_free, squares_between
from chessrules.core.types import A1, A2, A3, A7, A8, B2, B3, C3, D4, E1, E4, E8, H1, H8, Square


class TestDirectionBetween:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (E1, E8, Direction.VERTICAL),
            (A1, H1, Direction.HORIZONTAL),
            (A1, H8, Direction.DIAGONAL),
            (H1, A8, Direction.DIAGONAL),
            (A1, B3, None),
            (E4, E4, None),
        ],
    )
    def test_geometry(self, a: Square, b: Square, expected: Direction | None) -> None:
        assert direction_between(a, b) == expected


class TestSquaresBetween:
    def test_diagonal(self) -> None:
        assert list(squares_between(A1, D4, Direction.DIAGONAL)) == [B2, C3]

    def test_adjacent_is_empty(self) -> None:
        assert list(squares_between(A1, A2, Direction.VERTICAL)) == []

    def test_reverse_order(self) -> None:
        assert list(squares_between(D4, A1, Direction.DIAGONAL)) == [C3, B2]

    def test_wrong_direction_raises(self) -> None:
        with pytest.raises(PathGeometryError):
            list(squares_between(A1, D4, Direction.HORIZONTAL))

    def test_geometry_error_is_contract_violation(self) -> None:
        with pytest.raises(ContractViolation):
            list(squares_between(A1, B3, Direction.DIAGONAL))


class TestIsPathFree:
    def test_blocked_by_pawn(self) -> None:
        assert not is_path_free(Board.initial(), A1, A3, Direction.VERTICAL)

    def test_open_middle(self) -> None:
        assert is_path_free(Board.initial(), A2, A7, Direction.VERTICAL)

    def test_endpoints_ignored(self) -> None:
        assert is_path_free(Board.initial(), A1, A2, Direction.VERTICAL)

    def test_mismatched_direction(self) -> None:
        with pytest.raises(PathGeometryError):
            is_path_free(Board.initial(), A1, A3, Direction.DIAGONAL)


class TestCanBeBlocked:
    def test_rook_can_interpose(self) -> None:
        b = Board.from_diagram(
            """
            ....r...
            ........
            ........
            ........
            R.......
            ........
            ........
            ....K...
            """
        )
        assert can_be_blocked(b, E8, E1, Direction.VERTICAL)

    def test_nothing_to_interpose(self) -> None:
        b = Board.from_diagram(
            """
            ....r...
            ........
            ........
            ........
            ........
            ........
            ........
            R...K...
            """
        )
        assert not can_be_blocked(b, E8, E1, Direction.VERTICAL)

    def test_pinned_blocker_does_not_count(self) -> None:
        # The bishop could reach E3 but is pinned by the queen on A5.
        b = Board.from_diagram(
            """
            ....r...
            ........
            ........
            q.......
            ........
            ........
            ...B....
            ....K...
            """
        )
        assert not can_be_blocked(b, E8, E1, Direction.VERTICAL)

    def test_no_king_on_square(self) -> None:
        b = Board.from_diagram("\n".join(["....r..."] + ["........"] * 7))
        with pytest.raises(ContractViolation):
            can_be_blocked(b, E8, E1, Direction.VERTICAL)

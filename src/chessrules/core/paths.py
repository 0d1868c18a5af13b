"""Line walking for sliding moves: is the way clear, and can it be closed?"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessrules.core.attacks import reachable_by
from chessrules.core.board import Board
from chessrules.core.enums import Direction
from chessrules.core.errors import ContractViolation, PathGeometryError
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


def direction_between(from_sq: Square, to_sq: Square) -> Direction | None:
    """Geometry of the line joining two distinct squares, None if not a line."""
    d_row = to_sq.row - from_sq.row
    d_column = to_sq.column - from_sq.column
    if d_row == 0 and d_column != 0:
        return Direction.HORIZONTAL
    if d_column == 0 and d_row != 0:
        return Direction.VERTICAL
    if d_row != 0 and abs(d_row) == abs(d_column):
        return Direction.DIAGONAL
    return None


def squares_between(from_sq: Square, to_sq: Square, direction: Direction) -> Iterator[Square]:
    """Squares strictly between two squares along *direction*.

    Raises :class:`PathGeometryError` when the squares do not lie on a line
    of the claimed direction.
    """
    actual = direction_between(from_sq, to_sq)
    if actual != direction:
        raise PathGeometryError(
            f"{from_sq.name}-{to_sq.name} is not a {direction.name.lower()} line"
        )
    step_row = (to_sq.row > from_sq.row) - (to_sq.row < from_sq.row)
    step_column = (to_sq.column > from_sq.column) - (to_sq.column < from_sq.column)
    sq = from_sq.offset(step_row, step_column)
    while sq is not None and sq != to_sq:
        yield sq
        sq = sq.offset(step_row, step_column)


def is_path_free(board: Board, from_sq: Square, to_sq: Square, direction: Direction) -> bool:
    """Are all squares strictly between *from_sq* and *to_sq* empty?"""
    for sq in squares_between(from_sq, to_sq, direction):
        if board.is_occupied(sq):
            _LOGGER.debug(
                "%s path %s-%s is not clear at %s",
                direction.name.lower(),
                from_sq.name,
                to_sq.name,
                sq.name,
            )
            return False
    return True


def can_be_blocked(
    board: Board, attacker_sq: Square, king_sq: Square, direction: Direction
) -> bool:
    """Can the king's side interpose a piece on the line from the attacker?"""
    king = board[king_sq]
    if king is None:
        raise ContractViolation(f"No king on {king_sq.name} to shield")
    return any(
        reachable_by(board, sq, king.color)
        for sq in squares_between(attacker_sq, king_sq, direction)
    )

"""Threat and reachability scans.

Both queries walk outward from the square being asked about: four straight
rays, four diagonal rays and the eight knight offsets. They only read the
board (optionally through an :class:`IntendedMove` overlay), so they can be
called any number of times in any order without side effects.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, Direction, PieceType
from chessrules.core.move import IntendedMove, piece_at
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, -2),
    (2, -1),
    (2, 1),
    (1, 2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
)

# (d_row, d_column) → geometry of the line
_RAY_DIRECTIONS: tuple[tuple[int, int, Direction], ...] = (
    (0, 1, Direction.HORIZONTAL),
    (0, -1, Direction.HORIZONTAL),
    (1, 0, Direction.VERTICAL),
    (-1, 0, Direction.VERTICAL),
    (1, 1, Direction.DIAGONAL),
    (1, -1, Direction.DIAGONAL),
    (-1, 1, Direction.DIAGONAL),
    (-1, -1, Direction.DIAGONAL),
)

_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


@dataclass(frozen=True, slots=True)
class _Ray:
    d_row: int
    d_column: int
    direction: Direction
    squares: tuple[Square, ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[Square, tuple[_Ray, ...]]:
    rays: dict[Square, tuple[_Ray, ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[_Ray] = []
        for d_row, d_column, direction in _RAY_DIRECTIONS:
            line: list[Square] = []
            nxt = sq.offset(d_row, d_column)
            while nxt is not None:
                line.append(nxt)
                nxt = nxt.offset(d_row, d_column)
            square_rays.append(_Ray(d_row, d_column, direction, tuple(line)))
        rays[sq] = tuple(square_rays)
    return rays


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        hits = (sq.offset(d_row, d_column) for d_row, d_column in offsets)
        targets[sq] = tuple(t for t in hits if t is not None)
    return targets


_RAYS = _build_rays()
KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)


# -- Result types -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Attacker:
    """A piece bearing on a square, and the line it bears along.

    ``direction`` is None for knights: they jump, so there is no line to block.
    """

    square: Square
    direction: Direction | None


@dataclass(slots=True)
class UnderAttack:
    attackers: list[Attacker] = field(default_factory=list)

    @property
    def under_attack(self) -> bool:
        return bool(self.attackers)

    def __len__(self) -> int:
        return len(self.attackers)

    def __bool__(self) -> bool:
        return self.under_attack


# -- Attack detection -------------------------------------------------------


def _threatens_along(piece: Piece, ray: _Ray, distance: int) -> bool:
    """Does *piece*, found *distance* steps out on *ray*, attack the ray's origin?"""
    ptype = piece.piece_type
    if ptype == PieceType.QUEEN:
        return True
    if ptype == PieceType.ROOK:
        return ray.direction != Direction.DIAGONAL
    if ptype == PieceType.BISHOP:
        return ray.direction == Direction.DIAGONAL
    if ptype == PieceType.KING:
        return distance == 1
    if ptype == PieceType.PAWN:
        # Pawns capture forward-diagonally, so the pawn must sit one row
        # behind the square from its own point of view.
        return (
            ray.direction == Direction.DIAGONAL
            and distance == 1
            and ray.d_row == -piece.color.pawn_direction
        )
    return False


def attacks_on(
    board: Board,
    square: Square,
    defender: Color,
    overlay: IntendedMove | None = None,
) -> UnderAttack:
    """Every piece of *defender*'s opponent attacking *square*.

    The first piece met on each ray ends that ray, whatever its color.
    """
    result = UnderAttack()

    for ray in _RAYS[square]:
        for distance, sq in enumerate(ray.squares, start=1):
            piece = piece_at(board, sq, overlay)
            if piece is None:
                continue
            if piece.color != defender and _threatens_along(piece, ray, distance):
                result.attackers.append(Attacker(sq, ray.direction))
            break

    for sq in KNIGHT_TARGETS[square]:
        piece = piece_at(board, sq, overlay)
        if (
            piece is not None
            and piece.color != defender
            and piece.piece_type == PieceType.KNIGHT
        ):
            result.attackers.append(Attacker(sq, None))

    return result


def is_king_attacked(
    board: Board, color: Color, overlay: IntendedMove | None = None
) -> bool:
    """Is *color*'s king attacked, on the real board or under *overlay*?"""
    if (
        overlay is not None
        and overlay.piece.piece_type == PieceType.KING
        and overlay.piece.color == color
    ):
        king_sq = overlay.to_sq
    else:
        king_sq = board.find_king(color)
    return attacks_on(board, king_sq, color, overlay).under_attack


# -- Reachability -----------------------------------------------------------


def _reaches_along(piece: Piece, origin: Square, ray: _Ray, distance: int, capture: bool) -> bool:
    """Could *piece*, *distance* steps out on *ray*, move onto the ray's origin?"""
    ptype = piece.piece_type
    if ptype != PieceType.PAWN:
        return _threatens_along(piece, ray, distance)

    behind = ray.d_row == -piece.color.pawn_direction
    if capture:
        return ray.direction == Direction.DIAGONAL and distance == 1 and behind
    if ray.direction != Direction.VERTICAL or not behind:
        return False
    if distance == 1:
        return True
    # Two-step advance: the ray already proved the square in between is empty.
    return distance == 2 and origin.row + 2 * ray.d_row == _PAWN_HOME_ROW[piece.color]


def movers_to(board: Board, square: Square, color: Color) -> Iterator[tuple[Square, Piece]]:
    """Pieces of *color* whose movement pattern lets them land on *square*.

    Pawns count by their literal advance onto an empty square, or by their
    diagonal capture onto an opponent piece. Pins are not considered here.
    """
    target = board[square]
    if target is not None and target.color == color:
        return
    capture = target is not None

    for ray in _RAYS[square]:
        for distance, sq in enumerate(ray.squares, start=1):
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == color and _reaches_along(piece, square, ray, distance, capture):
                yield sq, piece
            break

    for sq in KNIGHT_TARGETS[square]:
        piece = board[sq]
        if piece is not None and piece.color == color and piece.piece_type == PieceType.KNIGHT:
            yield sq, piece


def reachable_by(board: Board, square: Square, color: Color) -> bool:
    """Could some piece of *color* legally move to *square* right now?

    Used to ask whether a checking piece can be captured or its line blocked.
    A pinned piece does not count: the move must leave its own king safe.
    """
    for from_sq, piece in movers_to(board, square, color):
        overlay = IntendedMove(piece, from_sq, square)
        if not is_king_attacked(board, color, overlay):
            return True
    return False

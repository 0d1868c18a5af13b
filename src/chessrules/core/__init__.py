"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Move, MoveValidator, Position
    from chessrules.core.types import E2, E4

    pos = Position()
    check = MoveValidator.validate(pos, E2, E4)
    if check.legal:
        pos.apply_move(Move(E2, E4), check)
"""

from chessrules.core.attacks import Attacker, UnderAttack, attacks_on, reachable_by
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    Direction,
    GameResult,
    PieceType,
)
from chessrules.core.errors import (
    ChessRulesError,
    ContractViolation,
    NotationError,
    PathGeometryError,
    UnknownPieceError,
)
from chessrules.core.move import (
    Castling,
    EnPassant,
    IntendedMove,
    Move,
    MoveCheck,
    Promotion,
)
from chessrules.core.notation import format_move, parse_move, parse_promotion
from chessrules.core.paths import can_be_blocked, is_path_free
from chessrules.core.piece import Piece, color_of, describe, is_black, is_white
from chessrules.core.position import Position, Round
from chessrules.core.rules import Rules
from chessrules.core.types import Square, parse_square
from chessrules.core.validator import MoveValidator

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "Direction",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    # Piece classifier
    "Piece",
    "color_of",
    "describe",
    "is_black",
    "is_white",
    # Domain objects
    "Board",
    "Position",
    "Round",
    "Move",
    "IntendedMove",
    "MoveCheck",
    "EnPassant",
    "Castling",
    "Promotion",
    # Engines
    "Attacker",
    "UnderAttack",
    "attacks_on",
    "reachable_by",
    "is_path_free",
    "can_be_blocked",
    "MoveValidator",
    "Rules",
    # Notation
    "format_move",
    "parse_move",
    "parse_promotion",
    # Errors
    "ChessRulesError",
    "ContractViolation",
    "NotationError",
    "PathGeometryError",
    "UnknownPieceError",
]

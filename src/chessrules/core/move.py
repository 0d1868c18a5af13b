"""Move value objects: requested moves, hypothetical overlays and the
side-effect descriptors the validator hands to the executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece, letter_of
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board


@dataclass(frozen=True, slots=True)
class Move:
    """A requested relocation, optionally naming the promotion piece kind."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    @property
    def notation(self) -> str:
        """Log form, e.g. ``E7-E8=Q``."""
        text = f"{self.from_sq.name}-{self.to_sq.name}"
        if self.promotion is not None:
            text += "=" + letter_of(self.promotion)
        return text

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True, slots=True)
class IntendedMove:
    """Hypothetical move laid over the real board for "what if" reads.

    ``from_sq`` (and ``vacated``, the pawn removed by en passant) read as
    empty, ``to_sq`` reads as ``piece``; everything else reads through.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    vacated: Square | None = None

    def read(self, board: Board, sq: Square) -> Piece | None:
        if sq == self.from_sq or sq == self.vacated:
            return None
        if sq == self.to_sq:
            return self.piece
        return board[sq]


def piece_at(board: Board, sq: Square, overlay: IntendedMove | None = None) -> Piece | None:
    """Board read that honours an optional overlay."""
    if overlay is None:
        return board[sq]
    return overlay.read(board, sq)


# ── Side-effect descriptors ──────────────────────────────────────────────────


@dataclass(slots=True)
class EnPassant:
    applied: bool = False
    captured_square: Square | None = None


@dataclass(slots=True)
class Castling:
    applied: bool = False
    rook_before: Square | None = None
    rook_after: Square | None = None


@dataclass(slots=True)
class Promotion:
    applied: bool = False
    piece_after: Piece | None = None


@dataclass(slots=True)
class MoveCheck:
    """Validator verdict for one ``(from, to)`` attempt.

    A new instance is built for every validation, so the descriptors always
    start out not-applied.
    """

    legal: bool = False
    reason: str | None = None
    en_passant: EnPassant = field(default_factory=EnPassant)
    castling: Castling = field(default_factory=Castling)
    promotion: Promotion = field(default_factory=Promotion)

    def __bool__(self) -> bool:
        return self.legal

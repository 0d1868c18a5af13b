"""Move notation: the ``<file><rank>-<file><rank>[=<PIECE>]`` token.

This is the only textual move form the engine reads or writes. The move log
stores it, and en passant is validated by parsing the last logged token.
"""

from __future__ import annotations

import re

from chessrules.core.enums import PieceType
from chessrules.core.errors import NotationError
from chessrules.core.move import Move
from chessrules.core.piece import piece_type_from_letter
from chessrules.core.types import parse_square

PROMOTION_LETTERS = "QRNB"

_MOVE_RE = re.compile(r"^([A-H][1-8])-([A-H][1-8])(?:=([A-Z]))?$")


def parse_promotion(letter: str) -> PieceType:
    """Promotion choice from a letter of either case (Q, R, N or B)."""
    text = letter.strip().upper()
    if len(text) != 1 or text not in PROMOTION_LETTERS:
        raise NotationError(f"Invalid promotion piece: {letter!r} (use Q, R, N or B)")
    return piece_type_from_letter(text)


def parse_move(token: str) -> Move:
    """Parse ``"E2-E4"`` or ``"E7-E8=Q"`` (case-insensitive) into a :class:`Move`."""
    text = token.strip().upper()
    match = _MOVE_RE.match(text)
    if match is None:
        raise NotationError(f"Invalid move notation: {token!r} (expected e.g. E2-E4 or E7-E8=Q)")
    from_name, to_name, promo = match.groups()
    promotion = parse_promotion(promo) if promo else None
    return Move(parse_square(from_name), parse_square(to_name), promotion)


def format_move(move: Move) -> str:
    """Inverse of :func:`parse_move`; always uppercase."""
    return move.notation

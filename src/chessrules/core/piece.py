"""Piece value object and the letter-based piece classifier."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Letter ↔ PieceType (uppercase form)
_LETTERS: dict[str, PieceType] = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_LETTER_OF: dict[PieceType, str] = {v: k for k, v in _LETTERS.items()}

_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Case-encoded letter (uppercase = white, lowercase = black)."""
        letter = _LETTER_OF[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            ptype = _LETTERS[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color_of(char), ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def is_slider(self) -> bool:
        return self.piece_type in (PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)

    def describe(self) -> str:
        return describe(self)


# ── Classifier ───────────────────────────────────────────────────────────────


def color_of(cell: Piece | str) -> Color:
    """Color of a piece or piece letter (letter case decides)."""
    if isinstance(cell, Piece):
        return cell.color
    return Color.WHITE if cell.isupper() else Color.BLACK


def is_white(cell: Piece | str) -> bool:
    return color_of(cell) == Color.WHITE


def is_black(cell: Piece | str) -> bool:
    return color_of(cell) == Color.BLACK


def describe(cell: Piece | str) -> str:
    """Readable description, e.g. 'White pawn'.

    Letters that do not name a piece kind are described as an unknown piece
    rather than rejected.
    """
    color = "White" if is_white(cell) else "Black"
    if isinstance(cell, Piece):
        ptype: PieceType | None = cell.piece_type
    else:
        ptype = _LETTERS.get(cell.upper())
    name = _NAMES[ptype] if ptype is not None else "unknown piece"
    return f"{color} {name}"


def piece_type_from_letter(letter: str) -> PieceType:
    """Piece kind for a letter of either case."""
    try:
        return _LETTERS[letter.upper()]
    except KeyError:
        raise ValueError(f"Invalid piece character: {letter!r}") from None


def letter_of(piece_type: PieceType) -> str:
    """Uppercase letter for a piece kind."""
    return _LETTER_OF[piece_type]

"""Square value type and coordinate helpers.

Board layout:
    row 0 = rank 1 (white's back rank), row 7 = rank 8
    column 0 = file A, column 7 = file H
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "ABCDEFGH"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate, always passed by value."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < 8 and 0 <= self.column < 8):
            raise ValueError(f"Square out of board: ({self.row}, {self.column})")

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Square(0, 4) -> 'E1'."""
        return FILES[self.column] + RANKS[self.row]

    def offset(self, d_row: int, d_column: int) -> Square | None:
        """Square shifted by the given deltas, or None when off the board."""
        row = self.row + d_row
        column = self.column + d_column
        if 0 <= row < 8 and 0 <= column < 8:
            return Square(row, column)
        return None

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. 'e4' or 'E4' -> Square(3, 4)."""
    text = name.strip().upper()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(RANKS.index(text[1]), FILES.index(text[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, column) for row in range(8) for column in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, c) for c in range(8))

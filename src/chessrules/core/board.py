"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import FILES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of pieces; ``None`` marks an empty cell."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.column]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq.row][sq.column] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.column] is None

    def is_occupied(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.column] is not None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every (square, piece) pair on the board, rank 1 first."""
        for row in range(8):
            for column in range(8):
                piece = self._grid[row][column]
                if piece is not None:
                    yield Square(row, column), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def find_king(self, color: Color) -> Square:
        """Return the king square for *color*."""
        target = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == target:
                return sq
        raise ValueError(f"No {color.name} king on board")

    def count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column, pt in enumerate(_BACK_RANK):
            b._grid[0][column] = Piece(Color.WHITE, pt)
            b._grid[1][column] = Piece(Color.WHITE, PieceType.PAWN)
            b._grid[6][column] = Piece(Color.BLACK, PieceType.PAWN)
            b._grid[7][column] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight text lines, rank 8 first.

        Each line holds eight cells; a piece letter or ``.`` for an empty cell.
        Whitespace between cells and a leading rank number are ignored, so the
        output of ``repr`` parses back::

            Board.from_diagram('''
                ....k...
                ........
                ........
                ........
                ........
                ........
                ........
                ....K..R
            ''')
        """
        rows: list[str] = []
        for line in diagram.splitlines():
            cells = "".join(line.split())
            if not cells or cells.upper() == FILES:
                continue
            if cells[0].isdigit():
                cells = cells[1:]
            rows.append(cells)
        if len(rows) != 8 or any(len(r) != 8 for r in rows):
            raise ValueError(f"Board diagram must be 8 rows of 8 cells: {diagram!r}")

        b = cls()
        for index, cells in enumerate(rows):
            row = 7 - index
            for column, ch in enumerate(cells):
                if ch != ".":
                    b._grid[row][column] = Piece.from_char(ch)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES.lower()))
        return "\n".join(rows)

"""Text rendering of a game: board grid, last moves, captures, turn."""

from __future__ import annotations

from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import FILES, Square
from chessrules.game.state import GameState

LOGO = "    ===============| CHESS |=============="
MENU = "Commands: (N)ew game \t(M)ove \t(Q)uit "

_CELL = 7
_LIGHT = "."
_DARK = " "


def _glyph(piece: Piece, unicode: bool) -> str:
    return piece.symbol if unicode else str(piece)


def render_board(state: GameState, unicode: bool = False) -> str:
    """Checkered grid, rank 8 at the top, each square 7 characters wide."""
    lines = ["   " + "".join(f"{f:<{_CELL}}" for f in FILES), ""]
    for row in range(7, -1, -1):
        for sub_line in range(_CELL // 2):
            text = []
            for column in range(8):
                # A1 is a dark square
                fill = _DARK if (row + column) % 2 == 0 else _LIGHT
                cell = [fill] * _CELL
                if sub_line == 1:
                    piece = state.piece_at(Square(row, column))
                    if piece is not None:
                        cell[_CELL // 2] = _glyph(piece, unicode)
                text.append("".join(cell))
            line = "".join(text)
            if sub_line == 1:
                line += f"   {row + 1}"
            lines.append(line)
    return "\n".join(lines)


def _captures(pieces: list[Piece], unicode: bool) -> str:
    return " ".join(_glyph(p, unicode) for p in pieces)


def render_situation(state: GameState, history_rounds: int = 5, unicode: bool = False) -> str:
    """Last moves (newest first), capture lists and whose turn it is."""
    lines: list[str] = []

    recent = state.last_rounds(history_rounds)
    if recent:
        lines.append("Last moves:")
        for number, rnd in recent:
            lines.append(f"{number:>2} ...... {rnd.white_move:<7} | {rnd.black_move}")
        lines.append("")

    if state.captured_by_white or state.captured_by_black:
        rule = "-" * 45
        lines.append(rule)
        lines.append(f"WHITE captured: {_captures(state.captured_by_white, unicode)}")
        lines.append(f"black captured: {_captures(state.captured_by_black, unicode)}")
        lines.append(rule)

    turn = "WHITE (upper case)" if state.side_to_move == Color.WHITE else "BLACK (lower case)"
    lines.append(f"Current turn: {turn}")
    lines.append("")
    return "\n".join(lines)

"""Terminal front-end: rendering and the interactive input loop."""

from chessrules.cli.render import render_board, render_situation
from chessrules.cli.session import TerminalSession

__all__ = ["TerminalSession", "render_board", "render_situation"]

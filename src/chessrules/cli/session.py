"""Interactive terminal loop: menu, square prompts, promotion prompt."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from chessrules.cli.render import LOGO, MENU, render_board, render_situation
from chessrules.config import Settings
from chessrules.core.types import Square, parse_square
from chessrules.game.controller import GameController

_CLEAR = "\033[2J\033[H"

InputFn = Callable[[str], str]


class TerminalSession:
    """Drives a :class:`GameController` from line-based input.

    Feedback for the next screen is queued in ``_pending`` and printed once,
    above the menu.
    """

    def __init__(
        self,
        settings: Settings,
        controller: GameController | None = None,
        input_fn: InputFn | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._settings = settings
        self._controller = controller if controller is not None else GameController()
        self._input = input_fn if input_fn is not None else input
        self._out = output if output is not None else sys.stdout
        self._pending: list[str] = []

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self) -> None:
        self._clear()
        self._write(LOGO)
        while True:
            self._flush_messages()
            self._write(MENU)
            choice = self._ask("Type here: ")
            if choice is None:
                break
            choice = choice.strip()
            if len(choice) != 1:
                self._write("Invalid option. Type one letter only\n")
                continue

            option = choice.upper()
            if option == "Q":
                break
            if option == "N":
                self._controller.new_game()
                self._show_game()
            elif option == "M":
                self._move()
            else:
                self._write("Option does not exist\n")

    # ── Commands ─────────────────────────────────────────────────────────

    def _move(self) -> None:
        state = self._controller.state
        if not self._controller.has_game:
            self._write("No game running!")
            return
        if state.is_game_over:
            self._write("This game has already finished!")
            return

        text = self._ask("Choose piece to be moved. (example: A1 or b2): ")
        if text is None:
            return
        if "-" in text:
            outcome = self._controller.submit(text)
            self._pending.extend(outcome.messages)
            self._show_game()
            return

        from_sq = self._parse(text)
        if from_sq is None:
            return
        piece = state.piece_at(from_sq)
        if piece is not None:
            self._write(f"Piece is {piece.describe()}")

        to_text = self._ask("Move to: ")
        if to_text is None:
            return
        to_sq = self._parse(to_text)
        if to_sq is None:
            return

        promotion: str | None = None
        if state.requires_promotion(from_sq, to_sq):
            promotion = self._ask("Promote to (Q, R, N, B): ")
            if promotion is None:
                return

        outcome = self._controller.submit_move(from_sq, to_sq, promotion)
        self._pending.extend(outcome.messages)
        self._show_game()

    # ── Output helpers ───────────────────────────────────────────────────

    def _show_game(self) -> None:
        state = self._controller.state
        self._clear()
        self._write(LOGO)
        self._write(
            render_situation(
                state,
                history_rounds=self._settings.history_rounds,
                unicode=self._settings.unicode_pieces,
            )
        )
        self._write(render_board(state, unicode=self._settings.unicode_pieces))

    def _parse(self, text: str) -> Square | None:
        try:
            return parse_square(text)
        except ValueError:
            self._pending.append(
                "You should type a column A-H followed by a row 1-8 (e.g. E2)"
            )
            return None

    def _ask(self, prompt: str) -> str | None:
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def _flush_messages(self) -> None:
        for message in self._pending:
            self._write(message)
        self._pending.clear()

    def _clear(self) -> None:
        if self._settings.clear_screen:
            self._out.write(_CLEAR)

    def _write(self, text: str) -> None:
        self._out.write(text + "\n")

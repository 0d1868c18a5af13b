"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.cli.session import TerminalSession
from chessrules.config import Settings

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Two-player chess in the terminal.",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        default=None,
        help="draw pieces as chess glyphs instead of letters",
    )
    parser.add_argument(
        "--no-clear",
        dest="clear_screen",
        action="store_false",
        default=None,
        help="do not clear the screen between turns",
    )
    parser.add_argument(
        "--history",
        type=int,
        default=None,
        metavar="N",
        help="number of move rounds to show (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="logging verbosity (default: WARNING)",
    )
    return parser


def load_settings(argv: list[str] | None = None) -> Settings:
    """Environment/file settings with command-line overrides applied."""
    args = _build_parser().parse_args(argv)
    overrides = {
        "unicode_pieces": args.unicode,
        "clear_screen": args.clear_screen,
        "history_rounds": args.history,
        "log_level": args.log_level,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    settings = load_settings(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Starting with %s", settings)

    try:
        TerminalSession(settings).run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())

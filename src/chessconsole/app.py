"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from chessconsole.console.i18n import set_language
from chessconsole.console.input import ConsoleMoveInput
from chessconsole.console.renderer import ConsoleRenderer
from chessconsole.core.errors import ChessConsoleError
from chessconsole.game.controller import GameController
from chessconsole.settings import AppSettings, parse_args

_LOGGER = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        filename=settings.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_game(settings: AppSettings) -> int:
    """Play one game on the console. Returns a process exit status."""
    set_language(settings.language)
    renderer = ConsoleRenderer(
        use_color=settings.use_color,
        show_performance=settings.show_performance,
        clear_screen=settings.clear_screen,
    )
    controller = GameController()
    try:
        controller.new_game(settings.placement)
    except ValueError as exc:
        _LOGGER.error("Invalid start position: %s", exc)
        return 2
    except ChessConsoleError:
        _LOGGER.exception("Engine invariant violated")
        return 2

    try:
        controller.play(ConsoleMoveInput(), renderer)
    except (EOFError, KeyboardInterrupt):
        _LOGGER.warning("Input closed; game abandoned")
        return 1
    except ChessConsoleError:
        _LOGGER.exception("Engine invariant violated")
        return 2
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the console game."""
    settings = parse_args(argv)
    _configure_logging(settings)
    return run_game(settings)


if __name__ == "__main__":
    sys.exit(main())

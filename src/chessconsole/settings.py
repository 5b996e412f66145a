"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from chessconsole.console.i18n import LANGUAGES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Console
    use_color: bool = True
    show_performance: bool = True
    clear_screen: bool = True

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Game
    placement: str | None = None  # FEN placement field; None = standard start


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessconsole",
        description="Play chess against another human in the terminal.",
    )
    parser.add_argument(
        "--language", choices=LANGUAGES, default=AppSettings.language,
        help="Language of prompts and messages",
    )
    parser.add_argument(
        "--no-color", dest="use_color", action="store_false",
        help="Disable ANSI colors",
    )
    parser.add_argument(
        "--no-perf", dest="show_performance", action="store_false",
        help="Hide the performance panel",
    )
    parser.add_argument(
        "--no-clear", dest="clear_screen", action="store_false",
        help="Do not clear the screen between turns",
    )
    parser.add_argument(
        "--log-level", choices=_LOG_LEVELS, default=AppSettings.log_level,
        type=str.upper,
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument(
        "--position", dest="placement", default=None,
        help="Start from a FEN piece-placement field instead of the initial position",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command-line arguments."""
    args = build_parser().parse_args(argv)
    return AppSettings(
        language=args.language,
        use_color=args.use_color,
        show_performance=args.show_performance,
        clear_screen=args.clear_screen,
        log_level=args.log_level,
        log_file=args.log_file,
        placement=args.placement,
    )

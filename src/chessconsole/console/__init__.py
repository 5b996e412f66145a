"""Console shell — keyboard input, text rendering, performance sampling."""

from chessconsole.console.i18n import LANGUAGES, set_language, t
from chessconsole.console.input import ConsoleMoveInput, parse_coordinate
from chessconsole.console.monitor import ThreadInfo, sample_process
from chessconsole.console.renderer import ConsoleRenderer

__all__ = [
    "LANGUAGES",
    "ConsoleMoveInput",
    "ConsoleRenderer",
    "ThreadInfo",
    "parse_coordinate",
    "sample_process",
    "set_language",
    "t",
]

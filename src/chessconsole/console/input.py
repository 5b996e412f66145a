"""Keyboard input: algebraic square names typed at a prompt."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessconsole.console.i18n import t
from chessconsole.core.types import INVALID_COORDINATE, Coordinate, parse_square, square_name
from chessconsole.game.interfaces import IMoveInput

if TYPE_CHECKING:
    from chessconsole.core.enums import Color
    from chessconsole.core.piece import Piece


def parse_coordinate(text: str | None) -> Coordinate:
    """Parse user text into a coordinate, or :data:`INVALID_COORDINATE`."""
    if not text:
        return INVALID_COORDINATE
    try:
        return parse_square(text)
    except ValueError:
        return INVALID_COORDINATE


class ConsoleMoveInput(IMoveInput):
    """Reads one square name per prompt.

    Args:
        reader: ``(prompt) -> str`` used to obtain a line; defaults to
            :func:`input`. ``EOFError`` / ``KeyboardInterrupt`` propagate.
    """

    __slots__ = ("_reader",)

    def __init__(self, reader: Callable[[str], str] | None = None) -> None:
        self._reader = reader if reader is not None else input

    def request_origin(self, player: Color) -> Coordinate:
        prompt = t().prompt_origin.format(player=t().color_name(player))
        return parse_coordinate(self._reader(prompt))

    def request_destination(self, piece: Piece) -> Coordinate:
        prompt = t().prompt_destination.format(
            symbol=piece.symbol, square=square_name(piece.position)
        )
        return parse_coordinate(self._reader(prompt))

"""Engine exceptions."""

from __future__ import annotations


class ChessConsoleError(RuntimeError):
    """Base class for unrecoverable engine errors."""


class KingNotFoundError(ChessConsoleError):
    """A color's king is missing from the board.

    The engine cannot answer check or mate questions without it, so this is
    never treated as a game outcome.
    """

    def __init__(self, color: object) -> None:
        super().__init__(f"No {color} king on board")
        self.color = color

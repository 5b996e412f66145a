"""Abstract interfaces for the game layer.

The turn controller depends on these ABCs, not on the console
implementations, so tests can drive it with scripted collaborators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessconsole.core.enums import Color

if TYPE_CHECKING:
    from chessconsole.core.board import Board
    from chessconsole.core.piece import Piece
    from chessconsole.core.types import Coordinate
    from chessconsole.game.state import GameState


# ── Turn FSM states ──────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn controller."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    MOVE_COMMITTED = auto()
    GAME_OVER = auto()


# ── Collaborators ────────────────────────────────────────────────────────────


class IMoveInput(ABC):
    """Source of move coordinates (keyboard, script, network...).

    Both methods return either an on-board coordinate or
    :data:`~chessconsole.core.types.INVALID_COORDINATE`; the controller
    rejects and asks again for anything it cannot use.
    """

    @abstractmethod
    def request_origin(self, player: Color) -> Coordinate:
        """Ask *player* which square to move from."""

    @abstractmethod
    def request_destination(self, piece: Piece) -> Coordinate:
        """Ask where the selected *piece* should go."""


class IRenderer(ABC):
    """Read-only view of the game. Must never mutate board or state."""

    @abstractmethod
    def render(self, board: Board, state: GameState) -> None:
        """Draw the current position and game information."""

    @abstractmethod
    def show_game_over(self, board: Board, state: GameState) -> None:
        """Draw the final summary once the game has ended."""

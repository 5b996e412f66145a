"""Game state — side to move, status, last move and captured pieces."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessconsole.core.enums import Color, GameStatus
from chessconsole.core.piece import Piece
from chessconsole.game.interfaces import GamePhase

NO_MOVE = "N/A"


@dataclass
class GameState:
    """Dynamic game information alongside the board.

    This is a pure data class: the turn controller decides when the player
    switches and when the status changes. Captured lists only grow.
    """

    current_player: Color = Color.WHITE
    status: GameStatus = GameStatus.ONGOING
    last_move: str = NO_MOVE
    phase: GamePhase = GamePhase.NOT_STARTED
    # Keyed by the color of the captured piece.
    _captured: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []},
        init=False,
        repr=False,
    )

    # ── Mutation ─────────────────────────────────────────────────────────

    def switch_player(self) -> None:
        self.current_player = self.current_player.opposite

    def add_captured_piece(self, piece: Piece) -> None:
        self._captured[piece.color].append(piece)

    # ── Query helpers ────────────────────────────────────────────────────

    def captured_by(self, color: Color) -> list[Piece]:
        """Pieces *color* has taken from the opponent, in capture order."""
        return list(self._captured[color.opposite])

    def captured_symbols(self, color: Color) -> str:
        """Space-separated symbols of the pieces *color* has taken."""
        return " ".join(p.symbol for p in self._captured[color.opposite])

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        """The side that delivered checkmate, if any."""
        if self.status == GameStatus.CHECKMATE:
            return self.current_player.opposite
        return None

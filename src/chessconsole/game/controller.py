"""GameController — the turn loop of a chess game.

Coordinates: Board, GameState, Rules and the input/render collaborators.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chessconsole.core.board import Board
from chessconsole.core.enums import Color, GameStatus, PieceType
from chessconsole.core.notation import board_from_placement
from chessconsole.core.rules import Rules
from chessconsole.core.types import Coordinate, is_valid_coordinate, move_name
from chessconsole.game.interfaces import GamePhase, IMoveInput, IRenderer
from chessconsole.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Coordinate, Coordinate, "GameState"], None]  # from, to, state
StatusCallback = Callable[[GameStatus], None]
GameOverCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


def _check_playable(board: Board, side_to_move: Color) -> None:
    """Reject custom positions the turn loop cannot play from."""
    for color in Color:
        kings = sum(1 for p in board.pieces(color) if p.piece_type == PieceType.KING)
        if kings != 1:
            raise ValueError(f"Position must have exactly one {color} king, found {kings}")
    if board.is_in_check(side_to_move.opposite):
        raise ValueError(f"{side_to_move.opposite} is in check but {side_to_move} is to move")


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs the per-turn cycle: obtain a legal move, apply it, switch the
    player, recompute the status.

    Thread-safety: turns are strictly sequential. Committing a move (apply,
    player switch and status recompute) happens under :attr:`lock`, and
    renderers read under the same lock, so nobody observes a half-applied
    move. Legality simulation runs on the caller's thread and restores the
    board before returning.
    """

    __slots__ = ("_board", "_state", "_lock", "events")

    def __init__(self) -> None:
        self._board = Board()
        self._state = GameState()
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    # ── Game setup ───────────────────────────────────────────────────────

    def new_game(
        self, placement: str | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Set up a new game from the start position or a placement string."""
        with self._lock:
            if placement is None:
                board = Board.initial()
            else:
                board = board_from_placement(placement)
                _check_playable(board, side_to_move)
            self._board = board
            self._state = GameState(current_player=side_to_move)
            self._state.status = Rules.game_status(self._board, side_to_move)

        _LOGGER.info(
            "New game: %s to move, status %s",
            side_to_move,
            self._state.status.name,
        )
        if self._state.status.is_terminal:
            self._finish()
        else:
            self._set_phase(GamePhase.AWAITING_MOVE)

    # ── Move handling ────────────────────────────────────────────────────

    def validate_move(self, from_sq: Coordinate, to_sq: Coordinate) -> bool:
        """Whether the side to move may play *from_sq* → *to_sq*."""
        if not (is_valid_coordinate(from_sq) and is_valid_coordinate(to_sq)):
            _LOGGER.debug("Rejected %s -> %s: off board", from_sq, to_sq)
            return False
        piece = self._board.piece_at(from_sq)
        if piece is None or piece.color != self._state.current_player:
            _LOGGER.debug("Rejected %s: no %s piece there", from_sq, self.current_player)
            return False
        # Simulation moves pieces on the live board.
        with self._lock:
            legal = Rules.is_move_legal(self._board, from_sq, to_sq)
        if not legal:
            _LOGGER.debug("Rejected %s: illegal", move_name(from_sq, to_sq))
            return False
        return True

    def submit_move(self, from_sq: Coordinate, to_sq: Coordinate) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False
        if not self.validate_move(from_sq, to_sq):
            return False
        self._commit(from_sq, to_sq)
        return True

    def read_move(self, move_input: IMoveInput) -> tuple[Coordinate, Coordinate]:
        """Ask *move_input* until it supplies a legal move for the side to move."""
        while True:
            from_sq = move_input.request_origin(self._state.current_player)
            if not is_valid_coordinate(from_sq):
                continue
            piece = self._board.piece_at(from_sq)
            if piece is None or piece.color != self._state.current_player:
                continue

            to_sq = move_input.request_destination(piece)
            if self.validate_move(from_sq, to_sq):
                return from_sq, to_sq

    def play_turn(self, move_input: IMoveInput) -> GameStatus:
        """Read one legal move, commit it and return the new status."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            raise RuntimeError(f"Cannot play a turn in phase {self._state.phase.name}")
        from_sq, to_sq = self.read_move(move_input)
        self._commit(from_sq, to_sq)
        return self._state.status

    def play(self, move_input: IMoveInput, renderer: IRenderer) -> GameStatus:
        """Run turns until checkmate or stalemate; returns the final status."""
        if self._state.phase == GamePhase.NOT_STARTED:
            self.new_game()

        while not self._state.is_game_over:
            self.render(renderer)
            self.play_turn(move_input)

        self.render(renderer)
        with self._lock:
            renderer.show_game_over(self._board, self._state)
        return self._state.status

    def render(self, renderer: IRenderer) -> None:
        """Hand a consistent view of board and state to *renderer*."""
        with self._lock:
            renderer.render(self._board, self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        state = self._state
        with self._lock:
            piece = self._board.piece_at(from_sq)
            assert piece is not None
            mover = state.current_player
            self._board.move_piece(from_sq, to_sq, state)
            piece.mark_moved()
            state.switch_player()
            previous = state.status
            # Not rolled back: new_game guarantees both kings stay on the board.
            state.status = Rules.game_status(self._board, state.current_player)
            self._set_phase(GamePhase.MOVE_COMMITTED)

        _LOGGER.info("%s played %s", mover, state.last_move)
        self._emit_move(from_sq, to_sq)
        if state.status != previous:
            _LOGGER.info("Status for %s: %s", state.current_player, state.status.name)
            self._emit_status(state.status)

        if state.status.is_terminal:
            self._finish()
        else:
            self._set_phase(GamePhase.AWAITING_MOVE)

    def _finish(self) -> None:
        _LOGGER.info("Game over: %s", self._state.status.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state.status)

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        for cb in self.events.on_move:
            cb(from_sq, to_sq, self._state)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)

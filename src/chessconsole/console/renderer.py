"""Console renderer — board grid, info panel and performance panel."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

from chessconsole.console.i18n import t
from chessconsole.console.monitor import ThreadInfo, sample_process
from chessconsole.core.enums import Color
from chessconsole.core.types import Coordinate
from chessconsole.game.interfaces import IRenderer

if TYPE_CHECKING:
    from chessconsole.core.board import Board
    from chessconsole.game.state import GameState

# ANSI escape codes
_CLEAR = "\033[2J\033[H"
_RESET = "\033[0m"
_LIGHT_BG = "\033[100m"  # dark grey
_DARK_BG = "\033[40m"  # black
_WHITE_FG = "\033[97m"
_BLACK_FG = "\033[93m"  # yellow

_FILES_HEADER = "    a b c d e f g h"
_FRAME = "  +-----------------+"
_SEPARATOR = "-" * 42


class ConsoleRenderer(IRenderer):
    """Draws the game as text.

    Args:
        stream: Output stream, stdout by default.
        use_color: Emit ANSI colors for squares and pieces.
        show_performance: Append the process performance panel.
        clear_screen: Clear the terminal before each frame.
        sampler: Performance sampler, :func:`sample_process` by default.
    """

    __slots__ = ("_stream", "_use_color", "_show_performance", "_clear_screen", "_sampler")

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        use_color: bool = True,
        show_performance: bool = True,
        clear_screen: bool = True,
        sampler: Callable[[], ThreadInfo] | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._use_color = use_color
        self._show_performance = show_performance
        self._clear_screen = clear_screen
        self._sampler = sampler if sampler is not None else sample_process

    # ── IRenderer implementation ─────────────────────────────────────────

    def render(self, board: Board, state: GameState) -> None:
        lines: list[str] = []
        lines.extend(self.board_lines(board))
        lines.append("")
        lines.extend(self.info_lines(state))
        if self._show_performance:
            lines.append(self.performance_line(self._sampler()))
            lines.append(_SEPARATOR)

        if self._clear_screen:
            self._stream.write(_CLEAR)
        self._stream.write("\n".join(lines) + "\n")
        self._stream.flush()

    def show_game_over(self, board: Board, state: GameState) -> None:
        message = t().status_message(state.status, state.current_player)
        self._stream.write("\n" + t().game_over.format(message=message) + "\n")
        self._stream.flush()

    # ── Frame pieces ─────────────────────────────────────────────────────

    def board_lines(self, board: Board) -> list[str]:
        lines = [_FILES_HEADER, _FRAME]
        for rank in range(8):
            cells: list[str] = []
            for file in range(8):
                piece = board.piece_at(Coordinate(file, rank))
                symbol = piece.symbol if piece is not None else " "
                if self._use_color:
                    bg = _LIGHT_BG if (rank + file) % 2 == 0 else _DARK_BG
                    fg = _WHITE_FG
                    if piece is not None and piece.color == Color.BLACK:
                        fg = _BLACK_FG
                    symbol = f"{bg}{fg}{symbol}{_RESET}"
                cells.append(symbol)
            lines.append(f"{8 - rank} |{'|'.join(cells)}| {8 - rank}")
        lines.append(_FRAME)
        lines.append(_FILES_HEADER)
        return lines

    def info_lines(self, state: GameState) -> list[str]:
        s = t()
        return [
            s.turn_label.format(
                player=s.color_name(state.current_player),
                status=s.status_message(state.status, state.current_player),
            ),
            s.last_move_label.format(move=state.last_move),
            s.captured_by_white.format(pieces=state.captured_symbols(Color.WHITE)),
            s.captured_by_black.format(pieces=state.captured_symbols(Color.BLACK)),
            _SEPARATOR,
        ]

    @staticmethod
    def performance_line(info: ThreadInfo) -> str:
        return t().perf_label.format(
            threads=info.total_threads, cpu=info.cpu_time, mem=info.memory_mb
        )

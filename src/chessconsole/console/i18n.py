"""Console strings.

Usage::

    from chessconsole.console.i18n import t, set_language

    set_language("Portuguese")
    print(t().status_check)      # "XEQUE!"
    print(t().wins_checkmate.format(color=t().color_black))
"""

from __future__ import annotations

from dataclasses import dataclass

from chessconsole.core.enums import Color, GameStatus


@dataclass(frozen=True)
class Strings:
    # ── Prompts ──────────────────────────────────────────────────────────
    prompt_origin: str  # e.g. "White, select a piece (e.g. e2): "
    prompt_destination: str  # e.g. "Move 'P' from e2 to: "

    # ── Info panel ───────────────────────────────────────────────────────
    turn_label: str  # "Turn: {player} | Status: {status}"
    last_move_label: str
    captured_by_white: str
    captured_by_black: str
    perf_label: str  # "Perf: Threads: {threads} | CPU: {cpu:.1f}s | Mem: {mem}MB"

    # ── Status ───────────────────────────────────────────────────────────
    status_ongoing: str
    status_check: str
    status_stalemate: str
    wins_checkmate: str  # "CHECKMATE! {color} wins!"
    game_over: str  # "GAME OVER: {message}"

    color_white: str
    color_black: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black

    def status_message(self, status: GameStatus, side_to_move: Color) -> str:
        if status == GameStatus.CHECK:
            return self.status_check
        if status == GameStatus.CHECKMATE:
            return self.wins_checkmate.format(
                color=self.color_name(side_to_move.opposite)
            )
        if status == GameStatus.STALEMATE:
            return self.status_stalemate
        return self.status_ongoing


_EN = Strings(
    prompt_origin="{player}, select a piece (e.g. e2): ",
    prompt_destination="Move '{symbol}' from {square} to: ",
    turn_label="Turn: {player} | Status: {status}",
    last_move_label="Last move: {move}",
    captured_by_white="Captured (by White): {pieces}",
    captured_by_black="Captured (by Black): {pieces}",
    perf_label="Perf: Threads: {threads} | CPU: {cpu:.1f}s | Mem: {mem}MB",
    status_ongoing="In progress",
    status_check="CHECK!",
    status_stalemate="Draw by stalemate!",
    wins_checkmate="CHECKMATE! {color} wins!",
    game_over="GAME OVER: {message}",
    color_white="White",
    color_black="Black",
)

_PT = Strings(
    prompt_origin="{player}, selecione a peça de origem (ex: e2): ",
    prompt_destination="Mover '{symbol}' de {square} para: ",
    turn_label="Turno: {player} | Status: {status}",
    last_move_label="Última jogada: {move}",
    captured_by_white="Capturadas (pelas Brancas): {pieces}",
    captured_by_black="Capturadas (pelas Pretas): {pieces}",
    perf_label="Perf: Threads: {threads} | CPU: {cpu:.1f}s | Mem: {mem}MB",
    status_ongoing="Em andamento",
    status_check="XEQUE!",
    status_stalemate="Empate por afogamento!",
    wins_checkmate="XEQUE-MATE! {color} venceram!",
    game_over="FIM DE JOGO: {message}",
    color_white="Brancas",
    color_black="Pretas",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Portuguese": _PT,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)

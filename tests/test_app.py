"""Tests for settings parsing and the application entry point."""

import builtins

import pytest

from chessconsole.app import main, run_game
from chessconsole.settings import AppSettings, parse_args


class TestParseArgs:
    def test_defaults(self) -> None:
        assert parse_args([]) == AppSettings()

    def test_flags(self) -> None:
        settings = parse_args(
            [
                "--language", "Portuguese",
                "--no-color",
                "--no-perf",
                "--no-clear",
                "--log-level", "debug",
                "--position", "4k3/8/8/8/8/8/8/4K3",
            ]
        )
        assert settings.language == "Portuguese"
        assert not settings.use_color
        assert not settings.show_performance
        assert not settings.clear_screen
        assert settings.log_level == "DEBUG"
        assert settings.placement == "4k3/8/8/8/8/8/8/4K3"

    def test_unknown_language_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--language", "Klingon"])


class TestRunGame:
    def _settings(self, **kwargs: object) -> AppSettings:
        return AppSettings(
            use_color=False, show_performance=False, clear_screen=False, **kwargs
        )

    def test_invalid_position(self) -> None:
        assert run_game(self._settings(placement="nonsense")) == 2

    def test_missing_king(self) -> None:
        assert run_game(self._settings(placement="8/8/8/8/8/8/8/8")) == 2

    def test_finished_position_exits_cleanly(self, capsys: pytest.CaptureFixture[str]) -> None:
        # White to move and already checkmated
        settings = self._settings(placement="rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert run_game(settings) == 0
        assert "CHECKMATE! Black wins!" in capsys.readouterr().out

    def test_scripted_game(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers = iter(["f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
        assert run_game(self._settings()) == 0
        assert "GAME OVER: CHECKMATE! Black wins!" in capsys.readouterr().out

    def test_eof_abandons_game(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def closed(prompt: str = "") -> str:
            raise EOFError

        monkeypatch.setattr(builtins, "input", closed)
        assert main(["--no-clear", "--no-perf", "--no-color"]) == 1

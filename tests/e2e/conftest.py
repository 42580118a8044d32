"""E2E test fixtures and utilities.

These tests exercise complete CLI workflows as a player would experience them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest
from rich.prompt import Confirm
from typer.testing import CliRunner

from numerus.cli.commands import play as play_module

ScriptedPlayer = Callable[[Iterable[str], Iterable[bool]], list[str]]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def offline_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(play_module, "load_dotenv", lambda: False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("NUMERUS_MODEL", raising=False)


@pytest.fixture
def fixed_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    secret = "1234"
    monkeypatch.setattr("numerus.core.engine.generate_secret", lambda length, rng=None: secret)
    return secret


@pytest.fixture
def scripted_player(monkeypatch: pytest.MonkeyPatch) -> ScriptedPlayer:
    """Replace the guess prompt and the play-again question with scripted answers.

    Returns the list that collects every guess handed to the session.
    """

    def _script(guesses: Iterable[str], replays: Iterable[bool] = ()) -> list[str]:
        pending_guesses = list(guesses)
        pending_replays = list(replays)
        played: list[str] = []

        def fake_ask_guess(view, console):
            value = pending_guesses.pop(0)
            played.append(value)
            return value

        monkeypatch.setattr(play_module, "ask_guess", fake_ask_guess)
        monkeypatch.setattr(
            Confirm, "ask", staticmethod(lambda *args, **kwargs: pending_replays.pop(0))
        )
        return played

    return _script

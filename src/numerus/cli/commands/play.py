from __future__ import annotations

from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from rich.console import Console

from numerus.adapters.commentary.anthropic_provider import build_provider
from numerus.adapters.commentary.static import StaticCommentator
from numerus.adapters.loaders.settings_loader import load_settings
from numerus.cli.ui.prompts import NEW_ROUND, QUIT, ask_guess, ask_play_again
from numerus.cli.ui.tables import (
    render_history,
    render_outcome,
    render_record,
    render_rules,
    render_stats,
)
from numerus.core.constants import UNAVAILABLE_COMMENTARY
from numerus.core.engine import GameSession
from numerus.core.models.enums import RoundStatus
from numerus.core.protocols import CommentaryProvider

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _resolve_provider(config: Path | None, offline: bool, console: Console) -> CommentaryProvider:
    if offline:
        return StaticCommentator(UNAVAILABLE_COMMENTARY)
    load_dotenv()
    try:
        settings = load_settings(config)
    except (OSError, ValueError) as exc:
        log.error("settings_load_failed", error=str(exc))
        console.print(f"[red]Failed to load settings: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    return build_provider(settings)


def _play_round(session: GameSession, console: Console) -> str:
    """Run guesses until the round ends or the player leaves it.

    Returns the final round status, NEW_ROUND or QUIT.
    """
    while True:
        view = session.view()
        if view.status is not RoundStatus.IN_PROGRESS:
            return view.status.value
        choice = ask_guess(view, console)
        if choice in (NEW_ROUND, QUIT):
            return choice
        record = session.submit_guess(choice)
        if record is None:
            console.print("[red]Guess was not accepted, try again.[/red]")
            continue
        with console.status("[dim]Game Master is analyzing...[/dim]"):
            session.wait_for_commentary()
        view = session.view()
        render_record(view.attempts, view.last_record or record, console)


def play_command(config: Path | None = None, offline: bool = False) -> None:
    console = Console()
    provider = _resolve_provider(config, offline, console)
    with GameSession(provider) as session:
        render_rules(console)
        try:
            while True:
                session.start_round()
                console.print("\n[bold]New round.[/bold] The secret is locked in.")
                outcome = _play_round(session, console)
                if outcome == QUIT:
                    break
                if outcome == NEW_ROUND:
                    continue
                view = session.view()
                render_history(view, console)
                render_outcome(view, console)
                if not ask_play_again(console):
                    break
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted.[/yellow]")
        render_stats(session.get_stats(), console)

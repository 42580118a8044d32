from __future__ import annotations

from rich.console import Console
from rich.table import Table

from numerus.core.constants import MAX_ATTEMPTS
from numerus.core.models.enums import RoundStatus
from numerus.core.models.round import GuessRecord, SessionStats
from numerus.core.state import RoundView

RULES = (
    "Guess 4 unique digits (0-9).",
    "Strikes = right digit, right spot.",
    "Balls = right digit, wrong spot.",
    f"You have {MAX_ATTEMPTS} attempts total.",
)


def render_rules(console: Console) -> None:
    console.print("[bold]Tactical Briefing[/bold]")
    for line in RULES:
        console.print(f"  - {line}")


def render_record(index: int, record: GuessRecord, console: Console) -> None:
    console.print(
        f"[bold]{index}.[/bold] {record.guess}  "
        f"[green]{record.strikes}S[/green] [yellow]{record.balls}B[/yellow]"
    )
    if record.commentary:
        console.print(f"   [dim italic]GM: {record.commentary}[/dim italic]")


def render_history(view: RoundView, console: Console) -> None:
    table = Table(title=f"Match History ({view.attempts}/{view.max_attempts})")
    table.add_column("#", justify="right")
    table.add_column("Guess")
    table.add_column("S", justify="right")
    table.add_column("B", justify="right")
    table.add_column("Game Master")
    for index, record in enumerate(view.history, start=1):
        table.add_row(
            str(index),
            record.guess,
            str(record.strikes),
            str(record.balls),
            record.commentary or "",
        )
    console.print(table)


def render_outcome(view: RoundView, console: Console) -> None:
    if view.status is RoundStatus.WON:
        console.print(
            f"[bold green]VICTORY[/bold green] You cracked the code in {view.attempts} guesses."
        )
    elif view.status is RoundStatus.LOST:
        console.print("[bold red]DEFEAT[/bold red] The AI outplayed you this time.")
        console.print(f"[red]The answer was {view.secret}[/red]")


def render_stats(stats: SessionStats, console: Console) -> None:
    table = Table(title="Session Stats")
    table.add_column("Played", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Losses", justify="right")
    table.add_column("Best", justify="right")
    best = str(stats.best_score) if stats.best_score is not None else "-"
    table.add_row(str(stats.rounds_played), str(stats.wins), str(stats.losses), best)
    console.print(table)

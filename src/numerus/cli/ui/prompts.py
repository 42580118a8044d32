from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from numerus.core.state import RoundView
from numerus.core.validator import normalize_guess, validate_guess

NEW_ROUND_COMMANDS = {"new", "n"}
QUIT_COMMANDS = {"quit", "q", "exit"}

NEW_ROUND = "new"
QUIT = "quit"


def ask_guess(view: RoundView, console: Console) -> str:
    """Prompt until the player enters a valid guess or a command.

    Returns:
        The guess, or NEW_ROUND / QUIT when the player asked for one of those.
    """
    attempt = view.attempts + 1
    while True:
        response = Prompt.ask(
            f"Guess {attempt}/{view.max_attempts} (4 unique digits, new/n, quit/q)",
            console=console,
        )
        value = normalize_guess(response or "")
        lowered = value.lower()
        if lowered in QUIT_COMMANDS:
            return QUIT
        if lowered in NEW_ROUND_COMMANDS:
            return NEW_ROUND
        issues = validate_guess(value)
        if not issues:
            return value
        for issue in issues:
            console.print(f"[red]{issue.message}[/red]")


def ask_play_again(console: Console) -> bool:
    return Confirm.ask("Play again?", default=True, console=console)

from __future__ import annotations

from rich.console import Console

from numerus.cli.ui.tables import render_rules


def rules_command() -> None:
    console = Console()
    render_rules(console)

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from numerus.adapters.loaders.settings_loader import YamlSettingsLoader


def validate_command(config: Path) -> None:
    console = Console()
    loader = YamlSettingsLoader()
    try:
        issues = loader.validate(config)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Failed to read settings: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    if issues:
        console.print("[red]Settings validation failed:[/red]")
        for issue in issues:
            location = issue.path or "settings"
            console.print(f"- {location}: {issue.message}")
        raise typer.Exit(code=1)
    console.print("[green]Settings are valid.[/green]")

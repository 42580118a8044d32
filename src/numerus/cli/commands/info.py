from __future__ import annotations

import os
import platform
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from numerus import __version__
from numerus.adapters.loaders.settings_loader import load_settings
from numerus.core.constants import MAX_ATTEMPTS, SECRET_LENGTH


def info_command(config: Path | None = None) -> None:
    console = Console()
    load_dotenv()
    try:
        settings = load_settings(config)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Failed to load settings: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    online = bool(os.environ.get(settings.api_key_env, "").strip())

    console.print(f"[bold]numerus version:[/bold] {__version__}")
    console.print(f"[bold]Python:[/bold] {platform.python_version()}")
    console.print(f"[bold]Rules:[/bold] {SECRET_LENGTH} digits, {MAX_ATTEMPTS} attempts")
    if online:
        console.print(f"[bold]Commentary:[/bold] online ({settings.model})")
    else:
        console.print(
            f"[bold]Commentary:[/bold] offline ({settings.api_key_env} is not set)"
        )

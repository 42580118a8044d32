"""CLI app with deferred heavy imports."""

from pathlib import Path

import typer

app = typer.Typer(
    name="numerus",
    help="numerus - Number Baseball against a sarcastic Game Master",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def play(
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, readable=True, help="Commentary settings YAML"
    ),
    offline: bool = typer.Option(False, "--offline", help="Skip AI commentary entirely"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    from numerus.cli.commands.play import play_command
    from numerus.logging import configure_logging

    configure_logging(verbose=verbose)
    play_command(config=config, offline=offline)


@app.command()
def rules() -> None:
    from numerus.cli.commands.rules import rules_command

    rules_command()


@app.command()
def validate(
    config: Path = typer.Argument(..., exists=True, readable=True),
) -> None:
    from numerus.cli.commands.validate import validate_command

    validate_command(config=config)


@app.command()
def info(
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, readable=True, help="Commentary settings YAML"
    ),
) -> None:
    from numerus.cli.commands.info import info_command

    info_command(config=config)

"""Typer CLI entrypoint for InnSync."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.markup import escape

from innsync.cli.bootstrap import (
    build_registry,
    configure_logging,
    load_effective_config,
)
from innsync.cli.rendering import CliRenderer
from innsync.commands.registry import CommandRegistry
from innsync.commands.types import ExitCommand
from innsync.config import ConfigError, InnsyncConfig
from innsync.parsing.errors import ParseError

app = typer.Typer(help="InnSync command parser CLI", add_completion=False)
_CONSOLE = Console()
_RENDERER = CliRenderer(console=_CONSOLE)


def _bootstrap(config_file: Path | None) -> tuple[InnsyncConfig, CommandRegistry]:
    """Load config, configure logging and build the registry.

    Args:
        config_file: Optional config file path override.

    Returns:
        Effective config and command registry.

    Raises:
        Exit: With code 2 when config or aliases are invalid.
    """
    try:
        config = load_effective_config(config_file)
        registry = build_registry(config)
    except (ConfigError, ValueError) as exc:
        _CONSOLE.print(
            f"[bold red]Invalid configuration: {escape(str(exc))}[/bold red]"
        )
        raise typer.Exit(code=2) from exc
    configure_logging(config.log_level)
    return config, registry


@app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(help="Single command line to parse.")],
    config_file: Annotated[
        Path | None,
        typer.Option(
            file_okay=True,
            dir_okay=False,
            help="Path to InnSync config YAML/JSON file.",
        ),
    ] = None,
) -> None:
    """Parse one command line and print the command object.

    Args:
        text: Raw command line.
        config_file: Optional config file path override.

    Raises:
        Exit: With code 1 when the line fails to parse.
    """
    _, registry = _bootstrap(config_file)
    try:
        command = registry.parse(text)
    except ParseError as exc:
        _RENDERER.render_error(exc)
        raise typer.Exit(code=1) from exc
    _RENDERER.render_command(command)


@app.command("repl")
def repl_command(
    config_file: Annotated[
        Path | None,
        typer.Option(
            file_okay=True,
            dir_okay=False,
            help="Path to InnSync config YAML/JSON file.",
        ),
    ] = None,
) -> None:
    """Parse command lines interactively until ``exit`` or end of input.

    Args:
        config_file: Optional config file path override.
    """
    config, registry = _bootstrap(config_file)
    _CONSOLE.print(
        "InnSync REPL. Type 'help' for commands, 'exit' to quit.", style="cyan"
    )
    while True:
        try:
            raw = typer.prompt(config.prompt)
        except (EOFError, KeyboardInterrupt, click.Abort):
            _CONSOLE.print("\nbye", style="yellow")
            break
        if not raw.strip():
            continue
        try:
            command = registry.parse(raw)
        except ParseError as exc:
            _RENDERER.render_error(exc)
            continue
        _RENDERER.render_command(command)
        if isinstance(command, ExitCommand):
            _CONSOLE.print("bye", style="yellow")
            break


def main() -> None:
    """Run the CLI."""
    app()


if __name__ == "__main__":
    main()

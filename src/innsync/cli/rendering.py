"""CLI rendering of parse outcomes with Rich views."""

from __future__ import annotations

from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from innsync.commands.types import BaseCommand
from innsync.parsing.errors import ParseError


class CliRenderer:
    """Render parsed commands and parse failures."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render_command(self, command: BaseCommand) -> None:
        """Render one parsed command as a JSON panel.

        Args:
            command: Parsed command object.
        """
        self._console.print(
            Panel(
                JSON.from_data(command.model_dump(mode="json")),
                title=escape(f"InnSync [{command.COMMAND_WORD}]"),
                border_style="green",
                expand=True,
            )
        )

    def render_error(self, error: ParseError) -> None:
        """Render one parse failure with its stable code.

        Args:
            error: Parse failure.
        """
        self._console.print(
            Panel(
                Text(error.message),
                title=escape(f"Error [{error.code}]"),
                border_style="bold red",
                expand=True,
            )
        )

"""Command parser registry and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from innsync.commands import grammar
from innsync.commands.parser import parse_line
from innsync.commands.parsers.add import AddCommandParser
from innsync.commands.parsers.edit import EditCommandParser
from innsync.commands.parsers.find import FindCommandParser
from innsync.commands.parsers.person_notes import (
    DeleteRequestCommandParser,
    MemoCommandParser,
    RequestCommandParser,
)
from innsync.commands.parsers.simple import BareCommandParser, IndexedCommandParser
from innsync.commands.parsers.tagging import TagCommandParser, UntagCommandParser
from innsync.commands.types import (
    ClearCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    StarCommand,
    UnstarCommand,
)
from innsync.parsing.errors import MESSAGE_UNKNOWN_COMMAND, ParseError, ParseErrorCode

_LOGGER = logging.getLogger(__name__)


class CommandParser(Protocol):
    """Protocol implemented by per-command parsers."""

    def parse(self, args: str) -> Command:
        """Parse argument text into a command object.

        Args:
            args: Argument text following the command word.
        """


def default_parsers() -> dict[str, CommandParser]:
    """Return the built-in command word to parser table."""
    return {
        "add": AddCommandParser(),
        "edit": EditCommandParser(),
        "delete": IndexedCommandParser(grammar.DELETE_GRAMMAR, DeleteCommand),
        "find": FindCommandParser(),
        "tag": TagCommandParser(),
        "untag": UntagCommandParser(),
        "memo": MemoCommandParser(),
        "req": RequestCommandParser(),
        "deletereq": DeleteRequestCommandParser(),
        "star": IndexedCommandParser(grammar.STAR_GRAMMAR, StarCommand),
        "unstar": IndexedCommandParser(grammar.UNSTAR_GRAMMAR, UnstarCommand),
        "list": BareCommandParser(ListCommand),
        "clear": BareCommandParser(ClearCommand),
        "help": BareCommandParser(HelpCommand),
        "exit": BareCommandParser(ExitCommand),
    }


class CommandRegistry:
    """Deterministic command word registry."""

    def __init__(self, *, aliases: Mapping[str, str] | None = None) -> None:
        """Construct registry with built-in parsers plus optional aliases.

        Args:
            aliases: Extra command words mapped to built-in command words.

        Raises:
            ValueError: If an alias shadows a built-in word or targets an
                unknown one.
        """
        self._parsers: dict[str, CommandParser] = default_parsers()
        self._aliases: dict[str, str] = {}
        for alias, target in (aliases or {}).items():
            if alias in self._parsers:
                raise ValueError(f"Alias '{alias}' shadows a built-in command.")
            if target not in self._parsers:
                raise ValueError(
                    f"Alias '{alias}' targets unknown command '{target}'."
                )
            self._aliases[alias] = target

    @property
    def command_words(self) -> tuple[str, ...]:
        """Built-in command words, in registration order."""
        return tuple(self._parsers)

    def dispatch(self, word: str, args: str) -> Command:
        """Parse ``args`` with the parser registered for ``word``.

        Args:
            word: Command word or configured alias.
            args: Argument text following the command word.

        Returns:
            Parsed command object.

        Raises:
            ParseError: If the word is unknown or the arguments are invalid.
        """
        resolved = self._aliases.get(word, word)
        parser = self._parsers.get(resolved)
        if parser is None:
            raise ParseError(
                ParseErrorCode.UNKNOWN_COMMAND,
                MESSAGE_UNKNOWN_COMMAND.format(word=word),
                data={"command": word},
            )
        _LOGGER.debug("Dispatching '%s' to %s", word, type(parser).__name__)
        return parser.parse(args)

    def parse(self, text: str) -> Command:
        """Parse one full input line into a command object.

        Args:
            text: Raw user input line.

        Returns:
            Parsed command object.

        Raises:
            ParseError: If the line cannot be parsed.
        """
        call = parse_line(text)
        return self.dispatch(call.word, call.args)

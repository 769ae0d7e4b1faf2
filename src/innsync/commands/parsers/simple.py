"""Parsers for commands taking only an index, or nothing at all."""

from __future__ import annotations

from typing import Generic, TypeVar

from innsync.commands.types import (
    ClearCommand,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    StarCommand,
    UnstarCommand,
)
from innsync.parsing.grammar import CommandGrammar, apply_grammar

IndexedT = TypeVar("IndexedT", DeleteCommand, StarCommand, UnstarCommand)
BareT = TypeVar("BareT", ListCommand, ClearCommand, HelpCommand, ExitCommand)


class IndexedCommandParser(Generic[IndexedT]):
    """Build a command whose only argument is the target index."""

    def __init__(self, grammar: CommandGrammar, command_type: type[IndexedT]) -> None:
        """Bind the grammar row and command type.

        Args:
            grammar: Grammar row with ``takes_index`` set.
            command_type: Command model built from the index.
        """
        self._grammar = grammar
        self._command_type = command_type

    def parse(self, args: str) -> IndexedT:
        """Parse the index from ``args``.

        Raises:
            ParseError: If the preamble is not a valid index.
        """
        parsed = apply_grammar(self._grammar, args)
        assert parsed.index is not None
        return self._command_type(index=parsed.index)


class BareCommandParser(Generic[BareT]):
    """Build a command that takes no arguments; trailing text is ignored."""

    def __init__(self, command_type: type[BareT]) -> None:
        """Bind the command type.

        Args:
            command_type: Argument-free command model to build.
        """
        self._command_type = command_type

    def parse(self, args: str) -> BareT:
        """Build the command, ignoring ``args``.

        Args:
            args: Argument text following the command word; unused.

        Returns:
            Fresh command instance.
        """
        del args
        return self._command_type()

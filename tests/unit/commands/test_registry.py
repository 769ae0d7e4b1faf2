"""Unit tests for the command registry and line splitter."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter

from innsync.commands.parser import parse_line
from innsync.commands.registry import CommandRegistry
from innsync.commands.types import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    StarCommand,
    UnstarCommand,
)
from innsync.model import Index
from innsync.parsing import ParseError, ParseErrorCode
from tests.unit.helpers import add_command_text, amy


@pytest.mark.unit
def test_parse_line_keeps_leading_space_of_args() -> None:
    """Argument text should keep the space after the command word."""
    call = parse_line("  find n/Amy  ")

    assert call.word == "find"
    assert call.args == " n/Amy"
    assert call.raw == "  find n/Amy  "


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   "])
def test_blank_line_is_invalid_format(registry: CommandRegistry, text: str) -> None:
    """Blank input should point the user at help."""
    with pytest.raises(ParseError) as exc_info:
        registry.parse(text)

    assert exc_info.value.code == ParseErrorCode.INVALID_COMMAND_FORMAT
    assert "help:" in exc_info.value.message


@pytest.mark.unit
def test_unknown_word_is_reported(registry: CommandRegistry) -> None:
    """Unregistered words should fail with the unknown command code."""
    with pytest.raises(ParseError) as exc_info:
        registry.parse("froboz 1")

    assert exc_info.value.code == ParseErrorCode.UNKNOWN_COMMAND
    assert exc_info.value.data == {"command": "froboz"}


@pytest.mark.unit
def test_command_words_are_case_sensitive(registry: CommandRegistry) -> None:
    """Command words should match exactly."""
    with pytest.raises(ParseError) as exc_info:
        registry.parse("LIST")

    assert exc_info.value.code == ParseErrorCode.UNKNOWN_COMMAND


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("list", ListCommand()),
        ("list 3", ListCommand()),
        ("clear", ClearCommand()),
        ("help me", HelpCommand()),
        ("delete 2", DeleteCommand(index=Index.from_one_based(2))),
        ("star 1", StarCommand(index=Index.from_one_based(1))),
        ("unstar 1", UnstarCommand(index=Index.from_one_based(1))),
    ],
)
def test_dispatch_simple_commands(
    registry: CommandRegistry, text: str, expected: Command
) -> None:
    """Simple commands should dispatch to the right command object."""
    assert registry.parse(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("word", ["delete", "star", "unstar"])
def test_huge_index_is_reported_as_invalid_index(
    registry: CommandRegistry, word: str
) -> None:
    """Index text with thousands of digits should fail as an invalid index."""
    with pytest.raises(ParseError) as exc_info:
        registry.parse(f"{word} " + "1" * 5000)

    assert exc_info.value.code == ParseErrorCode.INVALID_INDEX


@pytest.mark.unit
def test_dispatch_add_round_trip(registry: CommandRegistry) -> None:
    """A full add line should parse through the registry."""
    command = registry.parse(add_command_text(amy()))

    assert command == AddCommand(person=amy())


@pytest.mark.unit
def test_command_words_cover_every_built_in(registry: CommandRegistry) -> None:
    """Every built-in command word should be registered once."""
    assert set(registry.command_words) == {
        "add",
        "edit",
        "delete",
        "find",
        "tag",
        "untag",
        "memo",
        "req",
        "deletereq",
        "star",
        "unstar",
        "list",
        "clear",
        "help",
        "exit",
    }


@pytest.mark.unit
def test_aliases_resolve_to_built_ins() -> None:
    """Configured aliases should dispatch like their target word."""
    registry = CommandRegistry(aliases={"ls": "list", "f": "find"})

    assert registry.parse("ls") == ListCommand()
    assert isinstance(registry.parse("f n/amy"), FindCommand)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("aliases", "message"),
    [
        ({"list": "clear"}, "shadows a built-in"),
        ({"ls": "lst"}, "targets unknown command"),
    ],
)
def test_invalid_aliases_rejected(aliases: dict[str, str], message: str) -> None:
    """Aliases must not shadow built-ins or point nowhere."""
    with pytest.raises(ValueError, match=message):
        CommandRegistry(aliases=aliases)


@pytest.mark.unit
def test_commands_round_trip_through_discriminated_union(
    registry: CommandRegistry,
) -> None:
    """Serialised commands should validate back via the ``kind`` tag."""
    adapter = TypeAdapter(Command)
    command = registry.parse("tag 1 t/vip")

    assert adapter.validate_python(command.model_dump()) == command

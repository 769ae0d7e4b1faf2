"""Declarative prefix grammar rows and their enforcement."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from innsync.model.index import Index
from innsync.parsing.errors import (
    MESSAGE_NO_FIELD_SPECIFIED,
    MESSAGE_WITH_USAGE,
    ParseError,
    ParseErrorCode,
    invalid_format,
)
from innsync.parsing.fields import parse_index
from innsync.parsing.syntax import Prefix
from innsync.parsing.tokenizer import ArgumentMultimap, tokenize


class CommandGrammar(BaseModel):
    """Prefix arity rules for one command word.

    Attributes:
        command_word: Word that selects the command.
        usage: Usage text appended to format errors.
        takes_index: Whether the preamble is a one-based index.
        required: Prefixes that must be present.
        singular: Prefixes that may appear at most once.
        repeatable: Prefixes that may appear any number of times.
        exclusive: Exactly one of these must be present, when non-empty.
        any_of: At least one of these must be present, when non-empty.
        any_of_code: Error code raised when ``any_of`` is unmet.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    command_word: str
    usage: str
    takes_index: bool = False
    required: tuple[Prefix, ...] = ()
    singular: tuple[Prefix, ...] = ()
    repeatable: tuple[Prefix, ...] = ()
    exclusive: tuple[Prefix, ...] = ()
    any_of: tuple[Prefix, ...] = ()
    any_of_code: ParseErrorCode = ParseErrorCode.INVALID_COMMAND_FORMAT

    @property
    def prefixes(self) -> tuple[Prefix, ...]:
        """Every prefix this command recognises, in declaration order."""
        declared = (
            *self.required,
            *self.singular,
            *self.repeatable,
            *self.exclusive,
            *self.any_of,
        )
        return tuple(dict.fromkeys(declared))


class ParsedArguments(BaseModel):
    """Tokenized arguments that satisfied a command grammar."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: Index | None = None
    arguments: ArgumentMultimap


def _any_of_error(grammar: CommandGrammar) -> ParseError:
    if grammar.any_of_code == ParseErrorCode.NO_FIELD_SPECIFIED:
        return ParseError(
            ParseErrorCode.NO_FIELD_SPECIFIED,
            MESSAGE_NO_FIELD_SPECIFIED,
            data={"command": grammar.command_word},
        )
    return invalid_format(grammar.usage)


def parse_index_for(grammar: CommandGrammar, text: str) -> Index:
    """Parse an index, appending the command's usage to any failure.

    Args:
        grammar: Grammar row of the invoking command.
        text: Raw index text.

    Returns:
        Parsed index.

    Raises:
        ParseError: ``INVALID_INDEX`` with the usage text appended.
    """
    try:
        return parse_index(text)
    except ParseError as exc:
        raise ParseError(
            exc.code,
            MESSAGE_WITH_USAGE.format(message=exc.message, usage=grammar.usage),
            data=exc.data,
        ) from exc


def apply_grammar(grammar: CommandGrammar, raw_args: str) -> ParsedArguments:
    """Tokenize ``raw_args`` and enforce the grammar's prefix rules.

    Checks run in a fixed order so the reported failure is deterministic:
    prefix combination, then the index, then repeated single-valued
    prefixes. Field values are left for the command parser.

    Args:
        grammar: Grammar row of the invoking command.
        raw_args: Argument text following the command word.

    Returns:
        Parsed index (when the command takes one) and the multimap.

    Raises:
        ParseError: If the arguments violate the grammar.
    """
    arguments = tokenize(raw_args, *grammar.prefixes)

    if not grammar.takes_index and arguments.preamble:
        raise invalid_format(grammar.usage)
    if not all(arguments.is_present(prefix) for prefix in grammar.required):
        raise invalid_format(grammar.usage)
    if grammar.exclusive:
        present = [p for p in grammar.exclusive if arguments.is_present(p)]
        if len(present) != 1:
            raise invalid_format(grammar.usage)
    if grammar.any_of and not any(arguments.is_present(p) for p in grammar.any_of):
        raise _any_of_error(grammar)

    index = None
    if grammar.takes_index:
        index = parse_index_for(grammar, arguments.preamble)

    arguments.verify_no_duplicate_prefixes(*grammar.singular)
    return ParsedArguments(index=index, arguments=arguments)

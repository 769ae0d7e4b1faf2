"""Deterministic command line splitter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from innsync.commands.usage import HELP_USAGE
from innsync.parsing.errors import invalid_format


class CommandCall(BaseModel):
    """Command word and the untouched argument text after it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    word: str
    args: str = ""
    raw: str


def parse_line(text: str) -> CommandCall:
    """Split one input line into command word and argument text.

    The argument text keeps its leading whitespace so prefixes directly
    after the command word are still recognised by the tokenizer.

    Args:
        text: Raw user input line.

    Returns:
        Normalized command call.

    Raises:
        ParseError: If the line holds no command word.
    """
    stripped = text.strip()
    if not stripped:
        raise invalid_format(HELP_USAGE)
    word = stripped.split(maxsplit=1)[0]
    args = stripped[len(word) :]
    return CommandCall(word=word, args=args, raw=text)

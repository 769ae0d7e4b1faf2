"""Deterministic parse error contracts and user-facing message templates."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class ParseErrorCode(StrEnum):
    """Stable parse failure codes."""

    INVALID_INDEX = "invalid_index"
    INVALID_FIELD_VALUE = "invalid_field_value"
    INVALID_COMMAND_FORMAT = "invalid_command_format"
    DUPLICATE_PREFIX = "duplicate_prefix"
    DUPLICATE_FIELD = "duplicate_field"
    UNKNOWN_COMMAND = "unknown_command"
    NO_FIELD_SPECIFIED = "no_field_specified"


class ParseError(ValueError):
    """Command text failed to parse, with a stable deterministic code."""

    def __init__(
        self,
        code: ParseErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create parse failure.

        Args:
            code: Stable parse error code.
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data or {}


MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_WITH_USAGE = "{message}\n{usage}"
MESSAGE_DUPLICATE_PREFIXES = (
    "Multiple values specified for the following single-valued field(s): "
)
MESSAGE_DUPLICATE_FIELD = "Duplicate {field} found: {value}"
MESSAGE_DUPLICATE_REQUEST = "This request already exists for the person: {value}"
MESSAGE_NO_FIELD_SPECIFIED = "At least one field to edit must be provided."
MESSAGE_UNKNOWN_COMMAND = (
    "Unknown command '{word}'. Type 'help' to see available commands."
)


def invalid_format(usage: str) -> ParseError:
    """Build the invalid-command-format failure for one command.

    Args:
        usage: Usage text of the invoking command.

    Returns:
        Parse error carrying the usage text.
    """
    return ParseError(
        ParseErrorCode.INVALID_COMMAND_FORMAT,
        MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage),
    )


def duplicate_prefixes_message(tokens: Iterable[str]) -> str:
    """Render the duplicate-prefix message for the given prefix tokens."""
    return MESSAGE_DUPLICATE_PREFIXES + " ".join(tokens)

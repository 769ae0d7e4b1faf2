"""Parser for ``edit``."""

from __future__ import annotations

from innsync.commands.grammar import EDIT_GRAMMAR
from innsync.commands.parsers._support import collection_delta
from innsync.commands.types import EditCommand, EditPersonDescriptor
from innsync.parsing.fields import (
    parse_address,
    parse_booking_tags,
    parse_email,
    parse_memo,
    parse_name,
    parse_phone,
    parse_requests,
    parse_tags,
)
from innsync.parsing.grammar import apply_grammar
from innsync.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_BOOKING_TAG,
    PREFIX_EMAIL,
    PREFIX_MEMO,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REQUEST,
    PREFIX_TAG,
)


class EditCommandParser:
    """Build ``EditCommand`` from ``INDEX`` and at least one field prefix."""

    def parse(self, args: str) -> EditCommand:
        """Parse edit arguments into field deltas.

        Fields are validated in declaration order, so the first invalid
        field is the one reported. A repeatable prefix given once with no
        value clears that field.

        Args:
            args: Argument text following ``edit``.

        Returns:
            Edit command for the target index.

        Raises:
            ParseError: If the grammar, index or any field value is invalid.
        """
        parsed = apply_grammar(EDIT_GRAMMAR, args)
        arguments = parsed.arguments
        assert parsed.index is not None

        name = arguments.value(PREFIX_NAME)
        phone = arguments.value(PREFIX_PHONE)
        email = arguments.value(PREFIX_EMAIL)
        address = arguments.value(PREFIX_ADDRESS)
        memo = arguments.value(PREFIX_MEMO)
        descriptor = EditPersonDescriptor(
            name=None if name is None else parse_name(name),
            phone=None if phone is None else parse_phone(phone),
            email=None if email is None else parse_email(email),
            address=None if address is None else parse_address(address),
            memo=None if memo is None else parse_memo(memo),
            requests=collection_delta(
                arguments.all_values(PREFIX_REQUEST), parse_requests
            ),
            booking_tags=collection_delta(
                arguments.all_values(PREFIX_BOOKING_TAG), parse_booking_tags
            ),
            tags=collection_delta(arguments.all_values(PREFIX_TAG), parse_tags),
        )
        return EditCommand(index=parsed.index, descriptor=descriptor)

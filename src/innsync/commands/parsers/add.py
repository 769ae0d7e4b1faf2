"""Parser for ``add``."""

from __future__ import annotations

from innsync.commands.grammar import ADD_GRAMMAR
from innsync.commands.parsers._support import required_value
from innsync.commands.types import AddCommand
from innsync.model.fields import Memo
from innsync.model.person import Person
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


class AddCommandParser:
    """Build ``AddCommand`` from ``n/ p/ e/ a/ [m/] [r/]... [bt/]... [t/]...``."""

    def parse(self, args: str) -> AddCommand:
        """Parse add arguments into a new person.

        Args:
            args: Argument text following ``add``.

        Returns:
            Add command holding the validated person.

        Raises:
            ParseError: If the grammar or any field value is invalid.
        """
        arguments = apply_grammar(ADD_GRAMMAR, args).arguments
        memo_text = arguments.value(PREFIX_MEMO)
        person = Person(
            name=parse_name(required_value(arguments, PREFIX_NAME)),
            phone=parse_phone(required_value(arguments, PREFIX_PHONE)),
            email=parse_email(required_value(arguments, PREFIX_EMAIL)),
            address=parse_address(required_value(arguments, PREFIX_ADDRESS)),
            memo=Memo() if memo_text is None else parse_memo(memo_text),
            requests=parse_requests(arguments.all_values(PREFIX_REQUEST)),
            booking_tags=parse_booking_tags(arguments.all_values(PREFIX_BOOKING_TAG)),
            tags=parse_tags(arguments.all_values(PREFIX_TAG)),
        )
        return AddCommand(person=person)

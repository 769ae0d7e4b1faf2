"""Parsers for ``tag`` and ``untag``."""

from __future__ import annotations

from innsync.commands.grammar import TAG_GRAMMAR, UNTAG_GRAMMAR
from innsync.commands.types import TagCommand, UntagCommand
from innsync.parsing.fields import (
    parse_booking_tag,
    parse_booking_tags,
    parse_tag,
    parse_tags,
)
from innsync.parsing.grammar import apply_grammar
from innsync.parsing.syntax import PREFIX_BOOKING_TAG, PREFIX_TAG


class TagCommandParser:
    """Build ``TagCommand`` from ``INDEX [t/TAG]... [bt/BOOKING_TAG]...``."""

    def parse(self, args: str) -> TagCommand:
        """Parse tag arguments.

        Args:
            args: Argument text following ``tag``.

        Returns:
            Tag command with every tag and booking tag to attach.

        Raises:
            ParseError: If neither prefix is given or a value is invalid.
        """
        parsed = apply_grammar(TAG_GRAMMAR, args)
        assert parsed.index is not None
        return TagCommand(
            index=parsed.index,
            tags=parse_tags(parsed.arguments.all_values(PREFIX_TAG)),
            booking_tags=parse_booking_tags(
                parsed.arguments.all_values(PREFIX_BOOKING_TAG)
            ),
        )


class UntagCommandParser:
    """Build ``UntagCommand`` from ``INDEX t/TAG`` or ``INDEX bt/BOOKING_TAG``."""

    def parse(self, args: str) -> UntagCommand:
        """Parse untag arguments; exactly one removal target is allowed.

        Args:
            args: Argument text following ``untag``.

        Returns:
            Untag command naming one tag or one booking tag.

        Raises:
            ParseError: If both or neither prefix is given, either repeats,
                or the value is invalid.
        """
        parsed = apply_grammar(UNTAG_GRAMMAR, args)
        assert parsed.index is not None
        tag_text = parsed.arguments.value(PREFIX_TAG)
        booking_text = parsed.arguments.value(PREFIX_BOOKING_TAG)
        return UntagCommand(
            index=parsed.index,
            tag=None if tag_text is None else parse_tag(tag_text),
            booking_tag=(
                None if booking_text is None else parse_booking_tag(booking_text)
            ),
        )

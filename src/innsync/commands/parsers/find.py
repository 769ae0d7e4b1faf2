"""Parser for ``find``."""

from __future__ import annotations

from innsync.commands.grammar import FIND_GRAMMAR
from innsync.commands.types import FindCommand
from innsync.parsing.errors import invalid_format
from innsync.parsing.grammar import apply_grammar
from innsync.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_BOOKING_DATE,
    PREFIX_BOOKING_PROPERTY,
    PREFIX_EMAIL,
    PREFIX_MEMO,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    Prefix,
)
from innsync.search.predicate import SearchType

SEARCH_PREFIXES: dict[Prefix, SearchType] = {
    PREFIX_NAME: SearchType.NAME,
    PREFIX_PHONE: SearchType.PHONE,
    PREFIX_EMAIL: SearchType.EMAIL,
    PREFIX_ADDRESS: SearchType.ADDRESS,
    PREFIX_TAG: SearchType.TAG,
    PREFIX_MEMO: SearchType.MEMO,
    PREFIX_BOOKING_DATE: SearchType.BOOKING_DATE,
    PREFIX_BOOKING_PROPERTY: SearchType.BOOKING_PROPERTY,
}


class FindCommandParser:
    """Build ``FindCommand`` from one or more prefixed keyword groups."""

    def parse(self, args: str) -> FindCommand:
        """Parse search arguments into per-type keyword lists.

        Each value is split on whitespace into keywords; repeated prefixes
        add to the same type's keywords.

        Args:
            args: Argument text following ``find``.

        Returns:
            Find command carrying the search criteria.

        Raises:
            ParseError: If no search prefix is given, a preamble is present,
                or a prefix has no keyword.
        """
        arguments = apply_grammar(FIND_GRAMMAR, args).arguments
        criteria: dict[SearchType, tuple[str, ...]] = {}
        for prefix, search_type in SEARCH_PREFIXES.items():
            keywords: list[str] = []
            for value in arguments.all_values(prefix):
                words = value.split()
                if not words:
                    raise invalid_format(FIND_GRAMMAR.usage)
                keywords.extend(words)
            if keywords:
                criteria[search_type] = tuple(keywords)
        return FindCommand(criteria=criteria)

"""Parsers for ``memo``, ``req`` and ``deletereq``."""

from __future__ import annotations

from innsync.commands.grammar import (
    DELETE_REQUEST_GRAMMAR,
    MEMO_GRAMMAR,
    REQUEST_GRAMMAR,
)
from innsync.commands.parsers._support import required_value
from innsync.commands.types import DeleteRequestCommand, MemoCommand, RequestCommand
from innsync.parsing.fields import parse_memo, parse_requests
from innsync.parsing.grammar import apply_grammar, parse_index_for
from innsync.parsing.syntax import PREFIX_MEMO, PREFIX_REQUEST


class MemoCommandParser:
    """Build ``MemoCommand`` from ``INDEX m/[MEMO]``."""

    def parse(self, args: str) -> MemoCommand:
        """Parse memo arguments; an empty memo clears the existing one."""
        parsed = apply_grammar(MEMO_GRAMMAR, args)
        assert parsed.index is not None
        memo = parse_memo(required_value(parsed.arguments, PREFIX_MEMO))
        return MemoCommand(index=parsed.index, memo=memo)


class RequestCommandParser:
    """Build ``RequestCommand`` from ``INDEX r/REQUEST [r/REQUEST]...``."""

    def parse(self, args: str) -> RequestCommand:
        """Parse request arguments, rejecting repeated requests."""
        parsed = apply_grammar(REQUEST_GRAMMAR, args)
        assert parsed.index is not None
        requests = parse_requests(parsed.arguments.all_values(PREFIX_REQUEST))
        return RequestCommand(index=parsed.index, requests=requests)


class DeleteRequestCommandParser:
    """Build ``DeleteRequestCommand`` from ``INDEX r/REQUEST_INDEX``."""

    def parse(self, args: str) -> DeleteRequestCommand:
        """Parse the person index and the request's position."""
        parsed = apply_grammar(DELETE_REQUEST_GRAMMAR, args)
        assert parsed.index is not None
        request_index = parse_index_for(
            DELETE_REQUEST_GRAMMAR,
            required_value(parsed.arguments, PREFIX_REQUEST),
        )
        return DeleteRequestCommand(index=parsed.index, request_index=request_index)

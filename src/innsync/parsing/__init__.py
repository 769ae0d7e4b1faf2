"""Tokenizer, field validators and grammar enforcement for command text."""

from innsync.parsing.errors import ParseError, ParseErrorCode
from innsync.parsing.fields import (
    parse_address,
    parse_booking_tag,
    parse_booking_tags,
    parse_email,
    parse_index,
    parse_memo,
    parse_name,
    parse_phone,
    parse_request,
    parse_requests,
    parse_tag,
    parse_tags,
)
from innsync.parsing.grammar import CommandGrammar, ParsedArguments, apply_grammar
from innsync.parsing.syntax import Prefix
from innsync.parsing.tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "ArgumentMultimap",
    "CommandGrammar",
    "ParseError",
    "ParseErrorCode",
    "ParsedArguments",
    "Prefix",
    "apply_grammar",
    "parse_address",
    "parse_booking_tag",
    "parse_booking_tags",
    "parse_email",
    "parse_index",
    "parse_memo",
    "parse_name",
    "parse_phone",
    "parse_request",
    "parse_requests",
    "parse_tag",
    "parse_tags",
    "tokenize",
]

"""Prefix grammar table, one row per command taking prefixed arguments."""

from __future__ import annotations

from innsync.commands import usage
from innsync.parsing.errors import ParseErrorCode
from innsync.parsing.grammar import CommandGrammar
from innsync.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_BOOKING_DATE,
    PREFIX_BOOKING_PROPERTY,
    PREFIX_BOOKING_TAG,
    PREFIX_EMAIL,
    PREFIX_MEMO,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REQUEST,
    PREFIX_TAG,
)

ADD_GRAMMAR = CommandGrammar(
    command_word="add",
    usage=usage.ADD_USAGE,
    required=(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS),
    singular=(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_MEMO),
    repeatable=(PREFIX_REQUEST, PREFIX_BOOKING_TAG, PREFIX_TAG),
)

EDIT_GRAMMAR = CommandGrammar(
    command_word="edit",
    usage=usage.EDIT_USAGE,
    takes_index=True,
    singular=(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_MEMO),
    repeatable=(PREFIX_REQUEST, PREFIX_BOOKING_TAG, PREFIX_TAG),
    any_of=(
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_MEMO,
        PREFIX_REQUEST,
        PREFIX_BOOKING_TAG,
        PREFIX_TAG,
    ),
    any_of_code=ParseErrorCode.NO_FIELD_SPECIFIED,
)

DELETE_GRAMMAR = CommandGrammar(
    command_word="delete",
    usage=usage.DELETE_USAGE,
    takes_index=True,
)

FIND_GRAMMAR = CommandGrammar(
    command_word="find",
    usage=usage.FIND_USAGE,
    repeatable=(
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_TAG,
        PREFIX_MEMO,
        PREFIX_BOOKING_DATE,
        PREFIX_BOOKING_PROPERTY,
    ),
    any_of=(
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_TAG,
        PREFIX_MEMO,
        PREFIX_BOOKING_DATE,
        PREFIX_BOOKING_PROPERTY,
    ),
)

TAG_GRAMMAR = CommandGrammar(
    command_word="tag",
    usage=usage.TAG_USAGE,
    takes_index=True,
    repeatable=(PREFIX_TAG, PREFIX_BOOKING_TAG),
    any_of=(PREFIX_TAG, PREFIX_BOOKING_TAG),
)

UNTAG_GRAMMAR = CommandGrammar(
    command_word="untag",
    usage=usage.UNTAG_USAGE,
    takes_index=True,
    singular=(PREFIX_BOOKING_TAG, PREFIX_TAG),
    exclusive=(PREFIX_TAG, PREFIX_BOOKING_TAG),
)

MEMO_GRAMMAR = CommandGrammar(
    command_word="memo",
    usage=usage.MEMO_USAGE,
    takes_index=True,
    required=(PREFIX_MEMO,),
    singular=(PREFIX_MEMO,),
)

REQUEST_GRAMMAR = CommandGrammar(
    command_word="req",
    usage=usage.REQUEST_USAGE,
    takes_index=True,
    required=(PREFIX_REQUEST,),
    repeatable=(PREFIX_REQUEST,),
)

DELETE_REQUEST_GRAMMAR = CommandGrammar(
    command_word="deletereq",
    usage=usage.DELETE_REQUEST_USAGE,
    takes_index=True,
    required=(PREFIX_REQUEST,),
    singular=(PREFIX_REQUEST,),
)

STAR_GRAMMAR = CommandGrammar(
    command_word="star",
    usage=usage.STAR_USAGE,
    takes_index=True,
)

UNSTAR_GRAMMAR = CommandGrammar(
    command_word="unstar",
    usage=usage.UNSTAR_USAGE,
    takes_index=True,
)

GRAMMARS: dict[str, CommandGrammar] = {
    grammar.command_word: grammar
    for grammar in (
        ADD_GRAMMAR,
        EDIT_GRAMMAR,
        DELETE_GRAMMAR,
        FIND_GRAMMAR,
        TAG_GRAMMAR,
        UNTAG_GRAMMAR,
        MEMO_GRAMMAR,
        REQUEST_GRAMMAR,
        DELETE_REQUEST_GRAMMAR,
        STAR_GRAMMAR,
        UNSTAR_GRAMMAR,
    )
}

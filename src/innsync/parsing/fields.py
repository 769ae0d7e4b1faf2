"""Raw-text validators producing typed person field values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TypeVar

from innsync.model.fields import (
    Address,
    Email,
    FieldKind,
    FieldValue,
    Memo,
    Name,
    Phone,
    Request,
    check_field,
    normalize_field,
)
from innsync.model.index import Index
from innsync.model.tags import BookingTag, Tag
from innsync.model.unique_list import UniqueList
from innsync.parsing.errors import (
    MESSAGE_DUPLICATE_FIELD,
    MESSAGE_DUPLICATE_REQUEST,
    MESSAGE_INVALID_INDEX,
    ParseError,
    ParseErrorCode,
)

FieldT = TypeVar("FieldT", bound=FieldValue)

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")
_MAX_INDEX = 2**31 - 1
# digit strings longer than this are rejected before int() conversion
_MAX_INDEX_DIGITS = len(str(_MAX_INDEX))


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index, ignoring surrounding whitespace.

    Args:
        one_based_index: Raw index text.

    Returns:
        Parsed index.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer.
    """
    trimmed = one_based_index.strip()
    digits = trimmed.lstrip("0")
    if (
        not _UNSIGNED_INTEGER.fullmatch(trimmed)
        or not digits
        or len(digits) > _MAX_INDEX_DIGITS
        or int(digits) > _MAX_INDEX
    ):
        raise ParseError(
            ParseErrorCode.INVALID_INDEX,
            MESSAGE_INVALID_INDEX,
            data={"index": trimmed},
        )
    return Index.from_one_based(int(digits))


def _parse_field(kind: FieldKind, value_type: type[FieldT], raw: str) -> FieldT:
    normalized = normalize_field(kind, raw)
    message = check_field(kind, normalized)
    if message is not None:
        raise ParseError(
            ParseErrorCode.INVALID_FIELD_VALUE,
            message,
            data={"field": kind.value},
        )
    return value_type(value=normalized)


def parse_name(name: str) -> Name:
    """Parse a name, collapsing inner whitespace and dropping ``$``."""
    return _parse_field(FieldKind.NAME, Name, name)


def parse_phone(phone: str) -> Phone:
    """Parse a trimmed phone number."""
    return _parse_field(FieldKind.PHONE, Phone, phone)


def parse_email(email: str) -> Email:
    """Parse a trimmed email address."""
    return _parse_field(FieldKind.EMAIL, Email, email)


def parse_address(address: str) -> Address:
    """Parse an address, collapsing inner whitespace."""
    return _parse_field(FieldKind.ADDRESS, Address, address)


def parse_memo(memo: str) -> Memo:
    """Parse a trimmed memo; empty text yields an empty memo."""
    return _parse_field(FieldKind.MEMO, Memo, memo)


def parse_tag(tag: str) -> Tag:
    """Parse a trimmed tag."""
    return _parse_field(FieldKind.TAG, Tag, tag)


def parse_booking_tag(booking_tag: str) -> BookingTag:
    """Parse ``PROPERTY from/YYYY-MM-DD to/YYYY-MM-DD`` booking text."""
    return _parse_field(FieldKind.BOOKING_TAG, BookingTag, booking_tag)


def parse_request(request: str) -> Request:
    """Parse a trimmed request."""
    return _parse_field(FieldKind.REQUEST, Request, request)


def parse_tags(tags: Iterable[str]) -> tuple[Tag, ...]:
    """Parse tags in order, rejecting repeated tag text.

    Repetition is checked on the trimmed raw text before validity, so a
    repeated invalid tag reports the duplicate.

    Args:
        tags: Raw tag values.

    Returns:
        Distinct tags in input order.

    Raises:
        ParseError: On the first duplicate or invalid tag.
    """
    parsed: UniqueList[Tag] = UniqueList()
    seen: set[str] = set()
    for raw in tags:
        trimmed = raw.strip()
        if trimmed in seen:
            raise ParseError(
                ParseErrorCode.DUPLICATE_FIELD,
                MESSAGE_DUPLICATE_FIELD.format(field="tag", value=trimmed),
                data={"field": FieldKind.TAG.value, "value": trimmed},
            )
        seen.add(trimmed)
        parsed.add(parse_tag(trimmed))
    return parsed.as_tuple()


def parse_booking_tags(booking_tags: Iterable[str]) -> tuple[BookingTag, ...]:
    """Parse booking tags in order; identical bookings collapse to one."""
    parsed: UniqueList[BookingTag] = UniqueList()
    for raw in booking_tags:
        booking_tag = parse_booking_tag(raw)
        if not parsed.contains(booking_tag):
            parsed.add(booking_tag)
    return parsed.as_tuple()


def parse_requests(requests: Iterable[str]) -> tuple[Request, ...]:
    """Parse requests in order, rejecting case-insensitive repeats.

    Args:
        requests: Raw request values.

    Returns:
        Distinct requests in input order.

    Raises:
        ParseError: On the first invalid or repeated request.
    """
    parsed: UniqueList[Request] = UniqueList()
    for raw in requests:
        request = parse_request(raw)
        if parsed.find(request.is_same_request) is not None:
            raise ParseError(
                ParseErrorCode.DUPLICATE_FIELD,
                MESSAGE_DUPLICATE_REQUEST.format(value=request.value),
                data={"field": FieldKind.REQUEST.value, "value": request.value},
            )
        parsed.add(request)
    return parsed.as_tuple()

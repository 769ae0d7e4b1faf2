"""Multi-field person search predicate."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from enum import StrEnum

from innsync.model.fields import BOOKING_DATE_FORMAT
from innsync.model.person import Person

_LOGGER = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


class SearchType(StrEnum):
    """Person field categories usable as search criteria."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    TAG = "tag"
    BOOKING_DATE = "booking_date"
    BOOKING_PROPERTY = "booking_property"
    MEMO = "memo"


class SearchErrorCode(StrEnum):
    """Stable search construction error codes."""

    INVALID_STATE = "search_invalid_state"
    INVALID_ARGUMENT = "search_invalid_argument"


class SearchError(ValueError):
    """Search criteria violate the predicate builder's input contract."""

    def __init__(self, code: SearchErrorCode, message: str) -> None:
        """Create deterministic search error.

        Args:
            code: Stable search error code.
            message: Human-readable error message.
        """
        super().__init__(message)
        self.code = code


def _contains(text: str | None, keyword: str) -> bool:
    return text is not None and keyword in text.lower()


def _match_name(person: Person, keyword: str) -> bool:
    return _contains(person.name.value, keyword)


def _match_phone(person: Person, keyword: str) -> bool:
    return person.phone is not None and _contains(person.phone.value, keyword)


def _match_email(person: Person, keyword: str) -> bool:
    return person.email is not None and _contains(person.email.value, keyword)


def _match_address(person: Person, keyword: str) -> bool:
    return person.address is not None and _contains(person.address.value, keyword)


def _match_tag(person: Person, keyword: str) -> bool:
    return any(_contains(tag.value, keyword) for tag in person.tags)


def _match_memo(person: Person, keyword: str) -> bool:
    return _contains(person.memo.value, keyword)


def _match_booking_property(person: Person, keyword: str) -> bool:
    return any(
        _contains(booking.property_name, keyword) for booking in person.booking_tags
    )


def _match_booking_date(person: Person, keyword: str) -> bool:
    try:
        moment = datetime.strptime(keyword, BOOKING_DATE_FORMAT)
    except ValueError:
        _LOGGER.debug("Ignoring malformed booking date keyword %r", keyword)
        return False
    return any(booking.covers(moment) for booking in person.booking_tags)


_MATCHERS: dict[SearchType, Callable[[Person, str], bool]] = {
    SearchType.NAME: _match_name,
    SearchType.PHONE: _match_phone,
    SearchType.EMAIL: _match_email,
    SearchType.ADDRESS: _match_address,
    SearchType.TAG: _match_tag,
    SearchType.BOOKING_DATE: _match_booking_date,
    SearchType.BOOKING_PROPERTY: _match_booking_property,
    SearchType.MEMO: _match_memo,
}


def _normalized_keywords(
    search_type: object, keywords: Sequence[str] | None
) -> tuple[str, ...]:
    """Validate one criteria entry and lower-case its keywords.

    Args:
        search_type: Criteria key.
        keywords: Keywords listed for the key.

    Returns:
        Lower-cased keywords in input order.

    Raises:
        SearchError: If the key or any keyword breaks the input contract.
    """
    if not isinstance(search_type, SearchType):
        raise SearchError(
            SearchErrorCode.INVALID_ARGUMENT,
            f"Search type must be a SearchType, got {search_type!r}.",
        )
    if keywords is None or isinstance(keywords, str) or not keywords:
        raise SearchError(
            SearchErrorCode.INVALID_ARGUMENT,
            f"Keywords for search type '{search_type}' must be a non-empty list.",
        )
    normalized: list[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword:
            raise SearchError(
                SearchErrorCode.INVALID_ARGUMENT,
                f"Keyword for search type '{search_type}' cannot be null or empty.",
            )
        normalized.append(keyword.lower())
    return tuple(normalized)


def build_predicate(
    criteria: Mapping[SearchType, Sequence[str]] | None,
) -> PersonPredicate:
    """Combine search criteria into one person predicate.

    A person matches when any keyword of any search type matches its
    field; matching is case-insensitive substring containment, except
    booking dates, which match bookings whose inclusive range covers the
    date. The contract is checked eagerly so a bad entry fails here rather
    than reading as "no match".

    Args:
        criteria: Keywords per search type.

    Returns:
        Pure predicate over person records.

    Raises:
        SearchError: ``INVALID_STATE`` when criteria are empty;
            ``INVALID_ARGUMENT`` for a bad key or keyword.
    """
    if not criteria:
        raise SearchError(
            SearchErrorCode.INVALID_STATE,
            "At least one search criterion must be provided.",
        )
    compiled: list[tuple[Callable[[Person, str], bool], tuple[str, ...]]] = []
    for search_type, keywords in criteria.items():
        normalized = _normalized_keywords(search_type, keywords)
        compiled.append((_MATCHERS[search_type], normalized))
    _LOGGER.debug("Built search predicate over %s", [str(key) for key in criteria])

    def predicate(person: Person) -> bool:
        return any(
            matcher(person, keyword)
            for matcher, keywords in compiled
            for keyword in keywords
        )

    return predicate

"""Unit tests for the multi-field search predicate."""

from __future__ import annotations

from typing import Any

import pytest

from innsync.model import Address, BookingTag, Email, Memo, Phone, Tag
from innsync.search import SearchError, SearchErrorCode, SearchType, build_predicate
from tests.unit.helpers import VALID_BOOKING_BEACH, amy, person


@pytest.mark.unit
def test_any_keyword_of_any_type_matches() -> None:
    """Criteria should combine with OR across types and keywords."""
    # Arrange
    predicate = build_predicate(
        {SearchType.NAME: ["zoe", "bee"], SearchType.TAG: ["nomatch"]}
    )

    # Act / Assert
    assert predicate(amy())
    assert not predicate(person("Charlie Tan"))


@pytest.mark.unit
def test_matching_is_case_insensitive_substring() -> None:
    """Keywords should match substrings regardless of case."""
    guest = person(
        "Alex Yeoh",
        email=Email(value="alexyeoh@example.com"),
        address=Address(value="Blk 30 Geylang Street 29"),
        memo=Memo(value="Allergic to NUTS"),
        tags=(Tag(value="VIP-guest"),),
    )

    assert build_predicate({SearchType.NAME: ["YEO"]})(guest)
    assert build_predicate({SearchType.EMAIL: ["EXAMPLE.COM"]})(guest)
    assert build_predicate({SearchType.ADDRESS: ["geylang"]})(guest)
    assert build_predicate({SearchType.MEMO: ["nuts"]})(guest)
    assert build_predicate({SearchType.TAG: ["vip"]})(guest)


@pytest.mark.unit
def test_missing_optional_fields_never_match() -> None:
    """Absent phone, email or address should never match."""
    guest = person("Bernice Yu")

    for search_type in (SearchType.PHONE, SearchType.EMAIL, SearchType.ADDRESS):
        assert not build_predicate({search_type: ["1"]})(guest)


@pytest.mark.unit
def test_phone_matches_substring() -> None:
    """Phone keywords should match partial numbers."""
    guest = person("David Li", phone=Phone(value="91031282"))

    assert build_predicate({SearchType.PHONE: ["0312"]})(guest)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("date", "expected"),
    [
        ("2024-09-30", False),
        ("2024-10-01", True),
        ("2024-10-10", True),
        ("2024-10-20", True),
        ("2024-10-21", False),
    ],
)
def test_booking_date_matches_inclusive_range(date: str, expected: bool) -> None:
    """Booking dates should match both range endpoints."""
    guest = person("Irfan", booking_tags=(BookingTag(value=VALID_BOOKING_BEACH),))

    assert build_predicate({SearchType.BOOKING_DATE: [date]})(guest) is expected


@pytest.mark.unit
def test_malformed_booking_date_is_no_match() -> None:
    """Unparseable date keywords should simply not match."""
    predicate = build_predicate({SearchType.BOOKING_DATE: ["2024-10-xx"]})

    assert not predicate(amy())


@pytest.mark.unit
def test_booking_property_matches_property_name_only() -> None:
    """Property keywords should not match the booking dates."""
    guest = amy()

    assert build_predicate({SearchType.BOOKING_PROPERTY: ["beach"]})(guest)
    assert not build_predicate({SearchType.BOOKING_PROPERTY: ["2024"]})(guest)


@pytest.mark.unit
@pytest.mark.parametrize("criteria", [None, {}])
def test_empty_criteria_is_invalid_state(criteria: Any) -> None:
    """Building without criteria should fail as an invalid state."""
    with pytest.raises(SearchError) as exc_info:
        build_predicate(criteria)

    assert exc_info.value.code == SearchErrorCode.INVALID_STATE


@pytest.mark.unit
@pytest.mark.parametrize(
    "criteria",
    [
        {SearchType.NAME: []},
        {SearchType.NAME: None},
        {SearchType.NAME: "amy"},
        {SearchType.NAME: ["amy", ""]},
        {SearchType.NAME: ["amy", None]},
        {"name": ["amy"]},
    ],
)
def test_bad_entries_are_invalid_argument(criteria: Any) -> None:
    """Bad keys or keywords should fail eagerly as invalid arguments."""
    with pytest.raises(SearchError) as exc_info:
        build_predicate(criteria)

    assert exc_info.value.code == SearchErrorCode.INVALID_ARGUMENT


@pytest.mark.unit
def test_name_or_tag_criteria_match_either_person() -> None:
    """A name keyword and a tag keyword should each select their own match."""
    predicate = build_predicate(
        {SearchType.NAME: ["john"], SearchType.TAG: ["friend"]}
    )

    assert predicate(person("John Lee"))
    assert predicate(person("Amy", tags=(Tag(value="friend"),)))
    assert not predicate(person("Amy", tags=(Tag(value="vip"),)))

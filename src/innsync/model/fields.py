"""Field constraint table and validated person field values.

Every person attribute is checked by one small interpreter over the
``FIELD_CONSTRAINTS`` table: normalise the raw text, then test emptiness,
length and character pattern in that order. Value objects run the same
check in their validator, so an instance with an invalid backing string
cannot be constructed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator


class FieldKind(StrEnum):
    """Person attribute kinds with a validation rule."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    MEMO = "memo"
    TAG = "tag"
    BOOKING_TAG = "booking_tag"
    REQUEST = "request"


class Normalization(StrEnum):
    """Whitespace normalisation applied before validation."""

    TRIM = "trim"
    COLLAPSE = "collapse"


@dataclass(frozen=True)
class FieldConstraint:
    """One row of the field constraint table."""

    label: str
    message_empty: str
    normalization: Normalization = Normalization.TRIM
    drop_chars: str = ""
    allow_empty: bool = False
    max_length: int | None = None
    message_length: str = ""
    pattern: re.Pattern[str] | None = None
    message_pattern: str = ""
    extra_check: Callable[[str], str | None] | None = None


BOOKING_DATE_FORMAT = "%Y-%m-%d"
# 170-character property plus the date clause and some spacing
BOOKING_TAG_MAX_LENGTH = 250
BOOKING_TAG_PATTERN = re.compile(
    r"(?P<property>\S.*?)\s+from/(?P<start>\S+)\s+to/(?P<end>\S+)"
)
MESSAGE_BOOKING_TAG_FORMAT = (
    "Booking tags should be of the format PROPERTY from/YYYY-MM-DD to/YYYY-MM-DD, "
    "e.g. Beach House from/2024-10-01 to/2024-10-20"
)
MESSAGE_BOOKING_TAG_DATE = "Booking dates must be valid dates in the form YYYY-MM-DD."
MESSAGE_BOOKING_TAG_ORDER = "Booking end date must not be before its start date."
MESSAGE_BOOKING_TAG_PROPERTY_LENGTH = (
    "Booking tag property must be at most 170 characters long."
)

_ALNUM = r"[^\W_]+"
_EMAIL_LOCAL_PART = _ALNUM + r"([+_.-]" + _ALNUM + r")*"
_EMAIL_DOMAIN_LABEL = _ALNUM + r"(?:-" + _ALNUM + r")*"
# the last label needs at least 2 characters
_EMAIL_PATTERN = re.compile(
    _EMAIL_LOCAL_PART
    + "@"
    + r"(?:"
    + _EMAIL_DOMAIN_LABEL
    + r"\.)*"
    + r"(?=[^.]{2,}\Z)"
    + _EMAIL_DOMAIN_LABEL
)


def split_booking_tag(value: str) -> tuple[str, datetime, datetime]:
    """Split booking tag text into property, start and end.

    Args:
        value: Trimmed booking tag text.

    Returns:
        Property name and midnight start/end timestamps.

    Raises:
        ValueError: If the text does not follow the booking tag format.
    """
    match = BOOKING_TAG_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(MESSAGE_BOOKING_TAG_FORMAT)
    try:
        start = datetime.strptime(match["start"], BOOKING_DATE_FORMAT)
        end = datetime.strptime(match["end"], BOOKING_DATE_FORMAT)
    except ValueError as exc:
        raise ValueError(MESSAGE_BOOKING_TAG_DATE) from exc
    return match["property"].strip(), start, end


def _check_booking_tag(value: str) -> str | None:
    try:
        property_name, start, end = split_booking_tag(value)
    except ValueError as exc:
        return str(exc)
    if len(property_name) > 170:
        return MESSAGE_BOOKING_TAG_PROPERTY_LENGTH
    if end < start:
        return MESSAGE_BOOKING_TAG_ORDER
    return None


FIELD_CONSTRAINTS: dict[FieldKind, FieldConstraint] = {
    FieldKind.NAME: FieldConstraint(
        label="name",
        message_empty="Name cannot be empty.",
        normalization=Normalization.COLLAPSE,
        drop_chars="$",
        max_length=170,
        message_length="Name must be at most 170 characters long.",
        pattern=re.compile(r"(?:[^\W_]|[ '\-.,/@()])+"),
        message_pattern=(
            "Names should only contain letters, digits, spaces and "
            "the characters ' - . , / @ ( )"
        ),
    ),
    FieldKind.PHONE: FieldConstraint(
        label="phone",
        message_empty="Phone number cannot be empty.",
        pattern=re.compile(r"\+?[0-9]{6,17}"),
        message_pattern=(
            "Phone numbers should only contain digits, optionally preceded by '+', "
            "and be 6 to 17 digits long."
        ),
    ),
    FieldKind.EMAIL: FieldConstraint(
        label="email",
        message_empty="Email cannot be empty.",
        max_length=254,
        message_length="Email must be at most 254 characters long.",
        pattern=_EMAIL_PATTERN,
        message_pattern=(
            "Emails should be of the format local-part@domain. The local-part "
            "contains alphanumerics joined by single + _ . - characters; the domain "
            "is dot-separated labels of alphanumerics and hyphens, ending in a "
            "label of at least 2 characters."
        ),
    ),
    FieldKind.ADDRESS: FieldConstraint(
        label="address",
        message_empty="Address cannot be empty.",
        normalization=Normalization.COLLAPSE,
        max_length=500,
        message_length="Address must be at most 500 characters long.",
    ),
    FieldKind.MEMO: FieldConstraint(
        label="memo",
        message_empty="",
        allow_empty=True,
        max_length=500,
        message_length="Memo must be at most 500 characters long.",
    ),
    FieldKind.TAG: FieldConstraint(
        label="tag",
        message_empty="Tag cannot be empty.",
        max_length=170,
        message_length="Tag must be at most 170 characters long.",
    ),
    FieldKind.BOOKING_TAG: FieldConstraint(
        label="booking tag",
        message_empty="Booking tag cannot be empty.",
        max_length=BOOKING_TAG_MAX_LENGTH,
        message_length=(
            f"Booking tag must be at most {BOOKING_TAG_MAX_LENGTH} characters long."
        ),
        extra_check=_check_booking_tag,
    ),
    FieldKind.REQUEST: FieldConstraint(
        label="request",
        message_empty="Request cannot be empty.",
        max_length=170,
        message_length="Request must be at most 170 characters long.",
    ),
}


def normalize_field(kind: FieldKind, raw: str) -> str:
    """Apply the kind's normalisation rule to raw input text.

    Args:
        kind: Field kind whose rule applies.
        raw: Untrimmed user text.

    Returns:
        Normalised text, not yet validated.
    """
    constraint = FIELD_CONSTRAINTS[kind]
    text = raw
    for char in constraint.drop_chars:
        text = text.replace(char, "")
    if constraint.normalization == Normalization.COLLAPSE:
        return " ".join(text.split())
    return text.strip()


def check_field(kind: FieldKind, value: str) -> str | None:
    """Return the first violated rule's message, or ``None`` when valid.

    Args:
        kind: Field kind whose constraint row applies.
        value: Normalised text to check.

    Returns:
        Kind-specific error message, or ``None``.
    """
    constraint = FIELD_CONSTRAINTS[kind]
    if not value:
        return None if constraint.allow_empty else constraint.message_empty
    if constraint.max_length is not None and len(value) > constraint.max_length:
        return constraint.message_length
    if constraint.pattern is not None and not constraint.pattern.fullmatch(value):
        return constraint.message_pattern
    if constraint.extra_check is not None:
        return constraint.extra_check(value)
    return None


class FieldValue(BaseModel):
    """Immutable validated person attribute."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ClassVar[FieldKind]

    value: str

    @field_validator("value")
    @classmethod
    def _validate_value(cls, value: str) -> str:
        """Reject text violating this kind's constraint row.

        Args:
            value: Candidate backing string.

        Returns:
            The unchanged value.

        Raises:
            ValueError: If the value fails the constraint check.
        """
        message = check_field(cls.kind, value)
        if message is not None:
            raise ValueError(message)
        return value

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    """Person full name."""

    kind: ClassVar[FieldKind] = FieldKind.NAME


class Phone(FieldValue):
    """Phone number."""

    kind: ClassVar[FieldKind] = FieldKind.PHONE


class Email(FieldValue):
    """Email address."""

    kind: ClassVar[FieldKind] = FieldKind.EMAIL


class Address(FieldValue):
    """Postal address."""

    kind: ClassVar[FieldKind] = FieldKind.ADDRESS


class Memo(FieldValue):
    """Free-text note; may be empty."""

    kind: ClassVar[FieldKind] = FieldKind.MEMO

    value: str = ""


class Request(FieldValue):
    """Guest request, e.g. an extra pillow."""

    kind: ClassVar[FieldKind] = FieldKind.REQUEST

    def is_same_request(self, other: Request) -> bool:
        """Return whether two requests name the same thing, ignoring case."""
        return self.value.lower() == other.value.lower()

"""Test-only helpers for unit tests: typical persons and command text builders."""

from __future__ import annotations

from innsync.commands.types import EditPersonDescriptor
from innsync.model import (
    Address,
    BookingTag,
    Email,
    Memo,
    Name,
    Person,
    Phone,
    Request,
    Tag,
)

VALID_NAME_AMY = "Amy Bee"
VALID_NAME_BOB = "Bob Choo"
VALID_PHONE_AMY = "6511111111"
VALID_PHONE_BOB = "6522222222"
VALID_EMAIL_AMY = "amy@example.com"
VALID_EMAIL_BOB = "bob@example.com"
VALID_ADDRESS_AMY = "Block 312, Amy Street 1"
VALID_ADDRESS_BOB = "Block 123, Bobby Street 3"
VALID_TAG_FRIEND = "friend"
VALID_TAG_HUSBAND = "husband"
VALID_BOOKING_BEACH = "Beach House from/2024-10-01 to/2024-10-20"
VALID_BOOKING_CABIN = "Cabin from/2025-01-05 to/2025-01-07"

NAME_DESC_AMY = " n/" + VALID_NAME_AMY
NAME_DESC_BOB = " n/" + VALID_NAME_BOB
PHONE_DESC_AMY = " p/" + VALID_PHONE_AMY
PHONE_DESC_BOB = " p/" + VALID_PHONE_BOB
EMAIL_DESC_AMY = " e/" + VALID_EMAIL_AMY
EMAIL_DESC_BOB = " e/" + VALID_EMAIL_BOB
ADDRESS_DESC_AMY = " a/" + VALID_ADDRESS_AMY
ADDRESS_DESC_BOB = " a/" + VALID_ADDRESS_BOB
TAG_DESC_FRIEND = " t/" + VALID_TAG_FRIEND
TAG_DESC_HUSBAND = " t/" + VALID_TAG_HUSBAND
BOOKING_DESC_BEACH = " bt/" + VALID_BOOKING_BEACH

INVALID_NAME_DESC = " n/James&"
INVALID_PHONE_DESC = " p/911a"
INVALID_EMAIL_DESC = " e/bob!yahoo"
INVALID_ADDRESS_DESC = " a/"
INVALID_TAG_DESC = " t/" + "x" * 171
INVALID_BOOKING_DESC = " bt/Beach House from/2024-10-20 to/2024-10-01"


def amy() -> Person:
    """Return a fully populated typical person."""
    return Person(
        name=Name(value=VALID_NAME_AMY),
        phone=Phone(value=VALID_PHONE_AMY),
        email=Email(value=VALID_EMAIL_AMY),
        address=Address(value=VALID_ADDRESS_AMY),
        memo=Memo(value="Prefers a sea view"),
        requests=(Request(value="Extra pillow"),),
        booking_tags=(BookingTag(value=VALID_BOOKING_BEACH),),
        tags=(Tag(value=VALID_TAG_FRIEND),),
    )


def person(name: str, **fields: object) -> Person:
    """Return a person with ``name`` and the given validated field values."""
    return Person(name=Name(value=name), **fields)


def add_command_text(subject: Person) -> str:
    """Return an ``add`` command line reproducing ``subject``'s fields."""
    assert subject.phone is not None
    assert subject.email is not None
    assert subject.address is not None
    parts = [
        "add",
        f"n/{subject.name}",
        f"p/{subject.phone}",
        f"e/{subject.email}",
        f"a/{subject.address}",
        f"m/{subject.memo}",
    ]
    parts.extend(f"r/{request}" for request in subject.requests)
    parts.extend(f"bt/{booking}" for booking in subject.booking_tags)
    parts.extend(f"t/{tag}" for tag in subject.tags)
    return " ".join(parts)


def edit_descriptor_text(descriptor: EditPersonDescriptor) -> str:
    """Return the prefixed argument text for an edit descriptor."""
    parts: list[str] = []
    for token, value in (
        ("n/", descriptor.name),
        ("p/", descriptor.phone),
        ("e/", descriptor.email),
        ("a/", descriptor.address),
        ("m/", descriptor.memo),
    ):
        if value is not None:
            parts.append(f"{token}{value}")
    for token, values in (
        ("r/", descriptor.requests),
        ("bt/", descriptor.booking_tags),
        ("t/", descriptor.tags),
    ):
        if values is None:
            continue
        if not values:
            parts.append(token)
        parts.extend(f"{token}{value}" for value in values)
    return " ".join(parts)

"""Person record read by search predicates and built by add commands."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from innsync.model.fields import Address, Email, Memo, Name, Phone, Request
from innsync.model.tags import BookingTag, Tag


class Person(BaseModel):
    """Guest contact with bookings, requests and tags."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Name
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    memo: Memo = Memo()
    requests: tuple[Request, ...] = ()
    booking_tags: tuple[BookingTag, ...] = ()
    tags: tuple[Tag, ...] = ()
    starred: bool = False

"""Prefix markers recognised in command arguments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Prefix(BaseModel):
    """Marker token delimiting one argument segment, e.g. ``n/``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    token: str

    def __str__(self) -> str:
        return self.token


PREFIX_NAME = Prefix(token="n/")
PREFIX_PHONE = Prefix(token="p/")
PREFIX_EMAIL = Prefix(token="e/")
PREFIX_ADDRESS = Prefix(token="a/")
PREFIX_TAG = Prefix(token="t/")
PREFIX_BOOKING_TAG = Prefix(token="bt/")
PREFIX_BOOKING_DATE = Prefix(token="bd/")
PREFIX_BOOKING_PROPERTY = Prefix(token="bp/")
PREFIX_MEMO = Prefix(token="m/")
PREFIX_REQUEST = Prefix(token="r/")

ALL_PREFIXES: tuple[Prefix, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_BOOKING_TAG,
    PREFIX_BOOKING_DATE,
    PREFIX_BOOKING_PROPERTY,
    PREFIX_MEMO,
    PREFIX_REQUEST,
)

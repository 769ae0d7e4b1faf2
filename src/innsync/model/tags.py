"""Tag and booking tag value objects."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import model_validator

from innsync.model.fields import (
    BOOKING_TAG_MAX_LENGTH,
    FieldKind,
    FieldValue,
    split_booking_tag,
)


class Tag(FieldValue):
    """Free-form label attached to a person."""

    kind: ClassVar[FieldKind] = FieldKind.TAG


class BookingTag(FieldValue):
    """Property booking over an inclusive date range.

    The text form is ``PROPERTY from/YYYY-MM-DD to/YYYY-MM-DD``; the
    property name and the midnight start/end timestamps are derived from it
    and cannot be supplied independently.
    """

    kind: ClassVar[FieldKind] = FieldKind.BOOKING_TAG

    property_name: str = ""
    start: datetime = datetime.min
    end: datetime = datetime.min

    @model_validator(mode="before")
    @classmethod
    def _derive_parts(cls, data: Any) -> Any:
        """Fill property and dates from the booking text.

        Args:
            data: Raw constructor payload.

        Returns:
            Payload with derived fields set from ``value``.
        """
        if not isinstance(data, dict) or not isinstance(data.get("value"), str):
            return data
        if len(data["value"]) > BOOKING_TAG_MAX_LENGTH:
            return data
        try:
            property_name, start, end = split_booking_tag(data["value"])
        except ValueError:
            # value validation reports the format problem
            return data
        return {**data, "property_name": property_name, "start": start, "end": end}

    def covers(self, moment: datetime) -> bool:
        """Return whether ``moment`` lies within the booking, both ends inclusive."""
        return self.start <= moment <= self.end

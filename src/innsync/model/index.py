"""User-facing list positions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Index(BaseModel):
    """One-based position into a displayed list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    one_based: int = Field(ge=1)

    @property
    def zero_based(self) -> int:
        """Offset into the underlying zero-based sequence."""
        return self.one_based - 1

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        """Build an index from a user-facing position."""
        return cls(one_based=value)

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        """Build an index from a zero-based offset."""
        return cls(one_based=value + 1)

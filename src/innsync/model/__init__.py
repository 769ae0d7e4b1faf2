"""Validated person field values and the person record."""

from innsync.model.fields import (
    FIELD_CONSTRAINTS,
    Address,
    Email,
    FieldConstraint,
    FieldKind,
    FieldValue,
    Memo,
    Name,
    Normalization,
    Phone,
    Request,
    check_field,
    normalize_field,
)
from innsync.model.index import Index
from innsync.model.person import Person
from innsync.model.tags import BookingTag, Tag
from innsync.model.unique_list import DuplicateItemError, ItemNotFoundError, UniqueList

__all__ = [
    "FIELD_CONSTRAINTS",
    "Address",
    "BookingTag",
    "DuplicateItemError",
    "Email",
    "FieldConstraint",
    "FieldKind",
    "FieldValue",
    "Index",
    "ItemNotFoundError",
    "Memo",
    "Name",
    "Normalization",
    "Person",
    "Phone",
    "Request",
    "Tag",
    "UniqueList",
    "check_field",
    "normalize_field",
]

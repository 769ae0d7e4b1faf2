"""Command objects produced by successful parses.

``Command`` is a closed union discriminated on ``kind``; execution layers
match on it exhaustively.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from innsync.commands import usage
from innsync.model.fields import Address, Email, Memo, Name, Phone, Request
from innsync.model.index import Index
from innsync.model.person import Person
from innsync.model.tags import BookingTag, Tag
from innsync.search.predicate import PersonPredicate, SearchType, build_predicate


class BaseCommand(BaseModel):
    """Common configuration for immutable command objects."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]


class AddCommand(BaseCommand):
    """Add one new person."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = usage.ADD_USAGE

    kind: Literal["add"] = "add"
    person: Person


class EditPersonDescriptor(BaseModel):
    """Field deltas for an edit.

    ``None`` leaves a field unchanged; for collections an empty tuple
    clears the field.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    memo: Memo | None = None
    requests: tuple[Request, ...] | None = None
    booking_tags: tuple[BookingTag, ...] | None = None
    tags: tuple[Tag, ...] | None = None

    def is_any_field_edited(self) -> bool:
        """Return whether at least one field carries a delta."""
        return any(
            getattr(self, field_name) is not None
            for field_name in type(self).model_fields
        )


class EditCommand(BaseCommand):
    """Edit the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = usage.EDIT_USAGE

    kind: Literal["edit"] = "edit"
    index: Index
    descriptor: EditPersonDescriptor


class DeleteCommand(BaseCommand):
    """Delete the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = usage.DELETE_USAGE

    kind: Literal["delete"] = "delete"
    index: Index


class FindCommand(BaseCommand):
    """Filter persons matching any keyword of any search type."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = usage.FIND_USAGE

    kind: Literal["find"] = "find"
    criteria: dict[SearchType, tuple[str, ...]]

    def predicate(self) -> PersonPredicate:
        """Build the combined person predicate for these criteria.

        Returns:
            Predicate matching persons that satisfy any criterion.

        Raises:
            SearchError: If the criteria are empty or malformed.
        """
        return build_predicate(self.criteria)


class TagCommand(BaseCommand):
    """Attach tags and booking tags to the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "tag"
    MESSAGE_USAGE: ClassVar[str] = usage.TAG_USAGE

    kind: Literal["tag"] = "tag"
    index: Index
    tags: tuple[Tag, ...] = ()
    booking_tags: tuple[BookingTag, ...] = ()


class UntagCommand(BaseCommand):
    """Remove exactly one tag or booking tag from the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "untag"
    MESSAGE_USAGE: ClassVar[str] = usage.UNTAG_USAGE

    kind: Literal["untag"] = "untag"
    index: Index
    tag: Tag | None = None
    booking_tag: BookingTag | None = None

    @model_validator(mode="after")
    def _validate_single_target(self) -> UntagCommand:
        """Require exactly one removal target.

        Returns:
            Validated command.

        Raises:
            ValueError: If neither or both targets are set.
        """
        if (self.tag is None) == (self.booking_tag is None):
            raise ValueError("untag removes exactly one tag or booking tag.")
        return self


class MemoCommand(BaseCommand):
    """Replace the memo of the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "memo"
    MESSAGE_USAGE: ClassVar[str] = usage.MEMO_USAGE

    kind: Literal["memo"] = "memo"
    index: Index
    memo: Memo


class RequestCommand(BaseCommand):
    """Append requests to the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "req"
    MESSAGE_USAGE: ClassVar[str] = usage.REQUEST_USAGE

    kind: Literal["req"] = "req"
    index: Index
    requests: tuple[Request, ...] = Field(min_length=1)


class DeleteRequestCommand(BaseCommand):
    """Delete one request, by position, from the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "deletereq"
    MESSAGE_USAGE: ClassVar[str] = usage.DELETE_REQUEST_USAGE

    kind: Literal["deletereq"] = "deletereq"
    index: Index
    request_index: Index


class StarCommand(BaseCommand):
    """Star the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "star"
    MESSAGE_USAGE: ClassVar[str] = usage.STAR_USAGE

    kind: Literal["star"] = "star"
    index: Index


class UnstarCommand(BaseCommand):
    """Unstar the person at ``index``."""

    COMMAND_WORD: ClassVar[str] = "unstar"
    MESSAGE_USAGE: ClassVar[str] = usage.UNSTAR_USAGE

    kind: Literal["unstar"] = "unstar"
    index: Index


class ListCommand(BaseCommand):
    """Show every person."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = usage.LIST_USAGE

    kind: Literal["list"] = "list"


class ClearCommand(BaseCommand):
    """Remove every person."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = usage.CLEAR_USAGE

    kind: Literal["clear"] = "clear"


class HelpCommand(BaseCommand):
    """Show usage help."""

    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = usage.HELP_USAGE

    kind: Literal["help"] = "help"


class ExitCommand(BaseCommand):
    """Leave the application."""

    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = usage.EXIT_USAGE

    kind: Literal["exit"] = "exit"


Command = Annotated[
    AddCommand
    | EditCommand
    | DeleteCommand
    | FindCommand
    | TagCommand
    | UntagCommand
    | MemoCommand
    | RequestCommand
    | DeleteRequestCommand
    | StarCommand
    | UnstarCommand
    | ListCommand
    | ClearCommand
    | HelpCommand
    | ExitCommand,
    Field(discriminator="kind"),
]

"""Shared helpers for command parsers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from innsync.parsing.syntax import Prefix
from innsync.parsing.tokenizer import ArgumentMultimap

ItemT = TypeVar("ItemT")


def required_value(arguments: ArgumentMultimap, prefix: Prefix) -> str:
    """Return the value of a prefix the grammar already required.

    Args:
        arguments: Tokenized arguments that passed the grammar.
        prefix: Required prefix.

    Returns:
        Last value supplied for ``prefix``.
    """
    value = arguments.value(prefix)
    assert value is not None, f"grammar should require {prefix}"
    return value


def collection_delta(
    values: Sequence[str],
    parse_all: Callable[[Sequence[str]], tuple[ItemT, ...]],
) -> tuple[ItemT, ...] | None:
    """Interpret a repeatable prefix for edit-style commands.

    Args:
        values: Every raw value supplied for the prefix.
        parse_all: Batch validator for the field.

    Returns:
        ``None`` when the prefix is absent (field unchanged), ``()`` when
        given once with no value (field cleared), else the parsed items.
    """
    if not values:
        return None
    if len(values) == 1 and not values[0]:
        return ()
    return parse_all(values)

"""Prefix tokenizer splitting argument text into a preamble and tagged values."""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from innsync.parsing.errors import (
    ParseError,
    ParseErrorCode,
    duplicate_prefixes_message,
)
from innsync.parsing.syntax import Prefix


class ArgumentMultimap(BaseModel):
    """Raw argument values keyed by prefix, in left-to-right order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    preamble: str = ""
    values: dict[Prefix, tuple[str, ...]] = {}

    def value(self, prefix: Prefix) -> str | None:
        """Return the last value supplied for ``prefix``.

        Args:
            prefix: Prefix to look up.

        Returns:
            Last occurrence's value, or ``None`` when the prefix is absent.
        """
        found = self.values.get(prefix, ())
        return found[-1] if found else None

    def all_values(self, prefix: Prefix) -> list[str]:
        """Return every value supplied for ``prefix`` in input order."""
        return list(self.values.get(prefix, ()))

    def is_present(self, prefix: Prefix) -> bool:
        """Return whether ``prefix`` occurred at least once, even with no value."""
        return bool(self.values.get(prefix))

    def verify_no_duplicate_prefixes(self, *prefixes: Prefix) -> None:
        """Reject repeated occurrences of single-valued prefixes.

        Args:
            prefixes: Prefixes that may appear at most once.

        Raises:
            ParseError: If any listed prefix occurs more than once.
        """
        duplicated = [
            prefix for prefix in prefixes if len(self.values.get(prefix, ())) > 1
        ]
        if duplicated:
            tokens = [prefix.token for prefix in duplicated]
            raise ParseError(
                ParseErrorCode.DUPLICATE_PREFIX,
                duplicate_prefixes_message(tokens),
                data={"prefixes": tokens},
            )


@lru_cache(maxsize=64)
def _occurrence_pattern(token: str) -> re.Pattern[str]:
    """Match ``token`` only at the start of input or right after whitespace."""
    return re.compile(r"(?:^|(?<=\s))" + re.escape(token))


def _find_occurrences(
    raw_args: str, prefixes: tuple[Prefix, ...]
) -> list[tuple[int, Prefix]]:
    occurrences = [
        (match.start(), prefix)
        for prefix in prefixes
        for match in _occurrence_pattern(prefix.token).finditer(raw_args)
    ]
    occurrences.sort(key=lambda occurrence: occurrence[0])
    return occurrences


def tokenize(raw_args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split ``raw_args`` into a preamble and per-prefix raw values.

    A prefix is only recognised at position 0 or when preceded by
    whitespace, so tokens embedded inside a value (``john.n/doe@x.com``)
    stay part of that value. Values are trimmed but not validated.

    Args:
        raw_args: Argument text following the command word.
        prefixes: Prefixes to recognise.

    Returns:
        Multimap holding every requested prefix, absent ones mapped to ``()``.
    """
    wanted = tuple(prefix for prefix in dict.fromkeys(prefixes) if prefix.token)
    occurrences = _find_occurrences(raw_args, wanted)

    collected: dict[Prefix, list[str]] = {prefix: [] for prefix in wanted}
    for position, (start, prefix) in enumerate(occurrences):
        if position + 1 < len(occurrences):
            end = occurrences[position + 1][0]
        else:
            end = len(raw_args)
        collected[prefix].append(raw_args[start + len(prefix.token) : end].strip())

    preamble_end = occurrences[0][0] if occurrences else len(raw_args)
    return ArgumentMultimap(
        preamble=raw_args[:preamble_end].strip(),
        values={prefix: tuple(found) for prefix, found in collected.items()},
    )

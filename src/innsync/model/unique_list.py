"""Insertion-ordered collection that refuses duplicates."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class DuplicateItemError(ValueError):
    """Raised when adding an item equal to one already held."""


class ItemNotFoundError(KeyError):
    """Raised when removing an item that is not held."""


class UniqueList(Generic[T]):
    """Ordered list of distinct items with explicit failure variants."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        """Create list, adding ``items`` in order.

        Args:
            items: Initial items; must be pairwise distinct.

        Raises:
            DuplicateItemError: If ``items`` repeats an element.
        """
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def contains(self, item: T) -> bool:
        """Return whether an equal item is held."""
        return item in self._items

    def find(self, matches: Callable[[T], bool]) -> T | None:
        """Return the first item satisfying ``matches``, or ``None``."""
        return next((item for item in self._items if matches(item)), None)

    def add(self, item: T) -> None:
        """Append ``item``.

        Raises:
            DuplicateItemError: If an equal item is already held.
        """
        if self.contains(item):
            raise DuplicateItemError(f"Item already present: {item}")
        self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove ``item``.

        Raises:
            ItemNotFoundError: If no equal item is held.
        """
        try:
            self._items.remove(item)
        except ValueError as exc:
            raise ItemNotFoundError(f"Item not present: {item}") from exc

    def as_tuple(self) -> tuple[T, ...]:
        """Return an immutable snapshot in insertion order."""
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"

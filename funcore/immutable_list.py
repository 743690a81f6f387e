"""
ImmutableList - ordered container for traversal results
========================================================
"""

from __future__ import annotations

from collections.abc import Iterable


class ImmutableList[T](tuple[T, ...]):
    """
    Immutable ordered sequence.

    Обёртка над tuple: every "modifying" operation returns a new list,
    the receiver is never changed.

    Used as input and output container of sequence_list / traverse_list.
    Compares equal to any tuple with the same items.
    """

    @staticmethod
    def of[V](*items: V) -> ImmutableList[V]:
        """Create list with items."""
        return ImmutableList[V](items)

    @staticmethod
    def empty[V]() -> ImmutableList[V]:
        return ImmutableList[V]()

    def append(self, item: T, /) -> ImmutableList[T]:
        """
        New list with item at the end.

        Copies the receiver, so O(n). Traversals collect into a list and
        build the ImmutableList once instead of appending item by item.

        Example:
            ImmutableList.of(1, 2).append(3)  # ImmutableList([1, 2, 3])
        """
        return ImmutableList((*self, item))

    def prepend(self, item: T, /) -> ImmutableList[T]:
        """New list with item at the front."""
        return ImmutableList((item, *self))

    def concat(self, other: Iterable[T], /) -> ImmutableList[T]:
        """New list with other's items after this list's items."""
        return ImmutableList((*self, *other))

    def __repr__(self) -> str:
        return f"ImmutableList({list(self)!r})"


__all__ = ("ImmutableList",)

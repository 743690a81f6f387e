"""
Eq / Ord
========

Equality and ordering capabilities consumed by the container modules
(option.get_eq, either.get_ord, ...).

Any object with a matching ``equals`` / ``compare`` method satisfies the
protocols; the constructors below cover the common cases.
"""

from __future__ import annotations

import typing
from collections.abc import Callable


class Eq[A](typing.Protocol):
    """Equality capability."""

    def equals(self, x: A, y: A, /) -> bool: ...


class Ord[A](Eq[A], typing.Protocol):
    """
    Total ordering capability.

    compare() follows the three-way convention: negative when x < y,
    zero when equal, positive when x > y.
    """

    def compare(self, x: A, y: A, /) -> int: ...


class _FromEquals[A]:
    __slots__ = ("_equals",)

    def __init__(self, equals: Callable[[A, A], bool], /) -> None:
        self._equals = equals

    def equals(self, x: A, y: A, /) -> bool:
        return self._equals(x, y)


class _FromCompare[A]:
    __slots__ = ("_compare",)

    def __init__(self, compare: Callable[[A, A], int], /) -> None:
        self._compare = compare

    def compare(self, x: A, y: A, /) -> int:
        return self._compare(x, y)

    def equals(self, x: A, y: A, /) -> bool:
        # equals agrees with compare
        return self._compare(x, y) == 0


def from_equals[A](equals: Callable[[A, A], bool]) -> Eq[A]:
    """Build an Eq from a binary equality function."""
    return _FromEquals(equals)


def from_compare[A](compare: Callable[[A, A], int]) -> Ord[A]:
    """
    Build an Ord from a three-way compare function.

    Example:
        by_len = from_compare(lambda a, b: len(a) - len(b))
        by_len.compare("ab", "abc")  # -1
    """
    return _FromCompare(compare)


def default_eq[A]() -> Eq[A]:
    """Eq backed by the ``==`` operator."""
    return _FromEquals(lambda x, y: x == y)


def default_ord[A]() -> Ord[A]:
    """Ord backed by the ``<`` / ``>`` operators."""

    def compare(x: typing.Any, y: typing.Any) -> int:
        if x < y:
            return -1
        if x > y:
            return 1
        return 0

    return _FromCompare(compare)


def contramap[A, B](ord: Ord[B], f: Callable[[A], B]) -> Ord[A]:
    """Order A values by the B key that f extracts."""
    return _FromCompare(lambda x, y: ord.compare(f(x), f(y)))


def reverse[A](ord: Ord[A]) -> Ord[A]:
    """Flip an ordering."""
    return _FromCompare(lambda x, y: ord.compare(y, x))


__all__ = (
    "Eq",
    "Ord",
    "contramap",
    "default_eq",
    "default_ord",
    "from_compare",
    "from_equals",
    "reverse",
)

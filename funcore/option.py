"""
Option
======

Presence / absence of a value: every Option is either ``Some(value)`` or
``Nothing()``. Alternative to ``T | None`` that composes with map/flat_map
and never confuses "absent" with "present but None".

Recommended import:
    from funcore import option as O

    O.get_or_else(O.map(O.from_nullable(cfg.get("port")), int), lambda: 8080)
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import assert_never

from ._errors import UnwrapError
from ._types import Effect, Lazy, Predicate
from .algebra import Eq, Ord, from_compare, from_equals
from .immutable_list import ImmutableList


@dataclass(frozen=True, slots=True)
class Some[A]:
    """An existing value."""

    value: A

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """The absence of a value. All instances are equal."""

    def __repr__(self) -> str:
        return "Nothing"


type Option[A] = Some[A] | Nothing


# ============================================================================
# Lift
# ============================================================================


def some[A](value: A) -> Option[A]:
    return Some(value)


def of[A](value: A) -> Option[A]:
    """Lift a value into Option. Alias for some()."""
    return Some(value)


def none() -> Option[typing.Never]:
    return Nothing()


def from_predicate[A](predicate: Predicate[A], value: A) -> Option[A]:
    """Some(value) when predicate holds, Nothing otherwise."""
    return Some(value) if predicate(value) else Nothing()


def from_nullable[A](value: A | None) -> Option[A]:
    """
    Convert ``T | None`` to Option.

    Only ``None`` becomes Nothing; falsy values (0, "", []) stay Some.
    """
    return Nothing() if value is None else Some(value)


# ============================================================================
# Refinements
# ============================================================================


def is_some[A](opt: Option[A]) -> typing.TypeGuard[Some[A]]:
    return isinstance(opt, Some)


def is_none[A](opt: Option[A]) -> typing.TypeGuard[Nothing]:
    return isinstance(opt, Nothing)


# ============================================================================
# Case analysis
# ============================================================================


def match_w[A, B, C](
    opt: Option[A],
    *,
    on_none: Callable[[], B],
    on_some: Callable[[A], C],
) -> B | C:
    """
    Exhaustive case analysis with independent branch result types.

    on_none is called with no argument, on_some with the contained value.
    """
    match opt:
        case Some(value):
            return on_some(value)
        case Nothing():
            return on_none()
        case _ as unreachable:
            assert_never(unreachable)


def match[A, B](
    opt: Option[A],
    *,
    on_none: Callable[[], B],
    on_some: Callable[[A], B],
) -> B:
    """Exhaustive case analysis, both branches return B."""
    return match_w(opt, on_none=on_none, on_some=on_some)


fold = match


# ============================================================================
# Functor / Monad
# ============================================================================


def map[A, B](opt: Option[A], f: Callable[[A], B], /) -> Option[B]:
    """Transform the contained value. f is never called on Nothing."""
    match opt:
        case Some(value):
            return Some(f(value))
        case Nothing():
            return opt
        case _ as unreachable:
            assert_never(unreachable)


def flat_map[A, B](opt: Option[A], f: Callable[[A], Option[B]], /) -> Option[B]:
    """Chain a computation that may itself be absent."""
    match opt:
        case Some(value):
            return f(value)
        case Nothing():
            return opt
        case _ as unreachable:
            assert_never(unreachable)


chain = flat_map


def ap[A, B](f_opt: Option[Callable[[A], B]], opt: Option[A], /) -> Option[B]:
    """Apply a wrapped function to a wrapped value. Nothing if either is Nothing."""
    return flat_map(f_opt, lambda f: map(opt, f))


def tap[A](opt: Option[A], *, effect: Effect[A]) -> Option[A]:
    """Run effect on the Some value, return opt unchanged."""
    match opt:
        case Some(value):
            effect(value)
        case Nothing():
            pass
        case _ as unreachable:
            assert_never(unreachable)
    return opt


chain_first = tap


# ============================================================================
# Extract
# ============================================================================


def get_or_else[A, B](opt: Option[A], default: Lazy[B], /) -> A | B:
    """
    Contained value, or default() for Nothing.

    default is only invoked for Nothing.
    """
    match opt:
        case Some(value):
            return value
        case Nothing():
            return default()
        case _ as unreachable:
            assert_never(unreachable)


def to_nullable[A](opt: Option[A]) -> A | None:
    """Back to ``T | None``."""
    return get_or_else(opt, lambda: None)


def unwrap[A](opt: Option[A]) -> A:
    """Contained value, raises UnwrapError on Nothing. Prefer get_or_else."""
    match opt:
        case Some(value):
            return value
        case Nothing():
            raise UnwrapError(None, "unwrap() called on Nothing")
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Eq / Ord
# ============================================================================


def get_eq[A](eq: Eq[A]) -> Eq[Option[A]]:
    """
    Eq for Option built from Eq for the value.

    Nothing equals only Nothing; two Some compare their values with eq.
    """

    def equals(x: Option[A], y: Option[A]) -> bool:
        match x, y:
            case Some(a), Some(b):
                return eq.equals(a, b)
            case Nothing(), Nothing():
                return True
            case _:
                return False

    return from_equals(equals)


def get_ord[A](ord: Ord[A]) -> Ord[Option[A]]:
    """Ord for Option. Nothing sorts before every Some."""

    def compare(x: Option[A], y: Option[A]) -> int:
        match x, y:
            case Some(a), Some(b):
                return ord.compare(a, b)
            case Nothing(), Nothing():
                return 0
            case Nothing(), Some(_):
                return -1
            case _:
                return 1

    return from_compare(compare)


# ============================================================================
# Sequencing
# ============================================================================


def sequence_list[A](items: Iterable[Option[A]]) -> Option[ImmutableList[A]]:
    """
    [Option[A]] -> Option[[A]].

    Nothing as soon as any element is Nothing; later elements are not read.
    """
    from .collection.sequence import sequence_option
    return sequence_option(items)


def traverse_list[A, B](
    items: Iterable[A],
    f: Callable[[A], Option[B]],
) -> Option[ImmutableList[B]]:
    """Map each item with f and sequence, stopping at the first Nothing."""
    from .collection.traverse import traverse_option
    return traverse_option(items, f)


__all__ = (
    "Nothing",
    "Option",
    "Some",
    "ap",
    "chain",
    "chain_first",
    "flat_map",
    "fold",
    "from_nullable",
    "from_predicate",
    "get_eq",
    "get_or_else",
    "get_ord",
    "is_none",
    "is_some",
    "map",
    "match",
    "match_w",
    "none",
    "of",
    "sequence_list",
    "some",
    "tap",
    "to_nullable",
    "traverse_list",
    "unwrap",
)

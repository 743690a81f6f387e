"""
Either
======

Failure (``Left``) or success (``Right``), biased toward ``Right``:
map/flat_map/ap operate on the success payload and pass a ``Left``
through untouched.

Recommended import:
    from funcore import either as E
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
from .option import Nothing, Option, Some


@dataclass(frozen=True, slots=True)
class Left[E]:
    """Failure payload."""

    value: E

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, slots=True)
class Right[A]:
    """Success payload."""

    value: A

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


type Either[E, A] = Left[E] | Right[A]


# ============================================================================
# Lift
# ============================================================================


def left[E](value: E) -> Either[E, typing.Never]:
    return Left(value)


def right[A](value: A) -> Either[typing.Never, A]:
    return Right(value)


def of[A](value: A) -> Either[typing.Never, A]:
    """Lift a value into Either. Alias for right()."""
    return Right(value)


def from_predicate[E, A](
    predicate: Predicate[A],
    error: Lazy[E],
) -> Callable[[A], Either[E, A]]:
    """
    Build a validator: Right(value) when predicate holds, else Left(error()).

    error is a thunk, only called when the predicate fails.

    Example:
        positive = E.from_predicate(lambda n: n > 0, lambda: "Negative value")
        positive(42)  # Right(42)
        positive(-1)  # Left('Negative value')
    """

    def check(value: A) -> Either[E, A]:
        return Right(value) if predicate(value) else Left(error())

    return check


def from_option[E, A](option: Option[A], error: Lazy[E]) -> Either[E, A]:
    """Some(v) -> Right(v), Nothing -> Left(error())."""
    match option:
        case Some(value):
            return Right(value)
        case Nothing():
            return Left(error())
        case _ as unreachable:
            assert_never(unreachable)


def from_nullable[E, A](value: A | None, error: Lazy[E]) -> Either[E, A]:
    """None -> Left(error()), anything else -> Right(value)."""
    return Left(error()) if value is None else Right(value)


# ============================================================================
# Refinements
# ============================================================================


def is_left[E, A](either: Either[E, A]) -> typing.TypeGuard[Left[E]]:
    return isinstance(either, Left)


def is_right[E, A](either: Either[E, A]) -> typing.TypeGuard[Right[A]]:
    return isinstance(either, Right)


# ============================================================================
# Case analysis
# ============================================================================


def match_w[E, A, B, C](
    either: Either[E, A],
    *,
    on_left: Callable[[E], B],
    on_right: Callable[[A], C],
) -> B | C:
    """Exhaustive case analysis with independent branch result types."""
    match either:
        case Left(error):
            return on_left(error)
        case Right(value):
            return on_right(value)
        case _ as unreachable:
            assert_never(unreachable)


def match[E, A, B](
    either: Either[E, A],
    *,
    on_left: Callable[[E], B],
    on_right: Callable[[A], B],
) -> B:
    """
    Exhaustive case analysis, both branches return B.

    Example:
        E.match(result, on_left=lambda e: f"Fail: {e}", on_right=lambda v: f"Success: {v}")
    """
    return match_w(either, on_left=on_left, on_right=on_right)


fold = match


# ============================================================================
# Functor / Monad
# ============================================================================


def map[E, A, B](either: Either[E, A], f: Callable[[A], B], /) -> Either[E, B]:
    """Transform the Right payload. Left passes through as the same object."""
    match either:
        case Right(value):
            return Right(f(value))
        case Left(_):
            return either
        case _ as unreachable:
            assert_never(unreachable)


def map_left[E, A, F](either: Either[E, A], f: Callable[[E], F], /) -> Either[F, A]:
    """Transform the Left payload. Right passes through."""
    match either:
        case Left(error):
            return Left(f(error))
        case Right(_):
            return either
        case _ as unreachable:
            assert_never(unreachable)


def flat_map[E, A, B](
    either: Either[E, A],
    f: Callable[[A], Either[E, B]],
    /,
) -> Either[E, B]:
    """Monadic bind. Left short-circuits, f is not called."""
    match either:
        case Right(value):
            return f(value)
        case Left(_):
            return either
        case _ as unreachable:
            assert_never(unreachable)


chain = flat_map


def ap[E, A, B](
    f_either: Either[E, Callable[[A], B]],
    either: Either[E, A],
    /,
) -> Either[E, B]:
    """
    Apply a wrapped function to a wrapped value.

    If both are Left, the function side's Left wins.
    """
    match f_either, either:
        case Left(_), _:
            return f_either
        case Right(_), Left(_):
            return either
        case Right(f), Right(value):
            return Right(f(value))
        case _:
            raise TypeError(f"ap() expects Either values, got {f_either!r}, {either!r}")


def tap[E, A](either: Either[E, A], *, effect: Effect[A]) -> Either[E, A]:
    """Run effect on the Right payload, return either unchanged."""
    match either:
        case Right(value):
            effect(value)
        case Left(_):
            pass
        case _ as unreachable:
            assert_never(unreachable)
    return either


chain_first = tap


def swap[E, A](either: Either[E, A]) -> Either[A, E]:
    """Left(x) <-> Right(x)."""
    match either:
        case Left(error):
            return Right(error)
        case Right(value):
            return Left(value)
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Extract
# ============================================================================


def get_or_else[E, A, B](either: Either[E, A], default: Lazy[B], /) -> A | B:
    """
    Right payload, or default() for Left.

    default takes no argument: the Left payload is discarded.
    For an error-aware default use match().
    """
    match either:
        case Right(value):
            return value
        case Left(_):
            return default()
        case _ as unreachable:
            assert_never(unreachable)


def to_option[E, A](either: Either[E, A]) -> Option[A]:
    """Right(v) -> Some(v), Left -> Nothing."""
    match either:
        case Right(value):
            return Some(value)
        case Left(_):
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def unwrap[E, A](either: Either[E, A]) -> A:
    """Right payload, raises UnwrapError carrying the Left payload."""
    match either:
        case Right(value):
            return value
        case Left(error):
            raise UnwrapError(error, f"unwrap() called on Left({error!r})")
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Eq / Ord
# ============================================================================


def get_eq[E, A](left_eq: Eq[E], right_eq: Eq[A]) -> Eq[Either[E, A]]:
    """Equal only when both are the same variant with equal payloads."""

    def equals(x: Either[E, A], y: Either[E, A]) -> bool:
        match x, y:
            case Left(a), Left(b):
                return left_eq.equals(a, b)
            case Right(a), Right(b):
                return right_eq.equals(a, b)
            case _:
                return False

    return from_equals(equals)


def get_ord[E, A](left_ord: Ord[E], right_ord: Ord[A]) -> Ord[Either[E, A]]:
    """Left sorts before Right; same variant compares payloads."""

    def compare(x: Either[E, A], y: Either[E, A]) -> int:
        match x, y:
            case Left(a), Left(b):
                return left_ord.compare(a, b)
            case Right(a), Right(b):
                return right_ord.compare(a, b)
            case Left(_), Right(_):
                return -1
            case _:
                return 1

    return from_compare(compare)


# ============================================================================
# Sequencing
# ============================================================================


def sequence_list[E, A](items: Iterable[Either[E, A]]) -> Either[E, ImmutableList[A]]:
    """
    [Either[E, A]] -> Either[E, [A]].

    Returns the first Left; elements after it are not read.
    """
    from .collection.sequence import sequence_either
    return sequence_either(items)


def traverse_list[E, A, B](
    items: Iterable[A],
    f: Callable[[A], Either[E, B]],
) -> Either[E, ImmutableList[B]]:
    """Map each item with f and sequence, stopping at the first Left."""
    from .collection.traverse import traverse_either
    return traverse_either(items, f)


__all__ = (
    "Either",
    "Left",
    "Right",
    "ap",
    "chain",
    "chain_first",
    "flat_map",
    "fold",
    "from_nullable",
    "from_option",
    "from_predicate",
    "get_eq",
    "get_or_else",
    "get_ord",
    "is_left",
    "is_right",
    "left",
    "map",
    "map_left",
    "match",
    "match_w",
    "of",
    "right",
    "sequence_list",
    "swap",
    "tap",
    "to_option",
    "traverse_list",
    "unwrap",
)

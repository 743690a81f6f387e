"""Predicate combinators

Boolean composition of ``A -> bool`` functions."""

from __future__ import annotations

from collections.abc import Callable

from ._types import Lazy, Predicate


def and_[A](first: Predicate[A], second: Predicate[A]) -> Predicate[A]:
    """Both hold. second is not evaluated when first fails."""
    return lambda value: first(value) and second(value)


def or_[A](first: Predicate[A], second: Predicate[A]) -> Predicate[A]:
    """Either holds. second is not evaluated when first holds."""
    return lambda value: first(value) or second(value)


def not_[A](predicate: Predicate[A]) -> Predicate[A]:
    return lambda value: not predicate(value)


def contramap[A, B](predicate: Predicate[A], f: Callable[[B], A]) -> Predicate[B]:
    """
    Adapt a predicate on A to one on B by projecting first.

    Example:
        is_adult = contramap(lambda age: age >= 18, lambda user: user.age)
    """
    return lambda value: predicate(f(value))


def match[A, B](
    predicate: Predicate[A],
    *,
    on_true: Lazy[B],
    on_false: Lazy[B],
) -> Callable[[A], B]:
    """Branch on the predicate; only the chosen thunk is called."""

    def run(value: A) -> B:
        return on_true() if predicate(value) else on_false()

    return run


__all__ = ("and_", "contramap", "match", "not_", "or_")

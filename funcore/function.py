"""Function helpers

Plain function plumbing used to build pipelines out of the container
combinators."""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def pipe(value: typing.Any, *fns: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Thread a value through functions left to right.

    Example:
        pipe(O.some(2), lambda o: O.map(o, inc), lambda o: O.get_or_else(o, lambda: 0))
        # 3
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)

def flow(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Compose functions left to right into a single function.

    flow(f, g)(x) == g(f(x)); flow() is identity.
    """
    def composed(value: typing.Any) -> typing.Any:
        return pipe(value, *fns)

    return composed

__all__ = (
    "flow",
    "identity",
    "pipe",
)

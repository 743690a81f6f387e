"""
Core type definitions for funcore.

Aliases shared by the container modules.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Lazy = zero-arg factory, evaluated only when the value is needed
type Lazy[T] = Callable[[], T]

# Thunk = zero-arg callable producing an awaitable (the body of a TaskEither)
type Thunk[T] = Callable[[], Awaitable[T]]

# Effect = observation-only callback, return value ignored
type Effect[T] = Callable[[T], object]

__all__ = (
    "Effect",
    "Lazy",
    "Predicate",
    "Thunk",
)

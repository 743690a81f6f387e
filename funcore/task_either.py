"""TaskEither

Deferred asynchronous computation that can fail:
- Lazy (nothing runs until invoked)
- Async (awaits an underlying awaitable)
- Either[E, A] (Left is expected failure, carried as data)

A TaskEither is a description of how to compute, not a running computation.
Every invocation starts a fresh run; results are never memoized.

Recommended import:
    from funcore import task_either as TE

    user = TE.call(fetch_user, 42)
    name = await TE.get_or_else(TE.map(user, lambda u: u.name), lambda err: "guest")
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Iterable
from functools import wraps
from typing import assert_never

from loguru import logger

from ._errors import UnwrapError
from ._types import Effect, Lazy, Predicate, Thunk
from .either import Either, Left, Right
from .immutable_list import ImmutableList
from .option import Nothing, Option, Some


class TaskEither[E, A]:
    """Lazy async Either.

    Holds a zero-arg callable returning an awaitable of Either[E, A].
    Calling the TaskEither invokes it; awaiting the TaskEither is the same
    as awaiting ``te()``.

    Monadic laws (over resolved values):
    - Left identity: of(a).flat_map(f) ≡ f(a)
    - Right identity: m.flat_map(of) ≡ m
    - Associativity: m.flat_map(f).flat_map(g) ≡ m.flat_map(x => f(x).flat_map(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Thunk[Either[E, A]], /) -> None:
        """Create TaskEither from a fn returning an awaitable Either."""
        self._value = value

    # Functor operations

    def map[B](self, f: Callable[[A], B], /) -> TaskEither[E, B]:
        """Functor fmap - apply f to the eventual Right payload."""

        async def wrapper() -> Either[E, B]:
            result = await self()
            match result:
                case Right(value):
                    return Right(f(value))
                case Left(_):
                    return result
                case _ as unreachable:
                    assert_never(unreachable)

        return TaskEither(wrapper)

    def map_left[F](self, f: Callable[[E], F], /) -> TaskEither[F, A]:
        """Map over the error payload."""

        async def wrapper() -> Either[F, A]:
            result = await self()
            match result:
                case Left(error):
                    return Left(f(error))
                case Right(_):
                    return result
                case _ as unreachable:
                    assert_never(unreachable)

        return TaskEither(wrapper)

    # Monad operations

    def flat_map[B](self, f: Callable[[A], TaskEither[E, B]], /) -> TaskEither[E, B]:
        """
        Monadic bind (>>=).

        - On Right: builds the next TaskEither with f and awaits it
        - On Left: short-circuit, f is never called
        """

        async def wrapper() -> Either[E, B]:
            result = await self()
            match result:
                case Right(value):
                    return await f(value)()
                case Left(_):
                    return result
                case _ as unreachable:
                    assert_never(unreachable)

        return TaskEither(wrapper)

    # Protocol methods

    def __call__(self) -> Awaitable[Either[E, A]]:
        """Start a fresh run, returning its awaitable."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, Either[E, A]]:
        """Allow direct await on the TaskEither."""
        return self().__await__()

    def __repr__(self) -> str:
        return f"TaskEither({self._value!r})"


# ============================================================================
# Lift
# ============================================================================


def from_either[E, A](either: Either[E, A]) -> TaskEither[E, A]:
    """
    Lift an already-computed Either.

    NOTE: not lazy - either is already computed, the TaskEither just
    hands it back on every run.
    """
    async def run() -> Either[E, A]:
        return either

    return TaskEither(run)


def left[E](value: E) -> TaskEither[E, typing.Never]:
    """Always-failing TaskEither."""
    return from_either(Left(value))


def right[A](value: A) -> TaskEither[typing.Never, A]:
    """Always-succeeding TaskEither."""
    return from_either(Right(value))


def of[A](value: A) -> TaskEither[typing.Never, A]:
    """Alias for right()."""
    return right(value)


def from_predicate[E, A](
    predicate: Predicate[A],
    error: Lazy[E],
) -> Callable[[A], TaskEither[E, A]]:
    """
    Build an async validator from a sync predicate.

    The check itself is synchronous; the result still has to be awaited.

    Example:
        check_positive = TE.from_predicate(lambda n: n > 0, lambda: "Number is not positive")
        await check_positive(5)  # Right(5)
    """
    def check(value: A) -> TaskEither[E, A]:
        if predicate(value):
            return right(value)
        return left(error())

    return check


def from_option[E, A](option: Option[A], error: Lazy[E]) -> TaskEither[E, A]:
    """
    Some(v) -> Right(v), Nothing -> Left(error()).

    error is a thunk, evaluated on each run that sees Nothing.
    """
    async def run() -> Either[E, A]:
        match option:
            case Some(value):
                return Right(value)
            case Nothing():
                return Left(error())
            case _ as unreachable:
                assert_never(unreachable)

    return TaskEither(run)


def from_nullable[E, A](value: A | None, error: Lazy[E]) -> TaskEither[E, A]:
    """
    Convert ``T | None`` to TaskEither. None becomes Left(error()).

    **When to use:** cache checks, dict lookups, config reads - anywhere a
    plain optional value has to join an async pipeline.
    """
    async def run() -> Either[E, A]:
        if value is None:
            return Left(error())
        return Right(value)

    return TaskEither(run)


def wrap_async[E, A](thunk: Thunk[Either[E, A]]) -> TaskEither[E, A]:
    """
    Wrap a lazy async computation (thunk) into TaskEither.

    NOTE: thunk must be a zero-arg callable for laziness.
          A bare coroutine object would already be created and could only
          be awaited once.
    """
    async def run() -> Either[E, A]:
        return await thunk()

    return TaskEither(run)


def lifted[E, A, **P](
    func: Callable[P, Awaitable[Either[E, A]]],
) -> Callable[P, TaskEither[E, A]]:
    """
    Decorator: make an async function returning Either return TaskEither.

    Example:
        @TE.lifted
        async def fetch_user(user_id: int) -> Either[APIError, User]: ...

        result = await fetch_user(42)  # nothing ran until this await
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> TaskEither[E, A]:
        return wrap_async(lambda: func(*args, **kwargs))

    return wrapper


def call[E, A, **P](
    func: Callable[P, Awaitable[Either[E, A]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> TaskEither[E, A]:
    """
    Call an async function lazily with arguments, lifting into TaskEither.

    Preferred over wrap_async(lambda: ...) when args are known at call site.
    """
    return wrap_async(lambda: func(*args, **kwargs))


# ============================================================================
# Functor / Monad
# ============================================================================


def map[E, A, B](te: TaskEither[E, A], f: Callable[[A], B], /) -> TaskEither[E, B]:
    """Transform the eventual Right payload."""
    return te.map(f)


def map_left[E, A, F](te: TaskEither[E, A], f: Callable[[E], F], /) -> TaskEither[F, A]:
    """Transform the eventual Left payload."""
    return te.map_left(f)


def flat_map[E, A, B](
    te: TaskEither[E, A],
    f: Callable[[A], TaskEither[E, B]],
    /,
) -> TaskEither[E, B]:
    """Sequential bind. f runs only after te resolved to Right."""
    return te.flat_map(f)


chain = flat_map


def ap[E, A, B](
    f_te: TaskEither[E, Callable[[A], B]],
    te: TaskEither[E, A],
    /,
) -> TaskEither[E, B]:
    """
    Apply an async-produced function to an async-produced value.

    Sequential: the function side runs first. If it resolves to Left,
    that Left is the result and te never starts.
    """
    return f_te.flat_map(te.map)


# ============================================================================
# Effects
# ============================================================================


def tap[E, A](te: TaskEither[E, A], *, effect: Effect[A]) -> TaskEither[E, A]:
    """
    Execute sync side effect on the Right payload, pass result through.

    Exceptions raised by effect are logged and swallowed: an observation
    hook never changes the pipeline's result.
    """

    async def run() -> Either[E, A]:
        result = await te()
        match result:
            case Right(value):
                try:
                    effect(value)
                except Exception:
                    logger.opt(exception=True).warning("tap effect raised, result passed through")
            case Left(_):
                pass
            case _ as unreachable:
                assert_never(unreachable)
        return result

    return TaskEither(run)


chain_first = tap


def tap_async[E, A](
    te: TaskEither[E, A],
    *,
    effect: Callable[[A], Awaitable[object]],
) -> TaskEither[E, A]:
    """Execute async side effect on the Right payload. Same swallowing rule as tap()."""

    async def run() -> Either[E, A]:
        result = await te()
        match result:
            case Right(value):
                try:
                    await effect(value)
                except Exception:
                    logger.opt(exception=True).warning("tap_async effect raised, result passed through")
            case Left(_):
                pass
            case _ as unreachable:
                assert_never(unreachable)
        return result

    return TaskEither(run)


# ============================================================================
# Case analysis / extract
# ============================================================================


async def match_w[E, A, B, C](
    te: TaskEither[E, A],
    *,
    on_left: Callable[[E], Awaitable[B]],
    on_right: Callable[[A], Awaitable[C]],
) -> B | C:
    """Await te, then await the selected branch. Branch types may differ."""
    result = await te()
    match result:
        case Left(error):
            return await on_left(error)
        case Right(value):
            return await on_right(value)
        case _ as unreachable:
            assert_never(unreachable)


async def match[E, A, B](
    te: TaskEither[E, A],
    *,
    on_left: Callable[[E], Awaitable[B]],
    on_right: Callable[[A], Awaitable[B]],
) -> B:
    """
    Await te, then await whichever branch applies.

    Example:
        message = await TE.match(
            task,
            on_left=lambda e: render_error(e),
            on_right=lambda v: render_value(v),
        )
    """
    return await match_w(te, on_left=on_left, on_right=on_right)


fold = match


async def get_or_else[E, A, B](te: TaskEither[E, A], default: Callable[[E], B], /) -> A | B:
    """
    Run te and return the Right payload, or default(error) for Left.

    NOTE: unlike option.get_or_else / either.get_or_else, default here
          RECEIVES the Left payload.
    """
    result = await te()
    match result:
        case Right(value):
            return value
        case Left(error):
            return default(error)
        case _ as unreachable:
            assert_never(unreachable)


async def is_left[E, A](te: TaskEither[E, A]) -> bool:
    return isinstance(await te(), Left)


async def is_right[E, A](te: TaskEither[E, A]) -> bool:
    return isinstance(await te(), Right)


async def unwrap[E, A](te: TaskEither[E, A]) -> A:
    """
    Run and unwrap, raises UnwrapError on Left.

    Use only when success is certain or an exception is the wanted outcome.
    """
    result = await te()
    match result:
        case Right(value):
            return value
        case Left(error):
            raise UnwrapError(error, f"unwrap() called on Left({error!r})")
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Sequencing
# ============================================================================


def sequence_list[E, A](items: Iterable[TaskEither[E, A]]) -> TaskEither[E, ImmutableList[A]]:
    """
    [TaskEither[E, A]] -> TaskEither[E, [A]].

    Runs one element at a time in list order; the first Left ends the run
    and later elements never start.
    """
    from .collection.sequence import sequence_task_either
    return sequence_task_either(items)


def traverse_list[E, A, B](
    items: Iterable[A],
    f: Callable[[A], TaskEither[E, B]],
) -> TaskEither[E, ImmutableList[B]]:
    """Sequential async traverse with early exit on the first Left."""
    from .collection.traverse import traverse_task_either
    return traverse_task_either(items, f)


__all__ = (
    "TaskEither",
    "ap",
    "call",
    "chain",
    "chain_first",
    "flat_map",
    "fold",
    "from_either",
    "from_nullable",
    "from_option",
    "from_predicate",
    "get_or_else",
    "is_left",
    "is_right",
    "left",
    "lifted",
    "map",
    "map_left",
    "match",
    "match_w",
    "of",
    "right",
    "sequence_list",
    "tap",
    "tap_async",
    "traverse_list",
    "unwrap",
    "wrap_async",
)

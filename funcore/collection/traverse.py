"""Traverse combinators

Monadic traverse per container. Always sequential: the first failure ends
the traversal, so the remaining items are never handled and their effects
never start. The sync traversals pull items from the input lazily; the
TaskEither one holds the items so it can be run again."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from ..either import Either, Left, Right
from ..immutable_list import ImmutableList
from ..option import Nothing, Option, Some
from ..task_either import TaskEither

# Sync containers
def traverse_option[A, B](
    items: Iterable[A],
    handler: Callable[[A], Option[B]],
) -> Option[ImmutableList[B]]:
    """Map A -> Option[B] over items; Nothing on the first Nothing."""
    values: list[B] = []

    for index, item in enumerate(items):
        match handler(item):
            case Some(v):
                values.append(v)
            case Nothing():
                logger.debug("traverse_option stopped at index {}", index)
                return Nothing()

    return Some(ImmutableList(values))

def traverse_either[E, A, B](
    items: Iterable[A],
    handler: Callable[[A], Either[E, B]],
) -> Either[E, ImmutableList[B]]:
    """Map A -> Either[E, B] over items; first Left wins."""
    values: list[B] = []

    for index, item in enumerate(items):
        match handler(item):
            case Right(v):
                values.append(v)
            case Left(e):
                logger.debug("traverse_either stopped at index {}", index)
                return Left(e)

    return Right(ImmutableList(values))

# Async container
def traverse_task_either[E, A, B](
    items: Iterable[A],
    handler: Callable[[A], TaskEither[E, B]],
) -> TaskEither[E, ImmutableList[B]]:
    """
    Monadic map: A -> TaskEither[E, B]. Sequential to preserve effect order.

    Item i+1's handler is not called, and its computation not started,
    until item i resolved to Right. Nothing runs until the result is awaited.

    items is materialized when the TaskEither is built so every run sees
    the same elements; handlers are still only called inside a run.
    """
    pending = tuple(items)

    async def run() -> Either[E, ImmutableList[B]]:
        values: list[B] = []

        for index, item in enumerate(pending):
            match await handler(item)():
                case Right(v):
                    values.append(v)
                case Left(e):
                    logger.debug("traverse_task_either stopped at index {}", index)
                    return Left(e)

        return Right(ImmutableList(values))

    return TaskEither(run)

__all__ = ("traverse_either", "traverse_option", "traverse_task_either")

"""
Validate combinators
====================

Валидация с накоплением ошибок: every check runs, every error is kept.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .._types import Predicate
from ..either import Either, Left, Right
from ..immutable_list import ImmutableList
from ..task_either import TaskEither

type Validator[E, A] = Callable[[A], Either[list[E], A]]


# ============================================================================
# Sync validators
# ============================================================================


def validator[E, A](predicate: Predicate[A], error: E) -> Validator[E, A]:
    """
    Validator from a predicate: Right(value) or Left([error]).

    Example:
        must_be_odd = validator(lambda n: n % 2 != 0, "Must be odd")
        must_be_odd(3)  # Right(3)
        must_be_odd(4)  # Left(['Must be odd'])
    """

    def check(value: A) -> Either[list[E], A]:
        return Right(value) if predicate(value) else Left([error])

    return check


def apply_sequentially[E, A](validators: Sequence[Validator[E, A]]) -> Validator[E, A]:
    """
    Combine validators into one that runs all of them, in order.

    Not fail-fast: errors of every failing validator are concatenated.
    Validators may come from apply_sequentially themselves.
    """

    def check(value: A) -> Either[list[E], A]:
        errors: list[E] = []

        for v in validators:
            match v(value):
                case Left(errs):
                    errors.extend(errs)
                case Right(_):
                    pass

        if errors:
            return Left(errors)
        return Right(value)

    return check


# ============================================================================
# Async
# ============================================================================


def validate_all[E, A](
    task_eithers: Iterable[TaskEither[E, A]],
) -> TaskEither[list[E], ImmutableList[A]]:
    """Run all one after another, collect ALL errors (not fail-fast)."""
    pending = tuple(task_eithers)

    async def run() -> Either[list[E], ImmutableList[A]]:
        successes: list[A] = []
        failures: list[E] = []

        for te in pending:
            match await te():
                case Right(value):
                    successes.append(value)
                case Left(err):
                    failures.append(err)

        if failures:
            return Left(failures)
        return Right(ImmutableList(successes))

    return TaskEither(run)


__all__ = ("Validator", "apply_sequentially", "validate_all", "validator")

"""Sequence combinators

Structure flipping: [M[A]] -> M[[A]], implemented as traverse(identity)."""

from __future__ import annotations

from collections.abc import Iterable

from ..either import Either
from ..function import identity
from ..immutable_list import ImmutableList
from ..option import Option
from ..task_either import TaskEither
from .traverse import traverse_either, traverse_option, traverse_task_either

def sequence_option[A](items: Iterable[Option[A]]) -> Option[ImmutableList[A]]:
    """Flip structure: [Option[A]] -> Option[[A]]."""
    return traverse_option(items, identity)

def sequence_either[E, A](items: Iterable[Either[E, A]]) -> Either[E, ImmutableList[A]]:
    """Flip structure: [Either[E, A]] -> Either[E, [A]]."""
    return traverse_either(items, identity)

def sequence_task_either[E, A](
    items: Iterable[TaskEither[E, A]],
) -> TaskEither[E, ImmutableList[A]]:
    """Flip structure, running each TaskEither one after another."""
    return traverse_task_either(items, identity)

__all__ = ("sequence_either", "sequence_option", "sequence_task_either")

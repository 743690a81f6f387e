"""
Result-type containers for composing fallible computations.

Three containers with one shared vocabulary:
- Option[A]        : Some(value) | Nothing()
- Either[E, A]     : Left(error) | Right(value)
- TaskEither[E, A] : lazy, re-invocable async producer of Either[E, A]

Architecture:
- Free functions per container module, container as first argument
  (``O.map(opt, f)``, ``E.flat_map(e, f)``, ``TE.tap(te, effect=...)``)
- Sequencing / traversal / validation in ``funcore.collection``
- Expected failures are data; only ``unwrap`` raises (UnwrapError)

Logging goes through loguru and is disabled for "funcore" by default;
call ``logger.enable("funcore")`` to see it.
"""

from loguru import logger

# Core types
from ._errors import UnwrapError
from ._types import Effect, Lazy, Predicate, Thunk
from .immutable_list import ImmutableList
from .algebra import Eq, Ord

# Containers (import as modules: from funcore import option as O)
from . import option, either, task_either
from .option import Nothing, Option, Some
from .either import Either, Left, Right
from .task_either import TaskEither

# Sequencing / validation
from . import collection
from .collection import (
    apply_sequentially,
    sequence_either,
    sequence_option,
    sequence_task_either,
    traverse_either,
    traverse_option,
    traverse_task_either,
    validate_all,
    validator,
)

# Helpers
from . import algebra, function, predicate
from .function import flow, identity, pipe

logger.disable("funcore")

__all__ = (
    # Core types
    "Effect",
    "Eq",
    "ImmutableList",
    "Lazy",
    "Ord",
    "Predicate",
    "Thunk",
    "UnwrapError",
    # Containers
    "Either",
    "Left",
    "Nothing",
    "Option",
    "Right",
    "Some",
    "TaskEither",
    "either",
    "option",
    "task_either",
    # Collection
    "apply_sequentially",
    "collection",
    "sequence_either",
    "sequence_option",
    "sequence_task_either",
    "traverse_either",
    "traverse_option",
    "traverse_task_either",
    "validate_all",
    "validator",
    # Helpers
    "algebra",
    "flow",
    "function",
    "identity",
    "pipe",
    "predicate",
)

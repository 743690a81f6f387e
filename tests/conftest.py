"""Shared fixtures for funcore tests."""

from collections.abc import Generator

import pytest
from loguru import logger


class Counter:
    """Callable spy: records every argument it is called with."""

    def __init__(self, result=None) -> None:
        self.calls: list[object] = []
        self._result = result

    def __call__(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)
        return self._result

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> type[Counter]:
    return Counter


@pytest.fixture
def log_records() -> Generator[list[tuple[str, str]], None, None]:
    """Enable funcore logging and capture (level, message) pairs."""
    records: list[tuple[str, str]] = []

    def sink(message) -> None:
        record = message.record
        records.append((record["level"].name, record["message"]))

    logger.enable("funcore")
    handler_id = logger.add(sink, level="DEBUG", format="{message}")
    try:
        yield records
    finally:
        logger.remove(handler_id)
        logger.disable("funcore")

from __future__ import annotations

class UnwrapError(Exception):
    """unwrap() was called on Nothing or Left."""

    value: object

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)

__all__ = ("UnwrapError",)

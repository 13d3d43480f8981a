"""Library exceptions.

Errors introduced by fallible itself inherit from FallibleError. Errors raised
by caller-supplied code are never wrapped; they travel through a Failure as-is.
"""
from __future__ import annotations

import reprlib
from typing import Any


class FallibleError(Exception):
    """Base exception for library errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class NoSuchElementError(FallibleError, LookupError):
    def __init__(self, message: str = "No such element", value: Any = None) -> None:
        super().__init__(message, {"value": reprlib.repr(value)} if value is not None else None)
        self.value = value


class IllegalStateError(FallibleError, RuntimeError):
    pass

"""Domain Layer.

The Result value type, its construction helpers, aggregation and the library
exceptions.
"""
from __future__ import annotations

from fallible.domain.aggregate import aggregate
from fallible.domain.exceptions import (
    FallibleError,
    IllegalStateError,
    NoSuchElementError,
)
from fallible.domain.result import (
    Failure,
    Result,
    Success,
    failure,
    of,
    success,
)

__all__ = [
    # Exceptions
    "FallibleError",
    "NoSuchElementError",
    "IllegalStateError",
    # Result
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "of",
    "aggregate",
]

"""fallible.

A Result type for fallible computations: every computation yields either a
Success holding its value or a Failure holding the exception it raised.
"""
from __future__ import annotations

__version__ = "0.1.0"

from fallible.domain import (
    FallibleError,
    Failure,
    IllegalStateError,
    NoSuchElementError,
    Result,
    Success,
    aggregate,
    failure,
    of,
    success,
)
from fallible.shared import Settings, configure_logging, get_logger, get_settings

__all__ = [
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "of",
    "aggregate",
    "FallibleError",
    "NoSuchElementError",
    "IllegalStateError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "__version__",
]

"""Fail-fast aggregation of many results into one."""
from __future__ import annotations

from typing import Iterable, TypeVar

from fallible.domain.result import Failure, Result, Success

T = TypeVar("T")


def aggregate(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Collapse results into a single Result holding the list of values.

    Iteration stops at the first Failure, which is returned as-is. Elements
    after it are never looked at, and a generator is not advanced past it.

    Args:
        results: Ordered results to combine

    Returns:
        Success of the values in input order, or the first Failure

    Example:
        >>> aggregate([Success(1), Success(2)])
        Success(value=[1, 2])
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result  # type: ignore[return-value]
        values.append(result.value)
    return Success(values)

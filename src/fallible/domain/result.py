"""Result pattern for explicit error handling.

Provides Success and Failure types that carry the outcome of a fallible
computation as a value. Every operation that calls back into caller code
does so under guarded evaluation: an exception raised by the callback is
captured into a Failure instead of escaping the operation.

Example:
    >>> of(lambda: int("42")).map(lambda n: n * 2).get()
    84
    >>> of(lambda: int("x")).recover(ValueError, lambda e: 0).get()
    0
"""
from __future__ import annotations

import reprlib
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, overload

from fallible.domain.exceptions import IllegalStateError, NoSuchElementError
from fallible.shared.config import get_settings
from fallible.shared.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)

ErrorKind = type[BaseException] | tuple[type[BaseException], ...]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result."""

    value: T

    def is_success(self) -> bool:
        """Check if result is success."""
        return True

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return False

    def get(self) -> T:
        """Get the value."""
        return self.value

    def get_exception(self) -> NoReturn:
        """A success has no exception; asking for one is a usage error."""
        raise IllegalStateError(
            "Success holds no exception",
            {"value": reprlib.repr(self.value)},
        )

    def get_or_else(self, default: T) -> T:
        """Get the value; the default is ignored."""
        return self.value

    def get_or_none(self) -> T | None:
        """Get the value."""
        return self.value

    def map(self, transform: Callable[[T], U]) -> Result[U]:
        """Apply transform to the value and wrap its return in a Success."""
        return _guarded(lambda: Success(transform(self.value)))

    def flat_map(self, transform: Callable[[T], Result[U]]) -> Result[U]:
        """Apply transform to the value and return its Result as-is."""
        return _guarded(lambda: _as_result(transform(self.value)))

    def filter(self, predicate: Callable[[T], bool]) -> Result[T]:
        """Keep the value if predicate accepts it.

        Returns:
            self if predicate(value) is truthy, otherwise a Failure
            holding NoSuchElementError
        """
        return _guarded(
            lambda: self if predicate(self.value) else Failure(NoSuchElementError(value=self.value))
        )

    def recover(self, *args: Any) -> Result[T]:
        """Nothing to recover from."""
        _recovery_args(args)
        return self

    def recover_with(self, *args: Any) -> Result[T]:
        """Nothing to recover from."""
        _recovery_args(args)
        return self


@dataclass(frozen=True, slots=True)
class Failure(Generic[T]):
    """Failed result.

    Holds only the captured exception, never a value, so a Failure can stand
    in for a Result of any value type.
    """

    error: BaseException

    def __post_init__(self) -> None:
        """Validate that the payload can be re-raised."""
        if not isinstance(self.error, BaseException):
            raise TypeError(
                f"Failure requires an exception instance, got {type(self.error).__name__}"
            )

    def is_success(self) -> bool:
        """Check if result is success."""
        return False

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return True

    def get(self) -> NoReturn:
        """Raise the captured exception."""
        raise self.error

    def get_exception(self) -> BaseException:
        """Get the captured exception."""
        return self.error

    def get_or_else(self, default: T) -> T:
        """Get default value for failure."""
        return default

    def get_or_none(self) -> None:
        """No value to return."""
        return None

    def map(self, transform: Callable[[Any], U]) -> Result[U]:
        """Skip transform; the failure carries over."""
        return self  # type: ignore[return-value]

    def flat_map(self, transform: Callable[[Any], Result[U]]) -> Result[U]:
        """Skip transform; the failure carries over."""
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[Any], bool]) -> Result[T]:
        """Skip predicate; the failure carries over."""
        return self

    @overload
    def recover(self, handler: Callable[[BaseException], T], /) -> Result[T]: ...

    @overload
    def recover(self, kind: type[E] | tuple[type[E], ...], handler: Callable[[E], T], /) -> Result[T]: ...

    def recover(self, *args: Any) -> Result[T]:
        """Turn the failure into a Success carrying handler(error).

        Args:
            *args: Either (handler,) or (kind, handler). With a kind, the
                handler only runs if the error is an instance of kind (a class
                or tuple of classes, as accepted by an except clause).

        Returns:
            Success of the handler's return, this Failure if the kind does
            not match, or a new Failure if the handler raises
        """
        kind, handler = _recovery_args(args)
        return _guarded(
            lambda: Success(handler(self.error)) if isinstance(self.error, kind) else self
        )

    @overload
    def recover_with(self, handler: Callable[[BaseException], Result[T]], /) -> Result[T]: ...

    @overload
    def recover_with(
        self, kind: type[E] | tuple[type[E], ...], handler: Callable[[E], Result[T]], /
    ) -> Result[T]: ...

    def recover_with(self, *args: Any) -> Result[T]:
        """Like recover, but the handler returns a Result which is passed through."""
        kind, handler = _recovery_args(args)
        return _guarded(
            lambda: _as_result(handler(self.error)) if isinstance(self.error, kind) else self
        )


# Type alias
Result = Success[T] | Failure[T]


@overload
def success() -> Success[None]: ...


@overload
def success(value: T) -> Success[T]: ...


def success(value: Any = None) -> Success[Any]:
    """Create a Success result.

    Args:
        value: The success value; omitted for computations that only
            signal completion

    Returns:
        Success wrapping the value
    """
    return Success(value)


def failure(error: BaseException) -> Failure[Any]:
    """Create a Failure result.

    Args:
        error: The exception to capture

    Returns:
        Failure wrapping the exception

    Raises:
        TypeError: If error is not an exception instance
    """
    return Failure(error)


def of(supplier: Callable[[], T]) -> Result[T]:
    """Run supplier and capture its outcome.

    Args:
        supplier: Zero-argument callable that may raise

    Returns:
        Success of the return value, or Failure of the raised exception
    """
    return _guarded(lambda: Success(supplier()))


def _guarded(thunk: Callable[[], Result[U]]) -> Result[U]:
    try:
        return thunk()
    except Exception as exc:
        _report_captured(exc)
        return Failure(exc)


def _report_captured(exc: Exception) -> None:
    # A broken diagnostic must never replace the captured error; its own
    # failure is recorded as a note on that error instead.
    try:
        if get_settings().log_captured_errors:
            get_logger(__name__).debug(
                "guarded_evaluation_captured",
                error_type=type(exc).__name__,
                error=reprlib.repr(exc),
            )
    except Exception as report_error:
        exc.add_note(f"fallible: could not log captured error: {report_error!r}")


def _as_result(value: object) -> Result[Any]:
    if isinstance(value, (Success, Failure)):
        return value
    raise TypeError(f"Expected a Success or Failure, got {type(value).__name__}")


def _recovery_args(args: tuple[Any, ...]) -> tuple[ErrorKind, Callable[..., Any]]:
    # (handler,) recovers from anything, (kind, handler) only from kind
    if len(args) == 1:
        return BaseException, args[0]
    if len(args) == 2:
        return args[0], args[1]
    raise TypeError(f"Expected (handler) or (kind, handler), got {len(args)} arguments")

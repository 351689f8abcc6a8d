# topmark:header:start
#
#   project      : Au
#   file         : result.py
#   file_relpath : src/aulang/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discriminated success/failure results for fallible parsing steps.

Parsers in Au never raise for malformed input. Each fallible step returns
either a [`Success`][aulang.result.Success] carrying the parsed value or a
[`Failure`][aulang.result.Failure] carrying a human-readable message, and the
small combinators below compose those steps fail-fast:

* `map_result` transforms the value of a success.
* `flat_map` chains a further fallible step.
* `collect` turns an iterable of results into a result of a list, stopping at
  the first failure in iteration order.
* `recover` turns a failure into a plain value (used at process boundaries).

Failures are plain data: tests can compare them with ``==`` and callers can
inspect ``detail`` to locate the offending input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, NoReturn, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")
U = TypeVar("U")


class ResultError(Exception):
    """Raised when the value of a `Failure` is forcibly unwrapped."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome of a step that produced a value.

    Attributes:
        value (T): The produced value.
    """

    value: T

    @property
    def ok(self) -> Literal[True]:
        """Discriminant: always ``True`` for a success."""
        return True

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True)
class Failure:
    """Outcome of a step that could not produce a value.

    Attributes:
        detail (str): Human-readable description of what went wrong. Messages
            coming from nested parsers are passed through unchanged.
    """

    detail: str

    @property
    def ok(self) -> Literal[False]:
        """Discriminant: always ``False`` for a failure."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise `ResultError` with the failure detail.

        Raises:
            ResultError: Always.
        """
        raise ResultError(self.detail)


Result = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    """Return a `Success` carrying ``value``."""
    return Success(value)


def failure(detail: str) -> Failure:
    """Return a `Failure` carrying ``detail``."""
    return Failure(detail)


def map_result(result: Result[T], fn: Callable[[T], U]) -> Result[U]:
    """Apply ``fn`` to the value of a success; pass failures through.

    Args:
        result (Result[T]): Result to transform.
        fn (Callable[[T], U]): Infallible transformation.

    Returns:
        Result[U]: The transformed success, or the original failure.
    """
    if isinstance(result, Failure):
        return result
    return Success(fn(result.value))


def flat_map(result: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Chain a fallible step after a success; pass failures through.

    Args:
        result (Result[T]): Result of the previous step.
        fn (Callable[[T], Result[U]]): Next fallible step.

    Returns:
        Result[U]: The result of ``fn``, or the original failure.
    """
    if isinstance(result, Failure):
        return result
    return fn(result.value)


def collect(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Gather an iterable of results into a result of a list.

    The iterable is consumed lazily and iteration stops at the first failure,
    so steps after a failing one are never evaluated when ``results`` is a
    generator.

    Args:
        results (Iterable[Result[T]]): Results in source order.

    Returns:
        Result[list[T]]: All values in order, or the first failure encountered.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)


def recover(result: Result[T], handler: Callable[[Failure], T]) -> T:
    """Return the value of a success, or the value ``handler`` derives from a failure.

    ``handler`` may also not return at all (e.g. raise a CLI exception), which
    is how the command layer turns failures into process exit codes.

    Args:
        result (Result[T]): Result to resolve.
        handler (Callable[[Failure], T]): Called with the failure, if any.

    Returns:
        T: The success value or the handler's value.
    """
    if isinstance(result, Failure):
        return handler(result)
    return result.value

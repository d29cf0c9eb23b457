"""
Result type

Two-armed outcome (success value XOR Error) returned by every fallible
operation in oktagon instead of raising.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Error:
    """Error with a machine-readable code and a human-readable message"""

    code: str
    message: str
    cause: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.message


class Result(Generic[T]):
    """Either a success value or an Error, never both"""

    __slots__ = ("value", "error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the success value, leave errors untouched"""
        if self.is_err():
            return self
        return Return.ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Sequence another fallible step; fn is never called on an error"""
        if self.is_err():
            return self
        return fn(self.value)

    def tap(self, fn: Callable[[T], Any]) -> "Result[T]":
        """Run a side effect on the success value and return self unchanged"""
        if self.is_ok():
            fn(self.value)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.value == other.value and self.error == other.error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result.err({self.error!r})"
        return f"Result.ok({self.value!r})"


class Return:
    """Constructors for Result"""

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)

    @staticmethod
    def from_optional(value: Optional[T], error: Error) -> Result[T]:
        """Absent becomes the given error, present becomes success"""
        if value is None:
            return Return.err(error)
        return Return.ok(value)

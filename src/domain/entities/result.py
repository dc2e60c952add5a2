"""
Domain Result

Operations of the forecast workflows return a ``Result`` instead of raising
for expected failures. A result is either a success carrying a value or a
failure carrying a typed ``Error``.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import Error

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value or an error, never both."""

    _value: Optional[T] = None
    error: Error = Error.NONE

    @property
    def is_success(self) -> bool:
        return self.error == Error.NONE

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        """
        Value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError("Cannot access value of a failed result")
        return self._value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(_value=value, error=Error.NONE)

    @classmethod
    def failure(cls, error: Error) -> "Result[T]":
        if error == Error.NONE:
            raise ValueError("A failed result requires an error")
        return cls(_value=None, error=error)

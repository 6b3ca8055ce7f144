"""
Type definitions for structval.

Provides the Result type (Ok/Err), the structured ValidationError and
type aliases shared by every validator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar, Union

from .dynamic import render

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Where and why a value failed validation.

    path:     location relative to the root input ("" is the root itself)
    expected: what was required at that location
    found:    rendering of the value actually there
    """

    path: str
    expected: str
    found: str

    def with_path(self, path: str) -> ValidationError:
        return replace(self, path=path)

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "expected": self.expected, "found": self.found}

    def __str__(self) -> str:
        where = self.path if self.path else "root"
        return f"at {where}: expected {self.expected}, found {self.found}"


class UnwrapError(ValueError):
    """Raised when unwrapping the wrong variant of a Result."""

    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise UnwrapError(f"unwrap_err called on Ok: {self.value!r}")


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def unwrap(self) -> Any:
        raise UnwrapError(f"unwrap called on Err: {self.error}", self.error)

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]
Outcome = Union[Ok[T], Err[ValidationError]]


def fail(expected: str, value: Any) -> Err[ValidationError]:
    """
    Failure at the root path, reporting `value` as found.

    Usage:
        def positive(x: float) -> Outcome[float]:
            return Ok(x) if x > 0 else fail("positive number", x)
    """
    return Err(ValidationError(path="", expected=expected, found=render(value)))

"""
Core validator class for structval.

A validator is a pure function from a dynamic value to an Outcome. The
Validator dataclass wraps such a function so validators compose with
operators; combinators accept plain functions as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .types import Outcome

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Validator(Generic[T]):
    """
    Immutable validator node.

    Holds no state between calls, so a single instance can be shared and
    called concurrently.
    """

    fn: Callable[[Any], Outcome[T]]
    name: str | None = None

    def __call__(self, value: Any) -> Outcome[T]:
        return self.fn(value)

    def __or__(self, other: Callable[[Any], Outcome[U]]) -> Validator[T | U]:
        """
        Try this validator, fall back to `other`.

        Usage:
            number_val | boolean_val
        """
        from .combinators import or_

        return or_(self, other)

    def __ror__(self, other: Callable[[Any], Outcome[U]]) -> Validator[T | U]:
        """Support `plain_function | validator`."""
        from .combinators import or_

        return or_(other, self)

    def then(self, transform: Callable[[T], Outcome[U]]) -> Validator[U]:
        """Feed successful output into `transform`, same as chain()."""
        from .combinators import chain

        return chain(self, transform)

    def map(self, fn: Callable[[T], U]) -> Validator[U]:
        """Apply `fn` to successful output."""
        inner = self.fn

        def mapped(value: Any) -> Outcome[U]:
            return inner(value).map(fn)

        return Validator(mapped, name=f"{self.name}.map" if self.name else None)

    def __repr__(self) -> str:
        if self.name:
            return f"Validator({self.name})"
        return f"Validator({getattr(self.fn, '__name__', repr(self.fn))})"


def to_validator(v: Any) -> Validator[Any]:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        Callable  -> Validator wrapping it
    """
    if isinstance(v, Validator):
        return v

    if callable(v):
        return Validator(v, name=getattr(v, "__name__", None))

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")

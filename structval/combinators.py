"""
Combinators: build new validators out of existing ones.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

from .core import Validator, to_validator
from .dynamic import Undefined, render
from .primitives import null_val, undefined_val
from .types import Err, Outcome, ValidationError

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")


def or_(
    first: Callable[[Any], Outcome[T]], second: Callable[[Any], Outcome[U]]
) -> Validator[Union[T, U]]:
    """
    Try `first`, fall back to `second`.

    Left-biased: when `first` succeeds its result is returned and `second`
    is never called. When both fail the errors merge into one root-level
    error whose expected reads "<first> or <second>".

    Usage:
        or_(number_val, boolean_val)
        number_val | boolean_val        # same thing
    """
    p1 = to_validator(first)
    p2 = to_validator(second)

    def check(value: Any) -> Outcome[Union[T, U]]:
        r1 = p1(value)
        if r1.is_ok():
            return r1
        r2 = p2(value)
        if r2.is_ok():
            return r2
        return Err(
            ValidationError(
                path="",
                expected=f"{r1.error.expected} or {r2.error.expected}",
                found=render(value),
            )
        )

    return Validator(check)


def optional(p: Callable[[Any], Outcome[T]]) -> Validator[Union[T, Undefined]]:
    """
    Allow absence, validate if present.

    Usage:
        optional(string_val)     # UNDEFINED or a string; None is rejected
    """
    return or_(p, undefined_val)


def chain(
    p: Callable[[Any], Outcome[T]], transform: Callable[[T], Outcome[U]]
) -> Validator[U]:
    """
    Run `p`, then feed its output to `transform`.

    Both stages work at the same location, so neither adds a path segment;
    whichever stage fails first is reported as is.

    Usage:
        def positive(x):
            return Ok(x) if x > 0 else fail("positive number", x)

        chain(number_val, positive)
    """
    first = to_validator(p)

    def check(value: Any) -> Outcome[U]:
        return first(value).and_then(transform)

    return Validator(check)


def empty_val(default: D) -> Validator[D]:
    """
    Accept null or absence, producing `default`.

    Usage:
        empty_val("")            # UNDEFINED -> "", None -> ""
    """
    return or_(undefined_val, null_val).map(lambda _: default)

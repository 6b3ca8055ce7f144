"""
Primitive validators, one per dynamic value kind.

Each succeeds only when the input is exactly of its kind; nothing is
coerced, so number_val("3") fails.
"""

from __future__ import annotations

import json
from typing import Any, Union

from .core import Validator
from .dynamic import UNDEFINED, Kind, Undefined, kind_of
from .types import Ok, Outcome, fail

JsonObject = dict[str, Any]
JsonArray = Union[list, tuple]


def _kind_validator(kind: Kind, expected: str) -> Validator[Any]:
    def check(value: Any) -> Outcome[Any]:
        if kind_of(value) is kind:
            return Ok(value)
        return fail(expected, value)

    check.__name__ = f"{expected.lower()}_val"
    return Validator(check, name=expected)


string_val: Validator[str] = _kind_validator(Kind.STRING, "string")
number_val: Validator[Union[int, float]] = _kind_validator(Kind.NUMBER, "number")
boolean_val: Validator[bool] = _kind_validator(Kind.BOOLEAN, "boolean")
null_val: Validator[None] = _kind_validator(Kind.NULL, "null")
undefined_val: Validator[Undefined] = _kind_validator(Kind.UNDEFINED, "undefined")

# Arrays never pass as objects, even though both are containers
object_val: Validator[JsonObject] = _kind_validator(Kind.OBJECT, "Object")
array_val: Validator[JsonArray] = _kind_validator(Kind.ARRAY, "Array")


def literal(*values: Any) -> Validator[Any]:
    """
    Validate that the input is one of the given scalar values.

    Kinds must match as well as values, so literal(1) rejects True.

    Usage:
        literal("horse", "duck")
    """
    if not values:
        raise ValueError("literal() requires at least one value")

    allowed = [(kind_of(v), v) for v in values]
    expected = " or ".join(
        "undefined" if v is UNDEFINED else json.dumps(v) for v in values
    )

    def check(value: Any) -> Outcome[Any]:
        kind = kind_of(value)
        for allowed_kind, allowed_value in allowed:
            if kind is allowed_kind and value == allowed_value:
                return Ok(value)
        return fail(expected, value)

    return Validator(check, name=f"literal({expected})")

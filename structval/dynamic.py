"""
Dynamic values: the untyped input handed over by a JSON-like decoder.

A dynamic value is one of seven kinds. Validators dispatch on the explicit
discriminant returned by kind_of() instead of poking at Python types directly.
"""

from __future__ import annotations

import json
import math
from enum import Enum, auto
from typing import Any

from .context import max_found_length


class Undefined(Enum):
    """
    Sentinel for an absent value (a missing field or tuple position).

    Distinct from None, which is JSON null. Falsy, so `value or default`
    behaves the same way for absence and null.
    """

    UNDEFINED = "undefined"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED


class Kind(Enum):
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNDEFINED = auto()
    ARRAY = auto()
    OBJECT = auto()
    OTHER = auto()


def kind_of(value: Any) -> Kind:
    """
    Classify a dynamic value.

    bool is checked before numbers since it subclasses int in Python.
    Mappings only count as objects when every key is a string.
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return Kind.OBJECT
    return Kind.OTHER


def _json_default(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def _lenient_default(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    return repr(value)


def dump_json(value: Any, *, allow_nan: bool = True, lenient: bool = False) -> str:
    """
    Compact JSON text for a dynamic value; nested UNDEFINED becomes null.

    With `lenient`, values that are no JSON kind are written as their repr
    string instead of raising TypeError. ValueError is raised for non-finite
    floats when allow_nan is False and for circular references.
    """
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=allow_nan,
        default=_lenient_default if lenient else _json_default,
    )


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _opaque(value: Any) -> str:
    try:
        return repr(value)
    except RecursionError:
        return f"<{type(value).__name__}>"


def render(value: Any) -> str:
    """
    Render a value the way it is reported in ValidationError.found.

    Compact JSON text, or the literal "undefined" for an absent value.
    NaN and infinities render as null, like JSON.stringify.

    Usage:
        render("x")          # '"x"'
        render(["a", 1])     # '["a",1]'
        render(UNDEFINED)    # 'undefined'
    """
    if value is UNDEFINED:
        text = "undefined"
    else:
        try:
            text = dump_json(value, allow_nan=False, lenient=True)
        except ValueError:
            # Non-finite floats, or a circular reference
            try:
                text = dump_json(_finite(value), allow_nan=False, lenient=True)
            except (TypeError, ValueError, RecursionError):
                text = _opaque(value)
        except (TypeError, RecursionError):
            # Non-string keys or nesting too deep to encode
            text = _opaque(value)

    limit = max_found_length()
    if limit is not None and len(text) > limit:
        return text[:limit] + "..."
    return text

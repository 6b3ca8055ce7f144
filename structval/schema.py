"""
Schema operations for structval.

Provides parse() and model_val().
"""

from __future__ import annotations

from collections import abc
from types import UnionType
from typing import Annotated, Any, Callable, TypeVar, Union, get_args, get_origin

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .core import Validator, to_validator
from .dynamic import UNDEFINED, dump_json, render
from .paths import indexed_path, member_path
from .primitives import object_val
from .types import Err, Ok, Outcome, ValidationError, fail

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

logger = structlog.get_logger(__name__)


def parse(validator: Callable[[Any], Outcome[T]], value: Any) -> Outcome[T]:
    """
    Validate a decoded value.

    Args:
        validator: Any validator or plain validator function
        value: The dynamic value handed over by the decoder

    Returns:
        Ok(typed value) if validation passes
        Err(ValidationError) if validation fails

    Usage:
        result = parse(fields({"name": string_val}), json.loads(body))
        if result.is_err():
            return bad_request(str(result.error))
    """
    result = to_validator(validator)(value)
    if isinstance(result, Err):
        logger.debug(
            "validation_failed",
            validator=repr(validator),
            path=result.error.path,
            expected=result.error.expected,
            found=result.error.found,
        )
    return result


def model_val(model: type[M]) -> Validator[M]:
    """
    Validate an object into a Pydantic model instance.

    Pydantic runs in strict JSON mode: nothing is coerced, while arrays are
    still accepted for tuple fields, as they would be from a decoder. Only
    the first Pydantic error is reported. Its location becomes a path with
    the same rules as the structural validators: declared model fields are
    members, positions and mapping keys are indexed.

    Usage:
        class User(BaseModel):
            name: str
            tags: list[str] = []

        model_val(User)({"name": "Alice", "tags": ["a", 1]})
        # Err(path="tags.[1]", expected="Input should be a valid string", found="1")
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"model_val() requires a Pydantic model, got {model!r}")

    def check(value: Any) -> Outcome[M]:
        record = object_val(value)
        if record.is_err():
            return record

        # Pydantic knows nothing about absence markers
        data = {k: v for k, v in record.value.items() if v is not UNDEFINED}
        try:
            text = dump_json(data)
        except (TypeError, ValueError, RecursionError):
            return fail("JSON-compatible value", value)

        try:
            return Ok(model.model_validate_json(text, strict=True))
        except PydanticValidationError as e:
            return Err(_from_pydantic(model, e))

    return Validator(check, name=model.__name__)


def _from_pydantic(
    model: type[BaseModel], exc: PydanticValidationError
) -> ValidationError:
    first = exc.errors()[0]
    found = UNDEFINED if first["type"] == "missing" else first.get("input")
    return ValidationError(
        path=_path_for(model, first["loc"]),
        expected=first["msg"],
        found=render(found),
    )


def _path_for(model: type[BaseModel], loc: tuple[str | int, ...]) -> str:
    """
    Turn a Pydantic error location into a path, following the field types.

    Union branch tags in `loc` are not access steps and are skipped.
    """
    steps: list[tuple[str | int, bool]] = []
    hint: Any = model
    for segment in loc:
        hint = _unwrap(hint)
        if _is_union(hint) and isinstance(segment, str):
            hint = next((a for a in get_args(hint) if _tag(a) == segment), None)
            continue
        if isinstance(segment, int):
            steps.append((segment, True))
            hint = _item_type(hint, segment)
        elif _is_mapping(hint):
            steps.append((segment, True))
            hint = _value_type(hint)
        else:
            steps.append((segment, False))
            hint = _field_type(hint, segment)

    path = ""
    for here, indexed in reversed(steps):
        path = indexed_path(here, path) if indexed else member_path(str(here), path)
    return path


def _is_union(hint: Any) -> bool:
    return get_origin(hint) in (Union, UnionType)


def _unwrap(hint: Any) -> Any:
    """Strip Annotated and Optional, which leave no trace in `loc`."""
    if get_origin(hint) is Annotated:
        return _unwrap(get_args(hint)[0])
    if _is_union(hint):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
    return hint


def _tag(hint: Any) -> str | None:
    if isinstance(hint, type):
        return hint.__name__
    return None


def _is_mapping(hint: Any) -> bool:
    origin = get_origin(hint) or hint
    return isinstance(origin, type) and issubclass(origin, abc.Mapping)


def _value_type(hint: Any) -> Any:
    args = get_args(hint)
    return args[1] if len(args) == 2 else None


def _item_type(hint: Any, index: int) -> Any:
    origin = get_origin(hint)
    args = get_args(hint)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return args[index] if index < len(args) else None
    if isinstance(origin, type) and issubclass(origin, abc.Iterable) and args:
        return args[0]
    return None


def _field_type(hint: Any, name: str | int) -> Any:
    if not (isinstance(hint, type) and issubclass(hint, BaseModel)):
        return None
    for field_name, info in hint.model_fields.items():
        if name in (field_name, info.alias):
            return info.annotation
    return None

"""
Structural validators over compound dynamic values.

Each checks the container kind first (failing at the root path like
object_val/array_val would), then delegates to per-element validators and
prefixes their error paths:

    arrays, mapping keys, tuple positions  ->  indexed: [0], ["key"]
    named fields                           ->  member:  name, name.inner

The first failing element wins; nothing is aggregated.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, overload

from .core import Validator, to_validator
from .dynamic import UNDEFINED
from .paths import indexed_path, member_path
from .primitives import array_val, object_val
from .types import Err, Ok, Outcome, ValidationError

T = TypeVar("T")

Validators = Sequence[Callable[[Any], Outcome[Any]]]
FieldValidators = Mapping[str, Callable[[Any], Outcome[Any]]]


def _at_index(here: str | int) -> Callable[[ValidationError], ValidationError]:
    return lambda err: err.with_path(indexed_path(here, err.path))


def _at_member(here: str) -> Callable[[ValidationError], ValidationError]:
    return lambda err: err.with_path(member_path(here, err.path))


def member(name: str, p: Callable[[Any], Outcome[T]]) -> Validator[T]:
    """
    Look up one field of an object and validate it.

    A missing key is handed to `p` as UNDEFINED, so `p` decides whether
    absence is acceptable (see optional()).

    Usage:
        member("age", number_val)({"age": 3})     # Ok(3)
        member("age", number_val)({})             # Err(path="age", ...)
    """
    inner = to_validator(p)

    def check(value: Any) -> Outcome[T]:
        record = object_val(value)
        if record.is_err():
            return record
        return inner(record.value.get(name, UNDEFINED)).map_err(_at_member(name))

    return Validator(check, name=f"member({name!r})")


def all_elements(p: Callable[[Any], Outcome[T]]) -> Validator[list[T]]:
    """
    Validate every element of an array, in order.

    Returns a list of the validated outputs, same length and order.

    Usage:
        all_elements(string_val)(["a", 3])   # Err(path="[1]", expected="string")
    """
    inner = to_validator(p)

    def check(value: Any) -> Outcome[list[T]]:
        array = array_val(value)
        if array.is_err():
            return array

        out: list[T] = []
        for i, item in enumerate(array.value):
            result = inner(item)
            if isinstance(result, Err):
                return result.map_err(_at_index(i))
            out.append(result.value)
        return Ok(out)

    return Validator(check)


def all_fields(p: Callable[[Any], Outcome[T]]) -> Validator[dict[str, T]]:
    """
    Validate every value of an object, keyed by computed keys.

    Iterates in the object's own key order. Keys render bracketed and quoted
    (`["b"]`), the same way all_elements renders positions.

    Usage:
        all_fields(string_val)({"a": "1", "b": 4})   # Err(path='["b"]', ...)
    """
    inner = to_validator(p)

    def check(value: Any) -> Outcome[dict[str, T]]:
        record = object_val(value)
        if record.is_err():
            return record

        out: dict[str, T] = {}
        for key, item in record.value.items():
            result = inner(item)
            if isinstance(result, Err):
                return result.map_err(_at_index(key))
            out[key] = result.value
        return Ok(out)

    return Validator(check)


@overload
def elements(
    validators: Validators, into: None = None
) -> Validator[tuple[Any, ...]]:
    ...


@overload
def elements(validators: Validators, into: Callable[..., T]) -> Validator[T]:
    ...


def elements(
    validators: Validators, into: Optional[Callable[..., T]] = None
) -> Validator[Any]:
    """
    Validate a fixed-arity array position by position into a tuple.

    Positions past the end of the input are UNDEFINED, so a short input
    fails at the first position whose validator rejects absence. Extra
    trailing input elements are ignored. When `into` is given the outputs
    are passed to it positionally, which declares the output shape
    (a NamedTuple, a dataclass, ...).

    Usage:
        parse_triple = elements([string_val, number_val, optional(number_val)])
        parse_triple(["hello", 3])      # Ok(("hello", 3, UNDEFINED))

        class Pair(NamedTuple):
            name: str
            age: float

        elements([string_val, number_val], into=Pair)   # Validator[Pair]
    """
    inners = [to_validator(p) for p in validators]

    def check(value: Any) -> Outcome[Any]:
        array = array_val(value)
        if array.is_err():
            return array

        items = array.value
        out = []
        for i, inner in enumerate(inners):
            item = items[i] if i < len(items) else UNDEFINED
            result = inner(item)
            if isinstance(result, Err):
                return result.map_err(_at_index(i))
            out.append(result.value)

        if into is None:
            return Ok(tuple(out))
        return Ok(into(*out))

    return Validator(check)


@overload
def fields(
    validators: FieldValidators, into: None = None
) -> Validator[dict[str, Any]]:
    ...


@overload
def fields(validators: FieldValidators, into: Callable[..., T]) -> Validator[T]:
    ...


def fields(
    validators: FieldValidators, into: Optional[Callable[..., T]] = None
) -> Validator[Any]:
    """
    Validate an object field by field into a record.

    Fields are checked in the order of `validators`; missing fields are
    UNDEFINED. The output holds exactly the validated fields, as a dict or,
    when `into` is given, as `into(**record)` (a dataclass, NamedTuple,
    pydantic model, ...). Absent fields are left out of the keyword
    arguments so the target's own defaults apply.

    Usage:
        animal = fields({
            "name": string_val,
            "age": number_val,
            "nickname": optional(string_val),
        })
        animal({"name": "Carl", "age": 13})
        # Ok({"name": "Carl", "age": 13, "nickname": UNDEFINED})
    """
    inners = {name: to_validator(p) for name, p in validators.items()}

    def check(value: Any) -> Outcome[Any]:
        record = object_val(value)
        if record.is_err():
            return record

        source = record.value
        out: dict[str, Any] = {}
        for name, inner in inners.items():
            result = inner(source.get(name, UNDEFINED))
            if isinstance(result, Err):
                return result.map_err(_at_member(name))
            out[name] = result.value

        if into is None:
            return Ok(out)
        return Ok(into(**{k: v for k, v in out.items() if v is not UNDEFINED}))

    return Validator(check)


@overload
def extract_keys(
    validators: FieldValidators, into: None = None
) -> Validator[dict[str, Any]]:
    ...


@overload
def extract_keys(
    validators: FieldValidators, into: Callable[..., T]
) -> Validator[T]:
    ...


def extract_keys(
    validators: FieldValidators, into: Optional[Callable[..., T]] = None
) -> Validator[Any]:
    """
    Pick a named subset of fields out of a larger object.

    Same algorithm as fields(); every other key of the input is dropped.

    Usage:
        extract_keys({"id": string_val})({"id": "a1", "noise": [1, 2]})
        # Ok({"id": "a1"})
    """
    return fields(validators, into=into)

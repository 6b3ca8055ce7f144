"""
structval - runtime validation for untrusted, JSON-like data.

Usage:
    from structval import fields, optional, parse, string_val, number_val

    animal = fields({
        "name": string_val,
        "age": number_val,
        "nickname": optional(string_val),
    })

    result = parse(animal, json.loads(body))
    # Ok({...}) or Err(ValidationError(path=..., expected=..., found=...))
"""

from .combinators import chain, empty_val, optional, or_
from .context import validation_context
from .core import Validator, to_validator
from .dynamic import UNDEFINED, Kind, Undefined, kind_of, render
from .paths import indexed_path, member_path
from .primitives import (
    array_val,
    boolean_val,
    literal,
    null_val,
    number_val,
    object_val,
    string_val,
    undefined_val,
)
from .schema import model_val, parse
from .structural import (
    all_elements,
    all_fields,
    elements,
    extract_keys,
    fields,
    member,
)
from .types import Err, Ok, Outcome, Result, UnwrapError, ValidationError, fail

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "Outcome",
    "ValidationError",
    "UnwrapError",
    "fail",
    # Dynamic values
    "UNDEFINED",
    "Undefined",
    "Kind",
    "kind_of",
    "render",
    # Paths
    "indexed_path",
    "member_path",
    # Core
    "Validator",
    "to_validator",
    # Primitives
    "string_val",
    "number_val",
    "boolean_val",
    "null_val",
    "undefined_val",
    "object_val",
    "array_val",
    "literal",
    # Combinators
    "or_",
    "optional",
    "chain",
    "empty_val",
    # Structural
    "member",
    "all_elements",
    "all_fields",
    "elements",
    "fields",
    "extract_keys",
    # Schema
    "parse",
    "model_val",
    # Configuration
    "validation_context",
]

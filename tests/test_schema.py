"""
Tests for structval.schema.
"""

from typing import Union

import pytest
from pydantic import BaseModel, Field
from structlog.testing import capture_logs

from structval import (
    Err,
    Ok,
    ValidationError,
    all_elements,
    all_fields,
    fields,
    model_val,
    number_val,
    parse,
    string_val,
    validation_context,
)


class User(BaseModel):
    name: str
    age: int
    tags: list[str] = []


class Point(BaseModel):
    pt: tuple[int, int]


class Registry(BaseModel):
    scores: dict[str, int]
    owners: dict[str, User] = {}


class Tagged(BaseModel):
    value: Union[int, str]
    alias_field: int = Field(0, alias="aliasField")


class TestParse:
    def test_success(self):
        assert parse(number_val, 3) == Ok(3)

    def test_failure_is_logged(self):
        with capture_logs() as logs:
            result = parse(all_elements(string_val), ["a", 3])

        assert isinstance(result, Err)
        assert len(logs) == 1
        assert logs[0]["event"] == "validation_failed"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["path"] == "[1]"
        assert logs[0]["expected"] == "string"

    def test_success_is_not_logged(self):
        with capture_logs() as logs:
            parse(string_val, "ok")
        assert logs == []

    def test_accepts_plain_function(self):
        assert parse(lambda x: Ok(x), 1) == Ok(1)

    def test_found_capped_in_context(self):
        with validation_context(max_found_length=4):
            result = parse(string_val, [1, 2, 3, 4])
        assert result.error.found == "[1,2..."


class TestModelVal:
    def test_valid(self):
        user = model_val(User)({"name": "Alice", "age": 30}).unwrap()
        assert user == User(name="Alice", age=30)

    def test_strict_no_coercion(self):
        result = model_val(User)({"name": "Alice", "age": "30"})
        assert isinstance(result, Err)
        assert result.error.path == "age"
        assert result.error.found == '"30"'

    def test_missing_field(self):
        result = model_val(User)({"name": "Alice"})
        assert result.error.path == "age"
        assert result.error.found == "undefined"

    def test_nested_location(self):
        result = model_val(User)({"name": "Alice", "age": 3, "tags": ["a", 1]})
        assert result.error.path == "tags.[1]"
        assert result.error.found == "1"

    def test_requires_object(self):
        result = model_val(User)(["Alice"])
        assert result.error == ValidationError("", "Object", '["Alice"]')

    def test_rejects_non_models(self):
        with pytest.raises(TypeError):
            model_val(dict)  # type: ignore[arg-type]

    def test_composes(self):
        result = all_elements(model_val(User))([{"name": "A", "age": 1}, {}])
        assert result.error.path == "[1].name"

    def test_tuple_field_accepts_array(self):
        assert model_val(Point)({"pt": [1, 2]}).unwrap() == Point(pt=(1, 2))

    def test_tuple_field_no_coercion(self):
        result = model_val(Point)({"pt": [1, "2"]})
        assert result.error.path == "pt.[1]"
        assert result.error.found == '"2"'

    def test_mapping_keys_are_indexed(self):
        result = model_val(Registry)({"scores": {"a": 1, "b": "x"}})
        assert result.error.path == 'scores.["b"]'
        assert result.error.found == '"x"'

    def test_mapping_path_matches_all_fields(self):
        data = {"scores": {"a": 1, "b": "x"}}
        by_model = model_val(Registry)(data).error
        by_fields = fields({"scores": all_fields(number_val)})(data).error
        assert by_model.path == by_fields.path

    def test_model_inside_mapping(self):
        result = model_val(Registry)(
            {"scores": {}, "owners": {"x": {"name": "A", "age": "1"}}}
        )
        assert result.error.path == 'owners.["x"].age'

    def test_union_branch_not_in_path(self):
        result = model_val(Tagged)({"value": [1]})
        assert result.error.path == "value"

    def test_alias_is_member(self):
        result = model_val(Tagged)({"value": 1, "aliasField": "1"})
        assert result.error.path == "aliasField"

    def test_non_json_values_rejected(self):
        result = model_val(User)({"name": {"a", "b"}, "age": 1})
        assert isinstance(result, Err)
        assert result.error.expected == "JSON-compatible value"

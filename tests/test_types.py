"""
Tests for structval.types and structval.dynamic.
"""

import pytest

from structval import (
    UNDEFINED,
    Err,
    Kind,
    Ok,
    UnwrapError,
    ValidationError,
    fail,
    kind_of,
    render,
    validation_context,
)


class TestResult:
    def test_map(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)
        err = Err(ValidationError("", "number", '"a"'))
        assert err.map(lambda x: x * 10) is err

    def test_and_then(self):
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert isinstance(Ok(2).and_then(lambda x: fail("odd", x)), Err)
        err = Err(ValidationError("", "number", '"a"'))
        assert err.and_then(lambda x: Ok(x)) is err

    def test_map_err(self):
        ok = Ok(1)
        assert ok.map_err(lambda e: e.with_path("x")) is ok
        err = Err(ValidationError("", "number", '"a"'))
        assert err.map_err(lambda e: e.with_path("x")).error.path == "x"

    def test_unwrap(self):
        assert Ok("v").unwrap() == "v"
        error = ValidationError("a", "string", "3")
        with pytest.raises(UnwrapError) as excinfo:
            Err(error).unwrap()
        assert excinfo.value.error == error

    def test_unwrap_err_and_unwrap_or(self):
        error = ValidationError("", "string", "3")
        assert Err(error).unwrap_err() == error
        assert Err(error).unwrap_or("fallback") == "fallback"
        assert Ok(1).unwrap_or(2) == 1
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_predicates(self):
        assert Ok(1).is_ok() and not Ok(1).is_err()
        assert Err(None).is_err() and not Err(None).is_ok()


class TestValidationError:
    def test_str(self):
        assert str(ValidationError("a.b", "string", "3")) == (
            "at a.b: expected string, found 3"
        )
        assert str(ValidationError("", "number", '"x"')) == (
            'at root: expected number, found "x"'
        )

    def test_to_dict(self):
        error = ValidationError("[1]", "string", "3")
        assert error.to_dict() == {"path": "[1]", "expected": "string", "found": "3"}

    def test_immutable(self):
        error = ValidationError("", "string", "3")
        with pytest.raises(AttributeError):
            error.path = "x"  # type: ignore[misc]

    def test_fail(self):
        result = fail("horse or duck", "cow")
        assert result == Err(ValidationError("", "horse or duck", '"cow"'))


class TestDynamic:
    def test_kind_of(self):
        assert kind_of("s") is Kind.STRING
        assert kind_of(1) is Kind.NUMBER
        assert kind_of(1.5) is Kind.NUMBER
        assert kind_of(True) is Kind.BOOLEAN
        assert kind_of(None) is Kind.NULL
        assert kind_of(UNDEFINED) is Kind.UNDEFINED
        assert kind_of([1]) is Kind.ARRAY
        assert kind_of((1,)) is Kind.ARRAY
        assert kind_of({"a": 1}) is Kind.OBJECT
        assert kind_of({1: "a"}) is Kind.OTHER
        assert kind_of({1, 2}) is Kind.OTHER

    def test_undefined_is_falsy_singleton(self):
        assert not UNDEFINED
        assert UNDEFINED is not None
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_render(self):
        assert render("x") == '"x"'
        assert render(3) == "3"
        assert render(None) == "null"
        assert render(True) == "true"
        assert render(["x", "y"]) == '["x","y"]'
        assert render({"a": 1}) == '{"a":1}'
        assert render(UNDEFINED) == "undefined"
        assert render([UNDEFINED]) == "[null]"
        assert render("ü") == '"ü"'

    def test_render_non_finite_as_null(self):
        assert render(float("nan")) == "null"
        assert render([1.5, float("inf")]) == "[1.5,null]"
        assert render({"a": float("-inf")}) == '{"a":null}'

    def test_render_too_deep(self):
        deep: list = []
        for _ in range(100_000):
            deep = [deep]
        assert render(deep) == "<list>"

    def test_render_circular(self):
        loop: list = []
        loop.append(loop)
        assert render(loop) == "[[...]]"

    def test_render_non_json_value(self):
        assert render({1, 2}) == '"{1, 2}"'

    def test_render_capped(self):
        with validation_context(max_found_length=5):
            assert render("abcdefgh") == '"abcd...'
            assert render(1) == "1"
        assert render("abcdefgh") == '"abcdefgh"'

    def test_render_cap_must_be_positive(self):
        with pytest.raises(ValueError):
            with validation_context(max_found_length=0):
                pass

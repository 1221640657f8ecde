"""Unit tests for ParamSchema construction and error builders."""

import pytest
from pydantic import ValidationError

from paramcheck.validation import ParamSchema, invalid_param, ip_validator, missing_param, unknown_params
from paramcheck.validation.unknowns import check_unknown_params, find_unknown_params


async def _noop_after(_ctx, _raw, _validated):
    return None


class TestParamSchema:

    def test_defaults(self):
        schema = ParamSchema()

        assert schema.strict is False
        assert schema.required == {}
        assert schema.optional == {}
        assert schema.after == []

    def test_none_maps_are_empty(self):
        schema = ParamSchema(required=None, optional=None, after=None)

        assert schema.declared == set()
        assert schema.after == []

    def test_single_after_is_wrapped(self):
        schema = ParamSchema(after=_noop_after)

        assert schema.after == [_noop_after]

    def test_field_in_required_and_optional_is_rejected(self):
        with pytest.raises(ValidationError, match="both required and optional: ip"):
            ParamSchema(required={"ip": ip_validator}, optional={"ip": ip_validator})

    def test_non_callable_validator_is_rejected(self):
        with pytest.raises(ValidationError):
            ParamSchema(required={"ip": "not a function"})

    def test_unknown_schema_key_is_rejected(self):
        with pytest.raises(ValidationError):
            ParamSchema.model_validate({"requried": {"ip": ip_validator}})

    def test_schema_is_frozen(self):
        schema = ParamSchema(strict=True)

        with pytest.raises(ValidationError):
            schema.strict = False


class TestUnknowns:

    def test_find_unknown_params_keeps_input_order(self):
        schema = ParamSchema(required={"a": ip_validator}, optional={"b": ip_validator})

        assert find_unknown_params(schema, {"z": 1, "a": 1, "y": 2, "b": 3}) == ["z", "y"]

    def test_check_unknown_params(self):
        schema = ParamSchema(required={"a": ip_validator})

        assert check_unknown_params(schema, {"a": 1}) is None
        assert check_unknown_params(schema, {"a": 1, "x": 2, "w": 3}) == unknown_params(["x", "w"])


class TestBuilders:

    def test_invalid_param_defaults(self):
        assert invalid_param("a").model_dump(exclude_none=True) == {
            "field": "a",
            "code": "InvalidParameter",
            "message": "Invalid parameters",
        }

    def test_invalid_param_with_invalid_list(self):
        err = invalid_param("ips", "invalid IPs", ["a", "b"])

        assert err.invalid == ["a", "b"]

    def test_missing_param(self):
        assert missing_param("a", "gone").model_dump(exclude_none=True) == {
            "field": "a",
            "code": "MissingParameter",
            "message": "gone",
        }

    def test_unknown_params_message(self):
        err = unknown_params(["x", "y"], "Unexpected")

        assert err.field == ["x", "y"]
        assert err.message == "Unexpected: x, y"

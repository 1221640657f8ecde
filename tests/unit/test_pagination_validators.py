"""Unit tests for the offset and limit validators."""

import pytest

from paramcheck.validation import Failure, Value, invalid_param, is_not_integer, limit_validator, offset_validator

OFFSET_MSG = "invalid value, offset must be an integer greater than or equal to 0"
LIMIT_MSG = "invalid limit, must be an integer greater than 0 or less than or equal to 1000"


class TestIsNotInteger:

    @pytest.mark.parametrize("value", ["0", "10", "+7", "-3", "1e3", "5.0"])
    def test_integers(self, value):
        assert not is_not_integer(value)

    @pytest.mark.parametrize("value", ["", " 10", "10 ", "1.5", "ten", "0x10", "1_000", "nan", "inf", "1e400"])
    def test_not_integers(self, value):
        assert is_not_integer(value)


class TestOffsetValidator:

    @pytest.mark.parametrize("value, expected", [("0", 0), ("25", 25), (0, 0), (40, 40), (3.0, 3)])
    def test_valid(self, value, expected):
        assert offset_validator.check("offset", value) == Value(expected)

    def test_large_integer_string_keeps_precision(self):
        assert offset_validator.check("offset", "9007199254740993") == Value(9007199254740993)
        assert offset_validator.check("offset", "1" * 400) == Value(int("1" * 400))

    @pytest.mark.parametrize("value", ["-1", -1, "1.5", 1.5, " 4", "", "abc", None, True, [1]])
    def test_invalid(self, value):
        assert offset_validator.check("offset", value) == Failure(invalid_param("offset", OFFSET_MSG))


class TestLimitValidator:

    @pytest.mark.parametrize("value, expected", [("1", 1), ("1000", 1000), (500, 500)])
    def test_valid(self, value, expected):
        assert limit_validator.check("limit", value) == Value(expected)

    @pytest.mark.parametrize("value", ["0", 0, "1001", 1001, "NaN", "10.5", False])
    def test_invalid(self, value):
        assert limit_validator.check("limit", value) == Failure(invalid_param("limit", LIMIT_MSG))

    def test_range_follows_settings(self, settings_env):
        settings_env.setenv("PARAMCHECK_MAX_LIMIT", "50")

        assert limit_validator.check("limit", "50") == Value(50)
        assert limit_validator.check("limit", "51") == Failure(
            invalid_param("limit", "invalid limit, must be an integer greater than 0 or less than or equal to 50")
        )

"""String validators — non-empty strings and arrays of them."""

from typing import Any

from paramcheck.config import get_settings
from paramcheck.validation import constants
from paramcheck.validation.base import BaseFieldValidator
from paramcheck.validation.common import is_blank
from paramcheck.validation.models import Failure, FieldOutcome


class StringValidator(BaseFieldValidator):
    """A string that is not blank and at most MAX_STR_LEN characters long."""

    @property
    def name(self) -> str:
        return "StringValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, str):
            return self._fail(field, constants.STR)

        if len(value) > get_settings().MAX_STR_LEN:
            return self._fail(field, constants.max_len_message())

        if is_blank(value):
            return self._fail(field, constants.STR_EMPTY)

        return self._ok(value)


class StringArrayValidator(BaseFieldValidator):
    """A non-empty list of non-blank strings."""

    @property
    def name(self) -> str:
        return "StringArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, list):
            return self._fail(field, constants.ARRAY_OF_STR)

        if not value:
            return self._fail(field, constants.ARRAY_EMPTY)

        for item in value:
            if not isinstance(item, str):
                return self._fail(field, constants.ARRAY_OF_STR)
            if is_blank(item):
                return self._fail(field, constants.STR_EMPTY)

        return self._ok(value)


class StringOrArrayValidator(BaseFieldValidator):
    """Either a valid string or a valid string array."""

    def __init__(self) -> None:
        self._string = StringValidator()
        self._array = StringArrayValidator()

    @property
    def name(self) -> str:
        return "StringOrArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        outcome = self._string.check(field, value)
        if isinstance(outcome, Failure):
            return self._array.check(field, value)
        return outcome


string_validator = StringValidator()
string_array_validator = StringArrayValidator()
string_or_array_validator = StringOrArrayValidator()

"""Choice validators — booleans, enumerations and response field lists."""

import json
from typing import Any, Sequence

from paramcheck.validation import constants
from paramcheck.validation.base import BaseFieldValidator
from paramcheck.validation.models import FieldOutcome


class BooleanValidator(BaseFieldValidator):
    """A real boolean, or exactly ``"true"`` / ``"false"``."""

    @property
    def name(self) -> str:
        return "BooleanValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if isinstance(value, bool):
            return self._ok(value)
        if isinstance(value, str) and value in ("true", "false"):
            return self._ok(value == "true")
        return self._fail(field, constants.BOOLEAN)


def _same_value(value: Any, allowed: Any) -> bool:
    # Numbers match by value (1.0 matches 1); bools and other types must match exactly
    numbers = (int, float)
    if isinstance(value, bool) or isinstance(allowed, bool):
        return type(value) is type(allowed) and value == allowed
    if isinstance(value, numbers) and isinstance(allowed, numbers):
        return value == allowed
    return type(value) is type(allowed) and value == allowed


class EnumValidator(BaseFieldValidator):
    """Membership in a fixed set of allowed values."""

    def __init__(self, values: Sequence[Any]):
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise TypeError("values must be a sequence")
        self.values = list(values)
        self._message = "must be one of: " + ", ".join(json.dumps(v, default=str) for v in self.values)

    @property
    def name(self) -> str:
        return "EnumValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not any(_same_value(value, v) for v in self.values):
            return self._fail(field, self._message)
        return self._ok(value)


class FieldsArrayValidator(BaseFieldValidator):
    """A list of names of object fields to return in a response.

    ``allowed`` lists the names a client may ask for.
    """

    def __init__(self, allowed: Sequence[str]):
        if isinstance(allowed, str) or not all(isinstance(f, str) for f in allowed):
            raise TypeError("allowed must be a sequence of strings")
        self.allowed = list(allowed)

    @property
    def name(self) -> str:
        return "FieldsArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, list):
            return self._fail(field, constants.ARRAY_OF_STR)

        if not value:
            return self._fail(field, constants.ARRAY_EMPTY)

        if len(value) > len(self.allowed):
            return self._fail(field, constants.max_fields_message(len(self.allowed)))

        for item in value:
            if not isinstance(item, str):
                return self._fail(field, constants.ARRAY_OF_STR)
            if item not in self.allowed:
                return self._fail(field, constants.UNKNOWN_FIELD)

        return self._ok(value)


boolean_validator = BooleanValidator()

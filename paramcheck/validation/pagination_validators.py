"""Pagination validators — ``offset`` and ``limit`` query parameters.

Values usually arrive as strings from an HTTP query string, so integral
decimal strings are accepted and converted to ``int``.
"""

import math
import re
from typing import Any, Optional

from paramcheck.config import get_settings
from paramcheck.validation import constants
from paramcheck.validation.base import BaseFieldValidator
from paramcheck.validation.models import FieldOutcome

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DIGITS_RE = re.compile(r"[+-]?[0-9]+")


def is_not_integer(value: str) -> bool:
    """True unless ``value`` is an integral decimal with no surrounding whitespace.

    ``"10"`` and ``"1e3"`` are integers; ``""``, ``" 10"``, ``"1.5"`` and
    ``"ten"`` are not.
    """
    if value == "" or value.strip() != value or not _DECIMAL_RE.fullmatch(value):
        return True
    if _DIGITS_RE.fullmatch(value):
        return False
    number = float(value)
    return not math.isfinite(number) or not number.is_integer()


def to_integer(value: Any) -> Optional[int]:
    """Integral number or numeric string as ``int``, otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str) and not is_not_integer(value):
        if _DIGITS_RE.fullmatch(value):
            return int(value)
        return int(float(value))
    return None


class OffsetValidator(BaseFieldValidator):
    """An integer greater than or equal to MIN_OFFSET."""

    @property
    def name(self) -> str:
        return "OffsetValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        number = to_integer(value)
        if number is None or number < get_settings().MIN_OFFSET:
            return self._fail(field, constants.offset_message())
        return self._ok(number)


class LimitValidator(BaseFieldValidator):
    """An integer between MIN_LIMIT and MAX_LIMIT inclusive."""

    @property
    def name(self) -> str:
        return "LimitValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        settings = get_settings()
        number = to_integer(value)
        if number is None or not settings.MIN_LIMIT <= number <= settings.MAX_LIMIT:
            return self._fail(field, constants.limit_message())
        return self._ok(number)


offset_validator = OffsetValidator()
limit_validator = LimitValidator()

"""UUID validators — single UUIDs, UUID arrays and UUID prefix queries."""

import re
from typing import Any

from paramcheck.config import get_settings
from paramcheck.validation import constants
from paramcheck.validation.base import BaseFieldValidator
from paramcheck.validation.common import arrayify, is_blank
from paramcheck.validation.models import FieldOutcome

UUID_RE = re.compile(r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$")
UUID_PREFIX_CHARS_RE = re.compile(r"^[0-9a-f*-]+$")


def is_valid_uuid(value: Any) -> bool:
    """True if ``value`` is a canonical lowercase UUID string."""
    return isinstance(value, str) and UUID_RE.fullmatch(value) is not None


class UUIDValidator(BaseFieldValidator):
    """Accepts only the canonical 8-4-4-4-12 lowercase form."""

    @property
    def name(self) -> str:
        return "UUIDValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not is_valid_uuid(value):
            return self._fail(field, constants.INVALID_UUID)
        return self._ok(value)


class UUIDArrayValidator(BaseFieldValidator):
    """A list (or comma-separated string) of UUIDs, deduplicated and sorted."""

    @property
    def name(self) -> str:
        return "UUIDArrayValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, (list, tuple, str)):
            return self._fail(field, constants.ARRAY_OF_STR)

        valid: set[str] = set()
        invalid: set[str] = set()
        for item in arrayify(value):
            if is_valid_uuid(item):
                valid.add(item)
            else:
                invalid.add(str(item))

        if invalid:
            return self._fail(field, constants.INVALID_UUID, sorted(invalid))
        return self._ok(sorted(valid))


class UUIDPrefixValidator(BaseFieldValidator):
    """A full UUID, or a prefix query ending in a single ``*``.

    Matching by suffix, infix or circumfix (``*beef``, ``de*ef``) is refused.
    """

    @property
    def name(self) -> str:
        return "UUIDPrefixValidator"

    def check(self, field: str, value: Any) -> FieldOutcome:
        if not isinstance(value, str):
            return self._fail(field, constants.STR)

        if len(value) > get_settings().MAX_STR_LEN:
            return self._fail(field, constants.max_len_message())

        if is_blank(value):
            return self._fail(field, constants.STR_EMPTY)

        stars = value.count("*")
        if stars > 1:
            return self._fail(field, constants.UUID_WILDCARD)

        if stars == 1:
            if not value.endswith("*"):
                return self._fail(field, constants.UUID_PREF)
            if not UUID_PREFIX_CHARS_RE.fullmatch(value):
                return self._fail(field, constants.UUID_PREF_CHAR)
        elif not is_valid_uuid(value):
            return self._fail(field, constants.INVALID_UUID)

        return self._ok(value)


uuid_validator = UUIDValidator()
uuid_array_validator = UUIDArrayValidator()
uuid_prefix_validator = UUIDPrefixValidator()

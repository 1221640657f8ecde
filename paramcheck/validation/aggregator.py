"""Error aggregation — turns one pass's errors into a single outcome."""

from typing import Any, Mapping, Optional, Sequence

import structlog

from paramcheck.validation import constants
from paramcheck.validation.errors import InternalError, InvalidParamsError, MultiError
from paramcheck.validation.models import ErrorCode, FieldError

logger = structlog.get_logger()


_FIELD_ERROR_KEYS = ("field", "code", "message", "invalid")


def has_field(err: Any) -> bool:
    """True if ``err`` names a field, as a mapping key or an attribute."""
    if isinstance(err, Mapping):
        return "field" in err
    return hasattr(err, "field")


def as_field_error(err: Any) -> Optional[FieldError]:
    """Return ``err`` as a FieldError, or None if it has no field.

    Mappings carrying a ``field`` key, and objects with a ``field``
    attribute, are accepted so hand-written validators can report plain
    dicts or their own exception types. Missing or None parts fall back to
    the FieldError defaults.
    """
    if isinstance(err, FieldError):
        return err
    if not has_field(err):
        return None
    if isinstance(err, Mapping):
        parts = {key: err.get(key) for key in _FIELD_ERROR_KEYS}
    else:
        parts = {key: getattr(err, key, None) for key in _FIELD_ERROR_KEYS}
    data = {key: value for key, value in parts.items() if value is not None or key == "field"}
    return FieldError.model_validate(data)


def field_sort_key(err: FieldError) -> str:
    """Sort key by field name.

    A list-valued field (unknown parameters) sorts as its comma-joined names,
    so ``["hal"]`` sorts before ``"ip"``.
    """
    if isinstance(err.field, str):
        return err.field
    return ",".join(err.field)


def aggregate_errors(errors: Sequence[Any], validated: dict[str, Any]) -> dict[str, Any]:
    """Return ``validated`` if there are no errors, otherwise raise.

    Raises:
        InternalError: at least one error has no field. Field errors are
            discarded; two or more internal errors are wrapped in MultiError.
        InvalidParamsError: only field errors, sorted by field. The message is
            "Missing parameters" when every error is MissingParameter and
            "Invalid parameters" otherwise.
    """
    if not errors:
        return validated

    field_errors: list[FieldError] = []
    internal_errors: list[Any] = []
    for err in errors:
        field_error = as_field_error(err)
        if field_error is None:
            internal_errors.append(err)
        else:
            field_errors.append(field_error)

    if internal_errors:
        logger.error(
            "param_validation_internal_error",
            internal_errors=len(internal_errors),
            discarded_field_errors=len(field_errors),
        )
        cause = internal_errors[0] if len(internal_errors) == 1 else MultiError(internal_errors)
        raise InternalError(cause)

    invalid = any(err.code != ErrorCode.MISSING_PARAMETER.value for err in field_errors)
    message = constants.INVALID_PARAMS if invalid else constants.MISSING_PARAMS
    raise InvalidParamsError(message, sorted(field_errors, key=field_sort_key))

"""Validation models — error codes, field errors, validator outcomes and schemas.

A field validator reports its result as one of the outcome types below
instead of raising:

    Value(v)           the field is set to ``v`` in the validated result
    Expanded({...})    every key of the mapping is merged into the result
    Skip()             nothing is added (the field was only checked)
    Failure(error)     ``error`` is reported; nothing is added
"""

from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from paramcheck.validation import constants


class ErrorCode(str, Enum):
    """Codes carried by every field-level error."""

    INVALID_PARAMETER = "InvalidParameter"
    MISSING_PARAMETER = "MissingParameter"
    UNKNOWN_PARAMETERS = "UnknownParameters"


class FieldError(BaseModel):
    """A single field-level finding, as sent back to API clients.

    ``code`` is usually one of ErrorCode, but validators may report their
    own codes (``"Duplicate"``, for example).
    """

    field: Union[str, list[str]]  # List of names for unknown parameters
    code: str = ErrorCode.INVALID_PARAMETER.value
    message: str = constants.INVALID_PARAMS
    invalid: Optional[list[Any]] = None  # Offending sub-values, sorted

    @field_validator("field", mode="before")
    @classmethod
    def _field_as_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return value if isinstance(value, str) else str(value)

    @field_validator("code", "message", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value if isinstance(value, str) else str(value)

    @field_validator("invalid", mode="before")
    @classmethod
    def _as_list(cls, value: Any) -> Any:
        if value is None or isinstance(value, list):
            return value
        if isinstance(value, (tuple, set, frozenset)):
            return list(value)
        return [value]


# ── Validator outcomes ──

@dataclass(frozen=True)
class Value:
    value: Any


@dataclass(frozen=True)
class Expanded:
    values: Mapping[str, Any] = dc_field(default_factory=dict)


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class Failure:
    error: Any


FieldOutcome = Union[Value, Expanded, Skip, Failure]

# (context, field name, raw value) -> outcome, sync or async
FieldValidator = Callable[[Any, str, Any], Union[FieldOutcome, None, Awaitable[Optional[FieldOutcome]]]]

# (context, raw params, validated params) -> None | error | list of errors, sync or async
CrossValidator = Callable[[Any, Mapping[str, Any], dict[str, Any]], Any]


class ParamSchema(BaseModel):
    """Declared parameters for one request handler.

    Schemas are read-only once built and may be shared between concurrent
    validation passes.
    """

    strict: bool = Field(default=False, description="Reject parameters that are not declared")
    required: dict[str, Callable[..., Any]] = Field(default_factory=dict)
    optional: dict[str, Callable[..., Any]] = Field(default_factory=dict)
    after: list[Callable[..., Any]] = Field(
        default_factory=list,
        description="Cross-field validators, run in order once every field passed",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("required", "optional", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("after", mode="before")
    @classmethod
    def _wrap_single_after(cls, value: Any) -> Any:
        if value is None:
            return []
        if callable(value):
            return [value]
        return value

    @model_validator(mode="after")
    def _check_overlap(self) -> "ParamSchema":
        both = sorted(set(self.required) & set(self.optional))
        if both:
            raise ValueError(f"fields declared both required and optional: {', '.join(both)}")
        return self

    @property
    def declared(self) -> set[str]:
        """All field names the schema knows about."""
        return set(self.required) | set(self.optional)

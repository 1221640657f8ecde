"""Error classes and builders for a response's ``errors`` array."""

from typing import Any, Optional, Sequence

from fastapi import HTTPException

from paramcheck.validation import constants
from paramcheck.validation.models import ErrorCode, FieldError


# ── Error classes ──

class InvalidParamsError(HTTPException):
    """Invalid or missing parameters (HTTP 422).

    ``detail`` holds the response body, so FastAPI's default handler renders
    it without extra wiring.
    """

    rest_code = "InvalidParameters"

    def __init__(self, message: str, errors: Sequence[FieldError]):
        self.message = message
        self.errors = list(errors)
        self.body = {
            "code": self.rest_code,
            "message": message,
            "errors": [e.model_dump(exclude_none=True) for e in self.errors],
        }
        super().__init__(status_code=422, detail=self.body)

    def __str__(self) -> str:
        return self.message


class MultiError(Exception):
    """Two or more internal errors reported by one validation pass."""

    def __init__(self, errors: Sequence[Any]):
        self.errors = list(errors)
        super().__init__(f"first of {len(self.errors)} errors: {self.errors[0]}")


class InternalError(HTTPException):
    """A validator misbehaved (HTTP 500). ``cause`` holds what it reported."""

    rest_code = "InternalError"

    def __init__(self, cause: Any, message: str = constants.INTERNAL):
        self.message = message
        self.cause = cause
        super().__init__(
            status_code=500,
            detail={"code": self.rest_code, "message": message},
        )

    def __str__(self) -> str:
        return self.message


# ── Builders ──

def invalid_param(field: str, message: Optional[str] = None, invalid: Optional[list[Any]] = None) -> FieldError:
    """Error for a parameter whose value failed validation."""
    return FieldError(
        field=field,
        code=ErrorCode.INVALID_PARAMETER,
        message=message or constants.INVALID_PARAMS,
        invalid=invalid,
    )


def missing_param(field: str, message: Optional[str] = None) -> FieldError:
    """Error for a required parameter absent from the input."""
    return FieldError(
        field=field,
        code=ErrorCode.MISSING_PARAMETER,
        message=message or constants.MISSING_PARAM,
    )


def unknown_params(fields: Sequence[str], message: Optional[str] = None) -> FieldError:
    """One error listing every undeclared parameter."""
    names = list(fields)
    return FieldError(
        field=names,
        code=ErrorCode.UNKNOWN_PARAMETERS,
        message=f"{message or constants.UNKNOWN_PARAMS}: {', '.join(names)}",
    )

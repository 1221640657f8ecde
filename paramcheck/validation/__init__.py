"""Parameter validation — declared schemas, stock validators, aggregated errors.

Usage:
    from paramcheck.validation import ParamSchema, validate_params, uuid_validator

    schema = ParamSchema(strict=True, required={"uuid": uuid_validator})
    validated = await validate_params(schema, None, request_params)
"""

from paramcheck.validation.aggregator import aggregate_errors
from paramcheck.validation.base import BaseCrossValidator, BaseFieldValidator
from paramcheck.validation.choice_validators import (
    BooleanValidator,
    EnumValidator,
    FieldsArrayValidator,
    boolean_validator,
)
from paramcheck.validation.engine import (
    ValidationEngine,
    cross_validate,
    validate,
    validate_params,
    validation_engine,
)
from paramcheck.validation.errors import (
    InternalError,
    InvalidParamsError,
    MultiError,
    invalid_param,
    missing_param,
    unknown_params,
)
from paramcheck.validation.models import (
    ErrorCode,
    Expanded,
    Failure,
    FieldError,
    ParamSchema,
    Skip,
    Value,
)
from paramcheck.validation.network_validators import (
    ip_array_validator,
    ip_validator,
    subnet_array_validator,
    subnet_validator,
)
from paramcheck.validation.pagination_validators import is_not_integer, limit_validator, offset_validator
from paramcheck.validation.string_validators import (
    string_array_validator,
    string_or_array_validator,
    string_validator,
)
from paramcheck.validation.unknowns import find_unknown_params
from paramcheck.validation.uuid_validators import (
    is_valid_uuid,
    uuid_array_validator,
    uuid_prefix_validator,
    uuid_validator,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate_params",
    "validate",
    "cross_validate",
    "aggregate_errors",
    "find_unknown_params",
    "ParamSchema",
    "FieldError",
    "ErrorCode",
    "Value",
    "Expanded",
    "Skip",
    "Failure",
    "BaseFieldValidator",
    "BaseCrossValidator",
    "InvalidParamsError",
    "InternalError",
    "MultiError",
    "invalid_param",
    "missing_param",
    "unknown_params",
    "BooleanValidator",
    "EnumValidator",
    "FieldsArrayValidator",
    "boolean_validator",
    "ip_validator",
    "ip_array_validator",
    "subnet_validator",
    "subnet_array_validator",
    "string_validator",
    "string_array_validator",
    "string_or_array_validator",
    "uuid_validator",
    "uuid_array_validator",
    "uuid_prefix_validator",
    "is_valid_uuid",
    "is_not_integer",
    "offset_validator",
    "limit_validator",
]

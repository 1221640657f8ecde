"""Unknown-parameter detection for strict schemas."""

from typing import Any, Mapping, Optional

from paramcheck.validation.errors import unknown_params
from paramcheck.validation.models import FieldError, ParamSchema


def find_unknown_params(schema: ParamSchema, params: Mapping[str, Any]) -> list[str]:
    """Input keys declared neither required nor optional, in input order."""
    declared = schema.declared
    return [key for key in params if key not in declared]


def check_unknown_params(schema: ParamSchema, params: Mapping[str, Any]) -> Optional[FieldError]:
    """One UnknownParameters error naming every undeclared key, or None."""
    unknowns = find_unknown_params(schema, params)
    if not unknowns:
        return None
    return unknown_params([str(key) for key in unknowns])

"""Shared validation messages.

Messages that embed a configurable limit are built from the current
settings so they always agree with the check that produced them.
"""

from paramcheck.config import get_settings

INVALID_PARAMS = "Invalid parameters"
MISSING_PARAMS = "Missing parameters"
MISSING_PARAM = "Missing parameter"
UNKNOWN_PARAMS = "Unknown parameters"
PARAMETERS_ARE_OBJECTS = "Parameters must be objects"
INTERNAL = "Internal error"

ARRAY_OF_STR = "must be an array of strings"
ARRAY_EMPTY = "must not be an empty array"
STR = "must be a string"
STR_EMPTY = "must not be empty"
BOOLEAN = "must be a boolean value"
UNKNOWN_FIELD = "unknown field specified"

INVALID_UUID = "invalid UUID"
UUID_WILDCARD = "must contain at most one '*' wildcard"
UUID_PREF = "wildcard '*' is only allowed at the end of a UUID prefix"
UUID_PREF_CHAR = "UUID prefix may only contain hexadecimal characters and dashes"

INVALID_IP = "invalid IP address"
CIDR_SUBNET = "Subnet must be in CIDR form"

# Placeholder reported in `invalid` when an array field is an empty string
EMPTY_STRING = "Empty string"


def max_len_message() -> str:
    return f"must not be longer than {get_settings().MAX_STR_LEN} characters"


def max_fields_message(count: int) -> str:
    return f"can only specify a maximum of {count} fields"


def offset_message() -> str:
    return (
        "invalid value, offset must be an integer greater than or equal to "
        f"{get_settings().MIN_OFFSET}"
    )


def limit_message() -> str:
    settings = get_settings()
    return (
        f"invalid limit, must be an integer greater than {settings.MIN_LIMIT - 1} "
        f"or less than or equal to {settings.MAX_LIMIT}"
    )

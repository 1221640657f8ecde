"""Helpers shared by the stock validators."""

import re
from typing import Any

# First run of whitespace; array entries only have that run removed
_FIRST_WS_RE = re.compile(r"\s+")


def arrayify(value: Any) -> list[Any]:
    """Turn a comma-separated string into a list, or copy a list as-is.

    Single values often arrive as a scalar (directory services return one IP
    as a string) and CLI tools pass comma-separated lists.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if value == "":
        return []
    return value.split(",")


def strip_first_whitespace(value: str) -> str:
    return _FIRST_WS_RE.sub("", value, count=1)


def is_blank(value: str) -> bool:
    """True for empty or whitespace-only strings."""
    return value.strip() == ""

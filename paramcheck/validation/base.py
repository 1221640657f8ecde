"""Base validators — abstract classes implementing the Strategy Pattern.

Stock validators come in two variants. ``check()`` is return-based and can be
used on any value outside the engine (for example a string read back from a
database). Awaiting the validator itself is the engine contract and is
implemented in terms of ``check()``.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from paramcheck.validation.errors import invalid_param
from paramcheck.validation.models import Failure, FieldOutcome, Value


class BaseFieldValidator(ABC):
    """Abstract base for stock field validators.

    Contract:
        - check() is deterministic: same input → same outcome
        - check() reports problems as Failure, never by raising
        - the engine context is ignored by stock validators
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def check(self, field: str, value: Any) -> FieldOutcome:
        """Validate ``value`` for ``field`` and return the outcome."""
        ...

    async def __call__(self, context: Any, field: str, value: Any) -> FieldOutcome:
        return self.check(field, value)

    def __repr__(self) -> str:
        return f"<{self.name}>"

    # ── Helper Methods ──

    def _fail(self, field: str, message: Optional[str] = None, invalid: Optional[list[Any]] = None) -> Failure:
        return Failure(invalid_param(field, message, invalid))

    def _ok(self, value: Any) -> Value:
        return Value(value)


class BaseCrossValidator(ABC):
    """Abstract base for checks that need the whole validated object."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def validate(self, context: Any, raw: Mapping[str, Any], validated: dict[str, Any]) -> Any:
        """Return None, one error, or a list of errors."""
        ...

    async def __call__(self, context: Any, raw: Mapping[str, Any], validated: dict[str, Any]) -> Any:
        return await self.validate(context, raw, validated)

    def __repr__(self) -> str:
        return f"<{self.name}>"

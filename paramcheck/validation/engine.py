"""Validation Engine — validates request parameters against a ParamSchema.

Usage:
    schema = ParamSchema(
        strict=True,
        required={"uuid": uuid_validator},
        optional={"limit": limit_validator, "offset": offset_validator},
        after=[check_owner_matches],
    )
    validated = await validate_params(schema, app_config, request_params)

A pass either returns the validated parameters or raises exactly one of
InvalidParamsError (422) or InternalError (500).
"""

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Union

import structlog

from paramcheck.validation import constants
from paramcheck.validation.aggregator import aggregate_errors
from paramcheck.validation.errors import InternalError, InvalidParamsError, invalid_param, missing_param
from paramcheck.validation.models import (
    CrossValidator,
    Expanded,
    Failure,
    FieldOutcome,
    FieldValidator,
    ParamSchema,
    Skip,
    Value,
)
from paramcheck.validation.unknowns import check_unknown_params

logger = structlog.get_logger()

_OUTCOME_TYPES = (Value, Expanded, Skip, Failure)


@dataclass(frozen=True)
class ValidationTask:
    """One declared field present in the input, waiting to be validated."""

    field: str
    validator: FieldValidator
    value: Any


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "name", None) or getattr(fn, "__name__", None) or type(fn).__name__


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


async def cross_validate(
    after: Sequence[CrossValidator],
    context: Any,
    raw: Mapping[str, Any],
    validated: dict[str, Any],
) -> list[Any]:
    """Run cross-field validators one at a time, in declared order.

    Every validator runs even if an earlier one reported errors. A falsy
    result means no error; a list result is flattened into the returned
    errors.
    """
    errors: list[Any] = []
    for fn in after:
        try:
            result = await _resolve(fn(context, raw, validated))
        except Exception as e:
            logger.error("cross_validator_failed", validator=_describe(fn), error=str(e))
            errors.append(e)
            continue

        if not result:
            continue
        if isinstance(result, (list, tuple)):
            errors.extend(result)
        else:
            errors.append(result)
    return errors


class ValidationEngine:
    """Runs field validators concurrently, then cross-field validators in order.

    Pass lifecycle:
        structural check → field validation → unknown check (strict)
        → cross validation (only if clean) → aggregation
    """

    async def validate(
        self,
        schema: Union[ParamSchema, Mapping[str, Any]],
        context: Any,
        params: Any,
    ) -> dict[str, Any]:
        """Validate ``params`` against ``schema``.

        Args:
            schema: ParamSchema, or a mapping with the same keys
            context: Passed unchanged as the first argument of every validator
                (usually configuration or a database handle)
            params: Object to validate

        Returns:
            Dict holding only validated fields and fields added by validators

        Raises:
            InvalidParamsError: parameters are missing, invalid or unknown
            InternalError: a validator reported an error without a field
        """
        schema = self._as_schema(schema)
        start_time = time.perf_counter()

        # Not an object: nothing else can be checked
        if not isinstance(params, Mapping):
            logger.info("param_validation_rejected", params_type=type(params).__name__)
            raise InvalidParamsError(
                constants.INVALID_PARAMS,
                [invalid_param("parameters", constants.PARAMETERS_ARE_OBJECTS)],
            )

        errors: list[Any] = []
        validated: dict[str, Any] = {}
        tasks: list[ValidationTask] = []

        for field, fn in schema.required.items():
            if field in params:
                tasks.append(ValidationTask(field, fn, params[field]))
            else:
                errors.append(missing_param(field))

        for field, fn in schema.optional.items():
            if field in params:
                tasks.append(ValidationTask(field, fn, params[field]))

        # Outcomes come back in task order whatever order validators finish in
        outcomes = await asyncio.gather(*(self._run_field(context, task) for task in tasks))
        for task, outcome in zip(tasks, outcomes):
            self._apply(task, outcome, validated, errors)

        if schema.strict:
            unknown = check_unknown_params(schema, params)
            if unknown is not None:
                errors.append(unknown)

        cross_checked = not errors and bool(schema.after)
        if cross_checked:
            errors.extend(await cross_validate(schema.after, context, params, validated))

        logger.debug(
            "param_validation_complete",
            fields=len(tasks),
            errors=len(errors),
            cross_checked=cross_checked,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return aggregate_errors(errors, validated)

    async def validate_with_callback(
        self,
        schema: Union[ParamSchema, Mapping[str, Any]],
        context: Any,
        params: Any,
        callback: Callable[[Optional[Exception], Optional[dict[str, Any]]], Any],
    ) -> None:
        """Validate and report through ``callback(error, validated)`` exactly once."""
        try:
            validated = await self.validate(schema, context, params)
        except (InvalidParamsError, InternalError) as e:
            await _resolve(callback(e, None))
            return
        await _resolve(callback(None, validated))

    @staticmethod
    def _as_schema(schema: Union[ParamSchema, Mapping[str, Any]]) -> ParamSchema:
        if isinstance(schema, ParamSchema):
            return schema
        return ParamSchema.model_validate(schema)

    async def _run_field(self, context: Any, task: ValidationTask) -> FieldOutcome:
        """Run one field validator, turning misbehaviour into an internal error."""
        try:
            outcome = await _resolve(task.validator(context, task.field, task.value))
        except Exception as e:
            # Don't let one broken validator kill the whole pass
            logger.error(
                "field_validator_failed",
                field=task.field,
                validator=_describe(task.validator),
                error=str(e),
                error_type=type(e).__name__,
            )
            return Failure(e)

        if outcome is None:
            return Skip()
        if not isinstance(outcome, _OUTCOME_TYPES):
            logger.error(
                "field_validator_bad_outcome",
                field=task.field,
                validator=_describe(task.validator),
                outcome_type=type(outcome).__name__,
            )
            return Failure(TypeError(f"validator for '{task.field}' returned {type(outcome).__name__}"))
        return outcome

    @staticmethod
    def _apply(task: ValidationTask, outcome: FieldOutcome, validated: dict[str, Any], errors: list[Any]) -> None:
        if isinstance(outcome, Failure):
            errors.append(outcome.error)
        elif isinstance(outcome, Value):
            validated[task.field] = outcome.value
        elif isinstance(outcome, Expanded):
            validated.update(outcome.values)


# Module-level singleton
validation_engine = ValidationEngine()


async def validate_params(
    schema: Union[ParamSchema, Mapping[str, Any]],
    context: Any,
    params: Any,
) -> dict[str, Any]:
    """Validate ``params`` with the shared engine. See ValidationEngine.validate."""
    return await validation_engine.validate(schema, context, params)


async def validate(
    schema: Union[ParamSchema, Mapping[str, Any]],
    context: Any,
    params: Any,
    callback: Callable[[Optional[Exception], Optional[dict[str, Any]]], Any],
) -> None:
    """Callback-style entry point: ``callback(error, validated)``."""
    await validation_engine.validate_with_callback(schema, context, params, callback)

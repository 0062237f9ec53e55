"""
Meal record validation.

Entry point of the engine: sanitizes the candidate, runs every field
validator and the relational validator, and merges their results.
Stateless; the only outside input is the current time, read on each call.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence, Union

import structlog

from littlemeals.config import DEFAULT_LIMITS, ValidationLimits
from littlemeals.domain.meal_logging.field_validators import (
    validate_food_name,
    validate_meal_date,
    validate_meal_type,
    validate_notes,
)
from littlemeals.domain.meal_logging.models import Child, MealRecord
from littlemeals.domain.meal_logging.relational_validator import validate_child_responses
from littlemeals.domain.meal_logging.result import ValidationResult, combine
from littlemeals.domain.meal_logging.sanitizer import sanitize_meal_record

logger = structlog.get_logger(__name__)

MealRecordInput = Union[MealRecord, Mapping[str, Any]]
ChildInput = Union[Child, Mapping[str, Any]]


def _as_record(candidate: MealRecordInput) -> MealRecord:
    if isinstance(candidate, MealRecord):
        return candidate
    return MealRecord.model_validate(candidate)


def _as_children(children: Sequence[ChildInput]) -> list[Child]:
    return [child if isinstance(child, Child) else Child.model_validate(child) for child in children]


def validate_meal_record(
    candidate: MealRecordInput,
    children: Sequence[ChildInput],
    now: Optional[datetime] = None,
    limits: ValidationLimits = DEFAULT_LIMITS,
    today: Optional[date] = None,
) -> ValidationResult:
    """
    Validate a meal record candidate before it is persisted.

    Never stops at the first failure: the result lists every problem, in
    the order foodName, mealType, date, childResponses, notes.

    Args:
        candidate: MealRecord, or a camelCase mapping from the logging form
        children: Children of the active family (Child or mapping)
        now: Reference instant for the date window (defaults to now, UTC)
        limits: Validation limits
        today: Caller's calendar day for date-only values (defaults to now, UTC)

    Returns:
        ValidationResult

    Raises:
        pydantic.ValidationError: If a mapping cannot be modelled at all

    Example:
        >>> result = validate_meal_record(
        ...     {
        ...         "foodName": "Pancakes",
        ...         "mealType": "Breakfast",
        ...         "date": datetime.now(),
        ...         "childResponses": [{"childId": "1", "response": "eaten"}],
        ...     },
        ...     [{"id": "1", "name": "Sam"}],
        ... )
        >>> result.is_valid
        True
    """
    record = sanitize_meal_record(_as_record(candidate), limits)
    family = _as_children(children)

    result = combine(
        validate_food_name(record.food_name, limits),
        validate_meal_type(record.meal_type),
        validate_meal_date(record.date, now=now, limits=limits, today=today),
        validate_child_responses(record.child_responses, family),
        validate_notes(record.notes, limits),
    )

    logger.debug(
        "Meal record validated",
        is_valid=result.is_valid,
        error_count=len(result.errors),
        codes=[code.value for code in result.codes],
        children=len(family),
    )
    return result


def ensure_valid(result: ValidationResult) -> ValidationResult:
    """
    Raise instead of returning an invalid result.

    Thin adapter for fail-fast call sites; codes and fields are those of
    the underlying result.

    Raises:
        MealLoggingError: If the result has errors
    """
    return result.raise_if_invalid()

"""
Field validators.

Independent, pure checks over a single form field. Each returns a
ValidationResult with zero or more errors and never stops at the first
problem, so callers can show everything at once.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union

from littlemeals.config import DEFAULT_LIMITS, ValidationLimits
from littlemeals.domain.meal_logging.error_codes import ErrorCode
from littlemeals.domain.meal_logging.models import MealType
from littlemeals.domain.meal_logging.result import FieldError, ValidationResult
from littlemeals.domain.meal_logging.sanitizer import contains_harmful_pattern

_MEAL_TYPE_VALUES = frozenset(member.value for member in MealType)


def _error(field: str, code: ErrorCode, message: str) -> FieldError:
    return FieldError(field=field, code=code, message=message)


def validate_food_name(
    food_name: Optional[str], limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationResult:
    """
    Validate the food name.

    Length rules apply to the trimmed value and are mutually exclusive
    (empty -> REQUIRED_FIELD, short -> MIN_LENGTH, long -> MAX_LENGTH).
    The harmful-pattern rule is evaluated independently of them.

    Args:
        food_name: Raw food name, None when the field was never filled
        limits: Length bounds

    Returns:
        ValidationResult for field "foodName"
    """
    errors: list[FieldError] = []
    trimmed = (food_name or "").strip()

    if not trimmed:
        errors.append(
            _error("foodName", ErrorCode.REQUIRED_FIELD, "Please enter what you served")
        )
    elif len(trimmed) < limits.food_name_min:
        errors.append(
            _error(
                "foodName",
                ErrorCode.MIN_LENGTH,
                f"Food name must be at least {limits.food_name_min} characters",
            )
        )
    elif len(trimmed) > limits.food_name_max:
        errors.append(
            _error(
                "foodName",
                ErrorCode.MAX_LENGTH,
                f"Food name cannot exceed {limits.food_name_max} characters",
            )
        )

    if food_name and contains_harmful_pattern(food_name):
        errors.append(
            _error("foodName", ErrorCode.INVALID_CHARACTERS, "Invalid characters in food name")
        )

    return ValidationResult.from_errors(errors)


def validate_meal_type(meal_type: Any) -> ValidationResult:
    """Validate the meal type against the closed MealType set."""
    if meal_type is None or meal_type == "":
        return ValidationResult.from_errors(
            [_error("mealType", ErrorCode.REQUIRED_FIELD, "Please select a meal type")]
        )

    value = meal_type.value if isinstance(meal_type, MealType) else meal_type
    if not isinstance(value, str) or value not in _MEAL_TYPE_VALUES:
        return ValidationResult.from_errors(
            [_error("mealType", ErrorCode.INVALID_VALUE, "Invalid meal type selected")]
        )

    return ValidationResult.ok()


def parse_meal_date(value: Any) -> Union[datetime, date, None]:
    """
    Interpret a date field value.

    Accepts datetime and date objects and ISO 8601 strings ("2025-01-15",
    "2025-01-15T10:30:00Z"). Date-only strings stay calendar dates.

    Returns:
        datetime, date, or None when the value is missing or not a date
    """
    if isinstance(value, (datetime, date)):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    # Handle 'Z' suffix for UTC
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_meal_date(
    value: Any,
    now: Optional[datetime] = None,
    limits: ValidationLimits = DEFAULT_LIMITS,
    today: Optional[date] = None,
) -> ValidationResult:
    """
    Validate the meal date against the logging window.

    The window [now - past_window_days, now + future_window_days] is
    inclusive and computed from the current instant on every call. A
    datetime is compared instant by instant. A plain date is compared by
    calendar day against `today`, which defaults to the UTC date of `now`;
    callers away from UTC should pass their local date, since the UTC day
    differs from the local one near midnight. Both bounds are checked
    independently.

    Args:
        value: datetime, date or ISO string
        now: Reference instant (defaults to the current UTC time)
        limits: Window size
        today: Reference calendar day for plain dates (defaults to now, UTC)

    Returns:
        ValidationResult for field "date"
    """
    parsed = parse_meal_date(value)
    if parsed is None:
        return ValidationResult.from_errors(
            [_error("date", ErrorCode.INVALID_DATE, "Please select a valid date")]
        )

    now = _as_utc(now or datetime.now(timezone.utc))
    earliest = now - timedelta(days=limits.past_window_days)
    latest = now + timedelta(days=limits.future_window_days)

    if isinstance(parsed, datetime):
        moment = _as_utc(parsed)
        too_late = moment > latest
        too_early = moment < earliest
    else:
        day = today or now.date()
        too_late = parsed > day + timedelta(days=limits.future_window_days)
        too_early = parsed < day - timedelta(days=limits.past_window_days)

    errors: list[FieldError] = []
    if too_late:
        errors.append(
            _error("date", ErrorCode.INVALID_DATE_FUTURE, "Cannot log meals for future dates")
        )
    if too_early:
        errors.append(
            _error(
                "date",
                ErrorCode.INVALID_DATE_PAST,
                f"Cannot log meals older than {limits.past_window_days} days",
            )
        )
    return ValidationResult.from_errors(errors)


def validate_notes(notes: Optional[str], limits: ValidationLimits = DEFAULT_LIMITS) -> ValidationResult:
    """Validate optional meal notes (length only)."""
    if notes and len(notes) > limits.notes_max:
        return ValidationResult.from_errors(
            [
                _error(
                    "notes",
                    ErrorCode.MAX_LENGTH,
                    f"Notes cannot exceed {limits.notes_max} characters",
                )
            ]
        )
    return ValidationResult.ok()


def validate_child_name(name: Optional[str]) -> ValidationResult:
    """Validate a child profile name before the child is added to the family."""
    if not (name or "").strip():
        return ValidationResult.from_errors(
            [_error("name", ErrorCode.REQUIRED_FIELD, "Child name is required")]
        )
    return ValidationResult.ok()

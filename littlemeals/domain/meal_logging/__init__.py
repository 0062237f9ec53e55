"""
Meal logging bounded context.

Validation and data-integrity rules for logged meals: field validators,
the child-response relational validator, the sanitizer and the result
protocol that merges them.
"""

from littlemeals.domain.meal_logging.defaults import (
    blank_responses,
    set_all_responses,
    set_response,
    suggest_meal_type,
)
from littlemeals.domain.meal_logging.error_codes import ERROR_MESSAGES, ErrorCode, message_for
from littlemeals.domain.meal_logging.field_validators import (
    validate_child_name,
    validate_food_name,
    validate_meal_date,
    validate_meal_type,
    validate_notes,
)
from littlemeals.domain.meal_logging.models import (
    Child,
    ChildResponse,
    MealRecord,
    MealType,
    ResponseType,
)
from littlemeals.domain.meal_logging.relational_validator import validate_child_responses
from littlemeals.domain.meal_logging.result import FieldError, ValidationResult, combine
from littlemeals.domain.meal_logging.sanitizer import sanitize_input, sanitize_meal_record
from littlemeals.domain.meal_logging.validator import ensure_valid, validate_meal_record

__all__ = [
    "Child",
    "ChildResponse",
    "MealRecord",
    "MealType",
    "ResponseType",
    "ErrorCode",
    "ERROR_MESSAGES",
    "message_for",
    "FieldError",
    "ValidationResult",
    "combine",
    "sanitize_input",
    "sanitize_meal_record",
    "validate_food_name",
    "validate_meal_type",
    "validate_meal_date",
    "validate_notes",
    "validate_child_name",
    "validate_child_responses",
    "validate_meal_record",
    "ensure_valid",
    "suggest_meal_type",
    "blank_responses",
    "set_response",
    "set_all_responses",
]

"""
Logging form helpers.

Smart defaults and response-grid edits used by the meal logging form.
All helpers are pure: they return new objects and leave their inputs alone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Union

from littlemeals.domain.meal_logging.models import Child, ChildResponse, MealType, ResponseType


def suggest_meal_type(
    now: Optional[datetime] = None,
    last_meal_type: Union[MealType, str, None] = None,
) -> MealType:
    """
    Suggest a meal type from the time of day.

    06:00-10:59 Breakfast, 11:00-14:59 Lunch, 15:00-18:59 Dinner. Outside
    those hours the last meal type used is kept, or Snack.

    Args:
        now: Local time of the caregiver (defaults to datetime.now())
        last_meal_type: Meal type of the previous log, if any

    Returns:
        Suggested MealType
    """
    hour = (now or datetime.now()).hour
    if 6 <= hour < 11:
        return MealType.BREAKFAST
    if 11 <= hour < 15:
        return MealType.LUNCH
    if 15 <= hour < 19:
        return MealType.DINNER

    try:
        return MealType(last_meal_type) if last_meal_type else MealType.SNACK
    except ValueError:
        return MealType.SNACK


def _with_response(entry: ChildResponse, response: Union[ResponseType, str, None]) -> ChildResponse:
    return ChildResponse(**{**entry.model_dump(), "response": response})


def blank_responses(children: Sequence[Child]) -> list[ChildResponse]:
    """One unset response per child, in children order."""
    return [ChildResponse(child_id=child.id, response=None) for child in children]


def set_response(
    responses: Sequence[ChildResponse],
    child_id: str,
    response: Union[ResponseType, str, None],
) -> list[ChildResponse]:
    """Return responses with the given child's entry set to response."""
    return [
        _with_response(entry, response) if entry.child_id == child_id else entry
        for entry in responses
    ]


def set_all_responses(
    responses: Sequence[ChildResponse], response: Union[ResponseType, str, None]
) -> list[ChildResponse]:
    """Quick action: set every entry to the same response ("all ate")."""
    return [_with_response(entry, response) for entry in responses]

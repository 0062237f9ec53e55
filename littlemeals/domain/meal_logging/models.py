"""
Meal logging domain models.

Children, per-child responses and the meal record candidate that the
validation engine checks before a record is persisted.

A MealRecord is a *candidate*: it is built by form logic while the user is
still typing, so its fields are deliberately loose (optional, and accepting
values outside the enumerations). Rejecting bad values is the job of the
validators, which report every problem instead of failing on the first one.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MealType(str, Enum):
    """Closed set of meal types."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class ResponseType(str, Enum):
    """
    How a child responded to a meal.

    The unset state ("not yet recorded") is represented by None, not by a
    member of this enumeration.
    """

    EATEN = "eaten"
    PARTIAL = "partial"
    REFUSED = "refused"


def _coerce_enum(enum_cls: type[Enum], value: Any) -> Any:
    """Turn known raw values into enum members, leave anything else as is."""
    if isinstance(value, str) and not isinstance(value, Enum):
        try:
            return enum_cls(value)
        except ValueError:
            return value
    return value


class _FormModel(BaseModel):
    """Base for models loaded from camelCase form payloads."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Child(_FormModel):
    """
    Child of the active family.

    Authoritative input of the engine: the children collection is owned by
    the family and injected by the caller, never modified here. A child
    whose name is unknown keeps a blank name; the profile form enforces
    names separately (see validate_child_name).

    Example:
        >>> child = Child(id="1", name="Sam", age=4)
        >>> child.age_on(dt.date(2025, 1, 1))
        4
    """

    id: str = Field(..., min_length=1, description="Stable child identifier")
    name: str = Field("", description="Display name, blank when unknown")
    age: int = Field(0, ge=0, description="Stored age in years")
    birthdate: Optional[dt.date] = Field(None, description="Date of birth")
    preferences: tuple[str, ...] = Field(default=(), description="Liked foods")
    allergies: tuple[str, ...] = Field(default=(), description="Known allergies")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    def age_on(self, day: Optional[dt.date] = None) -> int:
        """
        Age in whole years.

        Derived from birthdate when known, otherwise the stored age.

        Args:
            day: Reference day (defaults to today, UTC)

        Returns:
            Age in years, never negative
        """
        if self.birthdate is None:
            return self.age

        day = day or dt.datetime.now(dt.timezone.utc).date()
        before_birthday = (day.month, day.day) < (self.birthdate.month, self.birthdate.day)
        return max(day.year - self.birthdate.year - int(before_birthday), 0)

    def __hash__(self) -> int:
        """Allow use as dict key."""
        return hash(self.id)


class ChildResponse(_FormModel):
    """
    One child's response to a logged meal.

    child_id and response are kept loose so that malformed form state can be
    modelled and then reported by the relational validator. Known response
    strings become ResponseType members, any other value is kept as is.
    """

    child_id: Optional[str] = Field(None, description="Id of the responding child")
    response: Any = Field(
        None, description="eaten | partial | refused, None when not recorded"
    )
    notes: Optional[str] = None
    timestamp: Optional[dt.datetime] = None

    @field_validator("response", mode="before")
    @classmethod
    def coerce_response(cls, v: Any) -> Any:
        return _coerce_enum(ResponseType, v)

    @property
    def is_recorded(self) -> bool:
        """True when a response value (valid or not) has been set."""
        return self.response is not None


class MealRecord(_FormModel):
    """
    Meal record candidate.

    Loaded from the logging form (camelCase keys) or built directly with
    snake_case names. Bookkeeping fields (id, family linkage, audit
    timestamps) travel with the record but are not validated.

    Example:
        >>> record = MealRecord.model_validate({
        ...     "foodName": "Pancakes",
        ...     "mealType": "Breakfast",
        ...     "date": dt.date.today(),
        ...     "childResponses": [{"childId": "1", "response": "eaten"}],
        ... })
        >>> record.meal_type is MealType.BREAKFAST
        True
    """

    food_name: Optional[str] = None
    meal_type: Any = None
    date: Any = None
    child_responses: list[ChildResponse] = Field(default_factory=list)
    notes: Optional[str] = None

    # Bookkeeping (opaque to the engine)
    id: Optional[str] = None
    family_id: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    @field_validator("meal_type", mode="before")
    @classmethod
    def coerce_meal_type(cls, v: Any) -> Any:
        return _coerce_enum(MealType, v)

    def to_dict(self) -> dict[str, Any]:
        """Convert to camelCase dictionary for serialization."""
        return self.model_dump(by_alias=True, mode="json")

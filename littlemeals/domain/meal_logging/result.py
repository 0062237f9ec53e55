"""
Validation result protocol.

Structured errors and the result type returned by every validator.
Results compose with combine(): error lists are concatenated and validity
is always recomputed from the concatenation.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Iterable

import structlog
from pydantic import BaseModel, ConfigDict, Field, computed_field

from littlemeals.domain.meal_logging.error_codes import ErrorCode, message_for
from littlemeals.domain.shared.errors import MealLoggingError

logger = structlog.get_logger(__name__)


class FieldError(BaseModel):
    """
    Structured validation error.

    Identifies what failed (code), why (message) and where to show it in a
    form (field). Collection errors use synthetic paths such as
    "childResponses[2].response".

    Example:
        >>> error = FieldError(
        ...     field="foodName",
        ...     message="Food name must be at least 2 characters",
        ...     code=ErrorCode.MIN_LENGTH,
        ... )
        >>> error.user_message
        'Input is too short'
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Form field path")
    message: str = Field(..., description="Context specific message")
    code: ErrorCode = Field(..., description="Machine-readable code")

    @property
    def user_message(self) -> str:
        """Generic template for the code, falling back to the carried message."""
        return message_for(self.code, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {"field": self.field, "message": self.message, "code": self.code.value}

    def __str__(self) -> str:
        return f"{self.code.value} {self.field}: {self.message}"


class ValidationResult(BaseModel):
    """
    Outcome of a validation.

    is_valid is derived from the error list and has no state of its own.

    Example:
        >>> ValidationResult().is_valid
        True
    """

    model_config = ConfigDict(frozen=True)

    errors: tuple[FieldError, ...] = Field(default=(), description="Errors, in discovery order")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """True iff no errors were found."""
        return not self.errors

    @classmethod
    def ok(cls) -> ValidationResult:
        """Empty result (identity element of combine)."""
        return cls()

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> ValidationResult:
        return cls(errors=tuple(errors))

    @property
    def codes(self) -> list[ErrorCode]:
        return [error.code for error in self.errors]

    def errors_for(self, field: str) -> list[FieldError]:
        """Errors attributed to one form field."""
        return [error for error in self.errors if error.field == field]

    def raise_if_invalid(self) -> ValidationResult:
        """
        Fail-fast adapter.

        Returns:
            self, when valid

        Raises:
            MealLoggingError: Built from the first error, carrying all errors
        """
        if self.is_valid:
            return self

        first = self.errors[0]
        logger.info(
            "Validation failed",
            code=first.code.value,
            field=first.field,
            error_count=len(self.errors),
        )
        raise MealLoggingError(
            first.message,
            code=first.code.value,
            field=first.field,
            errors=self.errors,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to camelCase dictionary for API responses."""
        return {
            "isValid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }

    def __add__(self, other: ValidationResult) -> ValidationResult:
        return combine(self, other)


def combine(*results: ValidationResult) -> ValidationResult:
    """
    Combine partial results.

    Concatenates the error sequences in argument order. Associative, with
    the empty result as identity.

    Example:
        >>> combine(ValidationResult(), ValidationResult()).is_valid
        True
    """
    return ValidationResult(errors=tuple(chain.from_iterable(r.errors for r in results)))

"""
Domain exceptions.

Typed exceptions for the places where callers want fail-fast semantics.
The validation engine itself reports problems as data (ValidationResult);
these classes only wrap that data at the boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn, Optional, Sequence

if TYPE_CHECKING:
    from littlemeals.domain.meal_logging.result import FieldError


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - A caller asks for fail-fast validation
    - A meal record is about to be persisted while invalid

    Example:
        >>> raise ValidationError("Food name is required")
    """

    pass


class MealLoggingError(ValidationError):
    """
    A meal record failed validation.

    Carries the machine-readable code and the form field of the first
    problem, plus every structured error found, so a fail-fast caller can
    still render the complete list.

    Attributes:
        message: human-readable message
        code: machine-readable error code (e.g. "MIN_LENGTH")
        field: form field path the error belongs to, if any
        errors: all structured errors of the failed validation

    Example:
        >>> raise MealLoggingError(
        ...     "Food name must be at least 2 characters",
        ...     code="MIN_LENGTH",
        ...     field="foodName",
        ... )
    """

    def __init__(
        self,
        message: str,
        code: str,
        field: Optional[str] = None,
        errors: Sequence["FieldError"] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field
        self.errors = tuple(errors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.field:
            payload["field"] = self.field
        if self.errors:
            payload["errors"] = [error.to_dict() for error in self.errors]
        return payload

    def __str__(self) -> str:
        return self.message


def raise_validation_error(message: str, code: str, field: Optional[str] = None) -> NoReturn:
    """
    Raise a MealLoggingError for a single problem.

    Args:
        message: Human-readable message
        code: Machine-readable error code
        field: Optional form field path

    Raises:
        MealLoggingError: Always
    """
    raise MealLoggingError(message, code=code, field=field)

"""Shared domain primitives."""

from littlemeals.domain.shared.errors import (
    DomainError,
    MealLoggingError,
    ValidationError,
    raise_validation_error,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "MealLoggingError",
    "raise_validation_error",
]

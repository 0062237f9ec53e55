"""Unit tests for shared domain exceptions."""

import pytest

from littlemeals.domain.meal_logging.error_codes import ErrorCode
from littlemeals.domain.meal_logging.result import FieldError
from littlemeals.domain.shared.errors import (
    DomainError,
    MealLoggingError,
    ValidationError,
    raise_validation_error,
)


class TestMealLoggingError:
    """Test MealLoggingError."""

    def test_hierarchy(self) -> None:
        """Catchable as ValidationError and DomainError."""
        assert issubclass(MealLoggingError, ValidationError)
        assert issubclass(ValidationError, DomainError)

    def test_attributes(self) -> None:
        """Message, code and field are kept."""
        error = MealLoggingError("Food name is required", code="REQUIRED_FIELD", field="foodName")

        assert str(error) == "Food name is required"
        assert error.code == "REQUIRED_FIELD"
        assert error.field == "foodName"
        assert error.errors == ()

    def test_to_dict(self) -> None:
        """Payload includes carried errors when present."""
        carried = FieldError(field="notes", code=ErrorCode.MAX_LENGTH, message="Too long")
        error = MealLoggingError("Too long", code="MAX_LENGTH", field="notes", errors=[carried])

        assert error.to_dict() == {
            "message": "Too long",
            "code": "MAX_LENGTH",
            "field": "notes",
            "errors": [{"field": "notes", "message": "Too long", "code": "MAX_LENGTH"}],
        }

    def test_to_dict_minimal(self) -> None:
        """Optional parts are omitted."""
        assert MealLoggingError("Oops", code="INVALID_VALUE").to_dict() == {
            "message": "Oops",
            "code": "INVALID_VALUE",
        }


class TestRaiseValidationError:
    """Test the fail-fast helper."""

    def test_raises(self) -> None:
        """Always raises MealLoggingError with the given triple."""
        with pytest.raises(MealLoggingError, match="Invalid child selected") as exc_info:
            raise_validation_error("Invalid child selected", "INVALID_CHILD_ID", "childResponses[0].childId")

        assert exc_info.value.code == "INVALID_CHILD_ID"
        assert exc_info.value.field == "childResponses[0].childId"

    def test_field_optional(self) -> None:
        """Field may be omitted."""
        with pytest.raises(MealLoggingError) as exc_info:
            raise_validation_error("Bad", "INVALID_VALUE")

        assert exc_info.value.field is None

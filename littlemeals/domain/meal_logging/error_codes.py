"""
Validation error codes.

Closed vocabulary shared with callers. Codes are stable identifiers: they
are matched by form screens and must not be renamed without a migration.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

GENERIC_MESSAGE = "Validation error"


class ErrorCode(str, Enum):
    """Machine-readable validation error codes."""

    REQUIRED_FIELD = "REQUIRED_FIELD"
    MIN_LENGTH = "MIN_LENGTH"
    MAX_LENGTH = "MAX_LENGTH"
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATE_FUTURE = "INVALID_DATE_FUTURE"
    INVALID_DATE_PAST = "INVALID_DATE_PAST"
    MISSING_CHILD_RESPONSE = "MISSING_CHILD_RESPONSE"
    INVALID_RESPONSE_TYPE = "INVALID_RESPONSE_TYPE"
    INVALID_CHILD_ID = "INVALID_CHILD_ID"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"


# User-facing templates, one per code
ERROR_MESSAGES: Mapping[ErrorCode, str] = MappingProxyType(
    {
        ErrorCode.REQUIRED_FIELD: "This field is required",
        ErrorCode.MIN_LENGTH: "Input is too short",
        ErrorCode.MAX_LENGTH: "Input is too long",
        ErrorCode.INVALID_VALUE: "Invalid value selected",
        ErrorCode.INVALID_DATE: "Please select a valid date",
        ErrorCode.INVALID_DATE_FUTURE: "Cannot select future dates",
        ErrorCode.INVALID_DATE_PAST: "Date is too far in the past",
        ErrorCode.MISSING_CHILD_RESPONSE: "Please set responses for all children",
        ErrorCode.INVALID_RESPONSE_TYPE: "Invalid response selected",
        ErrorCode.INVALID_CHILD_ID: "Invalid child selected",
        ErrorCode.INVALID_CHARACTERS: "Contains invalid characters",
    }
)


def message_for(code: Any, fallback: Optional[str] = None) -> str:
    """
    Map an error code to its user-facing message.

    Never raises: unknown codes (or values that are not codes at all) fall
    back to the given message, then to a generic one.

    Args:
        code: ErrorCode member or raw code string
        fallback: Message carried by the structured error, if any

    Returns:
        Human-readable message

    Example:
        >>> message_for("MIN_LENGTH")
        'Input is too short'
        >>> message_for("SOMETHING_NEW", "Custom text")
        'Custom text'
        >>> message_for(None)
        'Validation error'
    """
    try:
        return ERROR_MESSAGES[ErrorCode(code)]
    except (ValueError, TypeError, KeyError):
        return fallback or GENERIC_MESSAGE

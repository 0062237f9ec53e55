"""
Relational validator.

Cross-checks a meal's child responses against the family's children:
completeness (every child answered exactly once) and referential
integrity (every response points at a known child with a known value).
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from littlemeals.domain.meal_logging.error_codes import ErrorCode
from littlemeals.domain.meal_logging.models import Child, ChildResponse, ResponseType
from littlemeals.domain.meal_logging.result import FieldError, ValidationResult

_RESPONSE_VALUES = frozenset(member.value for member in ResponseType)


def _is_known_response(value: object) -> bool:
    if isinstance(value, ResponseType):
        return True
    return isinstance(value, str) and value in _RESPONSE_VALUES


def validate_child_responses(
    responses: Sequence[ChildResponse], children: Sequence[Child]
) -> ValidationResult:
    """
    Validate responses against the authoritative children collection.

    Runs three independent checks, all to completion:

    - MISSING_CHILD_RESPONSE, once per child without exactly one entry
      carrying a response (an entry with an unknown value still counts as
      an answer; it is reported by the value check instead). A child with
      several entries is reported too: duplicates are not merged.
    - INVALID_CHILD_ID, once per entry whose child_id is not a known child,
      at "childResponses[i].childId".
    - INVALID_RESPONSE_TYPE, once per entry whose non-null response is not
      eaten/partial/refused, at "childResponses[i].response".

    Args:
        responses: Child responses of the candidate record
        children: Children of the active family

    Returns:
        ValidationResult with missing-child errors first (children order),
        then per-entry errors (response order)
    """
    errors: list[FieldError] = []
    child_ids = {child.id for child in children}
    entries_per_child = Counter(response.child_id for response in responses)
    answered = {response.child_id for response in responses if response.is_recorded}

    for child in children:
        name = child.name or "child"
        if entries_per_child[child.id] > 1:
            errors.append(
                FieldError(
                    field="childResponses",
                    code=ErrorCode.MISSING_CHILD_RESPONSE,
                    message=f"Please set a single response for {name}",
                )
            )
        elif child.id not in answered:
            errors.append(
                FieldError(
                    field="childResponses",
                    code=ErrorCode.MISSING_CHILD_RESPONSE,
                    message=f"Please set response for {name}",
                )
            )

    for index, response in enumerate(responses):
        if response.is_recorded and not _is_known_response(response.response):
            errors.append(
                FieldError(
                    field=f"childResponses[{index}].response",
                    code=ErrorCode.INVALID_RESPONSE_TYPE,
                    message="Invalid response type",
                )
            )
        if response.child_id not in child_ids:
            errors.append(
                FieldError(
                    field=f"childResponses[{index}].childId",
                    code=ErrorCode.INVALID_CHILD_ID,
                    message="Invalid child ID",
                )
            )

    return ValidationResult.from_errors(errors)

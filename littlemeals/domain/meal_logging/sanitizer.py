"""
Free-text sanitizer.

Strips markup that could be interpreted as script when the text is later
rendered: <script> blocks, javascript: URIs and inline event handlers.
"""

from __future__ import annotations

import re
from typing import Any

from littlemeals.config import DEFAULT_LIMITS, ValidationLimits
from littlemeals.domain.meal_logging.models import MealRecord

SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
JAVASCRIPT_URI = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE)

_REMOVALS = (SCRIPT_BLOCK, JAVASCRIPT_URI, EVENT_HANDLER)

# Substrings rejected by the INVALID_CHARACTERS rule
HARMFUL_PATTERNS = (
    re.compile(r"<script", re.IGNORECASE),
    JAVASCRIPT_URI,
    EVENT_HANDLER,
)


def contains_harmful_pattern(text: str) -> bool:
    """True if text contains any substring rejected by INVALID_CHARACTERS."""
    return any(pattern.search(text) for pattern in HARMFUL_PATTERNS)


def _sanitize_once(text: str, max_length: int) -> str:
    text = text.strip()
    for pattern in _REMOVALS:
        text = pattern.sub("", text)
    return text[:max_length]


def sanitize_input(text: str, limits: ValidationLimits = DEFAULT_LIMITS) -> str:
    """
    Sanitize user input.

    Trims whitespace, removes harmful patterns and truncates to
    limits.sanitized_max characters. Passes repeat until the text is
    stable, so removals that splice a new pattern together
    ("javajavascript:script:") are caught and sanitize_input is idempotent.

    Args:
        text: Raw user input
        limits: Validation limits (truncation length)

    Returns:
        Sanitized text

    Example:
        >>> sanitize_input("  Pasta<script>alert(1)</script> ")
        'Pasta'
    """
    current = text
    while True:
        cleaned = _sanitize_once(current, limits.sanitized_max)
        if cleaned == current:
            return cleaned
        current = cleaned


def sanitize_meal_record(record: MealRecord, limits: ValidationLimits = DEFAULT_LIMITS) -> MealRecord:
    """
    Return a copy of the record with every free-text field sanitized.

    Covers food_name, notes and each child response's notes. The input
    record is never modified.
    """
    responses = [
        response.model_copy(update={"notes": sanitize_input(response.notes, limits)})
        if response.notes is not None
        else response
        for response in record.child_responses
    ]
    update: dict[str, Any] = {"child_responses": responses}
    if record.food_name is not None:
        update["food_name"] = sanitize_input(record.food_name, limits)
    if record.notes is not None:
        update["notes"] = sanitize_input(record.notes, limits)
    return record.model_copy(update=update)

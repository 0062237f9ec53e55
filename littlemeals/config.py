"""
Configuration utilities.

Values come from environment variables. Entry points load a .env file
(see littlemeals.cli); importing the library never does. The validation
limits default to the documented constants; the date window can be
widened or narrowed per deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_PAST_WINDOW_DAYS = 30
DEFAULT_FUTURE_WINDOW_DAYS = 1


@dataclass(frozen=True)
class ValidationLimits:
    """Value object for the bounds enforced by the validators.

    Attributes:
        food_name_min: Minimum trimmed food name length
        food_name_max: Maximum trimmed food name length
        notes_max: Maximum notes length
        sanitized_max: Length sanitized free text is truncated to
        past_window_days: How far back a meal can be logged
        future_window_days: How far ahead a meal can be logged

    Raises:
        ValueError: If a bound is negative or min exceeds max.
    """

    food_name_min: int = 2
    food_name_max: int = 100
    notes_max: int = 500
    sanitized_max: int = 1000
    past_window_days: int = DEFAULT_PAST_WINDOW_DAYS
    future_window_days: int = DEFAULT_FUTURE_WINDOW_DAYS

    def __post_init__(self) -> None:
        """Validate limit invariants."""
        for name in (
            "food_name_min",
            "food_name_max",
            "notes_max",
            "sanitized_max",
            "past_window_days",
            "future_window_days",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative, got {getattr(self, name)}")

        if self.food_name_min > self.food_name_max:
            raise ValueError("food_name_min cannot exceed food_name_max")


DEFAULT_LIMITS = ValidationLimits()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer setting, using default", setting=name, value=raw, default=default)
        return default
    if value < 0:
        logger.warning("Negative setting, using default", setting=name, value=value, default=default)
        return default
    return value


def get_validation_limits() -> ValidationLimits:
    """
    Get validation limits with the date window read from the environment.

    Uses LITTLEMEALS_PAST_WINDOW_DAYS and LITTLEMEALS_FUTURE_WINDOW_DAYS;
    unset, malformed or negative values fall back to 30 and 1 days.

    Returns:
        ValidationLimits instance
    """
    return ValidationLimits(
        past_window_days=_get_int("LITTLEMEALS_PAST_WINDOW_DAYS", DEFAULT_PAST_WINDOW_DAYS),
        future_window_days=_get_int("LITTLEMEALS_FUTURE_WINDOW_DAYS", DEFAULT_FUTURE_WINDOW_DAYS),
    )


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LITTLEMEALS_LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("LITTLEMEALS_LOG_LEVEL", "INFO").upper()


def get_log_format(default: Optional[str] = None) -> str:
    """
    Get log renderer name.

    Returns:
        "json" or "console" (LITTLEMEALS_LOG_FORMAT, defaults to "console")
    """
    value = os.getenv("LITTLEMEALS_LOG_FORMAT", default or "console").strip().lower()
    return "json" if value == "json" else "console"

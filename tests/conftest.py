"""
Shared fixtures for the meal logging tests.

Clock-dependent validators receive the fixed `now` fixture explicitly, so
no test depends on the wall clock.
"""

from datetime import datetime, timezone
from typing import Any

import pytest

from littlemeals.domain.meal_logging.models import Child, ChildResponse, ResponseType


# ═══════════════════════════════════════════════════════════
# CLOCK
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant (UTC)."""
    return datetime(2025, 3, 15, 12, 30, tzinfo=timezone.utc)


# ═══════════════════════════════════════════════════════════
# FAMILY FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def sam() -> Child:
    return Child(id="1", name="Sam", age=4)


@pytest.fixture
def children(sam: Child) -> list[Child]:
    """Three children of the active family."""
    return [
        sam,
        Child(id="2", name="Alex", age=6),
        Child(id="3", name="Robin", age=2),
    ]


@pytest.fixture
def all_eaten(children: list[Child]) -> list[ChildResponse]:
    """One 'eaten' response per child."""
    return [ChildResponse(child_id=child.id, response=ResponseType.EATEN) for child in children]


# ═══════════════════════════════════════════════════════════
# MEAL RECORD FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def valid_payload(now: datetime) -> dict[str, Any]:
    """Form payload (camelCase) that passes validation for all three children."""
    return {
        "foodName": "Pancakes",
        "mealType": "Breakfast",
        "date": now,
        "childResponses": [
            {"childId": "1", "response": "eaten"},
            {"childId": "2", "response": "partial"},
            {"childId": "3", "response": "refused"},
        ],
        "notes": "Added blueberries",
    }

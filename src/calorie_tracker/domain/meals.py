"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MEAL_TYPES = ("Breakfast", "Lunch", "Dinner", "Snack", "Custom")


@dataclass(frozen=True)
class MealLogInput:
    """Fields supplied when creating or editing a meal log."""

    date: datetime
    type: str
    meal_name: str
    quantity: int
    notes: str | None = None
    calories: float | None = None


@dataclass(frozen=True)
class MealLogRecord:
    """A single recorded eating event with its resolved calories."""

    id: UUID
    user_id: UUID
    date: datetime | None
    type: str
    meal_name: str
    quantity: int
    calories: float
    notes: str | None = None

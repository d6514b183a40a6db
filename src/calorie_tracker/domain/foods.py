"""Domain models for reusable food definitions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodDefinition:
    """A named food with a fixed per-unit calorie value."""

    id: UUID
    user_id: UUID
    name: str
    calories_per_unit: float
    unit: str = "Number"
    default_quantity: int = 1
    created_at: datetime | None = None

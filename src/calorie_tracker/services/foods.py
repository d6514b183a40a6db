"""Services for reusable food definitions."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.foods import FoodDefinition
from calorie_tracker.services.errors import FoodAlreadyExistsError


class FoodRepository(Protocol):
    """Persistence interface for food definitions."""

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodDefinition:
        """Create a food definition and return it."""

    def list_foods(self, user_id: UUID) -> list[FoodDefinition]:
        """Return a user's foods, newest first."""

    def get_by_name(self, user_id: UUID, name: str) -> FoodDefinition | None:
        """Return a user's food by exact name, if present."""


@dataclass
class FoodService:
    """Application service for food definitions."""

    repository: FoodRepository

    def create_food(
        self,
        user_id: UUID,
        name: str,
        calories_per_unit: float,
        unit: str | None = None,
        default_quantity: int | None = None,
    ) -> FoodDefinition:
        """Create a food, rejecting duplicate names."""
        cleaned = name.strip()
        if self.repository.get_by_name(user_id, cleaned):
            raise FoodAlreadyExistsError(cleaned)
        return self.repository.create_food(
            user_id,
            {
                "name": cleaned,
                "calories": float(calories_per_unit),
                "unit": unit or "Number",
                "qty": default_quantity or 1,
            },
        )

    def list_foods(self, user_id: UUID) -> list[FoodDefinition]:
        """Return the user's foods."""
        return self.repository.list_foods(user_id)

    def find_by_name(self, user_id: UUID, name: str) -> FoodDefinition | None:
        """Return a food by name."""
        return self.repository.get_by_name(user_id, name.strip())

    def resolve_calories(
        self, user_id: UUID, name: str, quantity: int, fallback: float = 0.0
    ) -> float:
        """Return quantity times the food's per-unit calories.

        ``fallback`` is returned when the user has no food with that name.
        """
        food = self.find_by_name(user_id, name)
        if food is None:
            return fallback
        return food.calories_per_unit * quantity

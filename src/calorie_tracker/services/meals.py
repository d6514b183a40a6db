"""Meal logging service."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.meals import MealLogInput, MealLogRecord
from calorie_tracker.services.foods import FoodService


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create_meal_log(self, user_id: UUID, entry: MealLogInput) -> MealLogRecord:
        """Create a meal log and return it."""

    def list_meal_logs(self, user_id: UUID) -> list[MealLogRecord]:
        """Return a user's meal logs, most recent date first."""

    def update_meal_log(
        self, user_id: UUID, meal_log_id: UUID, entry: MealLogInput
    ) -> bool:
        """Update a user's meal log, returning False when none matched."""

    def delete_meal_log(self, user_id: UUID, meal_log_id: UUID) -> bool:
        """Delete a user's meal log, returning False when none matched."""


@dataclass
class MealLogService:
    """Service that resolves calories from foods and persists meal logs."""

    food_service: FoodService
    repository: MealLogRepository

    def create_log(self, user_id: UUID, entry: MealLogInput) -> MealLogRecord:
        """Resolve the calorie total and store a meal log."""
        resolved = self._resolve(user_id, entry)
        return self.repository.create_meal_log(user_id, resolved)

    def list_logs(self, user_id: UUID) -> list[MealLogRecord]:
        """Return the user's meal logs."""
        return self.repository.list_meal_logs(user_id)

    def update_log(self, user_id: UUID, meal_log_id: UUID, entry: MealLogInput) -> bool:
        """Re-resolve calories and update a meal log owned by the user."""
        resolved = self._resolve(user_id, entry)
        return self.repository.update_meal_log(user_id, meal_log_id, resolved)

    def delete_log(self, user_id: UUID, meal_log_id: UUID) -> bool:
        """Delete a meal log owned by the user."""
        return self.repository.delete_meal_log(user_id, meal_log_id)

    def _resolve(self, user_id: UUID, entry: MealLogInput) -> MealLogInput:
        calories = self.food_service.resolve_calories(
            user_id,
            entry.meal_name,
            entry.quantity,
            fallback=entry.calories if entry.calories is not None else 0.0,
        )
        return replace(entry, meal_name=entry.meal_name.strip(), calories=calories)

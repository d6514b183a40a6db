"""Supabase repository for food definitions."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import (
    parse_int,
    parse_number,
    parse_timestamp,
    row_id,
)
from calorie_tracker.domain.foods import FoodDefinition
from calorie_tracker.services.foods import FoodRepository

_COLUMNS = "id, user_id, name, calories, unit, qty, created_at"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food definitions."""

    client: Client

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodDefinition:
        """Insert a food row and return it."""
        response = (
            self.client.table("foods")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_row(response.data[0])

    def list_foods(self, user_id: UUID) -> list[FoodDefinition]:
        """Return a user's foods, newest first."""
        response = (
            self.client.table("foods")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_by_name(self, user_id: UUID, name: str) -> FoodDefinition | None:
        """Return a food by exact name."""
        response = (
            self.client.table("foods")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> FoodDefinition:
    return FoodDefinition(
        id=row_id(row),
        user_id=row_id(row, "user_id"),
        name=str(row.get("name", "")),
        calories_per_unit=parse_number(row.get("calories")),
        unit=str(row.get("unit") or "Number"),
        default_quantity=parse_int(row.get("qty")),
        created_at=parse_timestamp(row.get("created_at")),
    )

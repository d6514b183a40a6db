"""Supabase repository for meal logs."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import (
    optional_text,
    parse_int,
    parse_number,
    parse_timestamp,
    row_id,
)
from calorie_tracker.domain.meals import MealLogInput, MealLogRecord
from calorie_tracker.services.meals import MealLogRepository

_COLUMNS = "id, user_id, date, type, meal_name, qty, calories, notes"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create_meal_log(self, user_id: UUID, entry: MealLogInput) -> MealLogRecord:
        """Insert a meal log row and return it."""
        response = (
            self.client.table("meal_logs")
            .insert({"user_id": str(user_id), **_payload(entry)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_row(response.data[0])

    def list_meal_logs(self, user_id: UUID) -> list[MealLogRecord]:
        """Return meal logs, most recent date first."""
        response = (
            self.client.table("meal_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def update_meal_log(
        self, user_id: UUID, meal_log_id: UUID, entry: MealLogInput
    ) -> bool:
        """Update a meal log row owned by the user."""
        response = (
            self.client.table("meal_logs")
            .update(_payload(entry))
            .eq("id", str(meal_log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def delete_meal_log(self, user_id: UUID, meal_log_id: UUID) -> bool:
        """Delete a meal log row owned by the user."""
        response = (
            self.client.table("meal_logs")
            .delete()
            .eq("id", str(meal_log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _payload(entry: MealLogInput) -> dict[str, object]:
    return {
        "date": entry.date.isoformat(),
        "type": entry.type,
        "meal_name": entry.meal_name,
        "qty": entry.quantity,
        "calories": entry.calories,
        "notes": entry.notes or None,
    }


def _parse_row(row: dict[str, object]) -> MealLogRecord:
    return MealLogRecord(
        id=row_id(row),
        user_id=row_id(row, "user_id"),
        date=parse_timestamp(row.get("date")),
        type=str(row.get("type") or "Custom"),
        meal_name=str(row.get("meal_name", "")),
        quantity=parse_int(row.get("qty")),
        calories=parse_number(row.get("calories")),
        notes=optional_text(row.get("notes")),
    )

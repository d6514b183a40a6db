"""Supabase repository for weight, height and combined measurements."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.rows import (
    optional_text,
    parse_number,
    parse_timestamp,
    row_id,
)
from calorie_tracker.domain.measurements import (
    HeightRecord,
    MeasurementInput,
    MeasurementRecord,
    WeightRecord,
)
from calorie_tracker.services.measurements import MeasurementRepository


@dataclass
class SupabaseMeasurementRepository(MeasurementRepository):
    """Supabase implementation for body measurements."""

    client: Client

    def create_weight(
        self, user_id: UUID, date: datetime, weight: float, notes: str | None
    ) -> WeightRecord:
        """Insert a weight row and return it."""
        row = self._insert(
            "weights",
            {
                "user_id": str(user_id),
                "date": date.isoformat(),
                "weight": weight,
                "notes": notes,
            },
        )
        return _parse_weight(row)

    def list_weights(self, user_id: UUID) -> list[WeightRecord]:
        """Return weight rows, most recent date first."""
        return [_parse_weight(row) for row in self._list("weights", user_id)]

    def create_height(
        self, user_id: UUID, date: datetime, height: float, notes: str | None
    ) -> HeightRecord:
        """Insert a height row and return it."""
        row = self._insert(
            "heights",
            {
                "user_id": str(user_id),
                "date": date.isoformat(),
                "height": height,
                "notes": notes,
            },
        )
        return _parse_height(row)

    def list_heights(self, user_id: UUID) -> list[HeightRecord]:
        """Return height rows, most recent date first."""
        return [_parse_height(row) for row in self._list("heights", user_id)]

    def create_measurement(
        self, user_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord:
        """Insert a combined measurement row and return it."""
        row = self._insert(
            "measurements", {"user_id": str(user_id), **_measurement_payload(entry)}
        )
        return _parse_measurement(row)

    def list_measurements(self, user_id: UUID) -> list[MeasurementRecord]:
        """Return combined measurement rows, most recent date first."""
        return [
            _parse_measurement(row) for row in self._list("measurements", user_id)
        ]

    def update_measurement(
        self, user_id: UUID, measurement_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord | None:
        """Update a measurement row owned by the user."""
        response = (
            self.client.table("measurements")
            .update(_measurement_payload(entry))
            .eq("id", str(measurement_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_measurement(response.data[0])

    def delete_measurement(self, user_id: UUID, measurement_id: UUID) -> bool:
        """Delete a measurement row owned by the user."""
        response = (
            self.client.table("measurements")
            .delete()
            .eq("id", str(measurement_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def _insert(self, table: str, payload: dict[str, object]) -> dict[str, object]:
        response = self.client.table(table).insert(payload).execute()
        if not response.data:
            raise RuntimeError(f"Failed to create {table} row")
        return response.data[0]

    def _list(self, table: str, user_id: UUID) -> list[dict[str, object]]:
        response = (
            self.client.table(table)
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return response.data or []


def _measurement_payload(entry: MeasurementInput) -> dict[str, object]:
    return {
        "date": entry.date.isoformat(),
        "height": entry.height,
        "height_unit": entry.height_unit,
        "weight": entry.weight,
        "notes": entry.notes or None,
    }


def _parse_weight(row: dict[str, object]) -> WeightRecord:
    return WeightRecord(
        id=row_id(row),
        user_id=row_id(row, "user_id"),
        date=parse_timestamp(row.get("date")),
        weight=parse_number(row.get("weight")),
        notes=optional_text(row.get("notes")),
    )


def _parse_height(row: dict[str, object]) -> HeightRecord:
    return HeightRecord(
        id=row_id(row),
        user_id=row_id(row, "user_id"),
        date=parse_timestamp(row.get("date")),
        height=parse_number(row.get("height")),
        notes=optional_text(row.get("notes")),
    )


def _parse_measurement(row: dict[str, object]) -> MeasurementRecord:
    return MeasurementRecord(
        id=row_id(row),
        user_id=row_id(row, "user_id"),
        date=parse_timestamp(row.get("date")),
        height=parse_number(row.get("height")),
        height_unit=str(row.get("height_unit") or "cm"),
        weight=parse_number(row.get("weight")),
        notes=optional_text(row.get("notes")),
    )

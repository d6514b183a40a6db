"""Weight, height and combined measurement records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.measurements import (
    HeightRecord,
    MeasurementInput,
    MeasurementRecord,
    WeightRecord,
)


class MeasurementRepository(Protocol):
    """Persistence interface for body measurements."""

    def create_weight(
        self, user_id: UUID, date: datetime, weight: float, notes: str | None
    ) -> WeightRecord:
        """Create a weight record and return it."""

    def list_weights(self, user_id: UUID) -> list[WeightRecord]:
        """Return weight records, most recent date first."""

    def create_height(
        self, user_id: UUID, date: datetime, height: float, notes: str | None
    ) -> HeightRecord:
        """Create a height record and return it."""

    def list_heights(self, user_id: UUID) -> list[HeightRecord]:
        """Return height records, most recent date first."""

    def create_measurement(
        self, user_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord:
        """Create a combined measurement and return it."""

    def list_measurements(self, user_id: UUID) -> list[MeasurementRecord]:
        """Return combined measurements, most recent date first."""

    def update_measurement(
        self, user_id: UUID, measurement_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord | None:
        """Update a measurement, returning None when none matched."""

    def delete_measurement(self, user_id: UUID, measurement_id: UUID) -> bool:
        """Delete a measurement, returning False when none matched."""


@dataclass
class MeasurementService:
    """Application service for body measurements."""

    repository: MeasurementRepository

    def add_weight(
        self, user_id: UUID, date: datetime, weight: float, notes: str | None = None
    ) -> WeightRecord:
        """Record a weight reading."""
        return self.repository.create_weight(user_id, date, weight, notes or None)

    def list_weights(self, user_id: UUID) -> list[WeightRecord]:
        """Return weight readings, most recent first."""
        return self.repository.list_weights(user_id)

    def add_height(
        self, user_id: UUID, date: datetime, height: float, notes: str | None = None
    ) -> HeightRecord:
        """Record a height reading."""
        return self.repository.create_height(user_id, date, height, notes or None)

    def list_heights(self, user_id: UUID) -> list[HeightRecord]:
        """Return height readings, most recent first."""
        return self.repository.list_heights(user_id)

    def add_measurement(
        self, user_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord:
        """Record a combined height and weight reading."""
        return self.repository.create_measurement(user_id, entry)

    def list_measurements(self, user_id: UUID) -> list[MeasurementRecord]:
        """Return combined readings, most recent first."""
        return self.repository.list_measurements(user_id)

    def update_measurement(
        self, user_id: UUID, measurement_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord | None:
        """Update a combined reading owned by the user."""
        return self.repository.update_measurement(user_id, measurement_id, entry)

    def delete_measurement(self, user_id: UUID, measurement_id: UUID) -> bool:
        """Delete a combined reading owned by the user."""
        return self.repository.delete_measurement(user_id, measurement_id)

"""Domain models for body measurements."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

HEIGHT_UNITS = ("cm", "inches")


@dataclass(frozen=True)
class WeightRecord:
    """A dated weight reading."""

    id: UUID
    user_id: UUID
    date: datetime | None
    weight: float
    notes: str | None = None


@dataclass(frozen=True)
class HeightRecord:
    """A dated height reading."""

    id: UUID
    user_id: UUID
    date: datetime | None
    height: float
    notes: str | None = None


@dataclass(frozen=True)
class MeasurementInput:
    """Fields supplied when creating or editing a combined measurement."""

    date: datetime
    height: float
    height_unit: str
    weight: float
    notes: str | None = None


@dataclass(frozen=True)
class MeasurementRecord:
    """A dated height and weight reading taken together."""

    id: UUID
    user_id: UUID
    date: datetime | None
    height: float
    height_unit: str
    weight: float
    notes: str | None = None

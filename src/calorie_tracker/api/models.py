"""Pydantic models for API request bodies."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_DAY_ONLY_LENGTH = 10
_BCRYPT_MAX_BYTES = 72


class DatedRequest(BaseModel):
    """Base payload for records stamped with a date."""

    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def expand_day(cls, value: object) -> object:
        """Read a bare ``YYYY-MM-DD`` form value as UTC midnight.

        The day is not shifted into the viewer's zone, so dashboards west of
        UTC show it under the previous calendar day.
        """
        if isinstance(value, str) and len(value.strip()) == _DAY_ONLY_LENGTH:
            return f"{value.strip()}T00:00:00+00:00"
        return value


class SignupRequest(BaseModel):
    """Sign-up form payload."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def fit_bcrypt(cls, value: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        if len(value.encode("utf-8")) > _BCRYPT_MAX_BYTES:
            raise ValueError("password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    """Login form payload."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class FoodRequest(BaseModel):
    """Food definition payload."""

    name: str = Field(min_length=1)
    calories: float = Field(gt=0)
    unit: str | None = None
    qty: int | None = Field(default=None, ge=1)


class MealLogRequest(DatedRequest):
    """Meal log payload for create and update."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default="Breakfast", min_length=1)
    meal_name: str = Field(alias="mealName", min_length=1)
    qty: int = Field(default=1, ge=1)
    calories: float | None = Field(default=None, ge=0)
    notes: str | None = None


class WeightRequest(DatedRequest):
    """Weight reading payload."""

    weight: float = Field(gt=0)
    notes: str | None = None


class HeightRequest(DatedRequest):
    """Height reading payload."""

    height: float = Field(gt=0)
    notes: str | None = None


class MeasurementRequest(DatedRequest):
    """Combined height and weight payload."""

    model_config = ConfigDict(populate_by_name=True)

    height: float = Field(gt=0)
    height_unit: Literal["cm", "inches"] = Field(default="cm", alias="heightUnit")
    weight: float = Field(gt=0)
    notes: str | None = None

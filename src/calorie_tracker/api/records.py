"""CRUD endpoints for foods, meal logs and body measurements."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from calorie_tracker.api.auth import require_user
from calorie_tracker.api.models import (
    FoodRequest,
    HeightRequest,
    MealLogRequest,
    MeasurementRequest,
    WeightRequest,
)
from calorie_tracker.domain.meals import MealLogInput
from calorie_tracker.domain.measurements import MeasurementInput
from calorie_tracker.services.errors import FoodAlreadyExistsError

if TYPE_CHECKING:
    from datetime import datetime

    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.foods import FoodDefinition
    from calorie_tracker.domain.meals import MealLogRecord
    from calorie_tracker.domain.measurements import (
        HeightRecord,
        MeasurementRecord,
        WeightRecord,
    )

router = APIRouter(prefix="/api", tags=["records"])


@router.get("/meals")
async def list_foods(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the user's food definitions."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_foods(user_id)
    return [_serialize_food(food) for food in foods]


@router.post("/meals")
async def create_food(
    payload: FoodRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Create a food definition."""
    container: AppContainer = request.app.state.container
    try:
        food = container.food_service.create_food(
            user_id,
            name=payload.name,
            calories_per_unit=payload.calories,
            unit=payload.unit,
            default_quantity=payload.qty,
        )
    except FoodAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Food already exists"
        ) from None
    return _serialize_food(food)


@router.get("/meal-logs")
async def list_meal_logs(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the user's meal logs, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        serialize_meal_log(log)
        for log in container.meal_log_service.list_logs(user_id)
    ]


@router.post("/meal-logs")
async def create_meal_log(
    payload: MealLogRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Log a meal, resolving calories from the named food."""
    container: AppContainer = request.app.state.container
    log = container.meal_log_service.create_log(user_id, _meal_log_input(payload))
    return serialize_meal_log(log)


@router.put("/meal-logs/{meal_log_id}")
async def update_meal_log(
    meal_log_id: UUID,
    payload: MealLogRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Edit a meal log owned by the caller."""
    container: AppContainer = request.app.state.container
    updated = container.meal_log_service.update_log(
        user_id, meal_log_id, _meal_log_input(payload)
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return {"success": True}


@router.delete("/meal-logs/{meal_log_id}")
async def delete_meal_log(
    meal_log_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Delete a meal log owned by the caller."""
    container: AppContainer = request.app.state.container
    if not container.meal_log_service.delete_log(user_id, meal_log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return {"success": True}


@router.get("/weight")
async def list_weights(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return weight readings, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        _serialize_weight(record)
        for record in container.measurement_service.list_weights(user_id)
    ]


@router.post("/weight", status_code=status.HTTP_201_CREATED)
async def create_weight(
    payload: WeightRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Record a weight reading."""
    container: AppContainer = request.app.state.container
    record = container.measurement_service.add_weight(
        user_id, payload.date, payload.weight, payload.notes
    )
    return _serialize_weight(record)


@router.get("/height")
async def list_heights(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return height readings, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        _serialize_height(record)
        for record in container.measurement_service.list_heights(user_id)
    ]


@router.post("/height", status_code=status.HTTP_201_CREATED)
async def create_height(
    payload: HeightRequest, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Record a height reading."""
    container: AppContainer = request.app.state.container
    record = container.measurement_service.add_height(
        user_id, payload.date, payload.height, payload.notes
    )
    return _serialize_height(record)


@router.get("/measurements")
async def list_measurements(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return combined readings, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        _serialize_measurement(record)
        for record in container.measurement_service.list_measurements(user_id)
    ]


@router.post("/measurements", status_code=status.HTTP_201_CREATED)
async def create_measurement(
    payload: MeasurementRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Record a combined height and weight reading."""
    container: AppContainer = request.app.state.container
    record = container.measurement_service.add_measurement(
        user_id, _measurement_input(payload)
    )
    return _serialize_measurement(record)


@router.put("/measurements/{measurement_id}")
async def update_measurement(
    measurement_id: UUID,
    payload: MeasurementRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Edit a combined reading owned by the caller."""
    container: AppContainer = request.app.state.container
    record = container.measurement_service.update_measurement(
        user_id, measurement_id, _measurement_input(payload)
    )
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return _serialize_measurement(record)


@router.delete("/measurements/{measurement_id}")
async def delete_measurement(
    measurement_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Delete a combined reading owned by the caller."""
    container: AppContainer = request.app.state.container
    if not container.measurement_service.delete_measurement(user_id, measurement_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return {"success": True}


def _meal_log_input(payload: MealLogRequest) -> MealLogInput:
    return MealLogInput(
        date=payload.date,
        type=payload.type,
        meal_name=payload.meal_name,
        quantity=payload.qty,
        notes=payload.notes,
        calories=payload.calories,
    )


def _measurement_input(payload: MeasurementRequest) -> MeasurementInput:
    return MeasurementInput(
        date=payload.date,
        height=payload.height,
        height_unit=payload.height_unit,
        weight=payload.weight,
        notes=payload.notes,
    )


def _isoformat(record_date: datetime | None) -> str | None:
    return record_date.isoformat() if record_date is not None else None


def _number(value: float) -> float | None:
    return value if math.isfinite(value) else None


def serialize_meal_log(log: MealLogRecord) -> dict[str, object]:
    """Render a meal log with the keys dashboard clients expect."""
    return {
        "id": str(log.id),
        "date": _isoformat(log.date),
        "type": log.type,
        "mealName": log.meal_name,
        "qty": log.quantity,
        "calories": _number(log.calories),
        "notes": log.notes,
    }


def _serialize_food(food: FoodDefinition) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "calories": _number(food.calories_per_unit),
        "unit": food.unit,
        "qty": food.default_quantity,
        "createdAt": _isoformat(food.created_at),
    }


def _serialize_weight(record: WeightRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "date": _isoformat(record.date),
        "weight": _number(record.weight),
        "notes": record.notes,
    }


def _serialize_height(record: HeightRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "date": _isoformat(record.date),
        "height": _number(record.height),
        "notes": record.notes,
    }


def _serialize_measurement(record: MeasurementRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "date": _isoformat(record.date),
        "height": _number(record.height),
        "heightUnit": record.height_unit,
        "weight": _number(record.weight),
        "notes": record.notes,
    }

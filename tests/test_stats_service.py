"""Tests for stats service."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

from calorie_tracker.domain.meals import MealLogRecord
from calorie_tracker.domain.stats import DailyTotal, RangeStatistics
from calorie_tracker.services.stats import StatsService
from tests.conftest import InMemoryMealLogRepository, InMemoryMeasurementRepository


def _log(user_id, day: int, meal_type: str, calories: float) -> MealLogRecord:
    return MealLogRecord(
        id=uuid4(),
        user_id=user_id,
        date=datetime(2024, 1, day, 12, tzinfo=UTC),
        type=meal_type,
        meal_name="food",
        quantity=1,
        calories=calories,
    )


def _service() -> tuple[
    StatsService, InMemoryMealLogRepository, InMemoryMeasurementRepository
]:
    meals = InMemoryMealLogRepository()
    measurements = InMemoryMeasurementRepository()
    return StatsService(meals, measurements), meals, measurements


def test_get_analytics_uses_only_the_users_logs() -> None:
    service, meals, _ = _service()
    user_id = uuid4()
    meals.logs = [
        _log(user_id, 5, "Breakfast", 100),
        _log(user_id, 5, "Lunch", 200),
        _log(user_id, 6, "Breakfast", 150),
        _log(uuid4(), 6, "Breakfast", 5000),
    ]

    report = service.get_analytics(user_id, "UTC")

    assert report.statistics.total_calories == 450
    assert report.statistics.peak_day_calories == 300
    assert report.daily == [
        DailyTotal(day="1/5/2024", total_calories=300),
        DailyTotal(day="1/6/2024", total_calories=150),
    ]
    assert {c.category for c in report.categories} == {"Breakfast", "Lunch"}


def test_get_calorie_summary_respects_timezone() -> None:
    service, meals, _ = _service()
    user_id = uuid4()
    log = _log(user_id, 1, "Dinner", 600)
    meals.logs = [replace(log, date=datetime(2024, 2, 1, 2, tzinfo=UTC))]

    summary = service.get_calorie_summary(user_id, "America/Los_Angeles")

    assert summary.months == {"Jan": {31: {"Dinner": 600}}}


def test_get_meal_days_groups_logs() -> None:
    service, meals, _ = _service()
    user_id = uuid4()
    meals.logs = [_log(user_id, 5, "Lunch", 1), _log(user_id, 7, "Lunch", 2)]

    grouped = service.get_meal_days(user_id, "UTC")

    assert list(grouped) == ["1/7/2024", "1/5/2024"]


def test_weight_trend_reports_series_and_range() -> None:
    service, _, measurements = _service()
    user_id = uuid4()
    measurements.create_weight(user_id, datetime(2024, 1, 1, tzinfo=UTC), 80, None)
    measurements.create_weight(user_id, datetime(2024, 1, 10, tzinfo=UTC), 78, None)

    report = service.get_weight_trend(user_id, "UTC")

    assert [point.value for point in report.series] == [80, 78]
    assert report.statistics == RangeStatistics(
        current=78, min=78, max=80, average=79
    )


def test_height_trend_without_data() -> None:
    service, _, _ = _service()

    report = service.get_height_trend(uuid4(), "UTC")

    assert report.series == []
    assert report.statistics is None

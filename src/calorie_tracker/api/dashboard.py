"""Dashboard endpoints that aggregate the caller's current records."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from calorie_tracker.api.auth import require_user
from calorie_tracker.api.records import serialize_meal_log
from calorie_tracker.config import parse_timezone

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.stats import MonthlyCalorieSummary
    from calorie_tracker.services.stats import TrendReport

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def resolve_timezone(request: Request, tz: str | None = Query(default=None)) -> str:
    """Return the requested IANA zone or the configured default."""
    container: AppContainer = request.app.state.container
    timezone_name = parse_timezone(tz, container.settings.default_timezone)
    if timezone_name is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown timezone"
        )
    return timezone_name


@router.get("/analytics")
async def analytics(
    request: Request,
    user_id: UUID = Depends(require_user),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return headline statistics, daily totals and category breakdown."""
    container: AppContainer = request.app.state.container
    report = container.stats_service.get_analytics(user_id, timezone_name)
    return {
        "stats": {
            "totalCalories": report.statistics.total_calories,
            "averagePerDay": report.statistics.average_per_day,
            "daysTracked": report.statistics.days_tracked,
            "peakDayCalories": report.statistics.peak_day_calories,
        },
        "daily": [
            {"day": entry.day, "totalCalories": entry.total_calories}
            for entry in report.daily
        ],
        "categories": [
            {"category": entry.category, "totalCalories": entry.total_calories}
            for entry in report.categories
        ],
    }


@router.get("/calorie-summary")
async def calorie_summary(
    request: Request,
    user_id: UUID = Depends(require_user),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return calories by month, day and meal category with totals."""
    container: AppContainer = request.app.state.container
    summary = container.stats_service.get_calorie_summary(user_id, timezone_name)
    return _serialize_summary(summary)


@router.get("/meal-days")
async def meal_days(
    request: Request,
    user_id: UUID = Depends(require_user),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return meal logs grouped by calendar day."""
    container: AppContainer = request.app.state.container
    grouped = container.stats_service.get_meal_days(user_id, timezone_name)
    return {
        "days": [
            {"day": day, "logs": [serialize_meal_log(log) for log in logs]}
            for day, logs in grouped.items()
        ]
    }


@router.get("/weight")
async def weight_trend(
    request: Request,
    user_id: UUID = Depends(require_user),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return the weight chart series and range statistics."""
    container: AppContainer = request.app.state.container
    return _serialize_trend(
        container.stats_service.get_weight_trend(user_id, timezone_name)
    )


@router.get("/height")
async def height_trend(
    request: Request,
    user_id: UUID = Depends(require_user),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return the height chart series and range statistics."""
    container: AppContainer = request.app.state.container
    return _serialize_trend(
        container.stats_service.get_height_trend(user_id, timezone_name)
    )


def _serialize_summary(summary: MonthlyCalorieSummary) -> dict[str, object]:
    categories = summary.categories()
    months = []
    for month in summary.sorted_months():
        days = [
            {
                "day": day,
                "values": dict(sorted(summary.months[month][day].items())),
                "total": summary.day_total(month, day),
            }
            for day in summary.sorted_days(month)
        ]
        months.append(
            {
                "month": month,
                "total": summary.month_total(month),
                "categoryTotals": {
                    category: summary.category_total(month, category)
                    for category in categories
                },
                "days": days,
            }
        )
    return {"categories": categories, "months": months}


def _serialize_trend(report: TrendReport) -> dict[str, object]:
    stats = report.statistics
    return {
        "series": [{"day": point.day, "value": point.value} for point in report.series],
        "stats": None
        if stats is None
        else {
            "current": stats.current,
            "min": stats.min,
            "max": stats.max,
            "average": stats.average,
        },
    }

"""Dashboard statistics computed from a user's current records."""

from dataclasses import dataclass
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.meals import MealLogRecord
from calorie_tracker.domain.stats import (
    CategoryTotal,
    DailyTotal,
    MonthlyCalorieSummary,
    RangeStatistics,
    SummaryStatistics,
    TrendPoint,
)
from calorie_tracker.services.aggregation import (
    compute_category_breakdown,
    compute_daily_totals,
    compute_range_statistics,
    compute_summary_statistics,
    compute_trend_series,
    group_by_day,
    group_by_month_then_day,
)
from calorie_tracker.services.meals import MealLogRepository
from calorie_tracker.services.measurements import MeasurementRepository


@dataclass(frozen=True)
class AnalyticsReport:
    """Headline statistics with the chart series behind them."""

    statistics: SummaryStatistics
    daily: list[DailyTotal]
    categories: list[CategoryTotal]


@dataclass(frozen=True)
class TrendReport:
    """Chart series and range statistics for a measured value."""

    series: list[TrendPoint]
    statistics: RangeStatistics | None


@dataclass
class StatsService:
    """Fetches one snapshot of a user's records and aggregates it."""

    meal_log_repository: MealLogRepository
    measurement_repository: MeasurementRepository

    def get_analytics(self, user_id: UUID, timezone_name: str) -> AnalyticsReport:
        """Return summary statistics, daily totals and category breakdown."""
        tz = ZoneInfo(timezone_name)
        logs = self.meal_log_repository.list_meal_logs(user_id)
        return AnalyticsReport(
            statistics=compute_summary_statistics(logs, tz=tz),
            daily=compute_daily_totals(logs, tz=tz),
            categories=compute_category_breakdown(logs, tz=tz),
        )

    def get_calorie_summary(
        self, user_id: UUID, timezone_name: str
    ) -> MonthlyCalorieSummary:
        """Return calories grouped by month, day and meal category."""
        logs = self.meal_log_repository.list_meal_logs(user_id)
        return group_by_month_then_day(logs, tz=ZoneInfo(timezone_name))

    def get_meal_days(
        self, user_id: UUID, timezone_name: str
    ) -> dict[str, list[MealLogRecord]]:
        """Return meal logs bucketed by calendar day."""
        logs = self.meal_log_repository.list_meal_logs(user_id)
        return group_by_day(logs, tz=ZoneInfo(timezone_name))

    def get_weight_trend(self, user_id: UUID, timezone_name: str) -> TrendReport:
        """Return the weight chart series and range statistics."""
        weights = self.measurement_repository.list_weights(user_id)
        return _trend(weights, "weight", ZoneInfo(timezone_name))

    def get_height_trend(self, user_id: UUID, timezone_name: str) -> TrendReport:
        """Return the height chart series and range statistics."""
        heights = self.measurement_repository.list_heights(user_id)
        return _trend(heights, "height", ZoneInfo(timezone_name))


def _trend(records: list[object], value_field: str, tz: ZoneInfo) -> TrendReport:
    return TrendReport(
        series=compute_trend_series(records, value_field, tz=tz),
        statistics=compute_range_statistics(records, value_field, tz=tz),
    )

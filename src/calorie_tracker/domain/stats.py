"""Domain models for aggregated statistics."""

import math
from dataclasses import dataclass, field

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True)
class DailyTotal:
    """Total calories for one calendar day."""

    day: str
    total_calories: float


@dataclass(frozen=True)
class CategoryTotal:
    """Total calories for one meal category."""

    category: str
    total_calories: float


@dataclass(frozen=True)
class SummaryStatistics:
    """Headline numbers for the analytics dashboard."""

    total_calories: float = 0
    average_per_day: float = 0
    days_tracked: int = 0
    peak_day_calories: float = 0


@dataclass(frozen=True)
class TrendPoint:
    """A single point on a weight or height chart."""

    day: str
    value: float


@dataclass(frozen=True)
class RangeStatistics:
    """Current, minimum, maximum and mean of a measured value."""

    current: float
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class MonthlyCalorieSummary:
    """Calories summed by month label, day of month and meal category.

    Only the leaf sums are stored. Day, month and per-category totals are
    derived from them on access.
    """

    months: dict[str, dict[int, dict[str, float]]] = field(default_factory=dict)

    def sorted_months(self) -> list[str]:
        """Return month labels, most recent calendar month first."""
        return sorted(self.months, key=MONTH_LABELS.index, reverse=True)

    def sorted_days(self, month: str) -> list[int]:
        """Return the days present in a month, latest first."""
        return sorted(self.months.get(month, {}), reverse=True)

    def categories(self) -> list[str]:
        """Return every category present, sorted ascending."""
        found = {
            category
            for days in self.months.values()
            for values in days.values()
            for category in values
        }
        return sorted(found)

    def day_total(self, month: str, day: int) -> float:
        """Return the calories for one day across all categories."""
        return math.fsum(self.months.get(month, {}).get(day, {}).values())

    def month_total(self, month: str) -> float:
        """Return the calories for every day in a month."""
        return math.fsum(
            value
            for values in self.months.get(month, {}).values()
            for value in values.values()
        )

    def category_total(self, month: str, category: str) -> float:
        """Return the calories for one category across a month."""
        return math.fsum(
            values.get(category, 0) for values in self.months.get(month, {}).values()
        )

"""Pure aggregation of dated records into dashboard summaries.

Every function takes a full snapshot of one user's records and recomputes its
result from scratch. Records only need the attributes that a function reads
(``date`` plus ``calories``/``type`` for meal logs, or the named value field
for measurements), so the domain dataclasses and test doubles both work.

Records with a missing or unparsable ``date``, a missing category, or a
missing or non-finite numeric field are skipped by every function.

Calorie sums use ``math.fsum``, so each total is the correctly rounded sum of
its records. Totals of different groupings agree exactly on the underlying
values but may differ in the last float digit once re-added, so compare them
with a tolerance.
"""

import logging
import math
from collections.abc import Iterable
from datetime import UTC, date, datetime, time, tzinfo
from typing import NamedTuple, TypeVar

from calorie_tracker.domain.stats import (
    MONTH_LABELS,
    CategoryTotal,
    DailyTotal,
    MonthlyCalorieSummary,
    RangeStatistics,
    SummaryStatistics,
    TrendPoint,
)

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class _CalorieEntry(NamedTuple):
    day: date
    category: str
    calories: float


class _ValueEntry(NamedTuple):
    timestamp: datetime
    position: int
    value: float


def resolve_timestamp(value: object, tz: tzinfo = UTC) -> datetime | None:
    """Return an aware datetime for a record date, or None if unusable.

    Naive datetimes and ISO strings without an offset are read as UTC. Plain
    dates are read as local midnight in ``tz``.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=tz)
    return None


def local_date(value: object, tz: tzinfo = UTC) -> date | None:
    """Return the calendar day of a record date in the consumer's zone."""
    timestamp = resolve_timestamp(value, tz)
    if timestamp is None:
        return None
    try:
        return timestamp.astimezone(tz).date()
    except (OverflowError, ValueError):
        return None


def day_label(day: date) -> str:
    """Format a calendar day as ``M/D/YYYY``."""
    return f"{day.month}/{day.day}/{day.year}"


def month_label(day: date) -> str:
    """Return the abbreviated month name for a calendar day."""
    return MONTH_LABELS[day.month - 1]


def group_by_day(
    records: Iterable[RecordT], *, tz: tzinfo = UTC
) -> dict[str, list[RecordT]]:
    """Bucket records by local calendar day, keeping input order."""
    grouped: dict[str, list[RecordT]] = {}
    for record in records:
        day = local_date(getattr(record, "date", None), tz)
        if day is None:
            continue
        grouped.setdefault(day_label(day), []).append(record)
    return grouped


def group_by_month_then_day(
    records: Iterable[object], *, tz: tzinfo = UTC
) -> MonthlyCalorieSummary:
    """Sum calories by month label, day of month and meal category.

    Months are keyed by name only, so the same month of different years
    shares a bucket.
    """
    leaves: dict[str, dict[int, dict[str, list[float]]]] = {}
    for entry in _calorie_entries(records, tz):
        days = leaves.setdefault(month_label(entry.day), {})
        categories = days.setdefault(entry.day.day, {})
        categories.setdefault(entry.category, []).append(entry.calories)
    months = {
        month: {
            day: {category: math.fsum(values) for category, values in cells.items()}
            for day, cells in days.items()
        }
        for month, days in leaves.items()
    }
    return MonthlyCalorieSummary(months=months)


def compute_daily_totals(
    records: Iterable[object], *, tz: tzinfo = UTC
) -> list[DailyTotal]:
    """Return total calories per day, oldest day first."""
    totals = _totals_by_day(_calorie_entries(records, tz))
    return [
        DailyTotal(day=day_label(day), total_calories=totals[day])
        for day in sorted(totals)
    ]


def compute_category_breakdown(
    records: Iterable[object], *, tz: tzinfo = UTC
) -> list[CategoryTotal]:
    """Return total calories per category in first-seen order."""
    grouped: dict[str, list[float]] = {}
    for entry in _calorie_entries(records, tz):
        grouped.setdefault(entry.category, []).append(entry.calories)
    return [
        CategoryTotal(category=category, total_calories=math.fsum(values))
        for category, values in grouped.items()
    ]


def compute_summary_statistics(
    records: Iterable[object], *, tz: tzinfo = UTC
) -> SummaryStatistics:
    """Return total, daily average, tracked days and peak day calories."""
    entries = _calorie_entries(records, tz)
    totals = _totals_by_day(entries)
    if not totals:
        return SummaryStatistics()
    total_calories = math.fsum(entry.calories for entry in entries)
    return SummaryStatistics(
        total_calories=total_calories,
        average_per_day=total_calories / len(totals),
        days_tracked=len(totals),
        peak_day_calories=max(totals.values()),
    )


def compute_trend_series(
    records: Iterable[object], value_field: str, *, tz: tzinfo = UTC
) -> list[TrendPoint]:
    """Project measurement records to chart points, oldest first.

    Records sharing a day stay separate points.
    """
    entries = sorted(
        _value_entries(records, value_field, tz),
        key=lambda entry: (entry.timestamp, entry.position),
    )
    return [
        TrendPoint(
            day=day_label(entry.timestamp.astimezone(tz).date()),
            value=entry.value,
        )
        for entry in entries
    ]


def compute_range_statistics(
    records: Iterable[object], value_field: str, *, tz: tzinfo = UTC
) -> RangeStatistics | None:
    """Return current, min, max and mean of a measured value.

    Records are expected most-recent-first, as the repositories return them.
    ``current`` is the value with the latest date; among equal dates the
    record that comes first in the input wins. Returns None without data.
    """
    entries = _value_entries(records, value_field, tz)
    if not entries:
        return None
    latest = max(entries, key=lambda entry: (entry.timestamp, -entry.position))
    values = [entry.value for entry in entries]
    return RangeStatistics(
        current=latest.value,
        min=min(values),
        max=max(values),
        average=sum(values) / len(values),
    )


def _calorie_entries(records: Iterable[object], tz: tzinfo) -> list[_CalorieEntry]:
    entries: list[_CalorieEntry] = []
    skipped = 0
    for record in records:
        day = local_date(getattr(record, "date", None), tz)
        calories = _finite(getattr(record, "calories", None))
        category = getattr(record, "type", None)
        if day is None or calories is None or category is None:
            skipped += 1
            continue
        entries.append(
            _CalorieEntry(day=day, category=str(category), calories=calories)
        )
    if skipped:
        _logger.debug("Skipped %s malformed meal log records", skipped)
    return entries


def _value_entries(
    records: Iterable[object], value_field: str, tz: tzinfo
) -> list[_ValueEntry]:
    entries: list[_ValueEntry] = []
    skipped = 0
    for position, record in enumerate(records):
        timestamp = resolve_timestamp(getattr(record, "date", None), tz)
        value = _finite(getattr(record, value_field, None))
        if timestamp is None or value is None or local_date(timestamp, tz) is None:
            skipped += 1
            continue
        entries.append(
            _ValueEntry(timestamp=timestamp, position=position, value=value)
        )
    if skipped:
        _logger.debug("Skipped %s malformed %s records", skipped, value_field)
    return entries


def _totals_by_day(entries: list[_CalorieEntry]) -> dict[date, float]:
    grouped: dict[date, list[float]] = {}
    for entry in entries:
        grouped.setdefault(entry.day, []).append(entry.calories)
    return {day: math.fsum(values) for day, values in grouped.items()}


def _finite(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)

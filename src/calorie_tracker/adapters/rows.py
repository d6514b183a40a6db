"""Helpers for parsing Supabase rows into domain values."""

import math
from datetime import datetime
from uuid import UUID


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, returning None when unusable."""
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def parse_number(raw: object) -> float:
    """Parse a numeric column, returning NaN when unusable."""
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, int | float):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return math.nan
    return math.nan


def parse_int(raw: object, default: int = 1) -> int:
    """Parse an integer column, falling back to a default."""
    value = parse_number(raw)
    if not math.isfinite(value):
        return default
    return int(value)


def optional_text(raw: object) -> str | None:
    """Return a non-empty string column or None."""
    if raw is None or raw == "":
        return None
    return str(raw)


def row_id(row: dict[str, object], column: str = "id") -> UUID:
    """Return a UUID column."""
    return UUID(str(row[column]))

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_QUANTUM


def now_local() -> datetime:
    """Current local time; services accept an explicit ``now`` instead where it matters."""
    return datetime.now()


def month_index(value: date) -> int:
    """Zero-based month of a date (January is 0)."""
    return value.month - 1


def in_month(value: date, month: int, year: int) -> bool:
    return value.year == year and month_index(value) == month


def month_ordinal(month: int, year: int) -> int:
    """Single comparable number for a (zero-based month, year) pair."""
    return year * 12 + month


def hours_between(start: datetime, end: datetime) -> Decimal:
    seconds = Decimal(str((end - start).total_seconds()))
    return (seconds / Decimal(3600)).quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def as_naive_local(value: datetime) -> datetime:
    """Stored times are naive local; offset-aware input is converted first."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)

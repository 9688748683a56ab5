"""Resolution of analysis periods into concrete date ranges."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class InvalidPeriodError(ValueError):
    """Raised when a period key is not recognized."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown analysis period: {key!r}")
        self.key = key


@dataclass(frozen=True)
class PeriodRule:
    """Declarative rule for a rolling period of whole local days."""

    key: str
    days: int


class Period(Enum):
    """Supported analysis periods."""

    TODAY = PeriodRule("today", 1)
    WEEK = PeriodRule("week", 7)
    MONTH = PeriodRule("month", 30)

    @property
    def key(self) -> str:
        return self.value.key

    @classmethod
    def from_key(cls, key: str) -> "Period":
        """Return the period for a key such as ``today`` or ``week``."""
        normalized = key.strip().lower()
        for period in cls:
            if period.key == normalized:
                return period
        raise InvalidPeriodError(key)


@dataclass(frozen=True)
class ResolvedPeriod:
    """Concrete inclusive range and day-count divisor for a period."""

    period: Period
    start: datetime
    end: datetime
    days: int


def resolve_period(period: Period | str, now: datetime) -> ResolvedPeriod:
    """Resolve a period relative to ``now``.

    The range starts at local midnight ``days - 1`` days before ``now`` and
    ends at ``now``. The divisor is always the full day count of the period,
    even when some of those days have no entries.
    """
    resolved = period if isinstance(period, Period) else Period.from_key(period)
    days = resolved.value.days
    start = (now - timedelta(days=days - 1)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return ResolvedPeriod(period=resolved, start=start, end=now, days=days)

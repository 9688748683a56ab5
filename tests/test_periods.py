"""Tests for analysis period resolution."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from diet_tracker.services.periods import InvalidPeriodError, Period, resolve_period


def test_today_starts_at_local_midnight() -> None:
    now = datetime(2024, 3, 15, 18, 30, tzinfo=UTC)

    resolved = resolve_period(Period.TODAY, now)

    assert resolved.start == datetime(2024, 3, 15, tzinfo=UTC)
    assert resolved.end == now
    assert resolved.days == 1


def test_week_covers_seven_calendar_days() -> None:
    now = datetime(2024, 3, 15, 9, 0, tzinfo=UTC)

    resolved = resolve_period("week", now)

    assert resolved.period is Period.WEEK
    assert resolved.start == datetime(2024, 3, 9, tzinfo=UTC)
    assert resolved.days == 7


def test_month_uses_thirty_day_divisor() -> None:
    now = datetime(2024, 3, 15, 9, 0, tzinfo=UTC)

    resolved = resolve_period("month", now)

    assert resolved.start == datetime(2024, 2, 15, tzinfo=UTC)
    assert resolved.days == 30


def test_start_is_midnight_in_user_timezone() -> None:
    tz = ZoneInfo("America/Los_Angeles")
    now = datetime(2024, 3, 15, 1, 0, tzinfo=UTC).astimezone(tz)

    resolved = resolve_period(Period.TODAY, now)

    assert resolved.start == datetime(2024, 3, 14, tzinfo=tz)
    assert resolved.start.astimezone(UTC) == datetime(2024, 3, 14, 7, tzinfo=UTC)


def test_period_keys_are_case_insensitive() -> None:
    assert Period.from_key(" Week ") is Period.WEEK


def test_unknown_period_is_rejected() -> None:
    with pytest.raises(InvalidPeriodError) as excinfo:
        resolve_period("year", datetime.now(tz=UTC))

    assert excinfo.value.key == "year"

"""Meal logging service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from diet_tracker.domain.entries import DietaryEntry, MealType
from diet_tracker.services.foods import FoodService
from diet_tracker.services.periods import Period, resolve_period

_logger = logging.getLogger(__name__)


class EntryNotFoundError(LookupError):
    """Raised when an entry does not exist or belongs to another user."""


class EntryRepository(Protocol):
    """Persistence interface for dietary entries."""

    def list_for_user_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[DietaryEntry]:
        """Return entries consumed within ``[start, end]``, oldest first."""

    def list_recent(self, user_id: UUID, limit: int) -> list[DietaryEntry]:
        """Return the most recent entries, newest first."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        meal_type: MealType,
        consumed_at: datetime,
        portion_multiplier: float,
    ) -> DietaryEntry:
        """Create an entry and return it."""

    def get_entry(self, entry_id: UUID) -> DietaryEntry | None:
        """Return an entry by id, if present."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EntryService:
    """Service for logging, listing and deleting meals."""

    repository: EntryRepository
    food_service: FoodService
    clock: Callable[[], datetime] = _utc_now

    def log_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        meal_type: MealType,
        portion_multiplier: float = 1.0,
        consumed_at: datetime | None = None,
    ) -> DietaryEntry:
        """Log a food for a user after checking it exists in the catalog."""
        if portion_multiplier <= 0:
            raise ValueError("Portion multiplier must be positive")
        if consumed_at is not None and consumed_at.tzinfo is None:
            raise ValueError("consumed_at must include a timezone")
        self.food_service.get_profile(food_id)
        return self.repository.create_entry(
            user_id=user_id,
            food_id=food_id,
            meal_type=meal_type,
            consumed_at=consumed_at or self.clock(),
            portion_multiplier=portion_multiplier,
        )

    def list_history(self, user_id: UUID, limit: int = 50) -> list[DietaryEntry]:
        """Return recent entries, newest first."""
        return self.repository.list_recent(user_id, limit)

    def list_today(
        self, user_id: UUID, timezone_name: str = "UTC"
    ) -> list[DietaryEntry]:
        """Return entries logged since local midnight."""
        now = self.clock().astimezone(ZoneInfo(timezone_name))
        today = resolve_period(Period.TODAY, now)
        return self.repository.list_for_user_in_range(
            user_id, today.start.astimezone(UTC), today.end.astimezone(UTC)
        )

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry owned by the user."""
        entry = self.repository.get_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise EntryNotFoundError(f"Entry {entry_id} not found")
        self.repository.delete_entry(entry_id)
        _logger.info("Deleted entry %s for user %s", entry_id, user_id)

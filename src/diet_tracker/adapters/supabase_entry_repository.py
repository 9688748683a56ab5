"""Supabase repository for dietary entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.entries import DietaryEntry, MealType
from diet_tracker.services.entries import EntryRepository

_COLUMNS = "id, user_id, food_item_id, meal_type, consumed_at, portion_size"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for dietary entry persistence."""

    client: Client

    def list_for_user_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[DietaryEntry]:
        """Return entries in the inclusive time range."""
        response = (
            self.client.table("dietary_entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("consumed_at", start.isoformat())
            .lte("consumed_at", end.isoformat())
            .order("consumed_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_recent(self, user_id: UUID, limit: int) -> list[DietaryEntry]:
        """Return the most recent entries for a user."""
        response = (
            self.client.table("dietary_entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("consumed_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        meal_type: MealType,
        consumed_at: datetime,
        portion_multiplier: float,
    ) -> DietaryEntry:
        """Insert an entry row and return it."""
        response = (
            self.client.table("dietary_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_item_id": str(food_id),
                    "meal_type": meal_type.value,
                    "consumed_at": consumed_at.isoformat(),
                    "portion_size": portion_multiplier,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create dietary entry in Supabase")
        return _parse_row(response.data[0])

    def get_entry(self, entry_id: UUID) -> DietaryEntry | None:
        """Return an entry by id."""
        response = (
            self.client.table("dietary_entries")
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("dietary_entries").delete().eq(
            "id", str(entry_id)
        ).execute()


def _parse_row(row: dict[str, object]) -> DietaryEntry:
    portion = row.get("portion_size")
    return DietaryEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_id=UUID(str(row["food_item_id"])),
        meal_type=MealType(str(row.get("meal_type") or MealType.SNACK.value)),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
        portion_multiplier=float(portion) if portion is not None else 1.0,
    )

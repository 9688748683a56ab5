"""Supabase repository for nutrient goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.nutrients import Nutrient
from diet_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation storing one goal record per user."""

    client: Client

    def get_goals(self, user_id: UUID) -> dict[Nutrient, float] | None:
        """Return stored goals, ignoring unknown nutrient keys."""
        response = (
            self.client.table("nutrition_goals")
            .select("goals")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        raw = response.data[0].get("goals") or {}
        goals: dict[Nutrient, float] = {}
        for key, value in raw.items():
            try:
                nutrient = Nutrient(key)
            except ValueError:
                continue
            if value is not None:
                goals[nutrient] = float(value)
        return goals

    def create_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        """Insert the goal record for a user."""
        self.client.table("nutrition_goals").insert(
            {"user_id": str(user_id), "goals": _serialize(goals)}
        ).execute()

    def update_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        """Replace the goal values for a user."""
        self.client.table("nutrition_goals").update(
            {
                "goals": _serialize(goals),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("user_id", str(user_id)).execute()


def _serialize(goals: dict[Nutrient, float]) -> dict[str, float]:
    return {nutrient.value: value for nutrient, value in goals.items()}

"""Daily nutrient goal management."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.nutrients import AnalysisConfig, Nutrient, default_config


class GoalRepository(Protocol):
    """Persistence interface for nutrient goals."""

    def get_goals(self, user_id: UUID) -> dict[Nutrient, float] | None:
        """Return the stored goals for a user, if any."""

    def create_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        """Create the goal record for a user."""

    def update_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        """Replace the goal record for a user."""


@dataclass
class GoalService:
    """Service for reading and editing a user's daily targets."""

    repository: GoalRepository
    config: AnalysisConfig = field(default_factory=default_config)

    def get_goals(self, user_id: UUID) -> dict[Nutrient, float]:
        """Return goals, creating the default record on first access."""
        stored = self.repository.get_goals(user_id)
        defaults = self.config.default_goals()
        if stored is None:
            self.repository.create_goals(user_id, defaults)
            return defaults
        return {**defaults, **stored}

    def update_goals(
        self, user_id: UUID, changes: Mapping[Nutrient, float]
    ) -> dict[Nutrient, float]:
        """Merge edited targets into the user's goal record."""
        for nutrient, value in changes.items():
            if not math.isfinite(value):
                raise ValueError(f"Goal for {nutrient.value} must be a finite number")
        goals = self.get_goals(user_id)
        goals.update(changes)
        self.repository.update_goals(user_id, goals)
        return goals

"""Domain models for logged meals."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """When during the day a food was eaten."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


@dataclass(frozen=True)
class DietaryEntry:
    """A single logged consumption of a catalog food."""

    id: UUID
    user_id: UUID
    food_id: UUID
    meal_type: MealType
    consumed_at: datetime
    portion_multiplier: float = 1.0

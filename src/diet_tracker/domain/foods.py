"""Domain models for the food catalog."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from diet_tracker.domain.nutrients import Nutrient


class FoodCategory(Enum):
    """Catalog category of a food."""

    FRUIT = "FRUIT"
    VEGETABLE = "VEGETABLE"
    GRAIN = "GRAIN"
    PROTEIN = "PROTEIN"
    DAIRY = "DAIRY"
    NUT_SEED = "NUT_SEED"
    BEVERAGE = "BEVERAGE"
    SNACK = "SNACK"
    OTHER = "OTHER"


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for one standard portion of a food."""

    amounts: Mapping[Nutrient, float]
    serving_size_g: float = 100.0

    def amount(self, nutrient: Nutrient) -> float:
        """Return the amount of a nutrient, zero when not present."""
        return self.amounts.get(nutrient, 0.0)


@dataclass(frozen=True)
class FoodItem:
    """A food in the catalog with its nutrient profile."""

    id: UUID
    name: str
    description: str | None
    category: FoodCategory
    profile: NutrientProfile

"""Tracked nutrients and the reference data used to analyze them."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Nutrient(Enum):
    """Nutrients tracked for foods and user goals, in display order."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBOHYDRATES = "carbohydrates"
    FAT = "fat"
    FIBER = "fiber"
    VITAMIN_A = "vitamin_a"
    VITAMIN_C = "vitamin_c"
    VITAMIN_D = "vitamin_d"
    VITAMIN_E = "vitamin_e"
    VITAMIN_K = "vitamin_k"
    VITAMIN_B12 = "vitamin_b12"
    CALCIUM = "calcium"
    IRON = "iron"
    MAGNESIUM = "magnesium"
    ZINC = "zinc"
    POTASSIUM = "potassium"


class NutrientGroup(Enum):
    """Display group of a nutrient in the analysis report."""

    ENERGY = "energy"
    MACRO = "macro"
    MICRO = "micro"


@dataclass(frozen=True)
class NutrientDefinition:
    """Display metadata and default daily target for a nutrient."""

    nutrient: Nutrient
    name: str
    unit: str
    group: NutrientGroup
    default_target: float


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable reference data injected into the analysis engine.

    ``definitions`` fixes both the set of tracked nutrients and their display
    order. ``food_suggestions`` is the static fallback used when the food
    catalog has no good sources for a nutrient.
    """

    definitions: tuple[NutrientDefinition, ...]
    food_suggestions: Mapping[Nutrient, tuple[str, ...]]
    suggested_food_limit: int = 4

    def definition(self, nutrient: Nutrient) -> NutrientDefinition:
        """Return the definition for a tracked nutrient."""
        for definition in self.definitions:
            if definition.nutrient is nutrient:
                return definition
        raise KeyError(nutrient)

    @property
    def nutrients(self) -> tuple[Nutrient, ...]:
        """Tracked nutrients in definition order."""
        return tuple(definition.nutrient for definition in self.definitions)

    def group(self, group: NutrientGroup) -> tuple[NutrientDefinition, ...]:
        """Definitions belonging to a display group, in definition order."""
        return tuple(
            definition for definition in self.definitions if definition.group is group
        )

    def default_goals(self) -> dict[Nutrient, float]:
        """System default daily targets keyed by nutrient."""
        return {
            definition.nutrient: definition.default_target
            for definition in self.definitions
        }


_ENERGY = NutrientGroup.ENERGY
_MACRO = NutrientGroup.MACRO
_MICRO = NutrientGroup.MICRO

_DEFINITIONS = (
    NutrientDefinition(Nutrient.CALORIES, "Calories", "kcal", _ENERGY, 2000),
    NutrientDefinition(Nutrient.PROTEIN, "Protein", "g", _MACRO, 50),
    NutrientDefinition(Nutrient.CARBOHYDRATES, "Carbohydrates", "g", _MACRO, 275),
    NutrientDefinition(Nutrient.FAT, "Fat", "g", _MACRO, 78),
    NutrientDefinition(Nutrient.FIBER, "Fiber", "g", _MACRO, 28),
    NutrientDefinition(Nutrient.VITAMIN_A, "Vitamin A", "mcg", _MICRO, 900),
    NutrientDefinition(Nutrient.VITAMIN_C, "Vitamin C", "mg", _MICRO, 90),
    NutrientDefinition(Nutrient.VITAMIN_D, "Vitamin D", "mcg", _MICRO, 20),
    NutrientDefinition(Nutrient.VITAMIN_E, "Vitamin E", "mg", _MICRO, 15),
    NutrientDefinition(Nutrient.VITAMIN_K, "Vitamin K", "mcg", _MICRO, 120),
    NutrientDefinition(Nutrient.VITAMIN_B12, "Vitamin B12", "mcg", _MICRO, 2.4),
    NutrientDefinition(Nutrient.CALCIUM, "Calcium", "mg", _MICRO, 1000),
    NutrientDefinition(Nutrient.IRON, "Iron", "mg", _MICRO, 18),
    NutrientDefinition(Nutrient.MAGNESIUM, "Magnesium", "mg", _MICRO, 400),
    NutrientDefinition(Nutrient.ZINC, "Zinc", "mg", _MICRO, 11),
    NutrientDefinition(Nutrient.POTASSIUM, "Potassium", "mg", _MICRO, 2600),
)

_FOOD_SUGGESTIONS = {
    Nutrient.PROTEIN: ("Chicken Breast", "Eggs", "Salmon", "Almonds"),
    Nutrient.FIBER: ("Broccoli", "Brown Rice", "Apple", "Spinach"),
    Nutrient.VITAMIN_C: ("Broccoli", "Spinach", "Banana"),
    Nutrient.VITAMIN_D: ("Salmon", "Egg", "Milk"),
    Nutrient.CALCIUM: ("Milk", "Broccoli", "Almonds"),
    Nutrient.IRON: ("Spinach", "Chicken Breast", "Brown Rice"),
    Nutrient.POTASSIUM: ("Banana", "Spinach", "Milk"),
    Nutrient.VITAMIN_B12: ("Salmon", "Egg", "Milk"),
}


def default_config(suggested_food_limit: int = 4) -> AnalysisConfig:
    """Build the standard adult reference configuration."""
    return AnalysisConfig(
        definitions=_DEFINITIONS,
        food_suggestions=MappingProxyType(dict(_FOOD_SUGGESTIONS)),
        suggested_food_limit=suggested_food_limit,
    )

"""Domain models produced by nutrient analysis."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from diet_tracker.domain.nutrients import Nutrient


class SeverityLevel(Enum):
    """Classification of intake relative to the daily target."""

    DEFICIENT = "DEFICIENT"
    LOW = "LOW"
    ADEQUATE = "ADEQUATE"
    SUFFICIENT = "SUFFICIENT"


class Priority(Enum):
    """Urgency of a recommendation."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class NutrientTotals:
    """Aggregated intake for a period.

    ``daily`` holds the daily-equivalent amount per nutrient. ``total_calories``
    is the raw sum over the whole period.
    """

    daily: dict[Nutrient, float]
    total_calories: float
    entry_count: int
    skipped_entries: int = 0


@dataclass(frozen=True)
class NutrientAssessment:
    """Intake of one nutrient compared against its target.

    ``percentage`` and ``severity`` are ``None`` when the target is not
    positive; such nutrients are shown but never scored.
    """

    nutrient: Nutrient
    name: str
    unit: str
    consumed: float
    recommended: float
    percentage: float | None
    severity: SeverityLevel | None

    @property
    def is_deficient(self) -> bool:
        return self.severity in {SeverityLevel.LOW, SeverityLevel.DEFICIENT}


@dataclass(frozen=True)
class Deficiency:
    """A nutrient consumed below 80% of its target."""

    nutrient: Nutrient
    name: str
    current_intake: float
    recommended_intake: float
    percent_of_target: float
    unit: str
    level: SeverityLevel


@dataclass(frozen=True)
class Recommendation:
    """Actionable advice for a deficient nutrient."""

    nutrient: Nutrient
    name: str
    message: str
    priority: Priority
    foods: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisReport:
    """Nutrient analysis of a user's meals for one period."""

    period: str
    start: datetime
    end: datetime
    days: int
    total_calories: float
    recommended_calories: float
    meal_count: int
    skipped_entries: int
    overall_score: float
    macronutrients: list[NutrientAssessment]
    micronutrients: list[NutrientAssessment]
    deficiencies: list[Deficiency]
    recommendations: list[Recommendation]

    @property
    def is_empty(self) -> bool:
        return self.meal_count == 0

"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from diet_tracker.domain.analysis import (
    AnalysisReport,
    Deficiency,
    NutrientAssessment,
    Recommendation,
)
from diet_tracker.domain.entries import DietaryEntry, MealType
from diet_tracker.domain.foods import FoodItem
from diet_tracker.domain.nutrients import Nutrient


def _round(value: float) -> float:
    return round(value, 2)


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutrientDetailResponse(CamelModel):
    """One row of the macro or micro nutrient breakdown."""

    key: str
    name: str
    consumed: float
    recommended: float
    percentage: float | None
    unit: str
    level: str | None

    @classmethod
    def from_assessment(
        cls, assessment: NutrientAssessment
    ) -> "NutrientDetailResponse":
        return cls(
            key=assessment.nutrient.value,
            name=assessment.name,
            consumed=_round(assessment.consumed),
            recommended=_round(assessment.recommended),
            percentage=(
                _round(assessment.percentage)
                if assessment.percentage is not None
                else None
            ),
            unit=assessment.unit,
            level=assessment.severity.value if assessment.severity else None,
        )


class DeficiencyResponse(CamelModel):
    """A nutrient below 80% of its target."""

    nutrient_name: str
    current_intake: float
    recommended_intake: float
    percent_of_target: float
    unit: str
    level: str

    @classmethod
    def from_deficiency(cls, deficiency: Deficiency) -> "DeficiencyResponse":
        return cls(
            nutrient_name=deficiency.name,
            current_intake=_round(deficiency.current_intake),
            recommended_intake=_round(deficiency.recommended_intake),
            percent_of_target=_round(deficiency.percent_of_target),
            unit=deficiency.unit,
            level=deficiency.level.value,
        )


class RecommendationResponse(CamelModel):
    """Advice for a deficient nutrient."""

    nutrient: str
    message: str
    priority: str
    foods: list[str]

    @classmethod
    def from_recommendation(
        cls, recommendation: Recommendation
    ) -> "RecommendationResponse":
        return cls(
            nutrient=recommendation.name,
            message=recommendation.message,
            priority=recommendation.priority.value,
            foods=list(recommendation.foods),
        )


class AnalysisReportResponse(CamelModel):
    """Nutrient analysis consumed by the dashboard and analysis pages.

    ``start`` and ``end`` are local calendar dates so that repeated calls over
    the same data serialize identically.
    """

    period: str
    start: date
    end: date
    days: int
    total_calories: float
    recommended_calories: float
    meal_count: int
    skipped_entries: int
    overall_score: float
    macronutrients: list[NutrientDetailResponse]
    micronutrients: list[NutrientDetailResponse]
    deficiencies: list[DeficiencyResponse]
    recommendations: list[RecommendationResponse]

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalysisReportResponse":
        return cls(
            period=report.period,
            start=report.start.date(),
            end=report.end.date(),
            days=report.days,
            total_calories=_round(report.total_calories),
            recommended_calories=_round(report.recommended_calories),
            meal_count=report.meal_count,
            skipped_entries=report.skipped_entries,
            overall_score=_round(report.overall_score),
            macronutrients=[
                NutrientDetailResponse.from_assessment(item)
                for item in report.macronutrients
            ],
            micronutrients=[
                NutrientDetailResponse.from_assessment(item)
                for item in report.micronutrients
            ],
            deficiencies=[
                DeficiencyResponse.from_deficiency(item) for item in report.deficiencies
            ],
            recommendations=[
                RecommendationResponse.from_recommendation(item)
                for item in report.recommendations
            ],
        )


class GoalsResponse(CamelModel):
    """A user's daily targets keyed by nutrient."""

    user_id: UUID
    goals: dict[str, float]

    @classmethod
    def from_goals(
        cls, user_id: UUID, goals: dict[Nutrient, float]
    ) -> "GoalsResponse":
        return cls(
            user_id=user_id,
            goals={nutrient.value: value for nutrient, value in goals.items()},
        )


class GoalsUpdateRequest(CamelModel):
    """Edited targets; nutrients left out keep their current value."""

    goals: dict[Nutrient, Annotated[float, Field(ge=0, allow_inf_nan=False)]]


class EntryCreateRequest(CamelModel):
    """Payload for logging a meal."""

    food_id: UUID
    meal_type: MealType
    portion_multiplier: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    consumed_at: AwareDatetime | None = None


class EntryResponse(CamelModel):
    """A logged meal."""

    id: UUID
    user_id: UUID
    food_id: UUID
    meal_type: MealType
    portion_multiplier: float
    consumed_at: datetime

    @classmethod
    def from_entry(cls, entry: DietaryEntry) -> "EntryResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            food_id=entry.food_id,
            meal_type=entry.meal_type,
            portion_multiplier=entry.portion_multiplier,
            consumed_at=entry.consumed_at,
        )


class FoodResponse(CamelModel):
    """A catalog food with its per-portion nutrients."""

    id: UUID
    name: str
    description: str | None
    category: str
    serving_size_g: float
    nutrients: dict[str, float]

    @classmethod
    def from_food(cls, food: FoodItem) -> "FoodResponse":
        return cls(
            id=food.id,
            name=food.name,
            description=food.description,
            category=food.category.value,
            serving_size_g=food.profile.serving_size_g,
            nutrients={
                nutrient.value: food.profile.amount(nutrient) for nutrient in Nutrient
            },
        )

"""Recommendations for deficient nutrients."""

import math
from collections.abc import Iterable, Sequence

from diet_tracker.domain.analysis import (
    NutrientAssessment,
    Priority,
    Recommendation,
    SeverityLevel,
)
from diet_tracker.domain.foods import FoodItem
from diet_tracker.domain.nutrients import AnalysisConfig, Nutrient

_PRIORITY_BY_SEVERITY = {
    SeverityLevel.DEFICIENT: Priority.HIGH,
    SeverityLevel.LOW: Priority.MEDIUM,
}


def suggest_foods(
    nutrient: Nutrient, foods: Iterable[FoodItem], limit: int
) -> list[str]:
    """Return catalog foods richest in a nutrient per calorie."""
    ranked = []
    for food in foods:
        amount = food.profile.amount(nutrient)
        if amount <= 0:
            continue
        calories = max(food.profile.amount(Nutrient.CALORIES), 1.0)
        ranked.append((-amount / calories, food.name))
    ranked.sort()
    names: list[str] = []
    for _, name in ranked:
        if name not in names:
            names.append(name)
        if len(names) >= limit:
            break
    return names


def build_recommendations(
    assessments: Iterable[NutrientAssessment],
    config: AnalysisConfig,
    catalog_foods: Sequence[FoodItem] = (),
) -> list[Recommendation]:
    """Create one recommendation per LOW or DEFICIENT nutrient, in order."""
    recommendations = []
    for assessment in assessments:
        priority = _PRIORITY_BY_SEVERITY.get(assessment.severity)
        if priority is None or assessment.percentage is None:
            continue
        foods = suggest_foods(
            assessment.nutrient, catalog_foods, config.suggested_food_limit
        )
        if not foods:
            fallback = config.food_suggestions.get(assessment.nutrient, ())
            foods = list(fallback[: config.suggested_food_limit])
        recommendations.append(
            Recommendation(
                nutrient=assessment.nutrient,
                name=assessment.name,
                message=_format_message(assessment),
                priority=priority,
                foods=foods,
            )
        )
    return recommendations


def _format_message(assessment: NutrientAssessment) -> str:
    # Floored so a value just under a threshold never prints as the threshold.
    percentage = math.floor(assessment.percentage or 0.0)
    if assessment.severity is SeverityLevel.DEFICIENT:
        return (
            f"Your {assessment.name} intake is very low ({percentage}% of daily "
            f"goal). Consider adding more {assessment.name.lower()}-rich foods."
        )
    return (
        f"Your {assessment.name} intake is below target ({percentage}%). "
        "Try adding a serving of recommended foods."
    )

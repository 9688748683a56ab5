"""Classification of nutrient intake against daily targets."""

from collections.abc import Mapping

from diet_tracker.domain.analysis import (
    Deficiency,
    NutrientAssessment,
    SeverityLevel,
)
from diet_tracker.domain.nutrients import (
    AnalysisConfig,
    Nutrient,
    NutrientDefinition,
    NutrientGroup,
)

SUFFICIENT_PERCENT = 100.0
ADEQUATE_PERCENT = 80.0
LOW_PERCENT = 50.0


def severity_for(percentage: float) -> SeverityLevel:
    """Return the severity bucket for a percent-of-target value."""
    if percentage >= SUFFICIENT_PERCENT:
        return SeverityLevel.SUFFICIENT
    if percentage >= ADEQUATE_PERCENT:
        return SeverityLevel.ADEQUATE
    if percentage >= LOW_PERCENT:
        return SeverityLevel.LOW
    return SeverityLevel.DEFICIENT


def classify(
    definition: NutrientDefinition, consumed: float, target: float
) -> NutrientAssessment:
    """Compare a daily-equivalent amount with its target.

    A non-positive target is an invalid goal: the nutrient keeps its consumed
    amount but gets no percentage or severity.
    """
    if target <= 0:
        percentage = None
        severity = None
    else:
        percentage = max(consumed / target * 100, 0.0)
        severity = severity_for(percentage)
    return NutrientAssessment(
        nutrient=definition.nutrient,
        name=definition.name,
        unit=definition.unit,
        consumed=consumed,
        recommended=target,
        percentage=percentage,
        severity=severity,
    )


def assess_group(
    config: AnalysisConfig,
    group: NutrientGroup,
    daily: Mapping[Nutrient, float],
    goals: Mapping[Nutrient, float],
) -> list[NutrientAssessment]:
    """Classify every nutrient of a display group in definition order.

    Goals missing for a nutrient fall back to the configured default.
    """
    return [
        classify(
            definition,
            daily.get(definition.nutrient, 0.0),
            goals.get(definition.nutrient, definition.default_target),
        )
        for definition in config.group(group)
    ]


def to_deficiency(assessment: NutrientAssessment) -> Deficiency:
    """Build the deficiency view of a LOW or DEFICIENT assessment."""
    if not assessment.is_deficient or assessment.percentage is None:
        raise ValueError(f"{assessment.name} is not deficient")
    return Deficiency(
        nutrient=assessment.nutrient,
        name=assessment.name,
        current_intake=assessment.consumed,
        recommended_intake=assessment.recommended,
        percent_of_target=assessment.percentage,
        unit=assessment.unit,
        level=assessment.severity,
    )

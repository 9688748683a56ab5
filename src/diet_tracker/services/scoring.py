"""Overall diet score."""

from collections.abc import Iterable

from diet_tracker.domain.analysis import NutrientAssessment

MAX_SCORE = 100.0


def overall_score(assessments: Iterable[NutrientAssessment]) -> float:
    """Average percent-of-target, each nutrient capped at full credit.

    Nutrients without a valid goal are left out of the average. Returns 0
    when nothing is eligible.
    """
    capped = [
        min(assessment.percentage, MAX_SCORE)
        for assessment in assessments
        if assessment.percentage is not None
    ]
    if not capped:
        return 0.0
    return max(0.0, min(sum(capped) / len(capped), MAX_SCORE))

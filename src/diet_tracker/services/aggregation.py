"""Aggregation of logged meals into daily-equivalent nutrient totals."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from uuid import UUID

from diet_tracker.domain.analysis import NutrientTotals
from diet_tracker.domain.entries import DietaryEntry
from diet_tracker.domain.foods import NutrientProfile
from diet_tracker.domain.nutrients import Nutrient

_logger = logging.getLogger(__name__)


def aggregate_entries(
    entries: Iterable[DietaryEntry],
    profiles: Mapping[UUID, NutrientProfile],
    nutrients: Sequence[Nutrient],
    days: int,
) -> NutrientTotals:
    """Sum portion-scaled nutrients and normalize them to a daily figure.

    Entries whose food has no profile are skipped and counted separately.
    """
    totals = dict.fromkeys(nutrients, 0.0)
    total_calories = 0.0
    entry_count = 0
    skipped = 0
    for entry in entries:
        profile = profiles.get(entry.food_id)
        if profile is None:
            skipped += 1
            _logger.warning(
                "Skipping entry %s: food %s not found in catalog",
                entry.id,
                entry.food_id,
            )
            continue
        portion = entry.portion_multiplier
        for nutrient in nutrients:
            totals[nutrient] += profile.amount(nutrient) * portion
        total_calories += profile.amount(Nutrient.CALORIES) * portion
        entry_count += 1

    divisor = max(days, 1)
    return NutrientTotals(
        daily={nutrient: amount / divisor for nutrient, amount in totals.items()},
        total_calories=total_calories,
        entry_count=entry_count,
        skipped_entries=skipped,
    )

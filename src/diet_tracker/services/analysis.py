"""Nutrient analysis of a user's logged meals."""

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from diet_tracker.domain.analysis import AnalysisReport
from diet_tracker.domain.entries import DietaryEntry
from diet_tracker.domain.foods import FoodItem, NutrientProfile
from diet_tracker.domain.nutrients import (
    AnalysisConfig,
    Nutrient,
    NutrientGroup,
    default_config,
)
from diet_tracker.services.aggregation import aggregate_entries
from diet_tracker.services.classification import assess_group, to_deficiency
from diet_tracker.services.periods import Period, ResolvedPeriod, resolve_period
from diet_tracker.services.recommendations import build_recommendations
from diet_tracker.services.scoring import overall_score

_logger = logging.getLogger(__name__)


class EntrySource(Protocol):
    """Read access to a user's logged meals."""

    def list_for_user_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[DietaryEntry]:
        """Return entries consumed within ``[start, end]``."""


class FoodCatalog(Protocol):
    """Read access to food nutrient profiles."""

    def get_profiles(self, food_ids: Sequence[UUID]) -> dict[UUID, NutrientProfile]:
        """Return profiles for the foods that exist; missing ids are omitted."""

    def list_foods(self) -> list[FoodItem]:
        """Return all active foods with profiles."""


class GoalStore(Protocol):
    """Read access to a user's daily nutrient targets."""

    def get_goals(self, user_id: UUID) -> dict[Nutrient, float]:
        """Return the user's targets, defaults included."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def build_report(  # noqa: PLR0913
    resolved: ResolvedPeriod,
    entries: Sequence[DietaryEntry],
    profiles: Mapping[UUID, NutrientProfile],
    goals: Mapping[Nutrient, float],
    config: AnalysisConfig,
    catalog_foods: Sequence[FoodItem] = (),
) -> AnalysisReport:
    """Build the analysis report from already loaded data."""
    totals = aggregate_entries(entries, profiles, config.nutrients, resolved.days)
    recommended_calories = goals.get(
        Nutrient.CALORIES, config.definition(Nutrient.CALORIES).default_target
    )
    if totals.entry_count == 0:
        return AnalysisReport(
            period=resolved.period.key,
            start=resolved.start,
            end=resolved.end,
            days=resolved.days,
            total_calories=0.0,
            recommended_calories=recommended_calories,
            meal_count=0,
            skipped_entries=totals.skipped_entries,
            overall_score=0.0,
            macronutrients=[],
            micronutrients=[],
            deficiencies=[],
            recommendations=[],
        )

    macros = assess_group(config, NutrientGroup.MACRO, totals.daily, goals)
    micros = assess_group(config, NutrientGroup.MICRO, totals.daily, goals)
    assessed = [*macros, *micros]
    deficient = [assessment for assessment in assessed if assessment.is_deficient]
    return AnalysisReport(
        period=resolved.period.key,
        start=resolved.start,
        end=resolved.end,
        days=resolved.days,
        total_calories=totals.total_calories,
        recommended_calories=recommended_calories,
        meal_count=totals.entry_count,
        skipped_entries=totals.skipped_entries,
        overall_score=overall_score(assessed),
        macronutrients=macros,
        micronutrients=micros,
        deficiencies=[to_deficiency(assessment) for assessment in deficient],
        recommendations=build_recommendations(deficient, config, catalog_foods),
    )


@dataclass
class NutrientAnalysisService:
    """Service that analyzes logged meals against nutrient goals."""

    entry_source: EntrySource
    food_catalog: FoodCatalog
    goal_store: GoalStore
    config: AnalysisConfig = field(default_factory=default_config)
    clock: Callable[[], datetime] = _utc_now

    async def get_analysis(
        self,
        user_id: UUID,
        period: Period | str,
        timezone_name: str = "UTC",
        now: datetime | None = None,
    ) -> AnalysisReport:
        """Analyze a user's meals for ``today``, ``week`` or ``month``."""
        local_now = (now or self.clock()).astimezone(ZoneInfo(timezone_name))
        resolved = resolve_period(period, local_now)
        entries, goals = await asyncio.gather(
            asyncio.to_thread(
                self.entry_source.list_for_user_in_range,
                user_id,
                resolved.start.astimezone(UTC),
                resolved.end.astimezone(UTC),
            ),
            asyncio.to_thread(self.goal_store.get_goals, user_id),
        )
        if not entries:
            return build_report(resolved, [], {}, goals, self.config)

        food_ids = sorted({entry.food_id for entry in entries}, key=str)
        profiles, catalog_foods = await asyncio.gather(
            asyncio.to_thread(self.food_catalog.get_profiles, food_ids),
            asyncio.to_thread(self.food_catalog.list_foods),
        )
        report = build_report(
            resolved, entries, profiles, goals, self.config, catalog_foods
        )
        _logger.info(
            "Analysis %s for user %s: meals=%s skipped=%s score=%.1f",
            resolved.period.key,
            user_id,
            report.meal_count,
            report.skipped_entries,
            report.overall_score,
        )
        return report

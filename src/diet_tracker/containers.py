"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.fdc_client import HttpxFdcClient
from diet_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from diet_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from diet_tracker.config import Settings
from diet_tracker.domain.nutrients import default_config
from diet_tracker.services.analysis import NutrientAnalysisService
from diet_tracker.services.entries import EntryService
from diet_tracker.services.foods import FoodService
from diet_tracker.services.goals import GoalService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: NutrientAnalysisService
    goal_service: GoalService
    entry_service: EntryService
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    analysis_config = default_config(resolved_settings.suggested_food_limit)
    entry_repository = SupabaseEntryRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    goal_repository = SupabaseGoalRepository(supabase_client)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    food_service = FoodService(repository=food_repository, fdc_client=fdc_client)
    goal_service = GoalService(goal_repository, config=analysis_config)
    entry_service = EntryService(
        repository=entry_repository, food_service=food_service
    )
    analysis_service = NutrientAnalysisService(
        entry_source=entry_repository,
        food_catalog=food_repository,
        goal_store=goal_service,
        config=analysis_config,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        goal_service=goal_service,
        entry_service=entry_service,
        food_service=food_service,
        close_resources=close_resources,
    )

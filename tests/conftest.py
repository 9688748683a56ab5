"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from diet_tracker.adapters.fdc_client import FdcClient
from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.entries import DietaryEntry, MealType
from diet_tracker.domain.foods import FoodCategory, FoodItem, NutrientProfile
from diet_tracker.domain.nutrients import Nutrient
from diet_tracker.services.analysis import NutrientAnalysisService
from diet_tracker.services.entries import EntryRepository, EntryService
from diet_tracker.services.foods import FoodRepository, FoodService
from diet_tracker.services.goals import GoalRepository, GoalService

FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


def make_food(
    name: str,
    category: FoodCategory = FoodCategory.OTHER,
    **amounts: float,
) -> FoodItem:
    """Build a catalog food; amounts are keyed by nutrient value."""
    return FoodItem(
        id=uuid4(),
        name=name,
        description=None,
        category=category,
        profile=NutrientProfile(
            amounts={Nutrient(key): value for key, value in amounts.items()}
        ),
    )


def make_entry(
    user_id: UUID,
    food_id: UUID,
    consumed_at: datetime = FIXED_NOW,
    portion_multiplier: float = 1.0,
    meal_type: MealType = MealType.LUNCH,
) -> DietaryEntry:
    return DietaryEntry(
        id=uuid4(),
        user_id=user_id,
        food_id=food_id,
        meal_type=meal_type,
        consumed_at=consumed_at,
        portion_multiplier=portion_multiplier,
    )


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory dietary entry repository for tests."""

    entries: dict[UUID, DietaryEntry] = field(default_factory=dict)

    def add(self, entry: DietaryEntry) -> DietaryEntry:
        self.entries[entry.id] = entry
        return entry

    def list_for_user_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[DietaryEntry]:
        matches = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.consumed_at <= end
        ]
        return sorted(matches, key=lambda entry: entry.consumed_at)

    def list_recent(self, user_id: UUID, limit: int) -> list[DietaryEntry]:
        matches = [
            entry for entry in self.entries.values() if entry.user_id == user_id
        ]
        matches.sort(key=lambda entry: entry.consumed_at, reverse=True)
        return matches[:limit]

    def create_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        meal_type: MealType,
        consumed_at: datetime,
        portion_multiplier: float,
    ) -> DietaryEntry:
        return self.add(
            make_entry(user_id, food_id, consumed_at, portion_multiplier, meal_type)
        )

    def get_entry(self, entry_id: UUID) -> DietaryEntry | None:
        return self.entries.get(entry_id)

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)
    profile_calls: list[list[UUID]] = field(default_factory=list)

    def add(self, food: FoodItem) -> FoodItem:
        self.foods[food.id] = food
        return food

    def get_profile(self, food_id: UUID) -> NutrientProfile | None:
        food = self.foods.get(food_id)
        return food.profile if food else None

    def get_profiles(self, food_ids: Sequence[UUID]) -> dict[UUID, NutrientProfile]:
        self.profile_calls.append(list(food_ids))
        return {
            food_id: self.foods[food_id].profile
            for food_id in food_ids
            if food_id in self.foods
        }

    def list_foods(self) -> list[FoodItem]:
        return sorted(self.foods.values(), key=lambda food: food.name)

    def search_foods(
        self, query: str | None, category: FoodCategory | None
    ) -> list[FoodItem]:
        return [
            food
            for food in self.list_foods()
            if (category is None or food.category is category)
            and (not query or query.lower() in food.name.lower())
        ]

    def create_food(
        self,
        name: str,
        description: str | None,
        category: FoodCategory,
        profile: NutrientProfile,
    ) -> FoodItem:
        return self.add(
            FoodItem(
                id=uuid4(),
                name=name,
                description=description,
                category=category,
                profile=profile,
            )
        )


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goals: dict[UUID, dict[Nutrient, float]] = field(default_factory=dict)
    created: list[UUID] = field(default_factory=list)

    def get_goals(self, user_id: UUID) -> dict[Nutrient, float] | None:
        stored = self.goals.get(user_id)
        return dict(stored) if stored is not None else None

    def create_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        self.created.append(user_id)
        self.goals[user_id] = dict(goals)

    def update_goals(self, user_id: UUID, goals: dict[Nutrient, float]) -> None:
        self.goals[user_id] = dict(goals)


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with an in-memory response."""

    failures: list[Exception] = field(default_factory=list)
    calls: list[int] = field(default_factory=list)
    food_payload: dict[str, object] = field(
        default_factory=lambda: {
            "fdcId": 171287,
            "description": "Egg, whole, raw, fresh",
            "brandOwner": None,
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 143},
                {"nutrient": {"id": 1003}, "amount": 12.6},
                {"nutrient": {"id": 1004}, "amount": 9.51},
                {"nutrient": {"id": 1005}, "amount": 0.72},
                {"nutrientId": 1114, "amount": 2.0},
                {"nutrientId": 1178, "amount": 0.89},
                {"nutrientId": 1051, "amount": 76.2},
            ],
        }
    )

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.calls.append(fdc_id)
        if self.failures:
            raise self.failures.pop(0)
        return self.food_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def container(
    settings: Settings,
    entry_repository: InMemoryEntryRepository,
    food_repository: InMemoryFoodRepository,
    goal_repository: InMemoryGoalRepository,
    fdc_client: FakeFdcClient,
) -> AppContainer:
    food_service = FoodService(
        repository=food_repository, fdc_client=fdc_client, retry_delay_seconds=0
    )
    goal_service = GoalService(goal_repository)
    entry_service = EntryService(
        repository=entry_repository,
        food_service=food_service,
        clock=lambda: FIXED_NOW,
    )
    analysis_service = NutrientAnalysisService(
        entry_source=entry_repository,
        food_catalog=food_repository,
        goal_store=goal_service,
        clock=lambda: FIXED_NOW,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        goal_service=goal_service,
        entry_service=entry_service,
        food_service=food_service,
        close_resources=close_resources,
    )

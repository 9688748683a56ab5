"""Food catalog service with USDA FoodData Central import."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx

from diet_tracker.adapters.fdc_client import FdcClient
from diet_tracker.domain.foods import FoodCategory, FoodItem, NutrientProfile
from diet_tracker.domain.nutrients import Nutrient

_FDC_NUTRIENT_IDS = {
    1008: Nutrient.CALORIES,
    1003: Nutrient.PROTEIN,
    1005: Nutrient.CARBOHYDRATES,
    1004: Nutrient.FAT,
    1079: Nutrient.FIBER,
    1106: Nutrient.VITAMIN_A,
    1162: Nutrient.VITAMIN_C,
    1114: Nutrient.VITAMIN_D,
    1109: Nutrient.VITAMIN_E,
    1185: Nutrient.VITAMIN_K,
    1178: Nutrient.VITAMIN_B12,
    1087: Nutrient.CALCIUM,
    1089: Nutrient.IRON,
    1090: Nutrient.MAGNESIUM,
    1095: Nutrient.ZINC,
    1092: Nutrient.POTASSIUM,
}

_SERVER_ERROR = 500

_logger = logging.getLogger(__name__)


class FoodNotFoundError(LookupError):
    """Raised when a food id is not in the catalog."""


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def get_profile(self, food_id: UUID) -> NutrientProfile | None:
        """Return the nutrient profile of a food, if present."""

    def get_profiles(self, food_ids: Sequence[UUID]) -> dict[UUID, NutrientProfile]:
        """Return profiles for the foods that exist."""

    def list_foods(self) -> list[FoodItem]:
        """Return all active foods."""

    def search_foods(
        self, query: str | None, category: FoodCategory | None
    ) -> list[FoodItem]:
        """Return active foods matching a name fragment and category."""

    def create_food(
        self,
        name: str,
        description: str | None,
        category: FoodCategory,
        profile: NutrientProfile,
    ) -> FoodItem:
        """Create a food with its profile and return it."""


@dataclass
class FoodService:
    """Application service for food catalog operations."""

    repository: FoodRepository
    fdc_client: FdcClient
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def search(
        self, query: str | None = None, category: str | None = None
    ) -> list[FoodItem]:
        """Search foods by name, optionally within a category.

        An unknown category is ignored rather than rejected.
        """
        cleaned = query.strip() if query else None
        return self.repository.search_foods(cleaned or None, _parse_category(category))

    def get_profile(self, food_id: UUID) -> NutrientProfile:
        """Return a food's profile or raise ``FoodNotFoundError``."""
        profile = self.repository.get_profile(food_id)
        if profile is None:
            raise FoodNotFoundError(f"Food {food_id} not found")
        return profile

    def category_counts(self) -> list[dict[str, object]]:
        """Return non-zero food counts per category, in category order."""
        counts = dict.fromkeys(FoodCategory, 0)
        for food in self.repository.list_foods():
            counts[food.category] += 1
        return [
            {"category": category.value, "count": count}
            for category, count in counts.items()
            if count > 0
        ]

    async def import_from_fdc(
        self, fdc_id: int, category: FoodCategory = FoodCategory.OTHER
    ) -> FoodItem:
        """Fetch a food from FoodData Central and store it in the catalog."""
        payload = await self._fetch_fdc_food(fdc_id)
        profile = _extract_profile(payload.get("foodNutrients", []))
        name = payload.get("description") or f"FDC food {fdc_id}"
        brand = payload.get("brandOwner") or payload.get("brandName")
        food = await asyncio.to_thread(
            self.repository.create_food,
            str(name),
            str(brand) if brand else None,
            category,
            profile,
        )
        _logger.info("Imported FDC food %s as %s", fdc_id, food.id)
        return food

    async def _fetch_fdc_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch an FDC food, retrying transport and server errors only.

        A 4xx answer (unknown id, bad key) is final and raised immediately.
        """
        attempt = 0
        while True:
            try:
                return await self.fdc_client.get_food(fdc_id)
            except (httpx.TransportError, httpx.HTTPStatusError) as exc:
                attempt += 1
                status_code = _status_code(exc)
                retryable = status_code is None or status_code >= _SERVER_ERROR
                _logger.warning(
                    "FDC import of food %s failed (attempt %s/%s, status=%s): %s",
                    fdc_id,
                    attempt,
                    self.retry_attempts + 1,
                    status_code if status_code is not None else "n/a",
                    exc,
                )
                if not retryable or attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _parse_category(raw: str | None) -> FoodCategory | None:
    if not raw or not raw.strip():
        return None
    try:
        return FoodCategory(raw.strip().upper())
    except ValueError:
        return None


def _status_code(exc: httpx.HTTPError) -> int | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def _extract_profile(food_nutrients: list[dict[str, object]]) -> NutrientProfile:
    """Map FDC nutrients (per 100 g) onto tracked nutrients."""
    amounts = dict.fromkeys(Nutrient, 0.0)
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("amount")
        tracked = _FDC_NUTRIENT_IDS.get(nutrient_id)
        if tracked is not None and amount is not None:
            amounts[tracked] = float(amount)
    return NutrientProfile(amounts=amounts, serving_size_g=100.0)

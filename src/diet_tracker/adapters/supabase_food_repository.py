"""Supabase repository for the food catalog."""

from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.foods import FoodCategory, FoodItem, NutrientProfile
from diet_tracker.domain.nutrients import Nutrient
from diet_tracker.services.foods import FoodRepository

_NUTRIENT_COLUMNS = ", ".join(nutrient.value for nutrient in Nutrient)
_PROFILE_COLUMNS = f"food_item_id, serving_size_g, {_NUTRIENT_COLUMNS}"
_FOOD_COLUMNS = (
    f"id, name, description, category, nutrient_profiles({_PROFILE_COLUMNS})"
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for catalog lookups.

    Foods live in ``food_items``; their per-portion amounts live in
    ``nutrient_profiles`` with one column per tracked nutrient.
    """

    client: Client

    def get_profile(self, food_id: UUID) -> NutrientProfile | None:
        """Return the profile for a food."""
        return self.get_profiles([food_id]).get(food_id)

    def get_profiles(self, food_ids: Sequence[UUID]) -> dict[UUID, NutrientProfile]:
        """Return profiles for the given foods in one query."""
        if not food_ids:
            return {}
        response = (
            self.client.table("nutrient_profiles")
            .select(_PROFILE_COLUMNS)
            .in_("food_item_id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return {
            UUID(str(row["food_item_id"])): _parse_profile(row)
            for row in response.data or []
        }

    def list_foods(self) -> list[FoodItem]:
        """Return all active foods with profiles."""
        response = (
            self.client.table("food_items")
            .select(_FOOD_COLUMNS)
            .eq("is_active", True)
            .order("name", desc=False)
            .execute()
        )
        return _parse_foods(response.data or [])

    def search_foods(
        self, query: str | None, category: FoodCategory | None
    ) -> list[FoodItem]:
        """Return active foods matching the name fragment and category."""
        request = (
            self.client.table("food_items")
            .select(_FOOD_COLUMNS)
            .eq("is_active", True)
        )
        if category is not None:
            request = request.eq("category", category.value)
        if query:
            request = request.ilike("name", f"%{query}%")
        response = request.order("name", desc=False).execute()
        return _parse_foods(response.data or [])

    def create_food(
        self,
        name: str,
        description: str | None,
        category: FoodCategory,
        profile: NutrientProfile,
    ) -> FoodItem:
        """Insert a food and its profile."""
        response = (
            self.client.table("food_items")
            .insert(
                {
                    "name": name,
                    "description": description,
                    "category": category.value,
                    "is_active": True,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food in Supabase")
        food_id = UUID(str(response.data[0]["id"]))
        self.client.table("nutrient_profiles").insert(
            {
                "food_item_id": str(food_id),
                "serving_size_g": profile.serving_size_g,
                **{
                    nutrient.value: profile.amount(nutrient)
                    for nutrient in Nutrient
                },
            }
        ).execute()
        return FoodItem(
            id=food_id,
            name=name,
            description=description,
            category=category,
            profile=profile,
        )


def _parse_profile(row: dict[str, object]) -> NutrientProfile:
    amounts = {}
    for nutrient in Nutrient:
        value = row.get(nutrient.value)
        amounts[nutrient] = float(value) if value is not None else 0.0
    serving = row.get("serving_size_g")
    return NutrientProfile(
        amounts=amounts,
        serving_size_g=float(serving) if serving is not None else 100.0,
    )


def _parse_foods(rows: list[dict[str, object]]) -> list[FoodItem]:
    foods = []
    for row in rows:
        profile_row = row.get("nutrient_profiles")
        if isinstance(profile_row, list):
            profile_row = profile_row[0] if profile_row else None
        if not isinstance(profile_row, dict):
            continue
        foods.append(
            FoodItem(
                id=UUID(str(row["id"])),
                name=str(row.get("name", "")),
                description=row.get("description"),
                category=_parse_category(row.get("category")),
                profile=_parse_profile(profile_row),
            )
        )
    return foods


def _parse_category(raw: object) -> FoodCategory:
    try:
        return FoodCategory(str(raw))
    except ValueError:
        return FoodCategory.OTHER

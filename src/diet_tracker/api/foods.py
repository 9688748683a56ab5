"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from diet_tracker.api.models import FoodResponse
from diet_tracker.domain.foods import FoodCategory

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("")
async def search_foods(
    request: Request, query: str | None = None, category: str | None = None
) -> list[FoodResponse]:
    """Search active foods by name and category."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.search(query, category)
    return [FoodResponse.from_food(food) for food in foods]


@router.get("/categories")
async def category_counts(request: Request) -> list[dict[str, object]]:
    """Return how many foods each category holds."""
    container: AppContainer = request.app.state.container
    return container.food_service.category_counts()


@router.post("/import/{fdc_id}", status_code=status.HTTP_201_CREATED)
async def import_food(
    fdc_id: int,
    request: Request,
    category: FoodCategory = FoodCategory.OTHER,
) -> FoodResponse:
    """Import a food from USDA FoodData Central into the catalog."""
    container: AppContainer = request.app.state.container
    try:
        food = await container.food_service.import_from_fdc(fdc_id, category)
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"FDC food {fdc_id} not found",
            ) from exc
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="FoodData Central request failed",
        ) from exc
    return FoodResponse.from_food(food)

"""Meal logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from diet_tracker.api.dependencies import resolve_timezone
from diet_tracker.api.models import EntryCreateRequest, EntryResponse
from diet_tracker.services.entries import EntryNotFoundError
from diet_tracker.services.foods import FoodNotFoundError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_entry(
    payload: EntryCreateRequest,
    request: Request,
    user_id: UUID = Query(alias="userId"),
) -> EntryResponse:
    """Log a meal for the user."""
    container: AppContainer = request.app.state.container
    try:
        entry = container.entry_service.log_entry(
            user_id=user_id,
            food_id=payload.food_id,
            meal_type=payload.meal_type,
            portion_multiplier=payload.portion_multiplier,
            consumed_at=payload.consumed_at,
        )
    except FoodNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return EntryResponse.from_entry(entry)


@router.get("")
async def list_entries(
    request: Request,
    user_id: UUID = Query(alias="userId"),
    limit: int = Query(default=50, ge=1, le=500),
) -> list[EntryResponse]:
    """Return the user's meal history, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_history(user_id, limit)
    return [EntryResponse.from_entry(entry) for entry in entries]


@router.get("/today")
async def list_today(
    request: Request,
    user_id: UUID = Query(alias="userId"),
    timezone: str = Depends(resolve_timezone),
) -> list[EntryResponse]:
    """Return meals logged since local midnight."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_today(user_id, timezone)
    return [EntryResponse.from_entry(entry) for entry in entries]


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID,
    request: Request,
    user_id: UUID = Query(alias="userId"),
) -> Response:
    """Delete one of the user's meals."""
    container: AppContainer = request.app.state.container
    try:
        container.entry_service.delete_entry(user_id, entry_id)
    except EntryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException, Query, Request, status

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer


def resolve_timezone(
    request: Request, timezone: str | None = Query(default=None)
) -> str:
    """Return a valid timezone name, defaulting to the configured one."""
    container: AppContainer = request.app.state.container
    name = timezone or container.settings.default_timezone
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {name}",
        ) from exc
    return name

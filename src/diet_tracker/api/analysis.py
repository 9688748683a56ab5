"""Nutrient analysis and goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from diet_tracker.api.dependencies import resolve_timezone
from diet_tracker.api.models import (
    AnalysisReportResponse,
    GoalsResponse,
    GoalsUpdateRequest,
)
from diet_tracker.services.periods import InvalidPeriodError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["analysis"])


@router.get("/analysis/{period}")
async def get_analysis(
    period: str,
    request: Request,
    user_id: UUID = Query(alias="userId"),
    timezone: str = Depends(resolve_timezone),
) -> AnalysisReportResponse:
    """Analyze the user's meals for ``today``, ``week`` or ``month``."""
    container: AppContainer = request.app.state.container
    try:
        report = await container.analysis_service.get_analysis(
            user_id, period, timezone_name=timezone
        )
    except InvalidPeriodError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return AnalysisReportResponse.from_report(report)


@router.get("/goals")
async def get_goals(
    request: Request, user_id: UUID = Query(alias="userId")
) -> GoalsResponse:
    """Return the user's daily targets."""
    container: AppContainer = request.app.state.container
    goals = container.goal_service.get_goals(user_id)
    return GoalsResponse.from_goals(user_id, goals)


@router.put("/goals")
async def update_goals(
    payload: GoalsUpdateRequest,
    request: Request,
    user_id: UUID = Query(alias="userId"),
) -> GoalsResponse:
    """Update some or all of the user's daily targets."""
    container: AppContainer = request.app.state.container
    goals = container.goal_service.update_goals(user_id, payload.goals)
    return GoalsResponse.from_goals(user_id, goals)

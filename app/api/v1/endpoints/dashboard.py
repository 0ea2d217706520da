"""Dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api import deps
from app.db.models.user import User
from app.schemas import DashboardStatsResponse
from app.services.stats import StatsService
from app.utils.exceptions import StatsRetrievalError, handle_stats_error


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def read_dashboard_stats(
    *,
    current_user: User = Depends(deps.get_current_user),
    service: StatsService = Depends(deps.get_stats_service),
) -> DashboardStatsResponse:
    """Return study time, streak, and goal progress for the dashboard."""

    try:
        stats = await service.compute_stats(current_user.id)
    except StatsRetrievalError as exc:
        raise handle_stats_error(exc) from exc
    return DashboardStatsResponse(stats=stats)

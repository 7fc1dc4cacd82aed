"""Prize endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container
from swing_showcase.api.errors import route_errors
from swing_showcase.api.serializers import serialize_prize, serialize_prize_stats
from swing_showcase.containers import AppContainer

router = APIRouter(prefix="/api/prizes", tags=["prizes"])


@router.get("/history")
@route_errors("PRIZE_HISTORY_ERROR", "Failed to get prize history")
async def prize_history(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    prizes = container.prize_service.history()
    return {"success": True, "prizes": [serialize_prize(prize) for prize in prizes]}


@router.get("/upcoming")
@route_errors("UPCOMING_PRIZES_ERROR", "Failed to get upcoming prizes")
async def upcoming_prizes(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    prizes = container.prize_service.upcoming()
    return {"success": True, "prizes": [serialize_prize(prize) for prize in prizes]}


@router.get("/stats")
@route_errors("PRIZE_STATS_ERROR", "Failed to get prize statistics")
async def prize_stats(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    stats = container.prize_service.stats()
    return {"success": True, "stats": serialize_prize_stats(stats)}

"""Competition endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container, require_user
from swing_showcase.api.errors import route_errors
from swing_showcase.api.serializers import serialize_competition
from swing_showcase.containers import AppContainer
from swing_showcase.services.auth import TokenClaims

router = APIRouter(prefix="/api/competitions", tags=["competitions"])


@router.get("/user")
@route_errors("COMPETITIONS_ERROR", "Failed to get competitions")
async def user_competitions(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the competitions the caller has joined."""
    competitions = container.competition_service.list_for_user(claims.user_id)
    return {
        "success": True,
        "competitions": [serialize_competition(item) for item in competitions],
    }


@router.get("/available")
@route_errors("COMPETITIONS_ERROR", "Failed to get competitions")
async def available_competitions(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return active competitions that are still open."""
    competitions = container.competition_service.list_available()
    return {
        "success": True,
        "competitions": [serialize_competition(item) for item in competitions],
    }


@router.post("/{competition_id}/join")
@route_errors("JOIN_ERROR", "Failed to join competition")
async def join_competition(
    competition_id: str,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.competition_service.join(competition_id, claims.user_id)
    return {"success": True, "message": "Successfully joined competition"}


@router.get("/{competition_id}")
@route_errors("COMPETITION_ERROR", "Failed to get competition")
async def get_competition(
    competition_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    competition = container.competition_service.get(competition_id)
    return {"success": True, "competition": serialize_competition(competition)}

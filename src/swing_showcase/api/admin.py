"""Admin API endpoints with simple token auth."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container, require_admin
from swing_showcase.api.schemas import CompetitionCreateRequest, PrizeCreateRequest
from swing_showcase.api.serializers import (
    serialize_competition,
    serialize_prize,
    serialize_user,
)
from swing_showcase.containers import AppContainer

router = APIRouter(
    prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/health")
async def admin_health() -> dict[str, object]:
    """Admin health check endpoint."""
    return {"success": True, "status": "ok"}


@router.get("/users")
async def list_users(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return every registered user."""
    users = container.user_service.repository.find_many()
    return {"success": True, "users": [serialize_user(user) for user in users]}


@router.post("/competitions")
async def create_competition(
    body: CompetitionCreateRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    competition = container.competition_service.create(
        title=body.title,
        end_date=body.end_date,
        status=body.status,
        description=body.description,
        prize=body.prize,
        cover_image=body.cover_image,
        category=body.category,
    )
    return {"success": True, "competition": serialize_competition(competition)}


@router.post("/prizes")
async def create_prize(
    body: PrizeCreateRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    prize = container.prize_service.create(
        title=body.title,
        value=body.value,
        start_date=body.start_date,
        status=body.status,
        competition_id=body.competition_id,
        winner_id=body.winner_id,
    )
    return {"success": True, "prize": serialize_prize(prize)}

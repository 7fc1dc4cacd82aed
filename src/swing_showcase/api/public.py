"""Anonymous profile viewing and voting."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container
from swing_showcase.api.errors import route_errors
from swing_showcase.api.schemas import VoteRequest
from swing_showcase.api.serializers import serialize_public_profile, serialize_vote
from swing_showcase.containers import AppContainer

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/profile/{model_id}")
@route_errors("PUBLIC_PROFILE_ERROR", "Failed to get public profile")
async def public_profile(
    model_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    profile = container.profile_service.get(model_id)
    return {"success": True, "profile": serialize_public_profile(profile)}


@router.post("/profile/{model_id}/vote")
@route_errors("VOTE_ERROR", "Failed to record vote")
async def vote_for_profile(
    model_id: str,
    body: VoteRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record a vote; every request appends a new one."""
    vote = container.vote_service.cast_vote(
        model_id,
        voter_id=body.voter_id,
        is_premium=body.is_premium,
        competition_id=body.competition_id,
    )
    return {
        "success": True,
        "message": "Vote recorded successfully",
        "vote": serialize_vote(vote),
    }

"""Voting statistics endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container
from swing_showcase.api.errors import route_errors
from swing_showcase.api.serializers import (
    serialize_vote,
    serialize_vote_stats,
    serialize_voter,
)
from swing_showcase.containers import AppContainer

router = APIRouter(prefix="/api/votes", tags=["votes"])


@router.get("/stats")
@route_errors("STATS_ERROR", "Failed to get voting statistics")
async def vote_stats(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    stats = container.vote_service.stats()
    return {"success": True, "stats": serialize_vote_stats(stats)}


@router.get("/top-voters")
@route_errors("VOTERS_ERROR", "Failed to get top voters")
async def top_voters(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    voters = container.vote_service.top_voters()
    return {"success": True, "topVoters": [serialize_voter(item) for item in voters]}


@router.get("/recent")
@route_errors("VOTES_ERROR", "Failed to get recent votes")
async def recent_votes(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    votes = container.vote_service.recent()
    return {"success": True, "votes": [serialize_vote(vote) for vote in votes]}


@router.get("/premium")
@route_errors("PREMIUM_ERROR", "Failed to get premium votes")
async def premium_votes(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    votes = container.vote_service.premium()
    return {"success": True, "votes": [serialize_vote(vote) for vote in votes]}

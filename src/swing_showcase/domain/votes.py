"""Domain models for voting."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Vote:
    """A single vote. Votes are never updated or deleted."""

    id: str
    model_id: str
    voter_id: str | None
    is_premium: bool
    timestamp: datetime
    competition_id: str | None = None


@dataclass(frozen=True)
class VoterCount:
    voter_id: str | None
    vote_count: int


@dataclass(frozen=True)
class ModelTally:
    model_id: str
    vote_count: int
    premium_count: int


@dataclass(frozen=True)
class VoteStats:
    total_votes: int
    unique_voters: int
    top_models: list[ModelTally]

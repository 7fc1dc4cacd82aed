"""Vote recording, tallies and free-vote eligibility."""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from swing_showcase.domain.votes import ModelTally, Vote, VoterCount, VoteStats
from swing_showcase.services.notifications import NotificationService
from swing_showcase.services.repository import Repository

_logger = logging.getLogger(__name__)

FREE_VOTE_COOLDOWN = timedelta(hours=24)

VoteRepository = Repository[Vote]


def can_vote(last_vote_at: datetime | None, now: datetime | None = None) -> bool:
    """Return True when a free vote is allowed given the previous one."""
    if last_vote_at is None:
        return True
    current = now or datetime.now(tz=UTC)
    return current - last_vote_at >= FREE_VOTE_COOLDOWN


def hours_until_next_vote(
    last_vote_at: datetime | None, now: datetime | None = None
) -> int:
    """Return the whole hours, rounded up, until the next free vote."""
    if can_vote(last_vote_at, now):
        return 0
    current = now or datetime.now(tz=UTC)
    remaining = last_vote_at + FREE_VOTE_COOLDOWN - current  # type: ignore[operator]
    return math.ceil(remaining.total_seconds() / 3600)


@dataclass
class FreeVoteTracker:
    """Remembers the last free vote per voter and target in process memory.

    Nothing here is persisted: a new tracker starts with every voter eligible.
    Premium votes never start a cooldown.
    """

    last_votes: dict[tuple[str, str], datetime] = field(default_factory=dict)

    def can_vote(
        self, voter_id: str, target_id: str, now: datetime | None = None
    ) -> bool:
        return can_vote(self.last_votes.get((voter_id, target_id)), now)

    def hours_remaining(
        self, voter_id: str, target_id: str, now: datetime | None = None
    ) -> int:
        return hours_until_next_vote(self.last_votes.get((voter_id, target_id)), now)

    def record(
        self,
        voter_id: str,
        target_id: str,
        is_premium: bool = False,
        now: datetime | None = None,
    ) -> bool:
        """Record a vote, returning False when a free vote is still cooling down."""
        if is_premium:
            return True
        if not self.can_vote(voter_id, target_id, now):
            return False
        self.last_votes[(voter_id, target_id)] = now or datetime.now(tz=UTC)
        return True


@dataclass
class VoteService:
    """Appends votes and computes leaderboards.

    The free-vote cooldown is not enforced here; every request is recorded.
    """

    repository: VoteRepository
    notification_service: NotificationService

    def cast_vote(
        self,
        model_id: str,
        voter_id: str | None,
        is_premium: bool = False,
        competition_id: str | None = None,
    ) -> Vote:
        """Append a vote and notify the model."""
        vote = self.repository.insert(
            Vote(
                id=str(uuid4()),
                model_id=model_id,
                voter_id=voter_id,
                is_premium=is_premium,
                competition_id=competition_id,
                timestamp=datetime.now(tz=UTC),
            )
        )
        _logger.info(
            "Vote recorded: model_id=%s premium=%s", model_id, vote.is_premium
        )
        label = "premium vote" if is_premium else "vote"
        self.notification_service.notify(
            model_id, "vote_received", "New vote", f"You received a {label}!"
        )
        return vote

    def count_for_model(self, model_id: str) -> int:
        return len(self.repository.find_many(lambda vote: vote.model_id == model_id))

    def stats(self, top: int = 10) -> VoteStats:
        """Return totals and the models with the most votes."""
        votes = self.repository.find_many()
        totals: Counter[str] = Counter(vote.model_id for vote in votes)
        premium: Counter[str] = Counter(
            vote.model_id for vote in votes if vote.is_premium
        )
        return VoteStats(
            total_votes=len(votes),
            unique_voters=len({vote.voter_id for vote in votes}),
            top_models=[
                ModelTally(
                    model_id=model_id,
                    vote_count=count,
                    premium_count=premium[model_id],
                )
                for model_id, count in totals.most_common(top)
            ],
        )

    def top_voters(self, limit: int = 10) -> list[VoterCount]:
        """Return voters ordered by number of votes cast."""
        counts: Counter[str | None] = Counter(
            vote.voter_id for vote in self.repository.find_many()
        )
        return [
            VoterCount(voter_id=voter_id, vote_count=count)
            for voter_id, count in counts.most_common(limit)
        ]

    def recent(self, limit: int = 20) -> list[Vote]:
        """Return the latest votes, newest first."""
        votes = self.repository.find_many()
        return sorted(votes, key=lambda vote: vote.timestamp, reverse=True)[:limit]

    def premium(self) -> list[Vote]:
        return self.repository.find_many(lambda vote: vote.is_premium)

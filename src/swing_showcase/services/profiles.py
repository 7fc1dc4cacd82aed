"""Public model profiles."""

from dataclasses import dataclass

from swing_showcase.domain.errors import ProfileNotFoundError
from swing_showcase.domain.models import UserRecord
from swing_showcase.services.competitions import CompetitionService
from swing_showcase.services.users import UserRepository
from swing_showcase.services.votes import VoteService


@dataclass(frozen=True)
class PublicProfile:
    """A user as shown to anonymous visitors, without private fields."""

    user: UserRecord
    vote_count: int
    competition_count: int


@dataclass
class PublicProfileService:
    user_repository: UserRepository
    vote_service: VoteService
    competition_service: CompetitionService

    def get(self, model_id: str) -> PublicProfile:
        """Return the public view of a model or raise ProfileNotFoundError."""
        user = self.user_repository.find_by_id(model_id)
        if user is None:
            raise ProfileNotFoundError()
        return PublicProfile(
            user=user,
            vote_count=self.vote_service.count_for_model(model_id),
            competition_count=len(self.competition_service.list_for_user(model_id)),
        )

"""Competition listing and participation."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import uuid4

from swing_showcase.domain.competitions import Competition, CompetitionStatus
from swing_showcase.domain.errors import AlreadyJoinedError, CompetitionNotFoundError
from swing_showcase.services.notifications import NotificationService
from swing_showcase.services.repository import Repository

_logger = logging.getLogger(__name__)

CompetitionRepository = Repository[Competition]


@dataclass
class CompetitionService:
    """Application service for competitions."""

    repository: CompetitionRepository
    notification_service: NotificationService

    def create(  # noqa: PLR0913
        self,
        title: str,
        end_date: datetime,
        status: CompetitionStatus = CompetitionStatus.ACTIVE,
        description: str = "",
        prize: str | None = None,
        cover_image: str | None = None,
        category: str | None = None,
    ) -> Competition:
        """Create a competition with no participants."""
        competition = self.repository.insert(
            Competition(
                id=str(uuid4()),
                title=title,
                status=status,
                end_date=end_date,
                description=description,
                prize=prize,
                cover_image=cover_image,
                category=category,
            )
        )
        _logger.info("Created competition: competition_id=%s", competition.id)
        return competition

    def get(self, competition_id: str) -> Competition:
        """Return a competition or raise CompetitionNotFoundError."""
        competition = self.repository.find_by_id(competition_id)
        if competition is None:
            raise CompetitionNotFoundError()
        return competition

    def list_available(self, now: datetime | None = None) -> list[Competition]:
        """Return active competitions that have not ended yet."""
        current = now or datetime.now(tz=UTC)
        return self.repository.find_many(lambda item: item.is_open(current))

    def list_for_user(self, user_id: str) -> list[Competition]:
        """Return competitions the user has joined."""
        return self.repository.find_many(lambda item: user_id in item.participants)

    def join(self, competition_id: str, user_id: str) -> Competition:
        """Append the user to the participant list exactly once."""
        competition = self.get(competition_id)
        if user_id in competition.participants:
            raise AlreadyJoinedError()
        updated = self.repository.update(
            replace(competition, participants=(*competition.participants, user_id))
        )
        self.notification_service.notify(
            user_id,
            "contest_joined",
            "Competition joined",
            f"You joined {competition.title}. Good luck!",
        )
        return updated

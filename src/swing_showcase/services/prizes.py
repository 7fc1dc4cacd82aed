"""Prize listings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from swing_showcase.domain.prizes import Prize, PrizeStats, PrizeStatus
from swing_showcase.services.repository import Repository

PrizeRepository = Repository[Prize]


@dataclass
class PrizeService:
    """Service for prize history and upcoming prizes."""

    repository: PrizeRepository

    def create(  # noqa: PLR0913
        self,
        title: str,
        value: float,
        start_date: datetime,
        status: PrizeStatus = PrizeStatus.UPCOMING,
        competition_id: str | None = None,
        winner_id: str | None = None,
    ) -> Prize:
        """Create a prize entry."""
        return self.repository.insert(
            Prize(
                id=str(uuid4()),
                title=title,
                value=value,
                status=status,
                start_date=start_date,
                competition_id=competition_id,
                winner_id=winner_id,
            )
        )

    def history(self) -> list[Prize]:
        """Return prizes that have been awarded."""
        return self.repository.find_many(
            lambda prize: prize.status == PrizeStatus.COMPLETED
        )

    def upcoming(self, now: datetime | None = None) -> list[Prize]:
        """Return upcoming prizes whose start date is still ahead."""
        current = now or datetime.now(tz=UTC)
        return self.repository.find_many(
            lambda prize: prize.status == PrizeStatus.UPCOMING
            and prize.start_date > current
        )

    def stats(self) -> PrizeStats:
        prizes = self.repository.find_many()
        return PrizeStats(
            total_prizes=len(prizes),
            total_value=sum(prize.value for prize in prizes),
            completed_prizes=sum(
                1 for prize in prizes if prize.status == PrizeStatus.COMPLETED
            ),
        )

"""Domain models for competitions."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class CompetitionStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Competition:
    """A contest models can join and receive votes in."""

    id: str
    title: str
    status: CompetitionStatus
    end_date: datetime
    description: str = ""
    prize: str | None = None
    participants: tuple[str, ...] = ()
    cover_image: str | None = None
    category: str | None = None

    def is_open(self, now: datetime) -> bool:
        """Return True when the competition accepts entries at ``now``."""
        return self.status == CompetitionStatus.ACTIVE and self.end_date > now

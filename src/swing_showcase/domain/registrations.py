"""Client-side competition listings and model registrations."""

from dataclasses import dataclass
from enum import StrEnum

from swing_showcase.domain.competitions import CompetitionStatus


class RegistrationStatus(StrEnum):
    ACTIVE = "active"
    WITHDRAWN = "withdrawn"


@dataclass(frozen=True)
class ListedCompetition:
    """A competition card as cached in local storage."""

    id: str
    title: str
    description: str
    prize: str
    end_date: str
    participants: int
    status: CompetitionStatus
    cover_image: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "prize": self.prize,
            "endDate": self.end_date,
            "participants": self.participants,
            "status": self.status.value,
            "coverImage": self.cover_image,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, object]) -> "ListedCompetition":
        return cls(
            id=str(raw["id"]),
            title=str(raw.get("title", "")),
            description=str(raw.get("description", "")),
            prize=str(raw.get("prize", "")),
            end_date=str(raw.get("endDate", "")),
            participants=int(raw.get("participants", 0)),
            status=CompetitionStatus(raw.get("status", "inactive")),
            cover_image=raw.get("coverImage"),
            category=raw.get("category"),
        )


@dataclass(frozen=True)
class ModelRegistration:
    """Links a model to a competition. Withdrawal is a soft state."""

    id: str
    competition_id: str
    model_id: str
    model_name: str
    registration_date: str
    status: RegistrationStatus = RegistrationStatus.ACTIVE
    votes: int = 0
    ranking: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "competitionId": self.competition_id,
            "modelId": self.model_id,
            "modelName": self.model_name,
            "registrationDate": self.registration_date,
            "status": self.status.value,
            "votes": self.votes,
            "ranking": self.ranking,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, object]) -> "ModelRegistration":
        return cls(
            id=str(raw["id"]),
            competition_id=str(raw["competitionId"]),
            model_id=str(raw["modelId"]),
            model_name=str(raw.get("modelName", "")),
            registration_date=str(raw.get("registrationDate", "")),
            status=RegistrationStatus(raw.get("status", "active")),
            votes=int(raw.get("votes", 0)),
            ranking=int(raw.get("ranking", 0)),
        )

"""Pydantic request models. Wire field names are camelCase."""

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from swing_showcase.domain.competitions import CompetitionStatus
from swing_showcase.domain.prizes import PrizeStatus


class CamelModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GoogleAuthRequest(CamelModel):
    id_token: str
    google_id: str
    email: str
    name: str = ""
    picture: str | None = None


class RegisterRequest(CamelModel):
    email: str = ""
    password: str = ""
    name: str = ""


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""


class ProfileUpdateRequest(CamelModel):
    """Known profile fields plus any extra free-form ones."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    name: str | None = None
    picture: str | None = None

    def updates(self) -> dict[str, object]:
        """Return only the fields present in the request body."""
        updates: dict[str, object] = dict(self.model_extra or {})
        for name in ("name", "picture"):
            if name in self.model_fields_set:
                updates[name] = getattr(self, name)
        return updates


class SettingsUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    def updates(self) -> dict[str, object]:
        return dict(self.model_extra or {})


class PasswordChangeRequest(CamelModel):
    current_password: str
    new_password: str


class VoteRequest(CamelModel):
    voter_id: str | None = None
    is_premium: bool = False
    competition_id: str | None = None


class ContactRequestBody(CamelModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class CompetitionCreateRequest(CamelModel):
    title: str = Field(min_length=1)
    end_date: AwareDatetime
    status: CompetitionStatus = CompetitionStatus.ACTIVE
    description: str = ""
    prize: str | None = None
    cover_image: str | None = None
    category: str | None = None


class PrizeCreateRequest(CamelModel):
    title: str = Field(min_length=1)
    value: float = Field(ge=0)
    start_date: AwareDatetime
    status: PrizeStatus = PrizeStatus.UPCOMING
    competition_id: str | None = None
    winner_id: str | None = None

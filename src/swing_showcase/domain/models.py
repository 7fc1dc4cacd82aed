"""Domain models for showcase users."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user or model."""

    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    picture: str | None = None
    google_id: str | None = None
    password_hash: str | None = None
    is_verified: bool = False
    settings: dict[str, object] = field(default_factory=dict)
    profile: dict[str, object] = field(default_factory=dict)

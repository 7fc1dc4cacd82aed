"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from swing_showcase.adapters.profile_api_client import ProfileApiClient, ProfileApiError
from swing_showcase.config import Settings
from swing_showcase.containers import AppContainer, build_container
from swing_showcase.domain.models import UserRecord
from swing_showcase.services.auth import (
    GoogleIdentity,
    GoogleTokenVerifier,
    hash_password,
)
from swing_showcase.services.local_store import LocalStore

DEFAULT_PASSWORD = "correct-horse"


@dataclass
class FakeGoogleVerifier(GoogleTokenVerifier):
    """Accepts only the tokens registered in ``identities``."""

    identities: dict[str, GoogleIdentity] = field(default_factory=dict)

    def add(self, token: str, email: str, google_id: str = "google-1") -> None:
        self.identities[token] = GoogleIdentity(
            google_id=google_id,
            email=email,
            name="Google User",
            picture=None,
            email_verified=True,
        )

    def verify(self, token: str) -> GoogleIdentity:
        identity = self.identities.get(token)
        if identity is None:
            raise ValueError("Wrong number of segments in token")
        return identity


@dataclass
class FakeProfileApiClient(ProfileApiClient):
    """Fake profile API that records requests and can be told to fail."""

    profile: dict[str, object] | None = None
    fail_get: bool = False
    fail_create: bool = False
    fail_portfolio: bool = False
    fail_update_user: bool = False
    created: list[dict[str, object]] = field(default_factory=list)
    portfolio: list[tuple[str, str]] = field(default_factory=list)
    user_updates: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    closed: bool = False

    async def get_profile(self, user_id: str) -> dict[str, object] | None:
        if self.fail_get:
            raise ProfileApiError("Network down", 503)
        return self.profile

    async def create_profile(self, payload: dict[str, object]) -> dict[str, object]:
        if self.fail_create:
            raise ProfileApiError("Failed to create profile", 500)
        self.created.append(payload)
        return {"success": True, "data": payload}

    async def add_portfolio_photo(self, user_id: str, photo_url: str) -> None:
        if self.fail_portfolio:
            raise ProfileApiError("Failed to upload portfolio photo", 500)
        self.portfolio.append((user_id, photo_url))

    async def update_user(self, user_id: str, payload: dict[str, object]) -> None:
        if self.fail_update_user:
            raise ProfileApiError("Failed to update user", 500)
        self.user_updates.append((user_id, payload))

    async def close(self) -> None:
        self.closed = True


def make_user(
    container: AppContainer,
    email: str = "model@example.com",
    name: str = "Model",
    password: str | None = DEFAULT_PASSWORD,
    **profile: object,
) -> UserRecord:
    """Insert a user straight into the container's repository."""
    now = datetime.now(tz=UTC)
    return container.user_service.repository.insert(
        UserRecord(
            id=str(uuid4()),
            email=email,
            name=name,
            password_hash=hash_password(password) if password else None,
            created_at=now,
            updated_at=now,
            profile=dict(profile),
        )
    )


def auth_headers(container: AppContainer, user: UserRecord) -> dict[str, str]:
    token = container.token_service.issue(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret="test-secret",
        admin_token="admin-token",
        google_client_id="client-id.apps.googleusercontent.com",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def google_verifier() -> FakeGoogleVerifier:
    return FakeGoogleVerifier()


@pytest.fixture
def container(settings: Settings, google_verifier: FakeGoogleVerifier) -> AppContainer:
    container = build_container(settings)
    container.user_service.google_verifier = google_verifier
    return container


@pytest.fixture
def store() -> LocalStore:
    return LocalStore()


@pytest.fixture
def profile_client() -> FakeProfileApiClient:
    return FakeProfileApiClient()

"""User-related business logic."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from swing_showcase.domain.errors import (
    GoogleAccountError,
    InvalidCredentialsError,
    ShowcaseError,
    UserExistsError,
    UserNotFoundError,
    ValidationFailedError,
)
from swing_showcase.domain.models import UserRecord
from swing_showcase.services.auth import (
    GoogleTokenVerifier,
    TokenService,
    hash_password,
    verify_password,
)
from swing_showcase.services.repository import Repository

_logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

# Fields a client may never overwrite through a profile update.
_PROTECTED_FIELDS = frozenset(
    {"id", "email", "password", "passwordHash", "googleId", "isVerified"}
)


class UserRepository(Repository[UserRecord], Protocol):
    """Persistence interface for user data."""

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given email, if present."""


@dataclass(frozen=True)
class AuthResult:
    """A user together with a freshly issued session token."""

    user: UserRecord
    token: str


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    token_service: TokenService
    google_verifier: GoogleTokenVerifier

    def authenticate_google(
        self,
        id_token: str,
        google_id: str,
        email: str,
        name: str,
        picture: str | None,
    ) -> AuthResult:
        """Exchange a Google ID token for a session token, creating the user."""
        try:
            identity = self.google_verifier.verify(id_token)
        except ValueError as exc:
            _logger.warning("Google token rejected: %s", exc)
            raise ShowcaseError(
                "Authentication failed", code="AUTH_FAILED", status_code=401
            ) from exc
        if identity.email != email:
            raise ValidationFailedError("Email mismatch", code="EMAIL_MISMATCH")

        now = datetime.now(tz=UTC)
        existing = self.repository.find_by_email(email)
        if existing is None:
            user = self.repository.insert(
                UserRecord(
                    id=_new_id(),
                    email=email,
                    name=name,
                    picture=picture,
                    google_id=google_id,
                    is_verified=True,
                    created_at=now,
                    updated_at=now,
                )
            )
            _logger.info("Created user from Google sign-in: user_id=%s", user.id)
        else:
            user = self.repository.update(
                replace(
                    existing,
                    google_id=google_id,
                    name=name,
                    picture=picture,
                    updated_at=now,
                )
            )
        return AuthResult(user=user, token=self.token_service.issue(user))

    def register(self, email: str, password: str, name: str) -> AuthResult:
        """Create a password-based account."""
        if not email or not password or not name:
            raise ValidationFailedError(
                "All fields are required", code="MISSING_FIELDS"
            )
        if self.repository.find_by_email(email) is not None:
            raise UserExistsError()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailedError(
                "Password must be at least 8 characters long", code="WEAK_PASSWORD"
            )
        now = datetime.now(tz=UTC)
        user = self.repository.insert(
            UserRecord(
                id=_new_id(),
                email=email,
                name=name,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
        )
        _logger.info("Registered user: user_id=%s", user.id)
        return AuthResult(user=user, token=self.token_service.issue(user))

    def login(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password."""
        if not email or not password:
            raise ValidationFailedError(
                "Email and password are required", code="MISSING_FIELDS"
            )
        user = self.repository.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError()
        if not user.password_hash:
            raise GoogleAccountError()
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return AuthResult(user=user, token=self.token_service.issue(user))

    def refresh(self, user_id: str) -> AuthResult:
        """Reissue a session token for an existing user."""
        user = self.get_user(user_id)
        return AuthResult(user=user, token=self.token_service.issue(user))

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user or raise UserNotFoundError."""
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def update_profile(self, user_id: str, updates: dict[str, object]) -> UserRecord:
        """Shallow-merge profile fields; ``name`` and ``picture`` are top level."""
        user = self.get_user(user_id)
        profile = dict(user.profile)
        name = user.name
        picture = user.picture
        for key, value in updates.items():
            if key in _PROTECTED_FIELDS:
                continue
            if key == "name":
                name = str(value)
            elif key == "picture":
                picture = value if value is None else str(value)
            else:
                profile[key] = value
        return self.repository.update(
            replace(
                user,
                name=name,
                picture=picture,
                profile=profile,
                updated_at=datetime.now(tz=UTC),
            )
        )

    def get_settings(self, user_id: str) -> dict[str, object]:
        """Return the user's settings."""
        return dict(self.get_user(user_id).settings)

    def update_settings(
        self, user_id: str, updates: dict[str, object]
    ) -> dict[str, object]:
        """Shallow-merge settings and return the result."""
        user = self.get_user(user_id)
        settings = {**user.settings, **updates}
        self.repository.update(
            replace(user, settings=settings, updated_at=datetime.now(tz=UTC))
        )
        return settings

    def change_password(
        self, user_id: str, current_password: str, new_password: str
    ) -> None:
        """Replace the password after checking the current one."""
        user = self.get_user(user_id)
        if not user.password_hash:
            raise GoogleAccountError()
        if not verify_password(current_password, user.password_hash):
            raise InvalidCredentialsError()
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailedError(
                "Password must be at least 8 characters long", code="WEAK_PASSWORD"
            )
        self.repository.update(
            replace(
                user,
                password_hash=hash_password(new_password),
                updated_at=datetime.now(tz=UTC),
            )
        )

    def delete_account(self, user_id: str) -> None:
        """Remove the user; unknown ids are ignored."""
        if self.repository.delete(user_id):
            _logger.info("Deleted account: user_id=%s", user_id)


def _new_id() -> str:
    return str(uuid4())

"""Session tokens, password hashing and third-party identity checks."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

import bcrypt
from jose import JWTError, jwt

from swing_showcase.domain.errors import TokenInvalidError
from swing_showcase.domain.models import UserRecord


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token."""

    user_id: str
    email: str
    name: str
    picture: str | None
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class GoogleIdentity:
    """Identity asserted by a verified Google ID token."""

    google_id: str
    email: str
    name: str
    picture: str | None
    email_verified: bool


class GoogleTokenVerifier(Protocol):
    """Interface for verifying Google ID tokens."""

    def verify(self, token: str) -> GoogleIdentity:
        """Return the identity in the token or raise ValueError."""


@dataclass
class TokenService:
    """Issues and verifies HMAC-signed bearer tokens with a fixed lifetime."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=24)

    def issue(self, user: UserRecord, now: datetime | None = None) -> str:
        """Sign a token for the user valid for ``ttl`` from ``now``."""
        issued_at = now or datetime.now(tz=UTC)
        payload = {
            "sub": user.id,
            "email": user.email,
            "name": user.name,
            "picture": user.picture,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode a token, raising TokenInvalidError when forged or expired."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise TokenInvalidError() from exc
        subject = payload.get("sub")
        if not subject:
            raise TokenInvalidError()
        return TokenClaims(
            user_id=str(subject),
            email=str(payload.get("email") or ""),
            name=str(payload.get("name") or ""),
            picture=payload.get("picture"),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    # bcrypt only considers the first 72 bytes
    password_bytes = password.encode("utf-8")[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a bcrypt hash."""
    password_bytes = password.encode("utf-8")[:72]
    return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))

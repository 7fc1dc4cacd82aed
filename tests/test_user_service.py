"""Tests for user and token services."""

from datetime import UTC, datetime, timedelta

import pytest

from swing_showcase.domain.errors import TokenInvalidError
from swing_showcase.services.auth import TokenService, hash_password, verify_password
from tests.conftest import make_user


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("correct-horse")

    assert hashed != "correct-horse"
    assert verify_password("correct-horse", hashed) is True
    assert verify_password("wrong-horse", hashed) is False


def test_token_rejects_other_secret(container) -> None:
    user = make_user(container)
    token = TokenService(secret="other-secret").issue(user)

    with pytest.raises(TokenInvalidError):
        container.token_service.verify(token)


def test_token_claims(container) -> None:
    user = make_user(container, email="ana@example.com", name="Ana")
    issued = datetime(2030, 1, 1, tzinfo=UTC)
    token = container.token_service.issue(user, now=issued)

    claims = container.token_service.verify(token)

    assert claims.user_id == user.id
    assert claims.email == "ana@example.com"
    assert claims.name == "Ana"
    assert claims.expires_at == issued + timedelta(hours=24)


def test_update_profile_skips_protected_fields(container) -> None:
    user = make_user(container)

    updated = container.user_service.update_profile(
        user.id,
        {"id": "hijack", "isVerified": True, "picture": "p.png", "bio": "New"},
    )

    assert updated.id == user.id
    assert updated.is_verified is False
    assert updated.picture == "p.png"
    assert updated.profile == {"bio": "New"}


def test_delete_account_ignores_unknown_user(container) -> None:
    container.user_service.delete_account("missing")

    assert container.user_service.repository.find_many() == []

"""Tests for authentication endpoints and bearer tokens."""

from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient

from swing_showcase.api.app import create_app
from tests.conftest import DEFAULT_PASSWORD, auth_headers, make_user


def test_register_returns_user_and_token(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/auth/register",
        json={"email": "ana@example.com", "password": "long-enough", "name": "Ana"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["email"] == "ana@example.com"
    assert "passwordHash" not in data["user"]
    claims = container.token_service.verify(data["token"])
    assert claims.user_id == data["user"]["id"]
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)


def test_register_validation_codes(container) -> None:
    client = TestClient(create_app(container))
    make_user(container, email="taken@example.com")

    missing = client.post("/api/auth/register", json={"email": "a@example.com"})
    duplicate = client.post(
        "/api/auth/register",
        json={"email": "taken@example.com", "password": "long-enough", "name": "X"},
    )
    weak = client.post(
        "/api/auth/register",
        json={"email": "b@example.com", "password": "short", "name": "B"},
    )

    assert missing.status_code == 400
    assert missing.json()["code"] == "MISSING_FIELDS"
    assert duplicate.status_code == 409
    assert duplicate.json() == {
        "success": False,
        "error": "User with this email already exists",
        "code": "USER_EXISTS",
    }
    assert weak.status_code == 400
    assert weak.json()["code"] == "WEAK_PASSWORD"


def test_login_checks_password(container) -> None:
    client = TestClient(create_app(container))
    make_user(container, email="ana@example.com")

    ok = client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": DEFAULT_PASSWORD},
    )
    wrong = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "nope"}
    )
    unknown = client.post(
        "/api/auth/login", json={"email": "who@example.com", "password": "nope"}
    )

    assert ok.status_code == 200
    assert ok.json()["token"]
    assert wrong.status_code == 401
    assert wrong.json()["code"] == "INVALID_CREDENTIALS"
    assert unknown.json()["code"] == "INVALID_CREDENTIALS"


def test_login_rejects_google_only_account(container) -> None:
    client = TestClient(create_app(container))
    make_user(container, email="g@example.com", password=None)

    response = client.post(
        "/api/auth/login", json={"email": "g@example.com", "password": "anything"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "GOOGLE_ACCOUNT"


def test_google_sign_in_creates_then_updates_user(container, google_verifier) -> None:
    client = TestClient(create_app(container))
    google_verifier.add("good-token", "g@example.com")
    body = {
        "idToken": "good-token",
        "googleId": "google-1",
        "email": "g@example.com",
        "name": "Gee",
        "picture": "https://example.com/p.png",
    }

    first = client.post("/api/auth/google", json=body)
    second = client.post("/api/auth/google", json={**body, "name": "Gee Two"})

    assert first.status_code == 200
    assert first.json()["user"]["isVerified"] is True
    assert second.json()["user"]["id"] == first.json()["user"]["id"]
    assert second.json()["user"]["name"] == "Gee Two"
    assert len(container.user_service.repository.find_many()) == 1


def test_google_sign_in_errors(container, google_verifier) -> None:
    client = TestClient(create_app(container))
    google_verifier.add("good-token", "real@example.com")
    body = {"idToken": "good-token", "googleId": "g", "email": "fake@example.com"}

    mismatch = client.post("/api/auth/google", json=body)
    rejected = client.post("/api/auth/google", json={**body, "idToken": "forged"})

    assert mismatch.status_code == 400
    assert mismatch.json()["code"] == "EMAIL_MISMATCH"
    assert rejected.status_code == 401
    assert rejected.json()["code"] == "AUTH_FAILED"


def test_protected_route_requires_token(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/api/user/profile")
    garbage = client.get(
        "/api/user/profile", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert missing.status_code == 401
    assert missing.json()["code"] == "TOKEN_REQUIRED"
    assert garbage.status_code == 403
    assert garbage.json()["code"] == "TOKEN_INVALID"


def test_expired_token_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    user = make_user(container)
    token = container.token_service.issue(
        user, now=datetime.now(tz=UTC) - timedelta(hours=25)
    )

    response = client.get(
        "/api/user/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 403
    assert response.json()["code"] == "TOKEN_INVALID"


def test_refresh_and_logout(container) -> None:
    client = TestClient(create_app(container))
    user = make_user(container)
    headers = auth_headers(container, user)

    refreshed = client.post("/api/auth/refresh", headers=headers)
    logged_out = client.post("/api/auth/logout", headers=headers)

    assert refreshed.status_code == 200
    assert refreshed.json()["user"]["id"] == user.id
    assert logged_out.json() == {"success": True, "message": "Logged out successfully"}


def test_refresh_for_deleted_user(container) -> None:
    client = TestClient(create_app(container))
    user = make_user(container)
    headers = auth_headers(container, user)
    container.user_service.delete_account(user.id)

    response = client.post("/api/auth/refresh", headers=headers)

    assert response.status_code == 404
    assert response.json()["code"] == "USER_NOT_FOUND"

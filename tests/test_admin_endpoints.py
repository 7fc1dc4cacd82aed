"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from swing_showcase.api.app import create_app
from tests.conftest import make_user

ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_requires_token(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/api/admin/users")
    wrong = client.get("/api/admin/users", headers={"X-Admin-Token": "nope"})

    assert missing.status_code == 401
    assert missing.json()["code"] == "ADMIN_TOKEN_REQUIRED"
    assert wrong.status_code == 401


def test_admin_users_endpoint(container) -> None:
    client = TestClient(create_app(container))
    make_user(container, email="ana@example.com")

    response = client.get("/api/admin/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    users = response.json()["users"]
    assert users[0]["email"] == "ana@example.com"
    assert "passwordHash" not in users[0]


def test_admin_creates_competition(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/admin/competitions",
        headers=ADMIN_HEADERS,
        json={
            "title": "Big Game Competition",
            "endDate": "2099-10-15T00:00:00Z",
            "prize": "$10,000",
            "category": "Premium",
        },
    )
    available = client.get("/api/competitions/available").json()["competitions"]

    assert response.status_code == 200
    assert response.json()["competition"]["status"] == "active"
    assert [item["title"] for item in available] == ["Big Game Competition"]


def test_admin_creates_prize(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/admin/prizes",
        headers=ADMIN_HEADERS,
        json={"title": "Fall cash", "value": 3500, "startDate": "2099-01-01T00:00:00Z"},
    )

    assert response.status_code == 200
    assert response.json()["prize"]["status"] == "upcoming"
    assert client.get("/api/prizes/stats").json()["stats"]["totalPrizes"] == 1


def test_admin_payload_validation(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/admin/competitions",
        headers=ADMIN_HEADERS,
        json={"title": "No end date"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"

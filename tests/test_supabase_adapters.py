"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from swing_showcase.adapters.supabase_competition_repository import (
    SupabaseCompetitionRepository,
)
from swing_showcase.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from swing_showcase.adapters.supabase_prize_repository import SupabasePrizeRepository
from swing_showcase.adapters.supabase_repository import SupabaseRepository
from swing_showcase.adapters.supabase_user_repository import SupabaseUserRepository
from swing_showcase.adapters.supabase_vote_repository import SupabaseVoteRepository
from swing_showcase.domain.competitions import Competition, CompetitionStatus
from swing_showcase.domain.models import UserRecord
from swing_showcase.domain.prizes import PrizeStatus
from swing_showcase.domain.votes import Vote


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _user_row(user_id: str, email: str = "ana@example.com") -> dict[str, object]:
    return {
        "id": user_id,
        "email": email,
        "name": "Ana",
        "password_hash": "hash",
        "is_verified": True,
        "settings_json": {"theme": "dark"},
        "profile_json": {"bio": "Dancer"},
        "created_at": "2025-01-01T00:00:00+00:00",
        "updated_at": "2025-01-02T00:00:00+00:00",
    }


def test_supabase_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    user_id = str(uuid4())
    now = datetime.now(tz=UTC)
    users_table.queue("insert", [_user_row(user_id)])
    users_table.queue("select", [_user_row(user_id)])

    repository = SupabaseUserRepository(client)
    created = repository.insert(
        UserRecord(
            id=user_id,
            email="ana@example.com",
            name="Ana",
            created_at=now,
            updated_at=now,
        )
    )
    fetched = repository.find_by_email("ana@example.com")

    assert created.id == user_id
    assert users_table.last_payload["email"] == "ana@example.com"
    assert fetched is not None
    assert fetched.settings == {"theme": "dark"}
    assert fetched.profile == {"bio": "Dancer"}
    assert ("email", "ana@example.com") in users_table.last_filters


def test_supabase_user_repository_missing_rows() -> None:
    repository = SupabaseUserRepository(FakeSupabaseClient())

    assert repository.find_by_id("missing") is None
    assert repository.find_by_email("missing@example.com") is None
    assert repository.delete("missing") is False


def test_supabase_insert_without_data_raises() -> None:
    repository = SupabaseVoteRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError, match="votes"):
        repository.insert(
            Vote(
                id="vote-1",
                model_id="m1",
                voter_id="v1",
                is_premium=False,
                timestamp=datetime.now(tz=UTC),
            )
        )


def test_supabase_competition_repository_update() -> None:
    client = FakeSupabaseClient()
    table = client.table("competitions")
    competition = Competition(
        id="comp-1",
        title="Summer Beauty Contest",
        status=CompetitionStatus.ACTIVE,
        end_date=datetime(2099, 1, 1, tzinfo=UTC),
        participants=("user-1",),
    )

    repository = SupabaseCompetitionRepository(client)
    updated = repository.update(competition)

    assert updated == competition
    assert table.last_payload["participants"] == ["user-1"]
    assert ("id", "comp-1") in table.last_filters


def test_supabase_find_many_filters_client_side() -> None:
    client = FakeSupabaseClient()
    client.table("notifications").queue(
        "select",
        [
            {"id": "n1", "user_id": "u1", "type": "system", "is_read": False},
            {"id": "n2", "user_id": "u2", "type": "system", "is_read": True},
        ],
    )

    repository = SupabaseNotificationRepository(client)
    notifications = repository.find_many(lambda item: item.user_id == "u1")

    assert [item.id for item in notifications] == ["n1"]


def test_supabase_prize_repository_parses_rows() -> None:
    client = FakeSupabaseClient()
    client.table("prizes").queue(
        "select",
        [
            {
                "id": "p1",
                "title": "Summer cash",
                "value": "5000",
                "status": "completed",
                "start_date": "2025-06-01T00:00:00+00:00",
            }
        ],
    )

    prize = SupabasePrizeRepository(client).find_by_id("p1")

    assert prize is not None
    assert prize.value == 5000.0
    assert prize.status == PrizeStatus.COMPLETED
    assert prize.start_date == datetime(2025, 6, 1, tzinfo=UTC)


def test_base_repository_requires_row_mapping() -> None:
    with pytest.raises(TypeError):
        SupabaseRepository(FakeSupabaseClient())

"""Tests for vote eligibility and vote statistics."""

from datetime import UTC, datetime, timedelta

from swing_showcase.adapters.memory_repository import InMemoryRepository
from swing_showcase.services.notifications import NotificationService
from swing_showcase.services.votes import (
    FreeVoteTracker,
    VoteService,
    can_vote,
    hours_until_next_vote,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


def _vote_service() -> VoteService:
    return VoteService(
        repository=InMemoryRepository(),
        notification_service=NotificationService(InMemoryRepository()),
    )


def test_can_vote_without_previous_vote() -> None:
    assert can_vote(None, NOW) is True


def test_can_vote_respects_cooldown() -> None:
    assert can_vote(NOW - timedelta(hours=23), NOW) is False
    assert can_vote(NOW - timedelta(hours=25), NOW) is True
    assert can_vote(NOW - timedelta(hours=24), NOW) is True


def test_hours_until_next_vote_rounds_up() -> None:
    assert hours_until_next_vote(None, NOW) == 0
    assert hours_until_next_vote(NOW - timedelta(hours=23), NOW) == 1
    assert hours_until_next_vote(NOW - timedelta(hours=1, minutes=30), NOW) == 23


def test_tracker_blocks_second_free_vote() -> None:
    tracker = FreeVoteTracker()

    assert tracker.record("voter", "model", now=NOW) is True
    assert tracker.record("voter", "model", now=NOW + timedelta(hours=2)) is False
    assert tracker.hours_remaining("voter", "model", NOW + timedelta(hours=2)) == 22
    assert tracker.record("voter", "model", now=NOW + timedelta(hours=24)) is True


def test_tracker_is_per_target_and_ignores_premium() -> None:
    tracker = FreeVoteTracker()
    tracker.record("voter", "model-a", now=NOW)

    assert tracker.can_vote("voter", "model-b", NOW) is True
    assert tracker.record("voter", "model-a", is_premium=True, now=NOW) is True
    assert tracker.can_vote("voter", "model-a", NOW) is False


def test_cast_vote_appends_and_notifies_model() -> None:
    service = _vote_service()

    first = service.cast_vote("m1", "v1")
    second = service.cast_vote("m1", "v1")

    assert first.id != second.id
    assert service.count_for_model("m1") == 2
    notifications = service.notification_service.list_for_user("m1")
    assert [item.type for item in notifications] == ["vote_received"] * 2


def test_stats_and_top_voters() -> None:
    service = _vote_service()
    service.cast_vote("m1", "v1")
    service.cast_vote("m1", "v2", is_premium=True)
    service.cast_vote("m2", "v1")

    stats = service.stats()

    assert stats.total_votes == 3
    assert stats.unique_voters == 2
    assert stats.top_models[0].model_id == "m1"
    assert stats.top_models[0].vote_count == 2
    assert stats.top_models[0].premium_count == 1
    top = service.top_voters()
    assert top[0].voter_id == "v1"
    assert top[0].vote_count == 2
    assert [vote.voter_id for vote in service.premium()] == ["v2"]
    assert len(service.recent(limit=2)) == 2

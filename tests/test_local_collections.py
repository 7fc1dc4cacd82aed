"""Tests for storage-backed competition and notification caches."""

import pytest

from swing_showcase.domain.errors import (
    AlreadyRegisteredError,
    CompetitionNotFoundError,
)
from swing_showcase.domain.registrations import RegistrationStatus
from swing_showcase.services.local_collections import (
    COMPETITIONS_KEY,
    REGISTRATIONS_KEY,
    LocalCompetitionCollection,
    LocalNotificationCollection,
)
from swing_showcase.services.local_store import InMemoryKeyValueStore, LocalStore


def test_first_load_seeds_default_competitions(store) -> None:
    collection = LocalCompetitionCollection(store)

    assert [comp.id for comp in collection.active()] == ["comp_1", "comp_2", "comp_3"]
    assert collection.coming_soon() == []
    assert len(store.read_json(COMPETITIONS_KEY)) == 3
    assert store.read_json(REGISTRATIONS_KEY) == []


def test_register_twice_yields_one_registration(store) -> None:
    collection = LocalCompetitionCollection(store)

    collection.register("model-1", "comp_1", "Ana")
    with pytest.raises(AlreadyRegisteredError):
        collection.register("model-1", "comp_1", "Ana")

    active = [
        reg
        for reg in collection.registrations_for("model-1")
        if reg.status == RegistrationStatus.ACTIVE
    ]
    assert len(active) == 1
    assert collection.is_registered("model-1", "comp_1") is True


def test_register_unknown_competition(store) -> None:
    collection = LocalCompetitionCollection(store)

    with pytest.raises(CompetitionNotFoundError):
        collection.register("model-1", "comp_404")


def test_withdraw_allows_registering_again(store) -> None:
    collection = LocalCompetitionCollection(store)
    collection.register("model-1", "comp_1")

    collection.withdraw("model-1", "comp_1")
    assert collection.is_registered("model-1", "comp_1") is False
    assert collection.participants("comp_1") == []

    collection.register("model-1", "comp_1")
    assert len(collection.participants("comp_1")) == 1


def test_rankings_sorted_by_votes(store) -> None:
    collection = LocalCompetitionCollection(store)
    collection.register("model-1", "comp_2")
    collection.register("model-2", "comp_2")

    collection.update_model_stats("comp_2", "model-1", votes=3, ranking=2)
    collection.update_model_stats("comp_2", "model-2", votes=9, ranking=1)

    assert [reg.model_id for reg in collection.rankings("comp_2")] == [
        "model-2",
        "model-1",
    ]


def test_collections_sharing_a_store_stay_in_sync(store) -> None:
    first = LocalCompetitionCollection(store)
    second = LocalCompetitionCollection(store)

    first.register("model-1", "comp_3")

    assert second.is_registered("model-1", "comp_3") is True


def test_closed_collection_stops_syncing(store) -> None:
    first = LocalCompetitionCollection(store)
    second = LocalCompetitionCollection(store)
    second.close()

    first.register("model-1", "comp_3")

    assert second.is_registered("model-1", "comp_3") is False


def test_corrupt_storage_falls_back_to_defaults() -> None:
    backend = InMemoryKeyValueStore(items={COMPETITIONS_KEY: "{not json"})
    collection = LocalCompetitionCollection(LocalStore(backend))

    assert len(collection.active()) == 3


def test_failing_listener_does_not_block_others(store) -> None:
    seen: list[str] = []

    def broken(_event) -> None:  # type: ignore[no-untyped-def]
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda event: seen.append(event.key))

    store.write_json("key", {"value": 1})

    assert seen == ["key"]


def test_notification_collection_read_state(store) -> None:
    notifications = LocalNotificationCollection(store)
    first = notifications.add("user-1", "vote_received", "New vote", "You got a vote")
    notifications.add("user-1", "contest_joined", "Joined", "Good luck")
    notifications.add("user-2", "vote_received", "New vote", "You got a vote")

    assert notifications.unread_count("user-1") == 2

    notifications.mark_read("user-1", str(first["id"]))
    assert notifications.unread_count("user-1") == 1

    notifications.mark_all_read("user-1")
    assert notifications.unread_count("user-1") == 0
    assert notifications.unread_count("user-2") == 1
    assert len(notifications.for_user("user-1")) == 2


def test_unreadable_cached_records_are_dropped(store) -> None:
    valid = {"id": "c3", "title": "Fitness", "status": "active"}
    store.write_json(
        COMPETITIONS_KEY,
        [
            {"id": "c1", "title": "x", "status": "coming-soon"},
            {"title": "no id", "status": "active"},
            valid,
        ],
    )
    store.write_json(
        REGISTRATIONS_KEY,
        [
            {"competitionId": "c3", "modelId": "model-1"},
            {"id": "reg_1", "competitionId": "c3", "modelId": "model-2"},
        ],
    )

    collection = LocalCompetitionCollection(store)

    assert [comp.id for comp in collection.competitions] == ["c3"]
    assert [reg.id for reg in collection.registrations] == ["reg_1"]

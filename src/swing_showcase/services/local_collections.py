"""Competitions, registrations and notifications cached in local storage."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import TypeVar
from uuid import uuid4

from swing_showcase.domain.competitions import CompetitionStatus
from swing_showcase.domain.errors import (
    AlreadyRegisteredError,
    CompetitionNotFoundError,
)
from swing_showcase.domain.registrations import (
    ListedCompetition,
    ModelRegistration,
    RegistrationStatus,
)
from swing_showcase.services.local_store import LocalStore, StorageEvent

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

COMPETITIONS_KEY = "competitions"
REGISTRATIONS_KEY = "modelRegistrations"
NOTIFICATIONS_KEY = "notifications"

DEFAULT_COMPETITIONS: tuple[ListedCompetition, ...] = (
    ListedCompetition(
        id="comp_1",
        title="Summer Beauty Contest",
        description="Show off your summer style and win amazing prizes!",
        prize="$5,000",
        end_date="2024-08-15",
        participants=156,
        status=CompetitionStatus.ACTIVE,
        cover_image="/src/assets/hot-girl-summer.jpg",
        category="Beauty",
    ),
    ListedCompetition(
        id="comp_2",
        title="Fitness Model Challenge",
        description="Celebrate health and fitness with our fitness model competition",
        prize="$3,500",
        end_date="2024-09-01",
        participants=89,
        status=CompetitionStatus.ACTIVE,
        cover_image="/src/assets/workout-warrior.jpg",
        category="Fitness",
    ),
    ListedCompetition(
        id="comp_3",
        title="Big Game Competition",
        description="The ultimate modeling competition with massive prizes",
        prize="$10,000",
        end_date="2024-10-15",
        participants=234,
        status=CompetitionStatus.ACTIVE,
        cover_image="/src/assets/big-game-competition.jpg",
        category="Premium",
    ),
)


@dataclass
class LocalCompetitionCollection:
    """Competition listings and registrations for a single client.

    The in-memory lists are refreshed whenever the store publishes a change to
    their key, so several collections sharing one store stay in sync.
    """

    store: LocalStore
    competitions: list[ListedCompetition] = field(default_factory=list)
    registrations: list[ModelRegistration] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._load()
        self._unsubscribe = self.store.subscribe(self._on_storage_event)

    def close(self) -> None:
        """Stop listening for storage changes."""
        self._unsubscribe()

    def active(self) -> list[ListedCompetition]:
        return self._with_status(CompetitionStatus.ACTIVE)

    def coming_soon(self) -> list[ListedCompetition]:
        return self._with_status(CompetitionStatus.INACTIVE)

    def completed(self) -> list[ListedCompetition]:
        return self._with_status(CompetitionStatus.COMPLETED)

    def registrations_for(self, model_id: str) -> list[ModelRegistration]:
        return [reg for reg in self.registrations if reg.model_id == model_id]

    def is_registered(self, model_id: str, competition_id: str) -> bool:
        """Return True when an active registration exists for the pair."""
        return any(
            reg.model_id == model_id
            and reg.competition_id == competition_id
            and reg.status == RegistrationStatus.ACTIVE
            for reg in self.registrations
        )

    def register(
        self, model_id: str, competition_id: str, model_name: str = "User"
    ) -> ModelRegistration:
        """Append an active registration unless one already exists."""
        if not any(comp.id == competition_id for comp in self.competitions):
            raise CompetitionNotFoundError()
        if self.is_registered(model_id, competition_id):
            raise AlreadyRegisteredError()
        registration = ModelRegistration(
            id=f"reg_{uuid4().hex}",
            competition_id=competition_id,
            model_id=model_id,
            model_name=model_name,
            registration_date=datetime.now(tz=UTC).isoformat(),
        )
        self._save_registrations([*self.registrations, registration])
        _logger.info(
            "Registered model %s for competition %s", model_id, competition_id
        )
        return registration

    def withdraw(self, model_id: str, competition_id: str) -> None:
        """Mark the model's registrations for the competition as withdrawn."""
        self._save_registrations(
            [
                replace(reg, status=RegistrationStatus.WITHDRAWN)
                if reg.model_id == model_id and reg.competition_id == competition_id
                else reg
                for reg in self.registrations
            ]
        )

    def update_model_stats(
        self, competition_id: str, model_id: str, votes: int, ranking: int
    ) -> None:
        """Overwrite the vote count and ranking of the matching registration."""
        self._save_registrations(
            [
                replace(reg, votes=votes, ranking=ranking)
                if reg.model_id == model_id and reg.competition_id == competition_id
                else reg
                for reg in self.registrations
            ]
        )

    def participants(self, competition_id: str) -> list[ModelRegistration]:
        return [
            reg
            for reg in self.registrations
            if reg.competition_id == competition_id
            and reg.status == RegistrationStatus.ACTIVE
        ]

    def rankings(self, competition_id: str) -> list[ModelRegistration]:
        """Return active participants ordered by votes, highest first."""
        return sorted(
            self.participants(competition_id), key=lambda reg: reg.votes, reverse=True
        )

    def _with_status(self, status: CompetitionStatus) -> list[ListedCompetition]:
        return [comp for comp in self.competitions if comp.status == status]

    def _load(self) -> None:
        stored = self.store.read_json(COMPETITIONS_KEY)
        if isinstance(stored, list):
            self.competitions = _parse_competitions(stored)
        else:
            self.competitions = list(DEFAULT_COMPETITIONS)
            self.store.write_json(
                COMPETITIONS_KEY, [comp.to_dict() for comp in self.competitions]
            )
        registrations = self.store.read_json(REGISTRATIONS_KEY)
        if isinstance(registrations, list):
            self.registrations = _parse_registrations(registrations)
        else:
            self.registrations = []
            self.store.write_json(REGISTRATIONS_KEY, [])

    def _save_registrations(self, registrations: list[ModelRegistration]) -> None:
        self.registrations = registrations
        self.store.write_json(
            REGISTRATIONS_KEY, [reg.to_dict() for reg in registrations]
        )

    def _on_storage_event(self, event: StorageEvent) -> None:
        if event.key == COMPETITIONS_KEY:
            self.competitions = _parse_competitions(
                self.store.read_json(COMPETITIONS_KEY, [])
            )
        elif event.key == REGISTRATIONS_KEY:
            self.registrations = _parse_registrations(
                self.store.read_json(REGISTRATIONS_KEY, [])
            )


@dataclass
class LocalNotificationCollection:
    """Notifications cached under a single storage key."""

    store: LocalStore

    def for_user(self, user_id: str) -> list[dict[str, object]]:
        return [item for item in self._items() if item.get("userId") == user_id]

    def add(
        self, user_id: str, type_: str, title: str, message: str
    ) -> dict[str, object]:
        """Append an unread notification."""
        notification: dict[str, object] = {
            "id": f"notif_{uuid4().hex}",
            "userId": user_id,
            "type": type_,
            "title": title,
            "message": message,
            "isRead": False,
            "createdAt": datetime.now(tz=UTC).isoformat(),
        }
        self.store.write_json(NOTIFICATIONS_KEY, [*self._items(), notification])
        return notification

    def mark_read(self, user_id: str, notification_id: str) -> None:
        self._mark(
            lambda item: item.get("id") == notification_id
            and item.get("userId") == user_id
        )

    def mark_all_read(self, user_id: str) -> None:
        self._mark(lambda item: item.get("userId") == user_id)

    def unread_count(self, user_id: str) -> int:
        return sum(1 for item in self.for_user(user_id) if not item.get("isRead"))

    def _mark(self, matches) -> None:  # type: ignore[no-untyped-def]
        self.store.write_json(
            NOTIFICATIONS_KEY,
            [
                {**item, "isRead": True} if matches(item) else item
                for item in self._items()
            ],
        )

    def _items(self) -> list[dict[str, object]]:
        stored = self.store.read_json(NOTIFICATIONS_KEY, [])
        if not isinstance(stored, list):
            return []
        return [item for item in stored if isinstance(item, dict)]


def _parse_competitions(raw: object) -> list[ListedCompetition]:
    return _parse_records(raw, ListedCompetition.from_dict, "competition")


def _parse_registrations(raw: object) -> list[ModelRegistration]:
    return _parse_records(raw, ModelRegistration.from_dict, "registration")


def _parse_records(
    raw: object, parse: Callable[[dict[str, object]], RecordT], kind: str
) -> list[RecordT]:
    """Parse stored records, dropping any that cannot be read."""
    if not isinstance(raw, list):
        return []
    records: list[RecordT] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            records.append(parse(item))
        except (KeyError, TypeError, ValueError):
            _logger.warning("Dropping unreadable %s record: %s", kind, item)
    return records

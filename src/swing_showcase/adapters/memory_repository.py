"""In-memory repositories used by default and in tests."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from swing_showcase.domain.models import UserRecord

EntityT = TypeVar("EntityT")


@dataclass
class InMemoryRepository(Generic[EntityT]):
    """Dictionary-backed repository; data is lost on restart."""

    items: dict[str, EntityT] = field(default_factory=dict)

    def find_by_id(self, entity_id: str) -> EntityT | None:
        return self.items.get(entity_id)

    def find_many(
        self, predicate: Callable[[EntityT], bool] | None = None
    ) -> list[EntityT]:
        if predicate is None:
            return list(self.items.values())
        return [item for item in self.items.values() if predicate(item)]

    def insert(self, entity: EntityT) -> EntityT:
        entity_id = entity.id  # type: ignore[attr-defined]
        if entity_id in self.items:
            raise KeyError(f"Duplicate id: {entity_id}")
        self.items[entity_id] = entity
        return entity

    def update(self, entity: EntityT) -> EntityT:
        entity_id = entity.id  # type: ignore[attr-defined]
        if entity_id not in self.items:
            raise KeyError(f"Unknown id: {entity_id}")
        self.items[entity_id] = entity
        return entity

    def delete(self, entity_id: str) -> bool:
        return self.items.pop(entity_id, None) is not None


@dataclass
class InMemoryUserRepository(InMemoryRepository[UserRecord]):
    """In-memory user repository with email lookup."""

    def find_by_email(self, email: str) -> UserRecord | None:
        for user in self.items.values():
            if user.email == email:
                return user
        return None

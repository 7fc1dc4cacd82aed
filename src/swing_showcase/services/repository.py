"""Generic persistence interface shared by every entity."""

from collections.abc import Callable
from typing import Protocol, TypeVar

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Persistence interface keyed by string ids."""

    def find_by_id(self, entity_id: str) -> EntityT | None:
        """Return the entity with the given id, if present."""

    def find_many(
        self, predicate: Callable[[EntityT], bool] | None = None
    ) -> list[EntityT]:
        """Return entities matching the predicate in insertion order."""

    def insert(self, entity: EntityT) -> EntityT:
        """Persist a new entity and return it."""

    def update(self, entity: EntityT) -> EntityT:
        """Replace an existing entity and return it."""

    def delete(self, entity_id: str) -> bool:
        """Delete an entity, returning True when something was removed."""

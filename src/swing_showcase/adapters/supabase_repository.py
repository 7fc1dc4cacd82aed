"""Base class for Supabase-backed repositories."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Generic, TypeVar

from supabase import Client

EntityT = TypeVar("EntityT")


@dataclass
class SupabaseRepository(ABC, Generic[EntityT]):
    """Maps frozen domain records onto a single Supabase table."""

    client: Client

    table_name: ClassVar[str]

    @abstractmethod
    def to_row(self, entity: EntityT) -> dict[str, object]:
        """Serialize an entity into a table row."""

    @abstractmethod
    def from_row(self, row: dict[str, object]) -> EntityT:
        """Build an entity from a table row."""

    def find_by_id(self, entity_id: str) -> EntityT | None:
        """Return the row with the given id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", entity_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return self.from_row(response.data[0])
        return None

    def find_many(
        self, predicate: Callable[[EntityT], bool] | None = None
    ) -> list[EntityT]:
        """Return all rows, filtered client-side by the predicate."""
        response = self.client.table(self.table_name).select("*").execute()
        entities = [self.from_row(row) for row in response.data or []]
        if predicate is None:
            return entities
        return [entity for entity in entities if predicate(entity)]

    def insert(self, entity: EntityT) -> EntityT:
        """Insert a row and return the stored entity."""
        response = (
            self.client.table(self.table_name).insert(self.to_row(entity)).execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to insert into {self.table_name}")
        return self.from_row(response.data[0])

    def update(self, entity: EntityT) -> EntityT:
        """Overwrite a row by id and return the entity."""
        row = self.to_row(entity)
        response = (
            self.client.table(self.table_name)
            .update(row)
            .eq("id", row["id"])
            .execute()
        )
        if response.data:
            return self.from_row(response.data[0])
        return entity

    def delete(self, entity_id: str) -> bool:
        """Delete a row by id."""
        response = (
            self.client.table(self.table_name).delete().eq("id", entity_id).execute()
        )
        return bool(response.data)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO timestamp column."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None

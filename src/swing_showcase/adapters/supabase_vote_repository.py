"""Supabase-backed vote repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from swing_showcase.adapters.supabase_repository import (
    SupabaseRepository,
    parse_timestamp,
)
from swing_showcase.domain.votes import Vote


@dataclass
class SupabaseVoteRepository(SupabaseRepository[Vote]):
    """Supabase implementation for the append-only vote log."""

    table_name = "votes"

    def to_row(self, entity: Vote) -> dict[str, object]:
        return {
            "id": entity.id,
            "model_id": entity.model_id,
            "voter_id": entity.voter_id,
            "is_premium": entity.is_premium,
            "competition_id": entity.competition_id,
            "timestamp": entity.timestamp.isoformat(),
        }

    def from_row(self, row: dict[str, object]) -> Vote:
        return Vote(
            id=str(row["id"]),
            model_id=str(row["model_id"]),
            voter_id=row.get("voter_id"),
            is_premium=bool(row.get("is_premium", False)),
            competition_id=row.get("competition_id"),
            timestamp=parse_timestamp(row.get("timestamp")) or datetime.now(tz=UTC),
        )

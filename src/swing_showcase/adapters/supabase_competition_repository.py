"""Supabase-backed competition repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from swing_showcase.adapters.supabase_repository import (
    SupabaseRepository,
    parse_timestamp,
)
from swing_showcase.domain.competitions import Competition, CompetitionStatus


@dataclass
class SupabaseCompetitionRepository(SupabaseRepository[Competition]):
    """Supabase implementation for competitions."""

    table_name = "competitions"

    def to_row(self, entity: Competition) -> dict[str, object]:
        return {
            "id": entity.id,
            "title": entity.title,
            "description": entity.description,
            "prize": entity.prize,
            "status": entity.status.value,
            "end_date": entity.end_date.isoformat(),
            "participants": list(entity.participants),
            "cover_image": entity.cover_image,
            "category": entity.category,
        }

    def from_row(self, row: dict[str, object]) -> Competition:
        return Competition(
            id=str(row["id"]),
            title=str(row.get("title") or ""),
            description=str(row.get("description") or ""),
            prize=row.get("prize"),
            status=CompetitionStatus(row.get("status", "inactive")),
            end_date=parse_timestamp(row.get("end_date")) or datetime.now(tz=UTC),
            participants=tuple(str(item) for item in row.get("participants") or []),
            cover_image=row.get("cover_image"),
            category=row.get("category"),
        )

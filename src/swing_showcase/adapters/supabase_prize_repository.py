"""Supabase-backed prize repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from swing_showcase.adapters.supabase_repository import (
    SupabaseRepository,
    parse_timestamp,
)
from swing_showcase.domain.prizes import Prize, PrizeStatus


@dataclass
class SupabasePrizeRepository(SupabaseRepository[Prize]):
    """Supabase implementation for prizes."""

    table_name = "prizes"

    def to_row(self, entity: Prize) -> dict[str, object]:
        return {
            "id": entity.id,
            "title": entity.title,
            "value": entity.value,
            "status": entity.status.value,
            "start_date": entity.start_date.isoformat(),
            "competition_id": entity.competition_id,
            "winner_id": entity.winner_id,
        }

    def from_row(self, row: dict[str, object]) -> Prize:
        return Prize(
            id=str(row["id"]),
            title=str(row.get("title") or ""),
            value=float(row.get("value") or 0.0),
            status=PrizeStatus(row.get("status", "upcoming")),
            start_date=parse_timestamp(row.get("start_date")) or datetime.now(tz=UTC),
            competition_id=row.get("competition_id"),
            winner_id=row.get("winner_id"),
        )

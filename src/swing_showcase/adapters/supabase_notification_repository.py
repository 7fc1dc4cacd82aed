"""Supabase-backed notification repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from swing_showcase.adapters.supabase_repository import (
    SupabaseRepository,
    parse_timestamp,
)
from swing_showcase.domain.notifications import Notification


@dataclass
class SupabaseNotificationRepository(SupabaseRepository[Notification]):
    """Supabase implementation for notifications."""

    table_name = "notifications"

    def to_row(self, entity: Notification) -> dict[str, object]:
        return {
            "id": entity.id,
            "user_id": entity.user_id,
            "type": entity.type,
            "title": entity.title,
            "message": entity.message,
            "is_read": entity.is_read,
            "created_at": entity.created_at.isoformat(),
        }

    def from_row(self, row: dict[str, object]) -> Notification:
        return Notification(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            type=str(row.get("type") or "system"),
            title=str(row.get("title") or ""),
            message=str(row.get("message") or ""),
            is_read=bool(row.get("is_read", False)),
            created_at=parse_timestamp(row.get("created_at")) or datetime.now(tz=UTC),
        )

"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from swing_showcase.adapters.supabase_repository import (
    SupabaseRepository,
    parse_timestamp,
)
from swing_showcase.domain.models import UserRecord


@dataclass
class SupabaseUserRepository(SupabaseRepository[UserRecord]):
    """Supabase implementation for user persistence."""

    table_name = "users"

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given email, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return self.from_row(response.data[0])
        return None

    def to_row(self, entity: UserRecord) -> dict[str, object]:
        return {
            "id": entity.id,
            "email": entity.email,
            "name": entity.name,
            "picture": entity.picture,
            "google_id": entity.google_id,
            "password_hash": entity.password_hash,
            "is_verified": entity.is_verified,
            "settings_json": entity.settings,
            "profile_json": entity.profile,
            "created_at": entity.created_at.isoformat(),
            "updated_at": entity.updated_at.isoformat(),
        }

    def from_row(self, row: dict[str, object]) -> UserRecord:
        now = datetime.now(tz=UTC)
        return UserRecord(
            id=str(row["id"]),
            email=str(row["email"]),
            name=str(row.get("name") or ""),
            picture=row.get("picture"),
            google_id=row.get("google_id"),
            password_hash=row.get("password_hash"),
            is_verified=bool(row.get("is_verified", False)),
            settings=dict(row.get("settings_json") or {}),
            profile=dict(row.get("profile_json") or {}),
            created_at=parse_timestamp(row.get("created_at")) or now,
            updated_at=parse_timestamp(row.get("updated_at")) or now,
        )

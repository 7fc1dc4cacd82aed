"""Notification service."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import uuid4

from swing_showcase.domain.notifications import Notification
from swing_showcase.services.repository import Repository

NotificationRepository = Repository[Notification]


@dataclass
class NotificationService:
    """Creates notifications and tracks their read state."""

    repository: NotificationRepository

    def notify(
        self, user_id: str, type_: str, title: str, message: str
    ) -> Notification:
        """Deliver a new unread notification to a user."""
        return self.repository.insert(
            Notification(
                id=str(uuid4()),
                user_id=user_id,
                type=type_,
                title=title,
                message=message,
                created_at=datetime.now(tz=UTC),
            )
        )

    def list_for_user(self, user_id: str) -> list[Notification]:
        """Return a user's notifications, newest first."""
        notifications = self.repository.find_many(lambda item: item.user_id == user_id)
        return sorted(notifications, key=lambda item: item.created_at, reverse=True)

    def mark_read(self, user_id: str, notification_id: str) -> None:
        """Mark one notification as read; unknown ids are ignored."""
        notification = self.repository.find_by_id(notification_id)
        if notification is None or notification.user_id != user_id:
            return
        if not notification.is_read:
            self.repository.update(replace(notification, is_read=True))

    def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of the user as read."""
        unread = self.repository.find_many(
            lambda item: item.user_id == user_id and not item.is_read
        )
        for notification in unread:
            self.repository.update(replace(notification, is_read=True))
        return len(unread)

"""Domain models for notifications."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    """A message delivered to a single user."""

    id: str
    user_id: str
    type: str
    title: str
    message: str
    created_at: datetime
    is_read: bool = False

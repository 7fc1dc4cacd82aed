"""Domain models for uploaded images."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UploadedImage:
    """Metadata of an image stored on disk."""

    id: str
    filename: str
    original_name: str
    path: str
    size: int
    uploaded_at: datetime

"""Profile image uploads."""

import logging
import random
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePath
from typing import Protocol
from uuid import uuid4

from swing_showcase.domain.errors import UploadRejectedError
from swing_showcase.domain.uploads import UploadedImage
from swing_showcase.services.repository import Repository

_logger = logging.getLogger(__name__)

_ALLOWED_TYPES = re.compile(r"jpeg|jpg|png|gif")

UploadedImageRepository = Repository[UploadedImage]


class ImageStorage(Protocol):
    """Interface for storing image bytes."""

    def save(self, filename: str, content: bytes) -> str:
        """Store the content and return its path."""

    def delete(self, path: str) -> None:
        """Remove stored content; missing files are ignored."""


@dataclass(frozen=True)
class IncomingImage:
    """An uploaded file as received from the client."""

    filename: str
    content_type: str
    content: bytes


@dataclass
class ImageUploadService:
    """Validates, stores and forgets profile and voting images."""

    storage: ImageStorage
    repository: UploadedImageRepository
    max_bytes: int
    max_files: int
    field_name: str = "images"

    def validate(self, image: IncomingImage) -> None:
        """Reject files that are too large or not an image."""
        extension = PurePath(image.filename).suffix.lower()
        if not (
            _ALLOWED_TYPES.search(extension)
            and _ALLOWED_TYPES.search(image.content_type.lower())
        ):
            raise UploadRejectedError("Only image files are allowed!")
        if len(image.content) > self.max_bytes:
            raise UploadRejectedError(
                f"File too large: {image.filename}", code="FILE_TOO_LARGE"
            )

    def upload(self, images: list[IncomingImage]) -> list[UploadedImage]:
        """Validate every file first, then store them all."""
        if not images:
            raise UploadRejectedError("No files uploaded", code="NO_FILES")
        if len(images) > self.max_files:
            raise UploadRejectedError(
                f"At most {self.max_files} files per request", code="TOO_MANY_FILES"
            )
        for image in images:
            self.validate(image)

        stored = []
        for image in images:
            filename = self._unique_filename(image.filename)
            path = self.storage.save(filename, image.content)
            stored.append(
                self.repository.insert(
                    UploadedImage(
                        id=str(uuid4()),
                        filename=filename,
                        original_name=image.filename,
                        path=path,
                        size=len(image.content),
                        uploaded_at=datetime.now(tz=UTC),
                    )
                )
            )
        _logger.info("Stored %s uploaded images", len(stored))
        return stored

    def delete(self, image_id: str) -> bool:
        """Delete an uploaded image, returning False when it is unknown."""
        image = self.repository.find_by_id(image_id)
        if image is None:
            return False
        self.storage.delete(image.path)
        return self.repository.delete(image_id)

    def _unique_filename(self, original: str) -> str:
        extension = PurePath(original).suffix.lower()
        millis = int(datetime.now(tz=UTC).timestamp() * 1000)
        suffix = random.randint(0, 999_999_999)  # noqa: S311
        return f"{self.field_name}-{millis}-{suffix}{extension}"

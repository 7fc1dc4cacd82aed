"""Filesystem-backed image storage."""

from dataclasses import dataclass
from pathlib import Path

from swing_showcase.services.uploads import ImageStorage


@dataclass
class LocalImageStorage(ImageStorage):
    """Writes images into a local directory."""

    root: Path

    def save(self, filename: str, content: bytes) -> str:
        """Write the file and return its path."""
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.root / filename
        path.write_bytes(content)
        return str(path)

    def delete(self, path: str) -> None:
        """Remove the file if it exists."""
        Path(path).unlink(missing_ok=True)

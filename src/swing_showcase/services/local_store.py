"""Key-value storage standing in for browser local storage."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageEvent:
    """Invalidation message published after a key changes.

    ``new_value`` is the raw stored string, or None when the key was removed.
    """

    key: str
    new_value: str | None


StorageListener = Callable[[StorageEvent], None]


class KeyValueStore(Protocol):
    """String key-value storage."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string, if any."""

    def set_item(self, key: str, value: str) -> None:
        """Store a string under the key."""

    def remove_item(self, key: str) -> None:
        """Remove the key if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class LocalStore:
    """JSON values over a KeyValueStore with change broadcasting.

    Writes are whole-key replacements: concurrent writers to the same key
    silently overwrite each other.
    """

    backend: KeyValueStore = field(default_factory=InMemoryKeyValueStore)
    _listeners: list[StorageListener] = field(default_factory=list)

    def read_json(self, key: str, default: object = None) -> object:
        """Return the decoded value, or ``default`` when missing or corrupt."""
        raw = self.backend.get_item(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            _logger.error("Discarding unreadable value for key %s", key)
            return default

    def write_json(self, key: str, value: object) -> None:
        """Store a value and notify subscribers."""
        raw = json.dumps(value)
        self.backend.set_item(key, raw)
        self._publish(StorageEvent(key=key, new_value=raw))

    def read_flag(self, key: str) -> bool:
        return self.backend.get_item(key) == "true"

    def write_flag(self, key: str) -> None:
        self.backend.set_item(key, "true")
        self._publish(StorageEvent(key=key, new_value="true"))

    def remove(self, key: str) -> None:
        """Remove a key and notify subscribers."""
        self.backend.remove_item(key)
        self._publish(StorageEvent(key=key, new_value=None))

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a listener and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event: StorageEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                _logger.exception("Storage listener failed for key %s", event.key)

"""
Key-value storage backends for the ledger snapshot.

Values are opaque strings addressed by key. Reads of a missing or
unreadable store return None; writes are best-effort and only log
on failure.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from weight_ledger.utils.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String key-value store."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""


class MemoryStore(KeyValueStore):
    """Process-local store, mainly for tests."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object file.

    The file maps keys to string values. Every write rewrites the whole
    file through a temporary sibling that is then moved into place.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize file store.

        Args:
            path: Location of the JSON file. Created on first write.

        Raises:
            StorageError: If the path exists but is a directory.
        """
        self.path = Path(path)
        if self.path.is_dir():
            raise StorageError(f"Storage path is a directory: {self.path}")

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.path}: root is not an object")
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            tmp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Could not write store {self.path}: {e}")

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

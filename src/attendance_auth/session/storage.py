from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from ..core.constants import USER_STORAGE_KEY
from ..core.exceptions import ValidationError
from ..users.mapping import user_from_storage, user_to_storage
from ..users.model import UserRecord

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Persistent key/value storage for string values (browser-like local storage)."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(Storage):
    def __init__(self):
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(Storage):
    """Storage backed by one JSON object on disk.

    Every write replaces the whole file through a temp file + rename, so a
    single-key update is atomic.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read_all(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Session storage at %s is unreadable, starting empty", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=self._path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)


def load_stored_user(storage: Storage) -> Optional[UserRecord]:
    """Return the cached user, dropping the entry if it can't be decoded."""
    raw = storage.get_item(USER_STORAGE_KEY)
    if not raw:
        return None
    try:
        return user_from_storage(json.loads(raw))
    except (ValueError, TypeError, AttributeError, ValidationError):
        # Invalid stored data
        logger.warning("Discarding invalid cached user entry")
        storage.remove_item(USER_STORAGE_KEY)
        return None


def store_user(storage: Storage, user: Optional[UserRecord]) -> None:
    if user:
        storage.set_item(USER_STORAGE_KEY, json.dumps(user_to_storage(user)))
    else:
        storage.remove_item(USER_STORAGE_KEY)

# -*- coding: utf-8 -*-
"""Persistent key/value storage for search-session state.

Every value is stored as JSON text. Two durable backends exist, mirroring
the two places the browser clients keep their state:

- ``SqlPersistentStore``: one row per key in the ``kv_store`` table
  (page-scoped, like ``localStorage``).
- ``JsonFilePersistentStore``: one JSON document holding every key
  (extension-scoped, like ``chrome.storage.local``).

The backend is chosen once by ``create_store`` from settings. Callers only
ever see ``get``/``set``/``delete`` and never handle storage errors: a
missing or malformed value reads as ``None`` and a failed write returns
``False``.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from factsy.core.config import Settings, get_settings
from factsy.models.db_models import KeyValueDB

logger = logging.getLogger(__name__)


class StorageKey:
    """Concrete storage key names."""

    HISTORY = "factsy_search_history"
    TRENDING = "factsy_trending"
    TRENDING_DATE = "factsy_trending_date"
    BOOKMARKS = "factsy_bookmarks"
    SEARCH_STATS = "factsy_search_stats"
    SEARCH_CATEGORIES = "factsy_search_categories"
    FACTSY_URL = "factsy_url"
    DARK_MODE = "factsy_dark_mode"


class PersistentStore(ABC):
    """Key/value store with JSON (de)serialization."""

    def get(self, key: str) -> Any | None:
        """Read and decode a value.

        Args:
            key: Storage key

        Returns:
            Decoded JSON value, or None if absent or malformed
        """
        try:
            raw = self._read(key)
        except (OSError, SQLAlchemyError) as e:
            logger.warning(f"Failed to read {key}: {e}")
            return None

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed JSON stored at {key}")
            return None

    def set(self, key: str, value: Any) -> bool:
        """Encode and write a value.

        Args:
            key: Storage key
            value: JSON-serializable value

        Returns:
            True if the value was written
        """
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.warning(f"Value for {key} is not JSON serializable: {e}")
            return False

        try:
            self._write(key, raw)
        except (OSError, SQLAlchemyError) as e:
            logger.warning(f"Failed to write {key}: {e}")
            return False
        return True

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key existed and was removed
        """
        try:
            return self._delete(key)
        except (OSError, SQLAlchemyError) as e:
            logger.warning(f"Failed to delete {key}: {e}")
            return False

    @abstractmethod
    def _read(self, key: str) -> str | None:
        """Return the raw JSON text stored at key, or None."""

    @abstractmethod
    def _write(self, key: str, raw: str) -> None:
        """Store raw JSON text at key."""

    @abstractmethod
    def _delete(self, key: str) -> bool:
        """Remove key, returning whether it existed."""


class MemoryPersistentStore(PersistentStore):
    """Dict-backed store. State is lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        """Initialize the store.

        Args:
            initial: Optional raw JSON text per key, for seeding tests
        """
        self._data: dict[str, str] = dict(initial or {})

    def _read(self, key: str) -> str | None:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def _delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None


class SqlPersistentStore(PersistentStore):
    """Store backed by the ``kv_store`` table."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize the store.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self._session_factory = session_factory

    def _read(self, key: str) -> str | None:
        with self._session_factory() as db:
            row = db.get(KeyValueDB, key)
            return row.value if row is not None else None

    def _write(self, key: str, raw: str) -> None:
        with self._session_factory() as db:
            row = db.get(KeyValueDB, key)
            if row is None:
                db.add(KeyValueDB(key=key, value=raw))
            else:
                row.value = raw
            db.commit()

    def _delete(self, key: str) -> bool:
        with self._session_factory() as db:
            count = db.query(KeyValueDB).filter(KeyValueDB.key == key).delete()
            db.commit()
            return count > 0


class JsonFilePersistentStore(PersistentStore):
    """Store backed by a single JSON document on disk.

    The document maps each key to its JSON text, so one malformed value
    does not hide the others.
    """

    def __init__(self, path: str | Path):
        """Initialize the store.

        Args:
            path: Location of the JSON document
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError:
            logger.warning(f"Ignoring malformed state file {self.path}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring unexpected state file contents in {self.path}")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def _read(self, key: str) -> str | None:
        with self._lock:
            return self._load().get(key)

    def _write(self, key: str, raw: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = raw
            self._save(data)

    def _delete(self, key: str) -> bool:
        with self._lock:
            data = self._load()
            if key not in data:
                return False
            del data[key]
            self._save(data)
            return True


def create_store(settings: Settings | None = None) -> PersistentStore:
    """Build the persistent store selected by configuration.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        PersistentStore for the configured backend

    Raises:
        ValueError: If the configured backend is unknown
    """
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "sql":
        from factsy.core.database import SessionLocal, init_db

        init_db()
        logger.info("Using SQL persistent store")
        return SqlPersistentStore(SessionLocal)
    elif backend == "json":
        logger.info(f"Using JSON file persistent store at {settings.storage_path}")
        return JsonFilePersistentStore(settings.storage_path)
    elif backend == "memory":
        logger.info("Using in-memory persistent store")
        return MemoryPersistentStore()

    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")

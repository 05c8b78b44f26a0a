# -*- coding: utf-8 -*-
"""Search category registry."""

from threading import Lock

from factsy.services.storage import PersistentStore, StorageKey


class CategoryRegistry:
    """Persisted set of category names used to tag history entries."""

    def __init__(self, store: PersistentStore):
        self._store = store
        self._lock = Lock()
        raw = store.get(StorageKey.SEARCH_CATEGORIES)
        names: list[str] = []
        if isinstance(raw, list):
            for item in raw:
                if isinstance(item, str) and item.strip() and item.strip() not in names:
                    names.append(item.strip())
        self._names = names

    def _persist(self) -> None:
        self._store.set(StorageKey.SEARCH_CATEGORIES, list(self._names))

    def add(self, name: str) -> bool:
        """Add a category.

        Returns:
            True if the category was new
        """
        name = (name or "").strip()
        if not name:
            return False
        with self._lock:
            if name in self._names:
                return False
            self._names.append(name)
            self._persist()
        return True

    def remove(self, name: str) -> bool:
        """Remove a category.

        Returns:
            True if the category existed
        """
        with self._lock:
            if name not in self._names:
                return False
            self._names.remove(name)
            self._persist()
        return True

    def names(self) -> list[str]:
        with self._lock:
            return list(self._names)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._names

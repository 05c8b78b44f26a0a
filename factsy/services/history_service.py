# -*- coding: utf-8 -*-
"""Search history management."""

import logging
from threading import Lock
from typing import Any

from factsy.core.clock import Clock
from factsy.models.search import HistoryEntry
from factsy.services.storage import PersistentStore, StorageKey

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


def normalize_history_item(item: Any) -> HistoryEntry | None:
    """Convert a stored history item to a HistoryEntry.

    The extension stores bare query strings; the web page stores objects
    with an optional category and timestamp.

    Args:
        item: A raw item read from storage

    Returns:
        HistoryEntry, or None if the item is unusable
    """
    if isinstance(item, str):
        return HistoryEntry(query=item) if item.strip() else None

    if isinstance(item, dict):
        query = item.get("query")
        if not isinstance(query, str) or not query.strip():
            return None
        category = item.get("category")
        timestamp = item.get("timestamp")
        return HistoryEntry(
            query=query,
            category=category if isinstance(category, str) and category else None,
            timestamp=timestamp if isinstance(timestamp, int) and not isinstance(timestamp, bool) else None,
        )

    return None


class HistoryManager:
    """Bounded, most-recent-first log of submitted queries.

    Queries are deduplicated case-insensitively; recording a query again
    moves it to the front with the new casing and category.
    """

    def __init__(
        self,
        store: PersistentStore,
        clock: Clock | None = None,
        trending=None,
        categories=None,
        limit: int = HISTORY_LIMIT,
    ):
        """Initialize the history manager and load stored history.

        Args:
            store: Persistent store
            clock: Time source for entry timestamps
            trending: TrendingAggregator notified of every recorded query
            categories: CategoryRegistry that learns recorded categories
            limit: Maximum number of entries kept
        """
        self._store = store
        self._clock = clock or Clock()
        self._trending = trending
        self._categories = categories
        self._limit = limit
        self._lock = Lock()
        self._entries: list[HistoryEntry] = self._load()

    def _load(self) -> list[HistoryEntry]:
        raw = self._store.get(StorageKey.HISTORY)
        if not isinstance(raw, list):
            return []

        entries: list[HistoryEntry] = []
        seen: set[str] = set()
        for item in raw:
            entry = normalize_history_item(item)
            if entry is None or entry.query.lower() in seen:
                continue
            seen.add(entry.query.lower())
            entries.append(entry)
        return entries[: self._limit]

    def _persist(self) -> None:
        self._store.set(
            StorageKey.HISTORY,
            [entry.model_dump() for entry in self._entries],
        )

    def record(self, query: str, category: str | None = None) -> HistoryEntry | None:
        """Record a submitted query.

        Args:
            query: The submitted query
            category: Optional category tag

        Returns:
            The new front entry, or None if the query was blank
        """
        if not query or not query.strip():
            return None

        category = category.strip() if category and category.strip() else None
        lowered = query.lower()
        entry = HistoryEntry(
            query=query,
            category=category,
            timestamp=self._clock.now_ms(),
        )

        with self._lock:
            remaining = [e for e in self._entries if e.query.lower() != lowered]
            self._entries = [entry] + remaining[: self._limit - 1]
            self._persist()
        logger.debug(f"Recorded history entry: {query!r} (category={category})")

        if self._trending is not None:
            self._trending.record(query)
        if self._categories is not None and category:
            self._categories.add(category)

        return entry

    def remove(self, query: str) -> bool:
        """Remove the entry matching query case-insensitively.

        Returns:
            True if an entry was removed
        """
        lowered = query.lower()
        with self._lock:
            remaining = [e for e in self._entries if e.query.lower() != lowered]
            if len(remaining) == len(self._entries):
                return False
            self._entries = remaining
            self._persist()
        return True

    def clear(self) -> None:
        """Remove every history entry."""
        with self._lock:
            self._entries = []
            self._persist()
        logger.info("Search history cleared")

    def entries(self) -> list[HistoryEntry]:
        """Get history, most recent first."""
        with self._lock:
            return list(self._entries)

    def by_category(self, category: str | None) -> list[HistoryEntry]:
        """Get entries tagged with a category.

        Args:
            category: Category to match; empty or None returns everything

        Returns:
            Matching entries, most recent first
        """
        if not category:
            return self.entries()
        with self._lock:
            return [e for e in self._entries if e.category == category]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

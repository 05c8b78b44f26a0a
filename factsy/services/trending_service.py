# -*- coding: utf-8 -*-
"""Daily trending-query leaderboard."""

import logging
from threading import Lock

from factsy.core.clock import Clock
from factsy.models.search import TrendingEntry
from factsy.services.storage import PersistentStore, StorageKey

logger = logging.getLogger(__name__)

TRENDING_LIMIT = 5


class TrendingAggregator:
    """Top queries submitted today.

    Counts are keyed on the exact query text (case-sensitive). The
    leaderboard starts over on the first query of a new calendar day.
    """

    def __init__(
        self,
        store: PersistentStore,
        clock: Clock | None = None,
        limit: int = TRENDING_LIMIT,
    ):
        self._store = store
        self._clock = clock or Clock()
        self._limit = limit
        self._lock = Lock()

    def _today(self) -> str:
        return self._clock.today().isoformat()

    def _load(self) -> list[TrendingEntry]:
        """Load today's leaderboard; anything from another day is discarded."""
        if self._store.get(StorageKey.TRENDING_DATE) != self._today():
            return []

        raw = self._store.get(StorageKey.TRENDING)
        if not isinstance(raw, list):
            return []

        entries = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            query = item.get("query")
            count = item.get("count")
            if isinstance(query, str) and query and isinstance(count, int) and count >= 1:
                entries.append(TrendingEntry(query=query, count=count))
        return entries

    def record(self, query: str) -> list[TrendingEntry]:
        """Count one submission of query.

        Args:
            query: The submitted query

        Returns:
            The updated leaderboard
        """
        if not query or not query.strip():
            return self.entries()

        # Load, increment and store must not interleave with another record
        with self._lock:
            entries = self._load()
            if not entries:
                logger.debug(f"Starting trending leaderboard for {self._today()}")

            for entry in entries:
                if entry.query == query:
                    entry.count += 1
                    break
            else:
                entries.append(TrendingEntry(query=query, count=1))

            # sorted() is stable: ties keep their previous order
            entries = sorted(entries, key=lambda e: e.count, reverse=True)[: self._limit]

            self._store.set(StorageKey.TRENDING, [e.model_dump() for e in entries])
            self._store.set(StorageKey.TRENDING_DATE, self._today())
        return entries

    def entries(self) -> list[TrendingEntry]:
        """Get today's leaderboard, highest count first."""
        with self._lock:
            return self._load()

    def date(self) -> str | None:
        """ISO date of the stored leaderboard, if any."""
        stored = self._store.get(StorageKey.TRENDING_DATE)
        return stored if isinstance(stored, str) else None

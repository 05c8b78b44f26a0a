# -*- coding: utf-8 -*-
"""Search analytics.

This module keeps running counters describing search activity. The average
result count is updated incrementally from the previous average and the
number of successful searches, never recomputed from a log.
"""

import logging
import math
from threading import Lock

from pydantic import ValidationError

from factsy.core.clock import Clock
from factsy.models.stats import SearchStats
from factsy.services.storage import PersistentStore, StorageKey

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class AnalyticsRecorder:
    """Recorder for search counters.

    A search is counted when it starts; only confirmed successes feed the
    success count and the average.

    Example:
        ```python
        analytics = AnalyticsRecorder(store)

        analytics.on_search_start()
        # ... call the fact-check provider ...
        analytics.on_search_success(result_count=4, elapsed_ms=180)

        stats = analytics.stats()
        ```
    """

    def __init__(self, store: PersistentStore, clock: Clock | None = None):
        """Initialize the recorder and load stored counters."""
        self._store = store
        self._clock = clock or Clock()
        self._lock = Lock()
        self._stats = self._load()

    def _load(self) -> SearchStats:
        raw = self._store.get(StorageKey.SEARCH_STATS)
        if not isinstance(raw, dict):
            return SearchStats()
        try:
            return SearchStats.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring malformed stored search stats")
            return SearchStats()

    def _persist(self) -> None:
        self._store.set(StorageKey.SEARCH_STATS, self._stats.model_dump(by_alias=True))

    def on_search_start(self) -> SearchStats:
        """Count a search and stamp its start time."""
        with self._lock:
            self._stats.total_searches += 1
            self._stats.last_search_time = self._clock.now_ms()
            self._persist()
            return self._stats.model_copy()

    def on_search_success(self, result_count: int, elapsed_ms: int) -> SearchStats:
        """Record a successful search.

        Args:
            result_count: Number of claims returned
            elapsed_ms: How long the search took in milliseconds
        """
        with self._lock:
            previous = self._stats.successful_searches
            successful = previous + 1
            self._stats.average_results = _round_half_up(
                (self._stats.average_results * previous + result_count) / successful
            )
            self._stats.successful_searches = successful
            self._stats.search_time = max(int(elapsed_ms), 0)
            self._persist()
            return self._stats.model_copy()

    def on_search_failure(self, error: Exception) -> SearchStats:
        """Note a failed search. Counters beyond the start are untouched."""
        logger.warning(f"Search failed: {error}")
        return self.stats()

    def stats(self) -> SearchStats:
        """Get a copy of the current counters."""
        with self._lock:
            return self._stats.model_copy()

    def reset(self) -> None:
        """Reset all counters."""
        with self._lock:
            self._stats = SearchStats()
            self._persist()

# -*- coding: utf-8 -*-
"""Search session: the state behind the Factsy search box.

A SearchSession owns history, trending, suggestions, bookmarks, analytics,
categories and preferences for one process, all writing through a single
persistent store. It also runs a search end to end:

1. the query is recorded in history (and trending),
2. analytics count the search,
3. the fact-check provider is called,
4. analytics record a success; failures only leave the start count,
5. the results become the session's current results unless a newer
   search was submitted in the meantime (last request wins).
"""

import logging
from threading import Lock

from factsy.core.clock import Clock
from factsy.core.config import Settings, get_settings
from factsy.models.claim import ClaimRecord
from factsy.models.search import (
    FilterResponse,
    KeyResponse,
    SearchFilter,
    SearchResponse,
    SearchStatus,
)
from factsy.services.analytics import AnalyticsRecorder
from factsy.services.bookmark_service import BookmarkRegistry
from factsy.services.category_service import CategoryRegistry
from factsy.services.debounce import Debouncer
from factsy.services.factcheck import FactCheckError, FactCheckService
from factsy.services.filter_service import apply_filter, unique_values
from factsy.services.history_service import HistoryManager
from factsy.services.preferences import PreferencesService
from factsy.services.scheduler import SchedulerService, get_scheduler
from factsy.services.storage import PersistentStore, create_store
from factsy.services.suggestion_service import SuggestionEngine
from factsy.services.trending_service import TrendingAggregator

logger = logging.getLogger(__name__)

SUGGESTION_JOB_ID = "factsy-suggestions"


class SearchSession:
    """Search-session state for one process."""

    def __init__(
        self,
        store: PersistentStore,
        provider: FactCheckService,
        scheduler: SchedulerService,
        clock: Clock | None = None,
        debounce_ms: int = 300,
        default_factsy_url: str = "https://your-factsy-app-url.com",
    ):
        """Build every component on top of one store.

        Args:
            store: Persistent store shared by all components
            provider: Fact-check provider
            scheduler: Scheduler running the suggestion debounce
            clock: Time source
            debounce_ms: Suggestion debounce delay in milliseconds
            default_factsy_url: Factsy URL used when none is stored
        """
        self.clock = clock or Clock()
        self.provider = provider

        self.trending = TrendingAggregator(store, self.clock)
        self.categories = CategoryRegistry(store)
        self.history = HistoryManager(
            store,
            self.clock,
            trending=self.trending,
            categories=self.categories,
        )
        self.suggestions = SuggestionEngine(
            self.history,
            self.trending,
            Debouncer(scheduler, SUGGESTION_JOB_ID, debounce_ms, self.clock),
        )
        self.bookmarks = BookmarkRegistry(store)
        self.analytics = AnalyticsRecorder(store, self.clock)
        self.preferences = PreferencesService(store, default_factsy_url)

        self._lock = Lock()
        self._sequence = 0
        self._query = ""
        self._results: list[ClaimRecord] = []

    # ========== Searching ==========

    def submit(self, query: str, category: str | None = None) -> SearchResponse:
        """Run a search for query.

        Args:
            query: Claim or headline text
            category: Optional history category

        Returns:
            SearchResponse with the results or the classified error
        """
        if not query or not query.strip():
            return SearchResponse(query=query or "", status=SearchStatus.SKIPPED)

        self.history.record(query, category)

        with self._lock:
            self._sequence += 1
            sequence = self._sequence

        self.analytics.on_search_start()
        started = self.clock.now_ms()

        try:
            results = self.provider.search(query)
        except FactCheckError as e:
            stats = self.analytics.on_search_failure(e)
            stale = self._settle(sequence, query, [])
            return SearchResponse(
                query=query,
                status=SearchStatus.ERROR,
                stale=stale,
                error=str(e),
                error_kind=e.kind,
                stats=stats,
            )

        stats = self.analytics.on_search_success(len(results), self.clock.now_ms() - started)
        stale = self._settle(sequence, query, results)
        if stale:
            logger.info(f"Ignoring results of superseded search {query!r}")

        return SearchResponse(
            query=query,
            status=SearchStatus.SUCCESS,
            results=results,
            total=len(results),
            stale=stale,
            stats=stats,
        )

    def _settle(self, sequence: int, query: str, results: list[ClaimRecord]) -> bool:
        """Publish results unless a newer search was issued.

        Returns:
            True if the search was superseded
        """
        with self._lock:
            if sequence != self._sequence:
                return True
            self._query = query
            self._results = list(results)
            return False

    @property
    def current_query(self) -> str:
        return self._query

    def current_results(self) -> list[ClaimRecord]:
        with self._lock:
            return list(self._results)

    def filtered_results(self, search_filter: SearchFilter) -> FilterResponse:
        """Filter the current results and list the available filter options."""
        results = self.current_results()
        filtered = apply_filter(results, search_filter)
        return FilterResponse(
            results=filtered,
            total=len(filtered),
            ratings=unique_values(results, "rating"),
            sources=unique_values(results, "source"),
        )

    # ========== Input ==========

    def key(self, key: str, category: str | None = None) -> KeyResponse:
        """Handle a key press, searching when Enter commits a query."""
        query = self.suggestions.on_key(key)
        search = self.submit(query, category) if query is not None else None
        return KeyResponse(state=self.suggestions.state(), search=search)

    def select_suggestion(self, index: int, category: str | None = None) -> KeyResponse:
        """Search for the suggestion picked with the pointer."""
        query = self.suggestions.select(index)
        search = self.submit(query, category) if query is not None else None
        return KeyResponse(state=self.suggestions.state(), search=search)


def build_session(
    settings: Settings | None = None,
    store: PersistentStore | None = None,
    provider: FactCheckService | None = None,
    scheduler: SchedulerService | None = None,
) -> SearchSession:
    """Build a session from settings, filling in default collaborators."""
    settings = settings or get_settings()
    scheduler = scheduler or get_scheduler()
    # Debounced jobs only run on a started scheduler
    scheduler.start()
    session = SearchSession(
        store=store or create_store(settings),
        provider=provider or FactCheckService(settings),
        scheduler=scheduler,
        debounce_ms=settings.suggestion_debounce_ms,
        default_factsy_url=settings.default_factsy_url,
    )
    logger.info(f"Search session ready ({settings.storage_backend} storage)")
    return session


# Global session instance
_search_session: SearchSession | None = None
_session_lock = Lock()


def get_search_session() -> SearchSession:
    """Get the global search session.

    Returns:
        SearchSession singleton instance
    """
    global _search_session
    with _session_lock:
        if _search_session is None:
            _search_session = build_session()
        return _search_session


def reset_search_session() -> None:
    """Drop the global search session (for testing)."""
    global _search_session
    with _session_lock:
        _search_session = None

# -*- coding: utf-8 -*-
"""Autocomplete suggestions and keyboard navigation for the search input.

Suggestions come from search history and today's trending queries. A
candidate matches when it contains the typed text (case-insensitively)
without being exactly that text, and is ranked:

    4  trending, starts with the typed text
    3  history, starts with the typed text
    2  history, contains the typed text
    1  trending, contains the typed text

Typing is debounced: suggestions are generated from whatever the input
holds once it has been quiet for the debounce delay.
"""

import logging
from threading import Lock
from typing import Iterable

from factsy.models.search import (
    HistoryEntry,
    Suggestion,
    SuggestionSource,
    SuggestionState,
    TrendingEntry,
)
from factsy.services.debounce import Debouncer

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 8

_PRIORITY = {
    (SuggestionSource.TRENDING, True): 4,
    (SuggestionSource.HISTORY, True): 3,
    (SuggestionSource.HISTORY, False): 2,
    (SuggestionSource.TRENDING, False): 1,
}


class Key:
    """Keyboard keys the suggestion dropdown reacts to."""

    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    ESCAPE = "Escape"


def build_suggestions(
    query: str,
    history: Iterable[HistoryEntry],
    trending: Iterable[TrendingEntry],
    limit: int = MAX_SUGGESTIONS,
) -> list[Suggestion]:
    """Rank history and trending queries matching the typed text.

    Args:
        query: Typed text
        history: History entries, most recent first
        trending: Trending entries, highest count first
        limit: Maximum number of suggestions

    Returns:
        Suggestions, highest priority first
    """
    if len(query) < MIN_QUERY_LENGTH:
        return []

    needle = query.lower()
    candidates = [(e.query, SuggestionSource.HISTORY) for e in history]
    candidates += [(e.query, SuggestionSource.TRENDING) for e in trending]

    suggestions: list[Suggestion] = []
    seen: set[str] = set()
    for text, source in candidates:
        lowered = text.lower()
        if needle not in lowered or text == query or lowered in seen:
            continue
        seen.add(lowered)
        suggestions.append(
            Suggestion(
                text=text,
                source_kind=source,
                priority=_PRIORITY[(source, lowered.startswith(needle))],
            )
        )

    suggestions.sort(key=lambda s: s.priority, reverse=True)
    return suggestions[:limit]


class SuggestionEngine:
    """State machine behind the suggestion dropdown.

    Example:
        ```python
        engine = SuggestionEngine(history, trending, debouncer)
        engine.on_focus()
        engine.on_input("fl")      # suggestions appear after the debounce
        engine.on_key("ArrowDown")
        query = engine.on_key("Enter")  # -> "flu shot"
        ```
    """

    def __init__(self, history, trending, debouncer: Debouncer):
        """Initialize the engine.

        Args:
            history: HistoryManager to draw suggestions from
            trending: TrendingAggregator to draw suggestions from
            debouncer: Debouncer for input changes
        """
        self._history = history
        self._trending = trending
        self._debouncer = debouncer
        self._lock = Lock()

        self._query = ""
        self._focused = False
        self._suggestions: list[Suggestion] = []
        self._selected_index = -1
        self._visible = False

    # ========== Input Events ==========

    def on_focus(self) -> None:
        with self._lock:
            self._focused = True

    def on_blur(self) -> None:
        """Input lost focus; a pending generation no longer fires."""
        with self._lock:
            self._focused = False
        self._debouncer.cancel()

    def on_input(self, text: str) -> None:
        """Record an input change and restart the debounce timer."""
        with self._lock:
            self._query = text
            focused = self._focused
        if focused:
            self._debouncer.trigger(self._on_debounce_elapsed)

    def _on_debounce_elapsed(self) -> None:
        with self._lock:
            if not self._focused:
                return
            query = self._query
        self.generate(query)

    def on_pointer_outside(self) -> None:
        """Pointer interaction outside the dropdown hides it."""
        with self._lock:
            self._visible = False

    # ========== Generation ==========

    def generate(self, query: str) -> list[Suggestion]:
        """Replace the dropdown contents with suggestions for query."""
        suggestions = build_suggestions(
            query,
            self._history.entries(),
            self._trending.entries(),
        )
        with self._lock:
            self._suggestions = suggestions
            self._selected_index = -1
            self._visible = bool(suggestions)
        logger.debug(f"Generated {len(suggestions)} suggestions for {query!r}")
        return suggestions

    # ========== Keyboard Navigation ==========

    def on_key(self, key: str) -> str | None:
        """Handle a key press in the input.

        Args:
            key: Key name (ArrowDown, ArrowUp, Escape, Enter)

        Returns:
            The query to search for when Enter was pressed, else None
        """
        if key == Key.ENTER:
            with self._lock:
                query = self._commit_locked()
            self._debouncer.cancel()
            return query

        with self._lock:
            if key == Key.ESCAPE:
                self._visible = False
                self._selected_index = -1
            elif key == Key.ARROW_DOWN:
                self._selected_index = min(self._selected_index + 1, len(self._suggestions) - 1)
            elif key == Key.ARROW_UP:
                self._selected_index = max(self._selected_index - 1, -1)
            return None

    def _commit_locked(self) -> str:
        if self._visible and 0 <= self._selected_index < len(self._suggestions):
            self._query = self._suggestions[self._selected_index].text
        self._visible = False
        self._selected_index = -1
        return self._query

    def select(self, index: int) -> str | None:
        """Pick a suggestion with the pointer.

        Returns:
            The committed query, or None if index is out of range
        """
        with self._lock:
            if not 0 <= index < len(self._suggestions):
                return None
            self._selected_index = index
            self._visible = True
            query = self._commit_locked()
        self._debouncer.cancel()
        return query

    # ========== State ==========

    @property
    def query(self) -> str:
        return self._query

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def suggestions(self) -> list[Suggestion]:
        return list(self._suggestions)

    def state(self) -> SuggestionState:
        """Snapshot of the dropdown."""
        pending = self._debouncer.pending
        with self._lock:
            return SuggestionState(
                query=self._query,
                suggestions=list(self._suggestions),
                selected_index=self._selected_index,
                visible=self._visible,
                pending=pending,
            )

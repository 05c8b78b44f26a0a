# -*- coding: utf-8 -*-
"""Pydantic models."""

from factsy.models.claim import (
    BookmarkList,
    BookmarkToggleResponse,
    ClaimRecord,
    ClaimReview,
    Publisher,
)
from factsy.models.preferences import (
    CategoryCreate,
    CategoryList,
    LookupUrl,
    Preferences,
    PreferencesUpdate,
)
from factsy.models.search import (
    FilterResponse,
    HistoryEntry,
    HistoryList,
    InputRequest,
    KeyRequest,
    KeyResponse,
    SearchFilter,
    SearchRequest,
    SearchResponse,
    SearchStatus,
    Suggestion,
    SuggestionList,
    SuggestionSource,
    SuggestionState,
    TrendingEntry,
    TrendingList,
)
from factsy.models.stats import SearchStats

__all__ = [
    "BookmarkList",
    "BookmarkToggleResponse",
    "ClaimRecord",
    "ClaimReview",
    "Publisher",
    "CategoryCreate",
    "CategoryList",
    "LookupUrl",
    "Preferences",
    "PreferencesUpdate",
    "FilterResponse",
    "HistoryEntry",
    "HistoryList",
    "InputRequest",
    "KeyRequest",
    "KeyResponse",
    "SearchFilter",
    "SearchRequest",
    "SearchResponse",
    "SearchStatus",
    "Suggestion",
    "SuggestionList",
    "SuggestionSource",
    "SuggestionState",
    "TrendingEntry",
    "TrendingList",
    "SearchStats",
]

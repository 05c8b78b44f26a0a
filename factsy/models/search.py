# -*- coding: utf-8 -*-
"""Pydantic models for search history, trending, suggestions and results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from factsy.models.claim import ClaimRecord
from factsy.models.stats import SearchStats


class HistoryEntry(BaseModel):
    """A single search history entry."""

    query: str = Field(..., description="Search query")
    category: str | None = Field(default=None, description="Optional category tag")
    timestamp: int | None = Field(default=None, description="Epoch milliseconds")


class HistoryList(BaseModel):
    """Response model for search history list."""

    history: list[HistoryEntry] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of history entries")


class TrendingEntry(BaseModel):
    """A query and how many times it was searched today."""

    query: str = Field(..., description="Search query")
    count: int = Field(default=1, ge=1, description="Searches today")


class TrendingList(BaseModel):
    """Response model for the trending leaderboard."""

    trending: list[TrendingEntry] = Field(default_factory=list)
    date: str | None = Field(default=None, description="ISO date of the leaderboard")


class SuggestionSource(str, Enum):
    """Where a suggestion came from."""

    HISTORY = "history"
    TRENDING = "trending"


class Suggestion(BaseModel):
    """An autocomplete suggestion."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Suggested query")
    source_kind: SuggestionSource = Field(..., alias="sourceKind")
    priority: int = Field(..., description="Ranking priority, higher first")


class SuggestionState(BaseModel):
    """Snapshot of the suggestion dropdown."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(default="", description="Current input text")
    suggestions: list[Suggestion] = Field(default_factory=list)
    selected_index: int = Field(default=-1, alias="selectedIndex")
    visible: bool = False
    pending: bool = Field(default=False, description="Suggestions are waiting on the debounce delay")


class SuggestionList(BaseModel):
    """Response model for search suggestions."""

    suggestions: list[Suggestion] = Field(default_factory=list)
    query: str = Field(..., description="Original query text")


class InputRequest(BaseModel):
    """Request model for an input change."""

    text: str = Field(default="", description="Current input text")


class KeyRequest(BaseModel):
    """Request model for a keyboard event."""

    key: str = Field(..., description="Key name, e.g. ArrowDown, Enter, Escape")


class SearchFilter(BaseModel):
    """Result filter. Empty strings mean no constraint."""

    rating: str = ""
    source: str = ""
    text: str = ""


class SearchStatus(str, Enum):
    """Outcome of a submitted search."""

    SUCCESS = "success"
    ERROR = "error"
    SKIPPED = "skipped"


class SearchRequest(BaseModel):
    """Request model for submitting a search."""

    query: str = Field(default="", description="Claim or headline to look up")
    category: str | None = Field(default=None, description="Optional category tag")


class SearchResponse(BaseModel):
    """Response model for a submitted search."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    status: SearchStatus
    results: list[ClaimRecord] = Field(default_factory=list)
    total: int = 0
    stale: bool = Field(default=False, description="A newer search superseded this one")
    error: str | None = None
    error_kind: str | None = Field(default=None, alias="errorKind")
    stats: SearchStats | None = None


class KeyResponse(BaseModel):
    """Response model for a keyboard event."""

    state: SuggestionState
    search: SearchResponse | None = None


class FilterResponse(BaseModel):
    """Response model for filtered results."""

    results: list[ClaimRecord] = Field(default_factory=list)
    total: int = 0
    ratings: list[str] = Field(default_factory=list, description="Rating filter options")
    sources: list[str] = Field(default_factory=list, description="Source filter options")

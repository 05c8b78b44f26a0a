# -*- coding: utf-8 -*-
"""Pydantic models for search analytics."""

from pydantic import BaseModel, ConfigDict, Field


class SearchStats(BaseModel):
    """Running search counters.

    ``average_results`` is the mean result count over successful searches,
    kept up to date incrementally.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_searches: int = Field(default=0, ge=0, alias="totalSearches")
    successful_searches: int = Field(default=0, ge=0, alias="successfulSearches")
    average_results: int = Field(default=0, ge=0, alias="averageResults")
    last_search_time: int | None = Field(
        default=None,
        alias="lastSearchTime",
        description="Epoch milliseconds of the last search start",
    )
    search_time: int = Field(
        default=0,
        ge=0,
        alias="searchTime",
        description="Duration of the last successful search in milliseconds",
    )

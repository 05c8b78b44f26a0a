# -*- coding: utf-8 -*-
"""Search API endpoints: submit, history, trending and suggestions."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from factsy.models.search import (
    FilterResponse,
    HistoryList,
    InputRequest,
    KeyRequest,
    KeyResponse,
    SearchFilter,
    SearchRequest,
    SearchResponse,
    SearchStatus,
    SuggestionList,
    SuggestionState,
    TrendingList,
)
from factsy.services.session import SearchSession, get_search_session

router = APIRouter(prefix="/search", tags=["search"])

_ERROR_STATUS = {
    "unauthorized": status.HTTP_502_BAD_GATEWAY,
    "rate_limited": status.HTTP_429_TOO_MANY_REQUESTS,
    "bad_request": status.HTTP_400_BAD_REQUEST,
}


def _raise_for_search_error(response: SearchResponse) -> None:
    """Convert a failed, still-current search into an HTTP error."""
    if response.status == SearchStatus.ERROR and not response.stale:
        raise HTTPException(
            status_code=_ERROR_STATUS.get(response.error_kind, status.HTTP_502_BAD_GATEWAY),
            detail=f"Error fetching facts: {response.error}",
        )


# ========== Search ==========


@router.post(
    "",
    response_model=SearchResponse,
    summary="Search fact-checked claims",
)
def submit_search(
    request: SearchRequest,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SearchResponse:
    """Search for a claim or headline.

    The query is added to history and trending. A blank query is skipped.
    """
    response = session.submit(request.query, request.category)
    _raise_for_search_error(response)
    return response


@router.post(
    "/filter",
    response_model=FilterResponse,
    summary="Filter current results",
)
def filter_results(
    search_filter: SearchFilter,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> FilterResponse:
    """Filter the results of the latest search by rating, source and text."""
    return session.filtered_results(search_filter)


# ========== History ==========


@router.get(
    "/history",
    response_model=HistoryList,
    summary="Get search history",
)
def get_search_history(
    session: Annotated[SearchSession, Depends(get_search_session)],
    category: Annotated[str | None, Query(description="Only entries in this category")] = None,
) -> HistoryList:
    """Get search history, most recent first."""
    history = session.history.by_category(category)
    return HistoryList(history=history, total=len(history))


@router.delete(
    "/history",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear all search history",
)
def clear_search_history(
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    """Clear all search history."""
    session.history.clear()
    return None


@router.delete(
    "/history/{query}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a search history entry",
)
def delete_search_history(
    query: Annotated[str, Path(description="Query to remove (case-insensitive)")],
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    """Delete a specific search history entry."""
    if not session.history.remove(query):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Search history not found: {query}",
        )
    return None


# ========== Trending ==========


@router.get(
    "/trending",
    response_model=TrendingList,
    summary="Get trending searches",
)
def get_trending(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> TrendingList:
    """Get today's most searched queries (most searched first)."""
    return TrendingList(
        trending=session.trending.entries(),
        date=session.trending.date(),
    )


# ========== Suggestions ==========


@router.get(
    "/suggestions",
    response_model=SuggestionList,
    summary="Get search suggestions",
)
def get_search_suggestions(
    session: Annotated[SearchSession, Depends(get_search_session)],
    q: Annotated[str, Query(description="Typed text")] = "",
) -> SuggestionList:
    """Generate suggestions for q immediately, skipping the debounce."""
    return SuggestionList(suggestions=session.suggestions.generate(q), query=q)


@router.get(
    "/state",
    response_model=SuggestionState,
    summary="Get suggestion dropdown state",
)
def get_suggestion_state(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SuggestionState:
    return session.suggestions.state()


@router.post(
    "/input",
    response_model=SuggestionState,
    summary="Report an input change",
)
def post_input(
    request: InputRequest,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SuggestionState:
    """Record the input text; suggestions follow after the debounce delay."""
    session.suggestions.on_input(request.text)
    return session.suggestions.state()


@router.post("/focus", response_model=SuggestionState, summary="Input focused")
def post_focus(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SuggestionState:
    session.suggestions.on_focus()
    return session.suggestions.state()


@router.post("/blur", response_model=SuggestionState, summary="Input blurred")
def post_blur(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SuggestionState:
    session.suggestions.on_blur()
    return session.suggestions.state()


@router.post(
    "/pointer-outside",
    response_model=SuggestionState,
    summary="Pointer interaction outside the suggestions",
)
def post_pointer_outside(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SuggestionState:
    session.suggestions.on_pointer_outside()
    return session.suggestions.state()


@router.post(
    "/key",
    response_model=KeyResponse,
    summary="Report a key press",
)
def post_key(
    request: KeyRequest,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> KeyResponse:
    """Navigate suggestions; Enter searches for the selected or typed query."""
    response = session.key(request.key)
    if response.search is not None:
        _raise_for_search_error(response.search)
    return response


@router.post(
    "/suggestions/{index}/select",
    response_model=KeyResponse,
    summary="Search for a suggestion",
)
def select_suggestion(
    index: int,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> KeyResponse:
    """Pick a suggestion with the pointer and search for it."""
    response = session.select_suggestion(index)
    if response.search is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Suggestion not found: {index}",
        )
    _raise_for_search_error(response.search)
    return response

# -*- coding: utf-8 -*-
"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from factsy.models.claim import BookmarkList, BookmarkToggleResponse, ClaimRecord
from factsy.services.session import SearchSession, get_search_session

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get(
    "",
    response_model=BookmarkList,
    summary="List bookmarks",
)
def list_bookmarks(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> BookmarkList:
    """List bookmarked claims, most recent first."""
    bookmarks = session.bookmarks.entries()
    return BookmarkList(bookmarks=bookmarks, total=len(bookmarks))


@router.post(
    "/toggle",
    response_model=BookmarkToggleResponse,
    summary="Toggle a bookmark",
)
def toggle_bookmark(
    claim: ClaimRecord,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> BookmarkToggleResponse:
    """Bookmark a claim, or remove it if it is already bookmarked."""
    bookmarked = session.bookmarks.toggle(claim)
    return BookmarkToggleResponse(bookmarked=bookmarked, total=len(session.bookmarks))


@router.post(
    "/status",
    response_model=BookmarkToggleResponse,
    summary="Check a bookmark",
)
def bookmark_status(
    claim: ClaimRecord,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> BookmarkToggleResponse:
    """Check whether a claim is bookmarked."""
    return BookmarkToggleResponse(
        bookmarked=session.bookmarks.is_bookmarked(claim),
        total=len(session.bookmarks),
    )


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove all bookmarks",
)
def clear_bookmarks(
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    session.bookmarks.clear()
    return None

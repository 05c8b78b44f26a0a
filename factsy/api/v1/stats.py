# -*- coding: utf-8 -*-
"""Search analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from factsy.models.stats import SearchStats
from factsy.services.session import SearchSession, get_search_session

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "",
    response_model=SearchStats,
    summary="Get search statistics",
)
def get_stats(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> SearchStats:
    """Get running search counters."""
    return session.analytics.stats()


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset search statistics",
)
def reset_stats(
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    session.analytics.reset()
    return None

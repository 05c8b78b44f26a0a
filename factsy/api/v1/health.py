# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import APIRouter, Depends

from factsy.core.config import get_settings
from factsy.services.scheduler import get_scheduler
from factsy.services.session import SearchSession, get_search_session

router = APIRouter()


@router.get("/health")
async def health_check(
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "fact_check_configured": session.provider.is_configured(),
        "scheduler_running": get_scheduler().is_running(),
    }

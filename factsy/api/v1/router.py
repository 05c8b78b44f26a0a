# -*- coding: utf-8 -*-
from fastapi import APIRouter

from factsy.api.v1 import bookmarks, health, preferences, search, stats

api_router = APIRouter()

# Health check
api_router.include_router(health.router, tags=["health"])

# Search, history, trending and suggestions
api_router.include_router(search.router)

# Bookmarks
api_router.include_router(bookmarks.router)

# Search analytics
api_router.include_router(stats.router)

# Categories and client preferences
api_router.include_router(preferences.router)

# -*- coding: utf-8 -*-
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from factsy.api.v1.router import api_router
from factsy.core.config import get_settings
from factsy.services.scheduler import get_scheduler, reset_scheduler

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the scheduler that fires debounced suggestion jobs."""
    scheduler = get_scheduler()
    scheduler.start()
    yield
    reset_scheduler()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Factsy - search-session state for fact-checking claims",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# The web page and the browser extension call from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "docs": "/docs",
        "health": f"{settings.api_v1_prefix}/health",
    }

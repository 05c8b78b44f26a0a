# -*- coding: utf-8 -*-
"""Database configuration and session management."""

from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from factsy.core.config import Settings, get_settings

# Declarative base for the key/value table
Base = declarative_base()

_settings = get_settings()


def create_db_engine(settings: Settings) -> Engine:
    """Create a database engine based on database type.

    Args:
        settings: Settings holding the database URL and debug flag

    Returns:
        SQLAlchemy engine configured for SQLite or PostgreSQL
    """
    database_url = settings.database_url
    echo = settings.debug

    if settings.is_sqlite:
        # File-backed SQLite needs its directory; in-memory URLs do not
        if database_url.startswith("sqlite:///"):
            db_file = database_url.replace("sqlite:///", "")
            if db_file and db_file != ":memory:":
                Path(db_file).parent.mkdir(parents=True, exist_ok=True)

        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},  # Debounce callbacks run off-thread
            echo=echo,
        )
    elif settings.is_postgresql:
        return create_engine(
            database_url,
            echo=echo,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
        )
    else:
        return create_engine(database_url, echo=echo)


engine = create_db_engine(_settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None):
    """Create the key/value table if it does not exist."""
    # Register models on Base.metadata
    from factsy.models import db_models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)

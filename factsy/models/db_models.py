# -*- coding: utf-8 -*-
"""SQLAlchemy database models."""

from datetime import datetime, UTC

from sqlalchemy import Column, DateTime, String, Text

from factsy.core.database import Base


def _utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


class KeyValueDB(Base):
    """A single persisted key holding a JSON-encoded value."""

    __tablename__ = "kv_store"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now)

    def __repr__(self) -> str:
        return f"<KeyValueDB(key={self.key!r})>"

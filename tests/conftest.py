# -*- coding: utf-8 -*-
import threading
import time

import pytest
from datetime import datetime, timedelta, UTC
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from factsy.main import app
from factsy.core.clock import Clock
from factsy.core.database import Base
from factsy.models.claim import ClaimRecord
from factsy.services.factcheck import FactCheckService
from factsy.services.session import SearchSession, get_search_session
from factsy.services.storage import MemoryPersistentStore, SqlPersistentStore

import factsy.models.db_models  # noqa: F401  (registers kv_store on Base)


class FakeClock(Clock):
    """Clock whose time only moves when told to."""

    def __init__(self, current: datetime):
        super().__init__(lambda: self.current)
        self.current = current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


class FakeScheduler:
    """Scheduler double that runs jobs only when fired."""

    def __init__(self):
        self.jobs: dict[str, tuple] = {}

    def add_date_job(self, job_id, func, run_date, args=()):
        self.jobs[job_id] = (func, run_date, args)

    def remove_job(self, job_id):
        return self.jobs.pop(job_id, None) is not None

    def has_job(self, job_id):
        return job_id in self.jobs

    def fire(self, job_id):
        func, _, args = self.jobs.pop(job_id)
        func(*args)


class SlowStore(MemoryPersistentStore):
    """Memory store whose reads and writes take a moment."""

    def _read(self, key):
        time.sleep(0.001)
        return super()._read(key)

    def _write(self, key, raw):
        time.sleep(0.001)
        super()._write(key, raw)


@pytest.fixture
def slow_store():
    return SlowStore()


@pytest.fixture
def run_threads():
    """Run each callable on its own thread, all released together."""
    def _run_threads(*funcs):
        barrier = threading.Barrier(len(funcs))
        errors = []

        def _worker(func):
            barrier.wait()
            try:
                func()
            except Exception as e:  # surfaced below
                errors.append(e)

        threads = [threading.Thread(target=_worker, args=(f,)) for f in funcs]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)
        assert errors == []

    return _run_threads


@pytest.fixture
def store():
    """Empty in-memory persistent store."""
    return MemoryPersistentStore()


@pytest.fixture
def sql_store():
    """Persistent store on an in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield SqlPersistentStore(TestingSessionLocal)
    engine.dispose()


@pytest.fixture
def fake_clock():
    """Clock pinned to 2026-10-19 12:00 UTC."""
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


@pytest.fixture
def mock_provider():
    """Fact-check provider returning no claims."""
    provider = MagicMock(spec=FactCheckService)
    provider.search.return_value = []
    provider.is_configured.return_value = True
    return provider


@pytest.fixture
def make_claim():
    """Factory for claim records."""
    def _make_claim(
        text="The earth is flat",
        rating="False",
        publisher="PolitiFact",
        url="https://example.com/review/1",
    ) -> ClaimRecord:
        review = {"textualRating": rating, "url": url}
        if publisher is not None:
            review["publisher"] = {"name": publisher}
        if rating is None:
            del review["textualRating"]
        return ClaimRecord.model_validate({"text": text, "claimReview": [review]})

    return _make_claim


@pytest.fixture
def session(store, mock_provider, fake_scheduler, fake_clock):
    """Search session on an in-memory store with test doubles."""
    return SearchSession(
        store=store,
        provider=mock_provider,
        scheduler=fake_scheduler,
        clock=fake_clock,
    )


@pytest.fixture
def client(session):
    """Test client whose requests use the test session."""
    app.dependency_overrides[get_search_session] = lambda: session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

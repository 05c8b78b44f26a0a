# -*- coding: utf-8 -*-
"""Tests for database engine creation."""

from sqlalchemy import inspect

from factsy.core.config import Settings
from factsy.core.database import create_db_engine, init_db


class TestSettingsDatabaseType:
    """Tests for the database type properties."""

    def test_sqlite(self):
        settings = Settings(database_url="sqlite:///./data/factsy.db")
        assert settings.is_sqlite
        assert not settings.is_postgresql

    def test_postgresql(self):
        for url in ("postgresql://u:p@db/factsy", "postgres://u:p@db/factsy"):
            settings = Settings(database_url=url)
            assert settings.is_postgresql
            assert not settings.is_sqlite


class TestCreateDbEngine:
    """Tests for create_db_engine."""

    def test_sqlite_file_creates_directory(self, tmp_path):
        """Test that a file-backed SQLite URL gets its directory."""
        db_file = tmp_path / "nested" / "factsy.db"
        engine = create_db_engine(Settings(database_url=f"sqlite:///{db_file}"))
        try:
            assert engine.dialect.name == "sqlite"
            assert db_file.parent.is_dir()

            init_db(engine)
            assert "kv_store" in inspect(engine).get_table_names()
        finally:
            engine.dispose()

    def test_sqlite_memory(self):
        """Test that an in-memory SQLite URL needs no directory."""
        engine = create_db_engine(Settings(database_url="sqlite:///:memory:", debug=True))
        try:
            assert engine.dialect.name == "sqlite"
            assert engine.echo is True
        finally:
            engine.dispose()

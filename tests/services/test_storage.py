# -*- coding: utf-8 -*-
"""Tests for persistent storage backends."""

import json
import pytest

from factsy.core.config import Settings
from factsy.services.storage import (
    JsonFilePersistentStore,
    MemoryPersistentStore,
    StorageKey,
    create_store,
)


class TestMemoryPersistentStore:
    """Tests for MemoryPersistentStore."""

    def test_get_missing_key(self, store):
        """Test that a missing key reads as None."""
        assert store.get("missing") is None

    def test_set_and_get(self, store):
        """Test storing and reading a JSON value."""
        assert store.set(StorageKey.HISTORY, [{"query": "flu shot"}]) is True
        assert store.get(StorageKey.HISTORY) == [{"query": "flu shot"}]

    def test_malformed_json_reads_as_absent(self):
        """Test that malformed JSON is treated as no data."""
        store = MemoryPersistentStore({StorageKey.HISTORY: "[{not json"})
        assert store.get(StorageKey.HISTORY) is None

    def test_unserializable_value_is_not_written(self, store):
        """Test that a value json cannot encode is rejected without raising."""
        assert store.set("bad", {"value": object()}) is False
        assert store.get("bad") is None

    def test_delete(self, store):
        """Test deleting a key."""
        store.set("key", 1)
        assert store.delete("key") is True
        assert store.get("key") is None
        assert store.delete("key") is False


class TestSqlPersistentStore:
    """Tests for SqlPersistentStore."""

    def test_set_and_get(self, sql_store):
        """Test storing and reading a value."""
        assert sql_store.set(StorageKey.SEARCH_STATS, {"totalSearches": 2}) is True
        assert sql_store.get(StorageKey.SEARCH_STATS) == {"totalSearches": 2}

    def test_overwrite(self, sql_store):
        """Test that setting a key again replaces its value."""
        sql_store.set(StorageKey.TRENDING_DATE, "2026-10-18")
        sql_store.set(StorageKey.TRENDING_DATE, "2026-10-19")
        assert sql_store.get(StorageKey.TRENDING_DATE) == "2026-10-19"

    def test_missing_key(self, sql_store):
        """Test that a missing row reads as None."""
        assert sql_store.get("missing") is None

    def test_delete(self, sql_store):
        """Test deleting a row."""
        sql_store.set("key", True)
        assert sql_store.delete("key") is True
        assert sql_store.delete("key") is False


class TestJsonFilePersistentStore:
    """Tests for JsonFilePersistentStore."""

    def test_set_and_get(self, tmp_path):
        """Test values survive a new store on the same file."""
        path = tmp_path / "state.json"
        JsonFilePersistentStore(path).set(StorageKey.BOOKMARKS, [{"text": "claim"}])

        assert JsonFilePersistentStore(path).get(StorageKey.BOOKMARKS) == [{"text": "claim"}]

    def test_missing_file(self, tmp_path):
        """Test that a missing file reads as empty."""
        store = JsonFilePersistentStore(tmp_path / "nested" / "state.json")
        assert store.get(StorageKey.HISTORY) is None

    def test_malformed_file(self, tmp_path):
        """Test that a corrupt document reads as empty and can be overwritten."""
        path = tmp_path / "state.json"
        path.write_text("{corrupt", encoding="utf-8")
        store = JsonFilePersistentStore(path)

        assert store.get(StorageKey.HISTORY) is None
        assert store.set(StorageKey.HISTORY, []) is True
        assert store.get(StorageKey.HISTORY) == []

    def test_one_malformed_value_does_not_hide_others(self, tmp_path):
        """Test that a bad value only affects its own key."""
        path = tmp_path / "state.json"
        path.write_text(
            json.dumps({StorageKey.HISTORY: "[oops", StorageKey.DARK_MODE: "true"}),
            encoding="utf-8",
        )
        store = JsonFilePersistentStore(path)

        assert store.get(StorageKey.HISTORY) is None
        assert store.get(StorageKey.DARK_MODE) is True


class TestCreateStore:
    """Tests for backend selection."""

    def test_memory_backend(self):
        """Test selecting the memory backend."""
        store = create_store(Settings(storage_backend="memory"))
        assert isinstance(store, MemoryPersistentStore)

    def test_json_backend(self, tmp_path):
        """Test selecting the JSON file backend."""
        settings = Settings(storage_backend="json", storage_path=str(tmp_path / "s.json"))
        assert isinstance(create_store(settings), JsonFilePersistentStore)

    def test_unknown_backend(self):
        """Test that an unknown backend is rejected."""
        with pytest.raises(ValueError):
            create_store(Settings(storage_backend="redis"))

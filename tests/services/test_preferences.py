# -*- coding: utf-8 -*-
"""Tests for preferences and search categories."""

from factsy.services.category_service import CategoryRegistry
from factsy.services.preferences import PreferencesService
from factsy.services.storage import MemoryPersistentStore, StorageKey

DEFAULT_URL = "https://factsy.example.com"


class TestPreferencesService:
    """Tests for PreferencesService."""

    def test_defaults(self, store):
        """Test defaults when nothing is stored."""
        prefs = PreferencesService(store, DEFAULT_URL).get()
        assert prefs.factsy_url == DEFAULT_URL
        assert prefs.dark_mode is False

    def test_update(self, store):
        """Test updating preferences."""
        service = PreferencesService(store, DEFAULT_URL)
        prefs = service.update(factsy_url="https://my.factsy.app", dark_mode=True)

        assert prefs.factsy_url == "https://my.factsy.app"
        assert prefs.dark_mode is True
        assert store.get(StorageKey.DARK_MODE) is True

    def test_partial_update_keeps_other_fields(self, store):
        """Test that omitted fields are unchanged."""
        service = PreferencesService(store, DEFAULT_URL)
        service.update(dark_mode=True)
        prefs = service.update(factsy_url="https://my.factsy.app")

        assert prefs.dark_mode is True

    def test_blank_url_restores_default(self, store):
        """Test that clearing the URL falls back to the default."""
        service = PreferencesService(store, DEFAULT_URL)
        service.update(factsy_url="https://my.factsy.app")
        assert service.update(factsy_url="  ").factsy_url == DEFAULT_URL

    def test_toggle_dark_mode(self, store):
        """Test flipping dark mode."""
        service = PreferencesService(store, DEFAULT_URL)
        assert service.toggle_dark_mode() is True
        assert service.toggle_dark_mode() is False

    def test_non_boolean_dark_mode_is_off(self):
        """Test that an unexpected stored value reads as off."""
        store = MemoryPersistentStore({StorageKey.DARK_MODE: '"true"'})
        assert PreferencesService(store, DEFAULT_URL).get().dark_mode is False

    def test_lookup_url(self, store):
        """Test building the lookup URL for selected text."""
        service = PreferencesService(store, DEFAULT_URL)
        assert service.lookup_url("Is the earth flat?") == (
            "https://factsy.example.com?q=Is%20the%20earth%20flat%3F"
        )


class TestCategoryRegistry:
    """Tests for CategoryRegistry."""

    def test_add(self, store):
        """Test adding categories."""
        registry = CategoryRegistry(store)
        assert registry.add("health") is True
        assert registry.add(" health ") is False
        assert registry.add("   ") is False
        assert registry.names() == ["health"]
        assert "health" in registry

    def test_remove(self, store):
        """Test removing categories."""
        registry = CategoryRegistry(store)
        registry.add("health")
        assert registry.remove("health") is True
        assert registry.remove("health") is False
        assert store.get(StorageKey.SEARCH_CATEGORIES) == []

    def test_load_deduplicates(self):
        """Test that stored duplicates and junk are dropped."""
        store = MemoryPersistentStore()
        store.set(StorageKey.SEARCH_CATEGORIES, ["health", "health", 3, "science"])
        assert CategoryRegistry(store).names() == ["health", "science"]

    def test_concurrent_adds_keep_unique(self, slow_store, run_threads):
        """Test that racing adds of the same names store each name once."""
        registry = CategoryRegistry(slow_store)
        names = [f"topic {i}" for i in range(15)]

        def add_all():
            for name in names:
                registry.add(name)

        run_threads(add_all, add_all)

        assert registry.names() == names
        assert slow_store.get(StorageKey.SEARCH_CATEGORIES) == names

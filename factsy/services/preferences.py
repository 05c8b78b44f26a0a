# -*- coding: utf-8 -*-
"""Client preferences shared by the web page and the extension."""

from urllib.parse import quote

from factsy.models.preferences import Preferences
from factsy.services.storage import PersistentStore, StorageKey


class PreferencesService:
    """Factsy app URL and dark mode."""

    def __init__(self, store: PersistentStore, default_factsy_url: str):
        """Initialize the service.

        Args:
            store: Persistent store
            default_factsy_url: URL used when none is stored
        """
        self._store = store
        self._default_factsy_url = default_factsy_url

    def get(self) -> Preferences:
        url = self._store.get(StorageKey.FACTSY_URL)
        dark_mode = self._store.get(StorageKey.DARK_MODE)
        return Preferences(
            factsy_url=url if isinstance(url, str) and url.strip() else self._default_factsy_url,
            dark_mode=dark_mode is True,
        )

    def update(
        self,
        factsy_url: str | None = None,
        dark_mode: bool | None = None,
    ) -> Preferences:
        """Update preferences. None leaves a value unchanged.

        An empty URL clears the stored URL so the default applies again.
        """
        if factsy_url is not None:
            url = factsy_url.strip().rstrip("?")
            if url:
                self._store.set(StorageKey.FACTSY_URL, url)
            else:
                self._store.delete(StorageKey.FACTSY_URL)
        if dark_mode is not None:
            self._store.set(StorageKey.DARK_MODE, bool(dark_mode))
        return self.get()

    def toggle_dark_mode(self) -> bool:
        """Flip dark mode and return the new value."""
        dark_mode = not self.get().dark_mode
        self._store.set(StorageKey.DARK_MODE, dark_mode)
        return dark_mode

    def lookup_url(self, text: str) -> str:
        """Build the Factsy URL that searches for text."""
        return f"{self.get().factsy_url}?q={quote(text, safe='')}"

# -*- coding: utf-8 -*-
"""Bookmarked claim records."""

import logging
from threading import Lock

from pydantic import ValidationError

from factsy.models.claim import ClaimRecord
from factsy.services.storage import PersistentStore, StorageKey

logger = logging.getLogger(__name__)


class BookmarkRegistry:
    """Saved claims, most recent first.

    Two claims are the same bookmark when their text and first review URL
    match.
    """

    def __init__(self, store: PersistentStore):
        self._store = store
        self._lock = Lock()
        self._bookmarks: list[ClaimRecord] = self._load()

    def _load(self) -> list[ClaimRecord]:
        raw = self._store.get(StorageKey.BOOKMARKS)
        if not isinstance(raw, list):
            return []

        bookmarks: list[ClaimRecord] = []
        keys: set[tuple[str, str]] = set()
        for item in raw:
            try:
                claim = ClaimRecord.model_validate(item)
            except ValidationError:
                logger.warning("Skipping malformed stored bookmark")
                continue
            if claim.identity_key in keys:
                continue
            keys.add(claim.identity_key)
            bookmarks.append(claim)
        return bookmarks

    def _persist(self) -> None:
        self._store.set(
            StorageKey.BOOKMARKS,
            [claim.to_storage() for claim in self._bookmarks],
        )

    def toggle(self, claim: ClaimRecord) -> bool:
        """Add the claim if it is not bookmarked, otherwise remove it.

        Args:
            claim: The claim record

        Returns:
            True if the claim is bookmarked after the toggle
        """
        key = claim.identity_key
        with self._lock:
            remaining = [b for b in self._bookmarks if b.identity_key != key]

            if len(remaining) < len(self._bookmarks):
                self._bookmarks = remaining
                bookmarked = False
            else:
                self._bookmarks = [claim] + self._bookmarks
                bookmarked = True

            self._persist()

        logger.debug(f"Bookmark {'added' if bookmarked else 'removed'}: {key[0]!r}")
        return bookmarked

    def is_bookmarked(self, claim: ClaimRecord) -> bool:
        key = claim.identity_key
        with self._lock:
            return any(b.identity_key == key for b in self._bookmarks)

    def entries(self) -> list[ClaimRecord]:
        """Get bookmarks, most recent first."""
        with self._lock:
            return list(self._bookmarks)

    def clear(self) -> None:
        with self._lock:
            self._bookmarks = []
            self._persist()

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookmarks)

# -*- coding: utf-8 -*-
"""Tests for bookmarks."""

from factsy.models.claim import ClaimRecord
from factsy.services.bookmark_service import BookmarkRegistry
from factsy.services.storage import MemoryPersistentStore, StorageKey


class TestBookmarkRegistry:
    """Tests for BookmarkRegistry."""

    def test_toggle_adds(self, store, make_claim):
        """Test bookmarking a claim."""
        registry = BookmarkRegistry(store)
        claim = make_claim()

        assert registry.toggle(claim) is True
        assert registry.is_bookmarked(claim)
        assert len(registry) == 1

    def test_double_toggle_restores(self, store, make_claim):
        """Test that toggling twice leaves membership unchanged."""
        registry = BookmarkRegistry(store)
        kept = make_claim(text="kept")
        claim = make_claim()
        registry.toggle(kept)

        registry.toggle(claim)
        assert registry.toggle(claim) is False

        assert not registry.is_bookmarked(claim)
        assert [b.text for b in registry.entries()] == ["kept"]

    def test_most_recent_first(self, store, make_claim):
        """Test that new bookmarks go to the front."""
        registry = BookmarkRegistry(store)
        registry.toggle(make_claim(text="first"))
        registry.toggle(make_claim(text="second"))

        assert [b.text for b in registry.entries()] == ["second", "first"]

    def test_identity_is_text_and_review_url(self, store, make_claim):
        """Test identity ignores rating and publisher but not the URL."""
        registry = BookmarkRegistry(store)
        registry.toggle(make_claim(rating="False", publisher="PolitiFact"))

        assert registry.is_bookmarked(make_claim(rating="Mostly false", publisher="Snopes"))
        assert not registry.is_bookmarked(make_claim(url="https://example.com/review/2"))

    def test_claim_without_reviews(self, store):
        """Test a claim with no reviews is keyed by text alone."""
        registry = BookmarkRegistry(store)
        claim = ClaimRecord(text="unreviewed claim")

        registry.toggle(claim)
        assert registry.is_bookmarked(ClaimRecord(text="unreviewed claim"))

    def test_persisted(self, store, make_claim):
        """Test bookmarks survive a new registry on the same store."""
        BookmarkRegistry(store).toggle(make_claim())

        stored = store.get(StorageKey.BOOKMARKS)
        assert stored[0]["claimReview"][0]["textualRating"] == "False"
        assert BookmarkRegistry(store).is_bookmarked(make_claim())

    def test_unknown_fields_round_trip(self, store):
        """Test that fields the registry does not know are kept."""
        claim = ClaimRecord.model_validate({
            "text": "claim",
            "claimReview": [{"url": "https://example.com", "reviewRank": 1}],
            "extraField": "kept",
        })
        BookmarkRegistry(store).toggle(claim)

        stored = store.get(StorageKey.BOOKMARKS)[0]
        assert stored["extraField"] == "kept"
        assert stored["claimReview"][0]["reviewRank"] == 1

    def test_load_skips_malformed_and_duplicates(self, make_claim):
        """Test loading malformed or duplicated stored bookmarks."""
        store = MemoryPersistentStore()
        record = make_claim().to_storage()
        store.set(StorageKey.BOOKMARKS, [record, "junk", record])

        assert len(BookmarkRegistry(store)) == 1

    def test_clear(self, store, make_claim):
        """Test removing every bookmark."""
        registry = BookmarkRegistry(store)
        registry.toggle(make_claim())
        registry.clear()

        assert registry.entries() == []
        assert store.get(StorageKey.BOOKMARKS) == []

    def test_concurrent_toggles_keep_set(self, slow_store, make_claim, run_threads):
        """Test that concurrent toggles never store the same bookmark twice."""
        registry = BookmarkRegistry(slow_store)
        claims = [make_claim(text=f"claim {i}") for i in range(30)]

        def toggle_all():
            for claim in claims:
                registry.toggle(claim)

        run_threads(toggle_all, toggle_all)

        # every claim was toggled twice
        assert registry.entries() == []
        assert slow_store.get(StorageKey.BOOKMARKS) == []

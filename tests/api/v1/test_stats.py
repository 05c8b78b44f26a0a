# -*- coding: utf-8 -*-
"""Tests for Stats API."""

from fastapi.testclient import TestClient


class TestStats:
    """Tests for /api/v1/stats."""

    def test_get_stats_empty(self, client: TestClient):
        """Test stats before any search."""
        response = client.get("/api/v1/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalSearches": 0,
            "successfulSearches": 0,
            "averageResults": 0,
            "lastSearchTime": None,
            "searchTime": 0,
        }

    def test_get_stats_after_search(self, client: TestClient, mock_provider, make_claim, fake_clock):
        """Test stats after a successful search."""
        mock_provider.search.return_value = [make_claim(), make_claim(text="other")]
        client.post("/api/v1/search", json={"query": "flat earth"})

        data = client.get("/api/v1/stats").json()
        assert data["totalSearches"] == 1
        assert data["successfulSearches"] == 1
        assert data["averageResults"] == 2
        assert data["lastSearchTime"] == fake_clock.now_ms()

    def test_reset_stats(self, client: TestClient, session):
        """Test resetting stats."""
        session.analytics.on_search_start()

        assert client.delete("/api/v1/stats").status_code == 204
        assert client.get("/api/v1/stats").json()["totalSearches"] == 0

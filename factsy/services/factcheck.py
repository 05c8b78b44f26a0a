# -*- coding: utf-8 -*-
"""Google Fact Check Tools API client."""

import hashlib
import logging
from typing import Any

import requests
from cachetools import TTLCache
from pydantic import ValidationError

from factsy.core.config import Settings, get_settings
from factsy.models.claim import ClaimRecord

logger = logging.getLogger(__name__)

# Keys shipped in old templates and docs; treated as "not configured"
_PLACEHOLDER_KEYS = {"", "your_api_key_here"}


class FactCheckError(Exception):
    """A claims search failed."""

    kind = "error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FactCheckUnauthorizedError(FactCheckError):
    """The API key was rejected or its quota is exhausted."""

    kind = "unauthorized"


class FactCheckRateLimitError(FactCheckError):
    """Too many requests."""

    kind = "rate_limited"


class FactCheckBadRequestError(FactCheckError):
    """The API rejected the request as malformed."""

    kind = "bad_request"


def error_for_status(status_code: int, body: str) -> FactCheckError:
    """Build the error matching an HTTP failure status.

    Args:
        status_code: HTTP status of the response
        body: Response body text

    Returns:
        FactCheckError subclass for the status
    """
    if status_code in (401, 403):
        return FactCheckUnauthorizedError("API key is invalid or quota exceeded", status_code)
    if status_code == 429:
        return FactCheckRateLimitError("Too many requests. Please try again later.", status_code)
    if status_code == 400:
        return FactCheckBadRequestError(
            f"Bad request (400) - Check if API is enabled and key is correct. Response: {body}",
            status_code,
        )
    return FactCheckError(f"API request failed ({status_code}): {body}", status_code)


class FactCheckService:
    """Service for searching fact-checked claims."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        cache_maxsize: int = 256,
    ):
        """Initialize the client.

        Args:
            settings: Application settings (defaults to the global settings)
            session: HTTP session to use
            cache_maxsize: Maximum number of cached query responses
        """
        settings = settings or get_settings()
        self._api_key = settings.google_fact_check_api_key
        self._api_url = settings.fact_check_api_url
        self._language = settings.fact_check_language
        self._page_size = settings.fact_check_page_size
        self._timeout = settings.fact_check_timeout
        self._session = session or requests.Session()

        # key = hash(normalized query)
        self._cache: TTLCache = TTLCache(
            maxsize=cache_maxsize,
            ttl=settings.fact_check_cache_ttl,
        )

        if not self.is_configured():
            logger.warning(
                "Google Fact Check API key not found. "
                "Set GOOGLE_FACT_CHECK_API_KEY in the environment or .env"
            )

    def is_configured(self) -> bool:
        """Check whether a usable API key is set."""
        return self._api_key not in _PLACEHOLDER_KEYS

    @staticmethod
    def _cache_key(query: str) -> str:
        return hashlib.sha256(query.strip().lower().encode()).hexdigest()[:32]

    def search(self, query: str) -> list[ClaimRecord]:
        """Search for fact-checked claims matching a query.

        Args:
            query: Claim or headline text

        Returns:
            Matching claim records (possibly empty)

        Raises:
            FactCheckError: If the request fails or the API reports an error
        """
        if not self.is_configured():
            raise FactCheckUnauthorizedError("Google Fact Check API key is not configured")

        key = self._cache_key(query)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {query!r}")
            return list(cached)

        params: dict[str, Any] = {
            "query": query,
            "key": self._api_key,
            "pageSize": self._page_size,
        }
        if self._language:
            params["languageCode"] = self._language

        try:
            response = self._session.get(self._api_url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise FactCheckError(f"Error fetching facts: {e}") from e

        if not response.ok:
            logger.warning(f"Claims search returned {response.status_code}")
            raise error_for_status(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise FactCheckError("API returned a malformed response") from e

        if not isinstance(data, dict):
            raise FactCheckError("API returned a malformed response")
        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else None
            raise FactCheckError(message or "API returned an error")

        raw_claims = data.get("claims")
        if raw_claims is None:
            raw_claims = []
        elif not isinstance(raw_claims, list):
            raise FactCheckError("API returned a malformed response")

        claims = []
        for item in raw_claims:
            try:
                claims.append(ClaimRecord.model_validate(item))
            except ValidationError:
                logger.warning("Skipping malformed claim in API response")

        self._cache[key] = claims
        return list(claims)

    def clear_cache(self) -> None:
        self._cache.clear()

# -*- coding: utf-8 -*-
"""Filtering of claim search results."""

from typing import Iterable

from factsy.models.claim import ClaimRecord
from factsy.models.search import SearchFilter

FILTER_FIELDS = ("rating", "source", "text")


def field_value(claim: ClaimRecord, field: str) -> str:
    """Get the value a filter field matches against.

    Args:
        claim: The claim record
        field: One of 'rating', 'source', 'text'

    Returns:
        The field value, or an empty string if the claim has none

    Raises:
        ValueError: If field is not a filter field
    """
    if field == "rating":
        return claim.rating
    if field == "source":
        return claim.source
    if field == "text":
        return claim.text or ""
    raise ValueError(f"Unknown filter field: {field}")


def matches(claim: ClaimRecord, search_filter: SearchFilter) -> bool:
    """Check whether a claim satisfies every non-empty filter field."""
    for field in FILTER_FIELDS:
        wanted = getattr(search_filter, field)
        if wanted and wanted.casefold() not in field_value(claim, field).casefold():
            return False
    return True


def apply_filter(
    results: Iterable[ClaimRecord],
    search_filter: SearchFilter,
) -> list[ClaimRecord]:
    """Keep the results matching the filter, in their original order.

    Args:
        results: Claim records from a search
        search_filter: Rating/source/text substrings; empty means any

    Returns:
        Matching claim records
    """
    return [claim for claim in results if matches(claim, search_filter)]


def unique_values(results: Iterable[ClaimRecord], field: str) -> list[str]:
    """Distinct non-empty values of a field, in first-seen order.

    Used to build the options of the rating and source filters.
    """
    values: list[str] = []
    seen: set[str] = set()
    for claim in results:
        value = field_value(claim, field)
        if value and value not in seen:
            seen.add(value)
            values.append(value)
    return values

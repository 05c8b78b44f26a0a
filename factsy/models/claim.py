# -*- coding: utf-8 -*-
"""Pydantic models for fact-check claim records and bookmarks."""

from pydantic import BaseModel, ConfigDict, Field


class Publisher(BaseModel):
    """Publisher of a claim review."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="Publisher name")
    site: str | None = Field(default=None, description="Publisher site")


class ClaimReview(BaseModel):
    """A single review of a claim by a fact-checking publisher."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    publisher: Publisher | None = None
    url: str | None = Field(default=None, description="Review article URL")
    title: str | None = Field(default=None, description="Review article title")
    review_date: str | None = Field(default=None, alias="reviewDate")
    textual_rating: str | None = Field(default=None, alias="textualRating")
    language_code: str | None = Field(default=None, alias="languageCode")


class ClaimRecord(BaseModel):
    """A fact-check result as returned by the claims search API.

    Unknown fields are kept so records round-trip unchanged through
    bookmarks.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    text: str | None = Field(default=None, description="Claim text")
    claimant: str | None = Field(default=None, description="Who made the claim")
    claim_date: str | None = Field(default=None, alias="claimDate")
    claim_review: list[ClaimReview] = Field(default_factory=list, alias="claimReview")

    @property
    def first_review(self) -> ClaimReview | None:
        """The first review, which is the one shown and bookmarked."""
        return self.claim_review[0] if self.claim_review else None

    @property
    def review_url(self) -> str:
        review = self.first_review
        return (review.url or "") if review else ""

    @property
    def rating(self) -> str:
        review = self.first_review
        return (review.textual_rating or "") if review else ""

    @property
    def source(self) -> str:
        review = self.first_review
        if review is None or review.publisher is None:
            return ""
        return review.publisher.name or ""

    @property
    def identity_key(self) -> tuple[str, str]:
        """Bookmark identity: (claim text, first review URL)."""
        return (self.text or "", self.review_url)

    def to_storage(self) -> dict:
        """Serialize to the JSON shape the browser clients store."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BookmarkList(BaseModel):
    """Response model for the bookmark list."""

    bookmarks: list[ClaimRecord] = Field(default_factory=list)
    total: int = Field(default=0, description="Number of bookmarks")


class BookmarkToggleResponse(BaseModel):
    """Response model for a bookmark toggle."""

    bookmarked: bool = Field(..., description="Membership after the toggle")
    total: int = Field(default=0, description="Number of bookmarks")

# -*- coding: utf-8 -*-
"""Pydantic models for client preferences and search categories."""

from pydantic import BaseModel, ConfigDict, Field


class Preferences(BaseModel):
    """Options shared by the web page and the browser extension."""

    model_config = ConfigDict(populate_by_name=True)

    factsy_url: str = Field(..., alias="factsyUrl", description="Factsy app URL")
    dark_mode: bool = Field(default=False, alias="darkMode")


class PreferencesUpdate(BaseModel):
    """Request model for updating preferences. Omitted fields are kept."""

    model_config = ConfigDict(populate_by_name=True)

    factsy_url: str | None = Field(default=None, alias="factsyUrl")
    dark_mode: bool | None = Field(default=None, alias="darkMode")


class LookupUrl(BaseModel):
    """Response model for a lookup URL."""

    url: str = Field(..., description="Factsy URL that searches for the text")


class CategoryList(BaseModel):
    """Response model for the search category list."""

    categories: list[str] = Field(default_factory=list)


class CategoryCreate(BaseModel):
    """Request model for adding a search category."""

    name: str = Field(..., min_length=1, max_length=64, description="Category name")

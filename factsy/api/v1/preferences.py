# -*- coding: utf-8 -*-
"""Category and preference API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from factsy.models.preferences import (
    CategoryCreate,
    CategoryList,
    LookupUrl,
    Preferences,
    PreferencesUpdate,
)
from factsy.services.session import SearchSession, get_search_session

router = APIRouter()


# ========== Categories ==========


@router.get(
    "/categories",
    response_model=CategoryList,
    tags=["categories"],
    summary="List search categories",
)
def list_categories(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> CategoryList:
    return CategoryList(categories=session.categories.names())


@router.post(
    "/categories",
    response_model=CategoryList,
    status_code=status.HTTP_201_CREATED,
    tags=["categories"],
    summary="Add a search category",
)
def add_category(
    request: CategoryCreate,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> CategoryList:
    if not request.name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category name must not be blank",
        )
    session.categories.add(request.name)
    return CategoryList(categories=session.categories.names())


@router.delete(
    "/categories/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["categories"],
    summary="Remove a search category",
)
def remove_category(
    name: str,
    session: Annotated[SearchSession, Depends(get_search_session)],
):
    if not session.categories.remove(name):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category not found: {name}",
        )
    return None


# ========== Preferences ==========


@router.get(
    "/preferences",
    response_model=Preferences,
    tags=["preferences"],
    summary="Get preferences",
)
def get_preferences(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> Preferences:
    return session.preferences.get()


@router.put(
    "/preferences",
    response_model=Preferences,
    tags=["preferences"],
    summary="Update preferences",
)
def update_preferences(
    request: PreferencesUpdate,
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> Preferences:
    """Update the Factsy URL and/or dark mode. Omitted fields are kept."""
    return session.preferences.update(
        factsy_url=request.factsy_url,
        dark_mode=request.dark_mode,
    )


@router.post(
    "/preferences/dark-mode/toggle",
    response_model=Preferences,
    tags=["preferences"],
    summary="Toggle dark mode",
)
def toggle_dark_mode(
    session: Annotated[SearchSession, Depends(get_search_session)],
) -> Preferences:
    session.preferences.toggle_dark_mode()
    return session.preferences.get()


@router.get(
    "/preferences/lookup-url",
    response_model=LookupUrl,
    tags=["preferences"],
    summary="Build a lookup URL",
)
def get_lookup_url(
    session: Annotated[SearchSession, Depends(get_search_session)],
    text: Annotated[str, Query(min_length=1, description="Selected text to look up")],
) -> LookupUrl:
    """Build the Factsy URL that fact-checks the given text."""
    return LookupUrl(url=session.preferences.lookup_url(text))

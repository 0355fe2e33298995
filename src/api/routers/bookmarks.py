"""Bookmark CRUD endpoints, with nested page and tag attachment."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.bookmark import (
    BookmarkCreate,
    BookmarkPageCreate,
    BookmarkResponse,
    BookmarkUpdate,
)
from schemas.page_selector import PageSelector
from services import bookmark_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def _not_found() -> JSONResponse:
    """404 with a JSON null body."""
    return JSONResponse(status_code=404, content=None)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    offset: int | None = Query(default=None, ge=0, description="Pagination offset"),
    limit: int | None = Query(default=None, ge=0, description="Pagination limit"),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks in insertion order, with their tags and pages."""
    bookmarks = await bookmark_service.get_bookmarks(db, offset, limit)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.post("", response_model=BookmarkResponse)
async def create_bookmark(
    data: BookmarkCreate | None = Body(default=None),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark. Name defaults to "New group", description to ""."""
    bookmark = await bookmark_service.create_bookmark(db, data or BookmarkCreate())
    return BookmarkResponse.model_validate(bookmark)


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={404: {"description": "Bookmark not found (null body)"}},
)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | JSONResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        return _not_found()
    return BookmarkResponse.model_validate(bookmark)


@router.patch(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={404: {"description": "Bookmark not found (null body)"}},
)
async def update_bookmark(
    bookmark_id: int,
    data: BookmarkUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | JSONResponse:
    """Update a bookmark's name and/or description."""
    bookmark = await bookmark_service.edit_bookmark(db, bookmark_id, data)
    if bookmark is None:
        return _not_found()
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}")
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> dict[str, Any]:
    """Delete a bookmark with its tags and pages. Succeeds for unknown IDs."""
    await bookmark_service.delete_bookmark(db, bookmark_id)
    return {}


@router.post("/{bookmark_id}/page")
async def add_page(
    bookmark_id: int,
    data: BookmarkPageCreate,
    db: AsyncSession = Depends(get_async_session),
) -> dict[str, Any]:
    """Attach a page to a bookmark, creating its page selector if needed."""
    await bookmark_service.add_page(db, bookmark_id, data)
    return {}


@router.delete("/{bookmark_id}/page", response_class=PlainTextResponse)
async def remove_page(
    bookmark_id: int,
    page: PageSelector,
    db: AsyncSession = Depends(get_async_session),
) -> str:
    """Detach a page from a bookmark. The page selector itself is kept."""
    await bookmark_service.remove_page(db, bookmark_id, page.scope, page.value)
    return "ok"


@router.post("/{bookmark_id}/tags", response_class=PlainTextResponse)
async def add_tag(
    bookmark_id: int,
    tag: str = Query(description="Tag to add"),
    db: AsyncSession = Depends(get_async_session),
) -> str:
    """Add a tag to a bookmark. Adding a tag the bookmark already has is a server error."""
    await bookmark_service.add_tag(db, bookmark_id, tag)
    return "ok"


@router.delete("/{bookmark_id}/tags", response_class=PlainTextResponse)
async def remove_tag(
    bookmark_id: int,
    tag: str = Query(description="Tag to remove"),
    db: AsyncSession = Depends(get_async_session),
) -> str:
    """Remove a tag from a bookmark."""
    await bookmark_service.remove_tag(db, bookmark_id, tag)
    return "ok"

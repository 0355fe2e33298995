"""
Service layer for bookmark operations.

Functions flush but never commit: the caller's session owns the transaction
(one per request, see db.session.get_async_session), which makes every
multi-statement mutation here atomic.
"""
from collections.abc import Callable
from typing import Any

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.dialects import postgresql as pg
from sqlalchemy.dialects import sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.base import utc_now
from models.bookmark import Bookmark
from models.bookmark_page import BookmarkPage
from models.bookmark_tag import BookmarkTag
from models.page_selector import PageSelector
from schemas.bookmark import BookmarkCreate, BookmarkPageCreate, BookmarkUpdate


def _with_relations(query: Select) -> Select:
    """Eager-load tags and pages (with their selectors) for a bookmark query."""
    return query.options(
        selectinload(Bookmark.pages).selectinload(BookmarkPage.page),
        selectinload(Bookmark.tags),
    ).execution_options(populate_existing=True)


async def get_bookmarks(
    db: AsyncSession,
    offset: int | None = None,
    limit: int | None = None,
) -> list[Bookmark]:
    """List bookmarks in insertion order. None for offset/limit means no pagination."""
    query = (
        _with_relations(select(Bookmark))
        .order_by(Bookmark.id)
        .offset(offset)
        .limit(limit)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark with its tags and pages, or None if it doesn't exist."""
    result = await db.execute(
        _with_relations(select(Bookmark)).where(Bookmark.id == bookmark_id),
    )
    return result.scalar_one_or_none()


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """Create a bookmark with no tags or pages. created_at and updated_at are equal."""
    now = utc_now()
    bookmark = Bookmark(
        name=data.name,
        desc=data.desc,
        created_at=now,
        updated_at=now,
        pages=[],
        tags=[],
    )
    db.add(bookmark)
    await db.flush()
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    values: dict[str, Any] | None = None,
) -> bool:
    """
    Update columns of a bookmark, always refreshing updated_at.

    Called with no values after every change to a bookmark's tags or pages so
    that updated_at reflects relationship changes as well.

    Args:
        db: Database session.
        bookmark_id: ID of the bookmark.
        values: Column values keyed by attribute name. An explicit updated_at
            takes precedence over the current time.

    Returns:
        True if a bookmark matched, False otherwise.
    """
    update_values: dict[str, Any] = {"updated_at": utc_now()}
    if values:
        update_values.update(values)
    result = await db.execute(
        update(Bookmark).where(Bookmark.id == bookmark_id).values(**update_values),
    )
    return result.rowcount > 0


async def edit_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark | None:
    """Apply the fields set in data; returns the updated bookmark or None if not found."""
    values = data.model_dump(exclude_unset=True, exclude_none=True)
    if not await update_bookmark(db, bookmark_id, values):
        return None
    return await get_bookmark(db, bookmark_id)


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> None:
    """
    Delete a bookmark with its tags and page associations.

    Page selectors are shared between bookmarks and are kept. Unknown ids are
    not an error.
    """
    await db.execute(delete(BookmarkTag).where(BookmarkTag.bookmark_id == bookmark_id))
    await db.execute(delete(BookmarkPage).where(BookmarkPage.bookmark_id == bookmark_id))
    await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))


def _insert_ignoring_conflicts(
    db: AsyncSession,
) -> Callable[[type[PageSelector]], pg.Insert | sqlite.Insert]:
    """
    Dialect-specific insert() that supports ON CONFLICT DO NOTHING.

    Raises:
        NotImplementedError: If the session is bound to a database other than
            SQLite or PostgreSQL.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return pg.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise NotImplementedError(
        f"Unsupported database dialect '{dialect}': only sqlite and postgresql are supported",
    )


async def resolve_page_selector(db: AsyncSession, scope: str, value: str) -> int:
    """
    Get the id of the page selector for (scope, value), creating it if needed.

    The insert is ignored when the pair already exists, in which case it
    returns no row and the id is looked up by the unique key instead.
    """
    insert_fn = _insert_ignoring_conflicts(db)
    result = await db.execute(
        insert_fn(PageSelector)
        .values(scope=scope, value=value)
        .on_conflict_do_nothing(index_elements=["scope", "value"])
        .returning(PageSelector.id),
    )
    page_id = result.scalar_one_or_none()
    if page_id is None:
        result = await db.execute(
            select(PageSelector.id).where(
                PageSelector.scope == scope,
                PageSelector.value == value,
            ),
        )
        page_id = result.scalar_one()
    return page_id


async def add_page(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkPageCreate,
) -> None:
    """
    Attach a page to a bookmark.

    Raises:
        IntegrityError: If the page is already attached to the bookmark, or the
            bookmark doesn't exist.
    """
    page_id = await resolve_page_selector(db, data.page.scope, data.page.value)
    await db.execute(
        insert(BookmarkPage).values(
            page_id=page_id,
            bookmark_id=bookmark_id,
            title=data.title,
            desc=data.desc,
        ),
    )
    await update_bookmark(db, bookmark_id)


async def remove_page(
    db: AsyncSession,
    bookmark_id: int,
    scope: str,
    value: str,
) -> None:
    """Detach a page from a bookmark. Nothing is deleted if the page isn't attached."""
    page_id = (
        select(PageSelector.id)
        .where(PageSelector.scope == scope, PageSelector.value == value)
        .limit(1)
        .scalar_subquery()
    )
    await db.execute(
        delete(BookmarkPage).where(
            BookmarkPage.bookmark_id == bookmark_id,
            BookmarkPage.page_id == page_id,
        ),
    )
    await update_bookmark(db, bookmark_id)


async def add_tag(db: AsyncSession, bookmark_id: int, tag: str) -> None:
    """
    Add a tag to a bookmark.

    The bookmark isn't required to exist; the tag row is stored regardless.

    Raises:
        IntegrityError: If the bookmark already has the tag.
    """
    await db.execute(insert(BookmarkTag).values(bookmark_id=bookmark_id, tag=tag))
    await update_bookmark(db, bookmark_id)


async def remove_tag(db: AsyncSession, bookmark_id: int, tag: str) -> None:
    """Remove a tag from a bookmark. Removing a missing tag is a no-op."""
    await db.execute(
        delete(BookmarkTag).where(
            BookmarkTag.bookmark_id == bookmark_id,
            BookmarkTag.tag == tag,
        ),
    )
    await update_bookmark(db, bookmark_id)

"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from models import Base, Bookmark, BookmarkPage, BookmarkTag, PageSelector


NOW = datetime(2024, 1, 1, tzinfo=UTC)


class FakeClock:
    """Stand-in for models.base.utc_now that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int = 1) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


@pytest.fixture(scope="session")
def database_url() -> str:
    """
    In-memory SQLite URL, also exported as DATABASE_URL.

    This must be set before any app imports that trigger Settings validation.
    """
    url = "sqlite+aiosqlite://"
    os.environ["DATABASE_URL"] = url
    return url


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with all tables for each test."""
    from db.session import build_engine

    engine = build_engine(database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """A session for calling the service layer directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock() -> Generator[FakeClock]:
    """Freeze the service layer's clock at NOW; tests advance it explicitly."""
    fake = FakeClock(NOW)
    with patch("services.bookmark_service.utc_now", new=fake):
        yield fake


@pytest.fixture
def fetch_rows(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[type[Any]], Awaitable[list[Any]]]:
    """Read every row of a model's table in a fresh session."""
    async def _fetch(model: type[Any]) -> list[Any]:
        async with session_factory() as session:
            result = await session.execute(select(model))
            return list(result.scalars().all())

    return _fetch


@pytest.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """
    One bookmark group with a tag and a page.

    bookmark 1 "Group name" / "description.", tag "hoge", page 1
    ("url", "https://example.test/") titled "Example site title".
    """
    async with session_factory() as session:
        session.add(
            Bookmark(name="Group name", desc="description.", created_at=NOW, updated_at=NOW),
        )
        await session.flush()
        session.add(BookmarkTag(bookmark_id=1, tag="hoge"))
        session.add(PageSelector(scope="url", value="https://example.test/"))
        await session.flush()
        session.add(
            BookmarkPage(
                bookmark_id=1,
                page_id=1,
                title="Example site title",
                desc="Site description.",
            ),
        )
        await session.commit()


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create a test client whose requests each get a session on the test engine."""
    # Clear the settings cache so it picks up DATABASE_URL from environment
    from core.config import get_settings

    get_settings.cache_clear()

    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()

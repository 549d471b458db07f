"""Shared fixtures: an in-memory SQLite store and an API client bound to it."""

import os

# Point the application at SQLite before any deeptalk module builds its engine.
os.environ.setdefault("DATABASE_ASYNC_PREFIX", "sqlite+aiosqlite://")
os.environ.setdefault("DATABASE_URI_OVERRIDE", "/:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from deeptalk.api import router
from deeptalk.core.config import settings
from deeptalk.core.db.database import Base, async_get_db
from deeptalk.core.setup import create_application, lifespan_factory
from deeptalk.models.post import Post


@pytest_asyncio.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client for the app with the database dependency overridden."""
    app = create_application(
        router=router,
        settings=settings,
        lifespan=lifespan_factory(settings, create_tables_on_start=False),
    )

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[async_get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def make_post():
    def _make(**overrides) -> Post:
        fields = {
            "title": "Hello community",
            "content": "First post on DeepTalk.",
            "author_id": "user-1",
            "author_name": "Mina",
            "author_avatar": "https://cdn.example.com/avatars/mina.png",
        }
        fields.update(overrides)
        return Post(**fields)

    return _make

"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator
from decimal import Decimal
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from tripdesigner.app.config import Settings, get_settings
from tripdesigner.app.db.engine import get_session
from tripdesigner.app.db.inmemory import InMemoryCatalogStore, InMemoryItineraryStore
from tripdesigner.app.db.models import Base
from tripdesigner.app.db.seed_catalog import seed_catalog
from tripdesigner.app.main import app
from tripdesigner.app.models.catalog import LocationEntry
from tripdesigner.app.planning.lifecycle import ItineraryManager


def make_location(
    location_id: int, category: str, price: str, name: str | None = None, pet_friendly: bool = False
) -> LocationEntry:
    """Build a catalog entry for tests."""
    return LocationEntry(
        id=location_id,
        name=name or f"{category} #{location_id}",
        category=category,
        price_per_person=Decimal(price),
        is_pet_friendly=pet_friendly,
    )


@pytest.fixture
def small_catalog() -> list[LocationEntry]:
    """Tour/Food/Pub catalog with easy-to-sum prices."""
    return [
        make_location(1, "Tour", "20.00"),
        make_location(2, "Food", "15.00"),
        make_location(3, "Pub", "12.50"),
        make_location(4, "Tour", "30.25"),
        make_location(5, "Food", "8.00"),
        make_location(9, "Tour", "40.00"),
    ]


@pytest.fixture
def itinerary_store() -> InMemoryItineraryStore:
    """Empty in-memory itinerary store."""
    return InMemoryItineraryStore()


@pytest.fixture
def manager(
    small_catalog: list[LocationEntry], itinerary_store: InMemoryItineraryStore
) -> ItineraryManager:
    """Lifecycle manager over in-memory stores and packaged templates."""
    return ItineraryManager(InMemoryCatalogStore(small_catalog), itinerary_store)


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite async engine with all tables.

    StaticPool keeps a single connection so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_engine(test_engine: AsyncEngine) -> AsyncGenerator[AsyncEngine, None]:
    """Test engine with the packaged catalog seeded."""
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        await seed_catalog(session)

    yield test_engine


@pytest_asyncio.fixture
async def db_session(seeded_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Async session over the seeded test database."""
    async with AsyncSession(seeded_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing uploads at a temporary directory."""
    return Settings(
        database_url="sqlite+aiosqlite://",
        upload_dir=str(tmp_path / "uploads"),
        admin_user_id="admin",
        seed_catalog=False,
    )


@pytest_asyncio.fixture
async def api_client(
    seeded_engine: AsyncEngine, test_settings: Settings
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app bound to the seeded test database."""

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with AsyncSession(seeded_engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

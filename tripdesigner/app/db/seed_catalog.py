"""Catalog seeding from the packaged location fixture."""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from tripdesigner.app.db.engine import get_async_engine
from tripdesigner.app.db.fixtures import load_seed_locations
from tripdesigner.app.db.models import Base, LocationData

logger = logging.getLogger(__name__)


async def seed_catalog(session: AsyncSession) -> int:
    """Insert fixture locations that are not yet in the catalog.

    This function is idempotent - safe to run multiple times. Existing rows
    are left untouched.

    Returns:
        Number of locations inserted
    """
    result = await session.execute(select(LocationData.id))
    existing_ids = set(result.scalars().all())

    inserted = 0
    for location in load_seed_locations():
        if location.id in existing_ids:
            continue
        session.add(
            LocationData(
                id=location.id,
                name=location.name,
                category=location.category,
                price_per_person=location.price_per_person,
                is_pet_friendly=location.is_pet_friendly,
            )
        )
        inserted += 1

    await session.commit()
    logger.info(f"[seed_catalog] inserted={inserted} existing={len(existing_ids)}")
    return inserted


async def init_database(engine: AsyncEngine, *, seed: bool = True) -> None:
    """Create tables and optionally seed the catalog."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            await seed_catalog(session)


if __name__ == "__main__":
    asyncio.run(init_database(get_async_engine()))

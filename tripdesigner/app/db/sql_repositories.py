"""SQL implementations of repository interfaces."""

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.db.fixtures import find_premade_itinerary
from tripdesigner.app.db.models import Itinerary, ItineraryLocation, LocationData
from tripdesigner.app.db.queries import select_owned_itineraries
from tripdesigner.app.db.repositories import ItineraryRecord
from tripdesigner.app.models.catalog import LocationEntry, PreMadeItinerary
from tripdesigner.app.planning.errors import StorageError

logger = logging.getLogger(__name__)


class SqlCatalogStore:
    """SQL implementation of CatalogStore."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_locations(self) -> Sequence[LocationEntry]:
        """List every catalog location ordered by id."""
        result = await self._session.execute(select(LocationData).order_by(LocationData.id))
        return [LocationEntry.model_validate(row) for row in result.scalars().all()]

    async def find_location(self, location_id: int) -> LocationEntry | None:
        """Get a catalog location by id."""
        row = await self._session.get(LocationData, location_id)
        if row is None:
            return None
        return LocationEntry.model_validate(row)

    async def list_distinct_categories(self) -> set[str]:
        """Distinct category tags present in the catalog."""
        result = await self._session.execute(select(LocationData.category).distinct())
        return set(result.scalars().all())

    def find_template(self, template_id: int) -> PreMadeItinerary | None:
        """Get a pre-made itinerary template by id."""
        return find_premade_itinerary(template_id)


class SqlItineraryStore:
    """SQL implementation of ItineraryStore."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._rows: dict[int, Itinerary] = {}

    async def _load_row(self, itinerary: ItineraryRecord) -> Itinerary | None:
        if itinerary.id is None:
            return None
        row = self._rows.get(itinerary.id)
        if row is None:
            result = await self._session.execute(
                select_owned_itineraries(itinerary.owner_user_id).where(
                    Itinerary.id == itinerary.id
                )
            )
            row = result.scalar_one_or_none()
            if row is not None:
                self._rows[row.id] = row
        return row

    async def save(self, itinerary: ItineraryRecord) -> ItineraryRecord:
        """Stage an insert or update and assign ids to new itineraries."""
        row = await self._load_row(itinerary)

        if row is None:
            row = Itinerary(owner_user_id=itinerary.owner_user_id, links=[])
            self._session.add(row)

        row.name = itinerary.name
        row.date = itinerary.date
        row.number_of_people = itinerary.number_of_people
        row.number_of_pets = itinerary.number_of_pets
        row.total_cost_per_itinerary = itinerary.total_cost_per_itinerary
        row.total_cost_for_all_locations = itinerary.total_cost_for_all_locations
        row.total_cost_for_all_people = itinerary.total_cost_for_all_people

        # Reuse link rows for locations that stay linked
        existing_links = {link.location_id: link for link in row.links}
        new_links = []
        for location in itinerary.locations:
            link = existing_links.get(location.id)
            if link is None:
                link = ItineraryLocation(location_id=location.id)
            new_links.append(link)
        row.links = new_links

        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"[itinerary.save] owner={itinerary.owner_user_id} failed: {e}")
            raise StorageError("Failed to stage itinerary") from e

        itinerary.id = row.id
        self._rows[row.id] = row
        return itinerary

    async def delete(self, itinerary: ItineraryRecord) -> None:
        """Stage removal of an itinerary and its links."""
        row = await self._load_row(itinerary)
        if row is None:
            return
        await self._session.delete(row)
        self._rows.pop(row.id, None)

    async def query(
        self, owner_user_id: str, ids: Iterable[int] | None = None
    ) -> list[ItineraryRecord]:
        """List itineraries owned by a user with links loaded eagerly."""
        # Refresh rows already in the session so links reflect the database
        stmt = select_owned_itineraries(owner_user_id).execution_options(populate_existing=True)
        if ids is not None:
            stmt = stmt.where(Itinerary.id.in_(list(ids)))

        result = await self._session.execute(stmt)
        rows = list(result.scalars().all())

        records = []
        for row in rows:
            self._rows[row.id] = row
            records.append(_to_record(row))
        return records

    async def commit(self) -> None:
        """Commit staged changes."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"[itinerary.commit] failed: {e}")
            raise StorageError("Failed to commit itinerary changes") from e


def _to_record(row: Itinerary) -> ItineraryRecord:
    locations = sorted(
        (LocationEntry.model_validate(link.location) for link in row.links),
        key=lambda loc: loc.id,
    )
    return ItineraryRecord(
        id=row.id,
        owner_user_id=row.owner_user_id,
        name=row.name,
        date=row.date,
        number_of_people=row.number_of_people,
        number_of_pets=row.number_of_pets,
        locations=locations,
        total_cost_per_itinerary=row.total_cost_per_itinerary,
        total_cost_for_all_locations=row.total_cost_for_all_locations,
        total_cost_for_all_people=row.total_cost_for_all_people,
    )

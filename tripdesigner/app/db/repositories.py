"""Repository protocol interfaces for data access."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Protocol

from tripdesigner.app.models.catalog import LocationEntry, PreMadeItinerary


@dataclass
class ItineraryRecord:
    """Itinerary aggregate with its linked locations resolved."""

    owner_user_id: str
    name: str
    date: date
    number_of_people: int = 1
    number_of_pets: int = 0
    locations: list[LocationEntry] = field(default_factory=list)
    total_cost_per_itinerary: Decimal = Decimal("0")
    total_cost_for_all_locations: Decimal = Decimal("0")
    total_cost_for_all_people: Decimal = Decimal("0")
    id: int | None = None


class CatalogStore(Protocol):
    """Read-only access to catalog locations and templates."""

    async def list_locations(self) -> Sequence[LocationEntry]:
        """List every catalog location ordered by id."""
        ...

    async def find_location(self, location_id: int) -> LocationEntry | None:
        """Get a catalog location by id.

        Args:
            location_id: Location ID

        Returns:
            Location or None if not in the catalog
        """
        ...

    async def list_distinct_categories(self) -> set[str]:
        """Distinct category tags present in the catalog."""
        ...

    def find_template(self, template_id: int) -> PreMadeItinerary | None:
        """Get a pre-made itinerary template by id."""
        ...


class ItineraryStore(Protocol):
    """Persistence for itinerary aggregates.

    save/delete stage changes; nothing is durable until commit().
    """

    async def save(self, itinerary: ItineraryRecord) -> ItineraryRecord:
        """Stage an insert or update, assigning an id to new itineraries.

        Args:
            itinerary: Itinerary aggregate

        Returns:
            The same record with its id set
        """
        ...

    async def delete(self, itinerary: ItineraryRecord) -> None:
        """Stage removal of an itinerary and its links."""
        ...

    async def query(
        self, owner_user_id: str, ids: Iterable[int] | None = None
    ) -> list[ItineraryRecord]:
        """List itineraries owned by a user with links loaded eagerly.

        Args:
            owner_user_id: Owner whose itineraries are returned
            ids: Optional id filter

        Returns:
            Itinerary records ordered by id
        """
        ...

    async def commit(self) -> None:
        """Commit staged changes.

        Raises:
            StorageError: If the underlying store fails
        """
        ...

"""In-memory implementations of repository interfaces."""

import copy
from collections.abc import Iterable, Sequence

from tripdesigner.app.db.fixtures import find_premade_itinerary
from tripdesigner.app.db.repositories import ItineraryRecord
from tripdesigner.app.models.catalog import LocationEntry, PreMadeItinerary


class InMemoryCatalogStore:
    """In-memory implementation of CatalogStore."""

    def __init__(
        self,
        locations: Iterable[LocationEntry] = (),
        templates: Iterable[PreMadeItinerary] | None = None,
    ) -> None:
        self._locations = {loc.id: loc for loc in locations}
        # None means "use the packaged templates"
        self._templates = (
            {template.id: template for template in templates} if templates is not None else None
        )

    async def list_locations(self) -> Sequence[LocationEntry]:
        """List every catalog location ordered by id."""
        return [self._locations[key] for key in sorted(self._locations)]

    async def find_location(self, location_id: int) -> LocationEntry | None:
        """Get a catalog location by id."""
        return self._locations.get(location_id)

    async def list_distinct_categories(self) -> set[str]:
        """Distinct category tags present in the catalog."""
        return {loc.category for loc in self._locations.values()}

    def find_template(self, template_id: int) -> PreMadeItinerary | None:
        """Get a pre-made itinerary template by id."""
        if self._templates is None:
            return find_premade_itinerary(template_id)
        return self._templates.get(template_id)


class InMemoryItineraryStore:
    """In-memory implementation of ItineraryStore.

    Changes are staged by save/delete and only become visible to query
    after commit. commit_count lets tests check commit boundaries.
    """

    def __init__(self) -> None:
        self._itineraries: dict[int, ItineraryRecord] = {}
        self._staged: dict[int, ItineraryRecord] = {}
        self._staged_deletes: set[int] = set()
        self._next_id = 1
        self.commit_count = 0

    async def save(self, itinerary: ItineraryRecord) -> ItineraryRecord:
        """Stage an insert or update."""
        if itinerary.id is None:
            itinerary.id = self._next_id
            self._next_id += 1
        self._staged[itinerary.id] = copy.deepcopy(itinerary)
        return itinerary

    async def delete(self, itinerary: ItineraryRecord) -> None:
        """Stage removal of an itinerary."""
        if itinerary.id is not None:
            self._staged.pop(itinerary.id, None)
            self._staged_deletes.add(itinerary.id)

    async def query(
        self, owner_user_id: str, ids: Iterable[int] | None = None
    ) -> list[ItineraryRecord]:
        """List committed itineraries owned by a user."""
        wanted = set(ids) if ids is not None else None
        return [
            copy.deepcopy(record)
            for key, record in sorted(self._itineraries.items())
            # Enforce ownership
            if record.owner_user_id == owner_user_id and (wanted is None or key in wanted)
        ]

    async def commit(self) -> None:
        """Apply staged changes."""
        for key in self._staged_deletes:
            self._itineraries.pop(key, None)
        self._itineraries.update(self._staged)
        self._staged.clear()
        self._staged_deletes.clear()
        self.commit_count += 1

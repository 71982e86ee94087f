"""Itinerary lifecycle manager - create, edit, recalculate, delete and read.

Every operation is scoped to an explicit owner id and every mutating call
commits exactly once, after all in-memory changes are applied.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timezone

from tripdesigner.app.db.repositories import CatalogStore, ItineraryRecord, ItineraryStore
from tripdesigner.app.models.catalog import LocationEntry
from tripdesigner.app.models.itinerary import (
    MAX_NUMBER_OF_PEOPLE,
    MAX_NUMBER_OF_PETS,
    CostSummary,
    Selection,
)
from tripdesigner.app.planning.errors import NotFoundError, ValidationError
from tripdesigner.app.planning.selection import (
    cost_for_people,
    resolve_selection,
    total_for_locations,
)
from tripdesigner.app.utils.logging import StructuredItineraryLogger
from tripdesigner.app.utils.metrics import PrometheusItineraryMetrics

logger = logging.getLogger(__name__)


def parse_trip_date(value: date | datetime | str | None) -> date:
    """Normalize a submitted trip date to a calendar date.

    Raises:
        ValidationError: If the value is missing or unparsable
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError("Itinerary date is required")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise ValidationError(f"Invalid itinerary date: {value!r}") from e


def _require_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("Itinerary name is required")
    return name.strip()


def _require_people(number_of_people: int) -> int:
    if number_of_people < 1:
        raise ValidationError("Number of people must be at least 1")
    if number_of_people > MAX_NUMBER_OF_PEOPLE:
        raise ValidationError(f"Number of people cannot exceed {MAX_NUMBER_OF_PEOPLE}")
    return number_of_people


def _require_pets(number_of_pets: int) -> int:
    if number_of_pets < 0:
        raise ValidationError("Number of pets cannot be negative")
    if number_of_pets > MAX_NUMBER_OF_PETS:
        raise ValidationError(f"Number of pets cannot exceed {MAX_NUMBER_OF_PETS}")
    return number_of_pets


def _apply_locations(
    itinerary: ItineraryRecord, locations: list[LocationEntry], number_of_people: int
) -> None:
    total = total_for_locations(locations)
    itinerary.locations = locations
    itinerary.number_of_people = number_of_people
    itinerary.total_cost_for_all_locations = total
    itinerary.total_cost_per_itinerary = cost_for_people(total, number_of_people)
    itinerary.total_cost_for_all_people = cost_for_people(total, number_of_people)


class ItineraryManager:
    """Orchestrates itinerary mutations over the catalog and itinerary stores."""

    def __init__(
        self,
        catalog: CatalogStore,
        store: ItineraryStore,
        *,
        op_logger: StructuredItineraryLogger | None = None,
        metrics: PrometheusItineraryMetrics | None = None,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._log = op_logger or StructuredItineraryLogger()
        self._metrics = metrics or PrometheusItineraryMetrics()

    async def _resolve(self, selection: Selection | None, number_of_people: int) -> CostSummary:
        catalog = await self._catalog.list_locations()
        if selection is None:
            selection = Selection()
        return resolve_selection(
            catalog, selection.categories, selection.location_ids, number_of_people
        )

    async def _get_owned(self, itinerary_id: int, owner_user_id: str) -> ItineraryRecord:
        matches = await self._store.query(owner_user_id, [itinerary_id])
        if not matches:
            self._metrics.inc_operation("lookup", "not_found")
            raise NotFoundError(f"Itinerary {itinerary_id} not found")
        return matches[0]

    async def create(
        self,
        owner_user_id: str,
        name: str,
        trip_date: date | datetime | str | None,
        selection: Selection | None = None,
        number_of_people: int = 1,
        number_of_pets: int = 0,
    ) -> ItineraryRecord:
        """Create an itinerary from a category/location selection.

        Raises:
            ValidationError: On empty name, unparsable date or invalid counts
        """
        clean_name = _require_name(name)
        parsed_date = parse_trip_date(trip_date)
        _require_people(number_of_people)
        _require_pets(number_of_pets)

        summary = await self._resolve(selection, number_of_people)

        itinerary = ItineraryRecord(
            owner_user_id=owner_user_id,
            name=clean_name,
            date=parsed_date,
            number_of_pets=number_of_pets,
        )
        _apply_locations(itinerary, summary.locations, number_of_people)

        await self._store.save(itinerary)
        await self._store.commit()

        self._metrics.inc_operation("create", "success")
        self._log.log_operation(
            "create",
            owner_user_id,
            "success",
            itinerary.id,
            locations=len(itinerary.locations),
            total=str(itinerary.total_cost_for_all_people),
        )
        return itinerary

    async def create_from_templates(
        self, owner_user_id: str, template_ids: Iterable[int]
    ) -> list[ItineraryRecord]:
        """Copy pre-made templates into new itineraries owned by the user.

        Unknown template ids are skipped, as are template locations that are
        no longer in the catalog. The batch is committed once.
        """
        created: list[ItineraryRecord] = []
        today = datetime.now(timezone.utc).date()

        for template_id in template_ids:
            template = self._catalog.find_template(template_id)
            if template is None:
                self._metrics.inc_skipped("create_from_template", "unknown_template")
                self._log.log_operation(
                    "create_from_template", owner_user_id, "skipped", template_id=template_id
                )
                continue

            linked: list[LocationEntry] = []
            linked_ids: set[int] = set()
            for template_location in template.locations:
                if template_location.id in linked_ids:
                    continue
                existing = await self._catalog.find_location(template_location.id)
                if existing is None:
                    self._metrics.inc_skipped("create_from_template", "missing_location")
                    continue
                linked.append(existing)
                linked_ids.add(existing.id)

            itinerary = ItineraryRecord(owner_user_id=owner_user_id, name=template.name, date=today)
            _apply_locations(itinerary, linked, itinerary.number_of_people)
            await self._store.save(itinerary)
            created.append(itinerary)

        await self._store.commit()

        for itinerary in created:
            self._metrics.inc_operation("create_from_template", "success")
            self._log.log_operation(
                "create_from_template",
                owner_user_id,
                "success",
                itinerary.id,
                locations=len(itinerary.locations),
            )
        return created

    async def create_from_template(
        self, owner_user_id: str, template_id: int
    ) -> ItineraryRecord | None:
        """Copy a single template; returns None when the template is unknown."""
        created = await self.create_from_templates(owner_user_id, [template_id])
        return created[0] if created else None

    async def edit(
        self,
        itinerary_id: int,
        owner_user_id: str,
        new_name: str,
        new_date: date | datetime | str | None,
        new_selection: Selection | None = None,
    ) -> ItineraryRecord:
        """Rename, re-date and re-select an itinerary.

        Costs are recomputed with the itinerary's existing number of people.

        Raises:
            ValidationError: On empty name or unparsable date
            NotFoundError: If the caller does not own the itinerary
        """
        clean_name = _require_name(new_name)
        parsed_date = parse_trip_date(new_date)

        itinerary = await self._get_owned(itinerary_id, owner_user_id)
        itinerary.name = clean_name
        itinerary.date = parsed_date
        itinerary.locations = []

        summary = await self._resolve(new_selection, itinerary.number_of_people)
        _apply_locations(itinerary, summary.locations, itinerary.number_of_people)

        await self._store.save(itinerary)
        await self._store.commit()

        self._metrics.inc_operation("edit", "success")
        self._log.log_operation(
            "edit", owner_user_id, "success", itinerary.id, locations=len(itinerary.locations)
        )
        return itinerary

    async def recalculate_cost(
        self, itinerary_id: int, owner_user_id: str, number_of_people: int
    ) -> ItineraryRecord:
        """Recompute totals from current links for a new group size.

        Raises:
            ValidationError: If number_of_people is outside 1..MAX_NUMBER_OF_PEOPLE
            NotFoundError: If the caller does not own the itinerary
        """
        _require_people(number_of_people)

        itinerary = await self._get_owned(itinerary_id, owner_user_id)
        _apply_locations(itinerary, list(itinerary.locations), number_of_people)

        await self._store.save(itinerary)
        await self._store.commit()

        self._metrics.inc_operation("recalculate_cost", "success")
        self._log.log_operation(
            "recalculate_cost",
            owner_user_id,
            "success",
            itinerary.id,
            number_of_people=number_of_people,
            total=str(itinerary.total_cost_for_all_people),
        )
        return itinerary

    async def delete(self, itinerary_ids: Iterable[int], owner_user_id: str) -> int:
        """Delete the caller's itineraries among the given ids.

        Ids that are unknown or owned by someone else are skipped silently.

        Returns:
            Number of itineraries removed
        """
        requested = set(itinerary_ids)
        owned = await self._store.query(owner_user_id, requested) if requested else []

        for itinerary in owned:
            await self._store.delete(itinerary)
        await self._store.commit()

        skipped = len(requested) - len(owned)
        self._metrics.inc_skipped("delete", "not_owned", skipped)
        self._metrics.inc_operation("delete", "success")
        self._log.log_operation(
            "delete", owner_user_id, "success", deleted=len(owned), skipped=skipped
        )
        return len(owned)

    async def list_itineraries(self, owner_user_id: str) -> list[ItineraryRecord]:
        """All itineraries owned by the user, links loaded."""
        return await self._store.query(owner_user_id)

    async def get_itinerary(
        self, itinerary_id: int, owner_user_id: str
    ) -> ItineraryRecord | None:
        """The owner's itinerary, or None if the id is not theirs."""
        matches = await self._store.query(owner_user_id, [itinerary_id])
        if not matches:
            logger.info(f"[itinerary.get] owner={owner_user_id} id={itinerary_id} not found")
            return None
        return matches[0]

"""Fixture-backed catalog data: seed locations and pre-made templates."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from tripdesigner.app.models.catalog import LocationEntry, PreMadeItinerary

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def _load_catalog_fixture() -> dict[str, Any]:
    fixtures_path = FIXTURES_DIR / "catalog.json"
    with open(fixtures_path) as f:
        return json.load(f)


def load_seed_locations() -> list[LocationEntry]:
    """Load the catalog locations shipped with the package.

    Returns:
        Location entries ordered as in the fixture
    """
    data = _load_catalog_fixture()
    return [LocationEntry.model_validate(item) for item in data.get("locations", [])]


@lru_cache
def get_premade_itineraries() -> tuple[PreMadeItinerary, ...]:
    """Pre-made itinerary templates with their locations resolved.

    Template location ids that do not appear in the fixture are skipped.
    """
    data = _load_catalog_fixture()
    locations_by_id = {loc.id: loc for loc in load_seed_locations()}

    templates = []
    for item in data.get("premade", []):
        templates.append(
            PreMadeItinerary(
                id=item["id"],
                name=item["name"],
                description=item.get("description", ""),
                locations=tuple(
                    locations_by_id[loc_id]
                    for loc_id in item.get("location_ids", [])
                    if loc_id in locations_by_id
                ),
            )
        )
    return tuple(templates)


def find_premade_itinerary(template_id: int) -> PreMadeItinerary | None:
    """Get a pre-made template by id, or None if no such template exists."""
    for template in get_premade_itineraries():
        if template.id == template_id:
            return template
    return None

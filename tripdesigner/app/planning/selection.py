"""Selection engine - resolve category/location choices into a costed location set.

The resolved set is the intersection of two filters over the catalog:
a location is kept only when its id was chosen AND its category was chosen.
A location picked by id whose category was not selected is dropped.

The "All" category token is expanded once, before filtering, to the distinct
categories present in the catalog. Location ids are widened to the whole
catalog only if the token survives that expansion, which happens when the
catalog itself carries a category literally named "All".
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from tripdesigner.app.models.catalog import ALL_CATEGORIES, LocationEntry
from tripdesigner.app.models.itinerary import CostSummary


def expand_selection(
    catalog: Sequence[LocationEntry],
    categories: Iterable[str] | None,
    location_ids: Iterable[int] | None,
) -> tuple[set[str], set[int]]:
    """Apply wildcard expansion to a raw selection.

    Args:
        catalog: Current catalog snapshot
        categories: Chosen category tags, possibly containing "All"
        location_ids: Chosen location ids

    Returns:
        (categories, location_ids) after expansion
    """
    selected_categories = set(categories or ())
    selected_ids = set(location_ids or ())

    if ALL_CATEGORIES in selected_categories:
        selected_categories = {loc.category for loc in catalog}

    if ALL_CATEGORIES in selected_categories:
        selected_ids = {loc.id for loc in catalog}

    return selected_categories, selected_ids


def total_for_locations(locations: Iterable[LocationEntry]) -> Decimal:
    """Sum per-person prices without intermediate rounding."""
    return sum((loc.price_per_person for loc in locations), Decimal("0"))


def cost_for_people(total_for_all_locations: Decimal, number_of_people: int) -> Decimal:
    """Scale a per-person locations total to a group size."""
    return total_for_all_locations * number_of_people


def resolve_selection(
    catalog: Sequence[LocationEntry],
    categories: Iterable[str] | None,
    location_ids: Iterable[int] | None,
    number_of_people: int,
) -> CostSummary:
    """Resolve a selection against the catalog and compute its costs.

    Deterministic for a given catalog and input; the catalog is not modified.
    An empty category or id selection yields an empty, zero-cost result.

    Args:
        catalog: Current catalog snapshot
        categories: Chosen category tags, possibly containing "All"
        location_ids: Chosen location ids
        number_of_people: Group size used for the itinerary total

    Returns:
        CostSummary with resolved locations in catalog order
    """
    selected_categories, selected_ids = expand_selection(catalog, categories, location_ids)

    resolved: list[LocationEntry] = []
    seen: set[int] = set()
    for loc in catalog:
        if loc.id in seen:
            continue
        if loc.id in selected_ids and loc.category in selected_categories:
            resolved.append(loc)
            seen.add(loc.id)

    total = total_for_locations(resolved)
    return CostSummary(
        locations=resolved,
        total_cost_for_all_locations=total,
        total_cost_per_itinerary=cost_for_people(total, number_of_people),
    )

"""Ownership-safe query helpers."""

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from tripdesigner.app.db.models import Itinerary, ItineraryLocation


def select_owned_itineraries(owner_user_id: str) -> Select[tuple[Itinerary]]:
    """Select itineraries with owner scoping enforced.

    Links and their catalog locations are loaded eagerly.

    Args:
        owner_user_id: Owner whose rows are visible

    Returns:
        Select statement filtered by owner and ordered by id
    """
    return (
        select(Itinerary)
        .where(Itinerary.owner_user_id == owner_user_id)
        .options(selectinload(Itinerary.links).selectinload(ItineraryLocation.location))
        .order_by(Itinerary.id)
    )

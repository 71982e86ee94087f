"""Models package - re-exports for convenience."""

from tripdesigner.app.models.catalog import ALL_CATEGORIES, LocationEntry, PreMadeItinerary
from tripdesigner.app.models.chat import ChatEntry
from tripdesigner.app.models.itinerary import CostSummary, ItineraryView, Selection
from tripdesigner.app.models.review import ReviewEntry

__all__ = [
    # Catalog
    "ALL_CATEGORIES",
    "LocationEntry",
    "PreMadeItinerary",
    # Itinerary
    "Selection",
    "CostSummary",
    "ItineraryView",
    # Chat
    "ChatEntry",
    # Reviews
    "ReviewEntry",
]

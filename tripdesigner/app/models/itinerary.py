"""Itinerary models - selections, cost summaries and user-facing views."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from tripdesigner.app.models.catalog import LocationEntry

# Upper bounds keep group totals inside the Numeric(12, 2) cost columns
MAX_NUMBER_OF_PEOPLE = 1000
MAX_NUMBER_OF_PETS = 100


class Selection(BaseModel):
    """Raw user choice of categories and location ids.

    Either set may be empty; an empty selection resolves to an empty itinerary.
    """

    categories: set[str] = Field(default_factory=set)
    location_ids: set[int] = Field(default_factory=set)


class CostSummary(BaseModel):
    """Resolved locations and their derived totals."""

    locations: list[LocationEntry]
    total_cost_for_all_locations: Decimal
    total_cost_per_itinerary: Decimal


class ItineraryView(BaseModel):
    """Itinerary as returned to its owner."""

    id: int
    name: str
    date: dt.date
    number_of_people: int
    number_of_pets: int
    locations: list[LocationEntry]
    total_cost_per_itinerary: Decimal
    total_cost_for_all_locations: Decimal
    total_cost_for_all_people: Decimal

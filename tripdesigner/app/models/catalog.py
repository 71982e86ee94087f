"""Catalog models - bookable locations and pre-made templates."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Category token that widens a selection to the whole catalog
ALL_CATEGORIES = "All"


class LocationEntry(BaseModel):
    """Bookable catalog location."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    category: str
    price_per_person: Decimal = Field(..., ge=0)
    is_pet_friendly: bool = False


class PreMadeItinerary(BaseModel):
    """Read-only itinerary template used to seed user itineraries."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""
    locations: tuple[LocationEntry, ...] = ()

    @property
    def price_per_person(self) -> Decimal:
        """Sum of the template's per-person location prices."""
        return sum((loc.price_per_person for loc in self.locations), Decimal("0"))

"""Catalog endpoints - locations, categories and pre-made templates."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.db.engine import get_session
from tripdesigner.app.db.fixtures import get_premade_itineraries
from tripdesigner.app.db.sql_repositories import SqlCatalogStore
from tripdesigner.app.models.catalog import LocationEntry

router = APIRouter(prefix="/catalog", tags=["catalog"])


class LocationListResponse(BaseModel):
    """Response for GET /catalog/locations."""

    locations: list[LocationEntry]


class CategoryListResponse(BaseModel):
    """Response for GET /catalog/categories."""

    categories: list[str]


class PreMadeSummary(BaseModel):
    """Single pre-made template."""

    id: int
    name: str
    description: str
    locations: list[LocationEntry]
    price_per_person: Decimal


class PreMadeListResponse(BaseModel):
    """Response for GET /catalog/premade."""

    templates: list[PreMadeSummary]


@router.get("/locations", response_model=LocationListResponse)
async def list_locations(
    session: Annotated[AsyncSession, Depends(get_session)],
    category: Annotated[str | None, Query(max_length=100)] = None,
) -> LocationListResponse:
    """List catalog locations, optionally filtered by category."""
    locations = await SqlCatalogStore(session).list_locations()
    if category:
        locations = [loc for loc in locations if loc.category == category]
    return LocationListResponse(locations=list(locations))


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryListResponse:
    """Distinct catalog categories, sorted."""
    categories = await SqlCatalogStore(session).list_distinct_categories()
    return CategoryListResponse(categories=sorted(categories))


@router.get("/premade", response_model=PreMadeListResponse)
async def list_premade() -> PreMadeListResponse:
    """List pre-made itinerary templates."""
    return PreMadeListResponse(
        templates=[
            PreMadeSummary(
                id=template.id,
                name=template.name,
                description=template.description,
                locations=list(template.locations),
                price_per_person=template.price_per_person,
            )
            for template in get_premade_itineraries()
        ]
    )

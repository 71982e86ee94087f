"""Itinerary endpoints - create, pre-made import, edit, cost, delete and read."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.api.auth import get_current_context
from tripdesigner.app.db.context import RequestContext
from tripdesigner.app.db.engine import get_session
from tripdesigner.app.db.repositories import ItineraryRecord
from tripdesigner.app.db.sql_repositories import SqlCatalogStore, SqlItineraryStore
from tripdesigner.app.models.itinerary import (
    MAX_NUMBER_OF_PEOPLE,
    MAX_NUMBER_OF_PETS,
    ItineraryView,
    Selection,
)
from tripdesigner.app.planning.errors import StorageError
from tripdesigner.app.planning.lifecycle import ItineraryManager

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


class CreateItineraryRequest(BaseModel):
    """Request body for POST /itineraries."""

    name: str = Field(..., max_length=200, description="Itinerary name")
    date: str = Field(..., description="Trip date (ISO 8601)")
    categories: list[str] = Field(default_factory=list, description='Categories, may include "All"')
    location_ids: list[int] = Field(default_factory=list, description="Chosen location ids")
    number_of_people: int = Field(1, ge=1, le=MAX_NUMBER_OF_PEOPLE)
    number_of_pets: int = Field(0, ge=0, le=MAX_NUMBER_OF_PETS)


class EditItineraryRequest(BaseModel):
    """Request body for PUT /itineraries/{itinerary_id}."""

    name: str = Field(..., max_length=200)
    date: str
    categories: list[str] = Field(default_factory=list)
    location_ids: list[int] = Field(default_factory=list)


class PreMadeRequest(BaseModel):
    """Request body for POST /itineraries/premade."""

    template_ids: list[int] = Field(default_factory=list)


class RecalculateCostRequest(BaseModel):
    """Request body for POST /itineraries/{itinerary_id}/cost."""

    number_of_people: int


class DeleteItinerariesRequest(BaseModel):
    """Request body for POST /itineraries/delete."""

    itinerary_ids: list[int] = Field(default_factory=list)


class ItineraryListResponse(BaseModel):
    """Response for itinerary listings."""

    itineraries: list[ItineraryView]


class DeleteItinerariesResponse(BaseModel):
    """Response for POST /itineraries/delete."""

    deleted: int
    itineraries: list[ItineraryView]


def get_itinerary_manager(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ItineraryManager:
    """Build a request-scoped manager over the SQL stores."""
    return ItineraryManager(SqlCatalogStore(session), SqlItineraryStore(session))


def to_view(itinerary: ItineraryRecord) -> ItineraryView:
    """Convert a persisted itinerary record to its API representation.

    Raises:
        StorageError: If the record was never saved
    """
    if itinerary.id is None:
        raise StorageError(f"Itinerary {itinerary.name!r} has not been persisted")
    return ItineraryView(
        id=itinerary.id,
        name=itinerary.name,
        date=itinerary.date,
        number_of_people=itinerary.number_of_people,
        number_of_pets=itinerary.number_of_pets,
        locations=list(itinerary.locations),
        total_cost_per_itinerary=itinerary.total_cost_per_itinerary,
        total_cost_for_all_locations=itinerary.total_cost_for_all_locations,
        total_cost_for_all_people=itinerary.total_cost_for_all_people,
    )


@router.post("", response_model=ItineraryView, status_code=status.HTTP_201_CREATED)
async def create_itinerary(
    request: CreateItineraryRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryView:
    """Create an itinerary from a category/location selection."""
    itinerary = await manager.create(
        ctx.user_id,
        request.name,
        request.date,
        Selection(categories=set(request.categories), location_ids=set(request.location_ids)),
        number_of_people=request.number_of_people,
        number_of_pets=request.number_of_pets,
    )
    return to_view(itinerary)


@router.post(
    "/premade", response_model=ItineraryListResponse, status_code=status.HTTP_201_CREATED
)
async def create_from_premade(
    request: PreMadeRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryListResponse:
    """Copy the selected pre-made templates into the caller's itineraries.

    Unknown template ids are ignored.
    """
    created = await manager.create_from_templates(ctx.user_id, request.template_ids)
    return ItineraryListResponse(itineraries=[to_view(itin) for itin in created])


@router.get("", response_model=ItineraryListResponse)
async def list_itineraries(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryListResponse:
    """List the caller's itineraries with their locations."""
    itineraries = await manager.list_itineraries(ctx.user_id)
    return ItineraryListResponse(itineraries=[to_view(itin) for itin in itineraries])


@router.post("/delete", response_model=DeleteItinerariesResponse)
async def delete_itineraries(
    request: DeleteItinerariesRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> DeleteItinerariesResponse:
    """Delete the caller's itineraries among the given ids.

    Returns the caller's remaining itineraries.
    """
    deleted = await manager.delete(request.itinerary_ids, ctx.user_id)
    remaining = await manager.list_itineraries(ctx.user_id)
    return DeleteItinerariesResponse(
        deleted=deleted, itineraries=[to_view(itin) for itin in remaining]
    )


@router.get("/{itinerary_id}", response_model=ItineraryView)
async def get_itinerary(
    itinerary_id: int,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryView:
    """Get one of the caller's itineraries."""
    itinerary = await manager.get_itinerary(itinerary_id, ctx.user_id)
    if itinerary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Itinerary {itinerary_id} not found",
        )
    return to_view(itinerary)


@router.put("/{itinerary_id}", response_model=ItineraryView)
async def edit_itinerary(
    itinerary_id: int,
    request: EditItineraryRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryView:
    """Rename, re-date and re-select an itinerary; the people count is kept."""
    itinerary = await manager.edit(
        itinerary_id,
        ctx.user_id,
        request.name,
        request.date,
        Selection(categories=set(request.categories), location_ids=set(request.location_ids)),
    )
    return to_view(itinerary)


@router.post("/{itinerary_id}/cost", response_model=ItineraryView)
async def recalculate_cost(
    itinerary_id: int,
    request: RecalculateCostRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    manager: Annotated[ItineraryManager, Depends(get_itinerary_manager)],
) -> ItineraryView:
    """Recompute totals for a new number of people."""
    itinerary = await manager.recalculate_cost(
        itinerary_id, ctx.user_id, request.number_of_people
    )
    return to_view(itinerary)

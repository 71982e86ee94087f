"""Review endpoints - public listing/details and authenticated posting."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.api.auth import require_identified_context
from tripdesigner.app.config import Settings, get_settings
from tripdesigner.app.db.context import RequestContext
from tripdesigner.app.db.engine import get_session
from tripdesigner.app.models.review import ReviewEntry
from tripdesigner.app.reviews.service import create_review, get_review, list_reviews
from tripdesigner.app.reviews.storage import LocalImageStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


class ReviewListResponse(BaseModel):
    """Response for GET /reviews."""

    reviews: list[ReviewEntry]


def get_image_storage(settings: Annotated[Settings, Depends(get_settings)]) -> LocalImageStorage:
    """Image storage rooted at the configured upload directory."""
    return LocalImageStorage(settings.upload_dir)


@router.get("", response_model=ReviewListResponse)
async def list_all_reviews(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ReviewListResponse:
    """List all reviews."""
    return ReviewListResponse(reviews=await list_reviews(session=session))


@router.get("/{review_id}", response_model=ReviewEntry)
async def review_details(
    review_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ReviewEntry:
    """Get a single review."""
    review = await get_review(review_id, session=session)
    if review is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Review {review_id} not found",
        )
    return review


@router.post("", response_model=ReviewEntry, status_code=status.HTTP_201_CREATED)
async def post_review(
    ctx: Annotated[RequestContext, Depends(require_identified_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    storage: Annotated[LocalImageStorage, Depends(get_image_storage)],
    username: Annotated[str, Form(max_length=100)],
    title: Annotated[str, Form(max_length=200)],
    review_post: Annotated[str, Form()],
    image: Annotated[UploadFile | None, File()] = None,
) -> ReviewEntry:
    """Publish a review with an optional image (multipart form).

    Requires an Authorization header (401 otherwise); the review itself
    carries the given username.
    """
    image_name = None
    image_content = None
    if image is not None:
        image_name = image.filename
        image_content = await image.read()

    logger.info(f"[reviews.post] caller={ctx.user_id} username={username}")
    return await create_review(
        username=username,
        title=title,
        review_post=review_post,
        image_name=image_name,
        image_content=image_content,
        storage=storage,
        default_image_path=settings.default_review_image,
        session=session,
    )

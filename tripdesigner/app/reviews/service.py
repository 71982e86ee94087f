"""Review persistence."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.db.models import Review
from tripdesigner.app.models.review import ReviewEntry
from tripdesigner.app.planning.errors import StorageError, ValidationError
from tripdesigner.app.reviews.storage import LocalImageStorage

logger = logging.getLogger(__name__)


async def create_review(
    *,
    username: str,
    title: str,
    review_post: str,
    image_name: str | None,
    image_content: bytes | None,
    storage: LocalImageStorage,
    default_image_path: str,
    session: AsyncSession,
) -> ReviewEntry:
    """Publish a review, storing its image when one was uploaded.

    Raises:
        ValidationError: If username, title or text is empty
        StorageError: If the review cannot be committed
    """
    for field_name, value in (("username", username), ("title", title), ("review", review_post)):
        if not value or not value.strip():
            raise ValidationError(f"Review {field_name} is required")

    if image_content:
        image_path = storage.save(image_name or "upload", image_content)
    else:
        image_path = default_image_path

    review = Review(
        username=username.strip(),
        title=title.strip(),
        review_post=review_post.strip(),
        posted_date=datetime.now(timezone.utc),
        image_path=image_path,
    )
    session.add(review)

    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        # No review row references the image
        if image_content:
            storage.delete(image_path)
        logger.error(f"[reviews.create] failed: {e}")
        raise StorageError("Failed to store review") from e

    return ReviewEntry.model_validate(review)


async def list_reviews(*, session: AsyncSession) -> list[ReviewEntry]:
    """All reviews, newest first."""
    result = await session.execute(
        select(Review).order_by(Review.posted_date.desc(), Review.id.desc())
    )
    return [ReviewEntry.model_validate(review) for review in result.scalars().all()]


async def get_review(review_id: int, *, session: AsyncSession) -> ReviewEntry | None:
    """A single review, or None."""
    review = await session.get(Review, review_id)
    if review is None:
        return None
    return ReviewEntry.model_validate(review)

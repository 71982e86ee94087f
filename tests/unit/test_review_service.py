"""Tests for review creation failure handling."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from tripdesigner.app.planning.errors import StorageError
from tripdesigner.app.reviews.service import create_review
from tripdesigner.app.reviews.storage import LocalImageStorage


def _failing_session() -> MagicMock:
    session = MagicMock()
    session.commit = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full")))
    session.rollback = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_failed_commit_removes_uploaded_image(tmp_path: Path) -> None:
    """Test an image written for a review that never committed is deleted."""
    storage = LocalImageStorage(tmp_path)
    session = _failing_session()

    with pytest.raises(StorageError):
        await create_review(
            username="alice",
            title="Loved it",
            review_post="Great canals.",
            image_name="canal.jpg",
            image_content=b"jpeg",
            storage=storage,
            default_image_path="/images/default-image.png",
            session=session,
        )

    session.rollback.assert_awaited_once()
    assert list(storage.images_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_failed_commit_without_image_touches_no_files(tmp_path: Path) -> None:
    """Test the default image is never deleted on failure."""
    storage = LocalImageStorage(tmp_path)

    with pytest.raises(StorageError):
        await create_review(
            username="alice",
            title="Rainy",
            review_post="Bring an umbrella.",
            image_name=None,
            image_content=None,
            storage=storage,
            default_image_path="/images/default-image.png",
            session=_failing_session(),
        )

    assert not storage.images_dir.exists()

"""Review models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ReviewEntry(BaseModel):
    """Published trip review."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    title: str
    review_post: str
    posted_date: datetime
    image_path: str

"""Chat models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ChatEntry(BaseModel):
    """Single persisted chat message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: str
    recipient_id: str
    email: str | None
    message: str
    date: datetime

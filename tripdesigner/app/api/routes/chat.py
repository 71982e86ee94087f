"""Chat endpoints - GET/POST /chat/messages."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.api.auth import get_current_context
from tripdesigner.app.chat.service import list_conversation, post_message
from tripdesigner.app.config import Settings, get_settings
from tripdesigner.app.db.context import RequestContext
from tripdesigner.app.db.engine import get_session
from tripdesigner.app.models.chat import ChatEntry

router = APIRouter(prefix="/chat", tags=["chat"])


class PostMessageRequest(BaseModel):
    """Request body for POST /chat/messages."""

    message: str = Field(..., max_length=2000)
    recipient_id: str | None = Field(None, description="Only used by admin senders")


class ConversationResponse(BaseModel):
    """Response for GET /chat/messages."""

    messages: list[ChatEntry]


@router.get("/messages", response_model=ConversationResponse)
async def get_conversation(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ConversationResponse:
    """Messages the caller sent or received."""
    messages = await list_conversation(ctx=ctx, session=session)
    return ConversationResponse(messages=messages)


@router.post("/messages", response_model=ChatEntry, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: PostMessageRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ChatEntry:
    """Send a message; non-admin messages go to the admin."""
    return await post_message(
        ctx=ctx,
        message=request.message,
        admin_user_id=settings.admin_user_id,
        recipient_id=request.recipient_id,
        session=session,
    )

"""Chat persistence - messages between users and the admin."""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tripdesigner.app.db.context import RequestContext
from tripdesigner.app.db.models import ChatMessage
from tripdesigner.app.models.chat import ChatEntry
from tripdesigner.app.planning.errors import StorageError, ValidationError

logger = logging.getLogger(__name__)


async def post_message(
    *,
    ctx: RequestContext,
    message: str,
    admin_user_id: str,
    recipient_id: str | None = None,
    session: AsyncSession,
) -> ChatEntry:
    """Persist a chat message from the caller.

    Non-admin senders always write to the admin; a recipient they pass is
    ignored. Admin senders must name the user they reply to.

    Args:
        ctx: Request context of the sender
        message: Message text
        admin_user_id: Configured admin user id
        recipient_id: Recipient chosen by an admin sender
        session: Async database session

    Returns:
        Stored ChatEntry

    Raises:
        ValidationError: On empty text or an admin message without recipient
        StorageError: If the message cannot be committed
    """
    if not message or not message.strip():
        raise ValidationError("Message text is required")

    if ctx.is_admin:
        if not recipient_id:
            raise ValidationError("Admin messages require a recipient")
        target = recipient_id
    else:
        target = admin_user_id

    chat = ChatMessage(
        email=ctx.email,
        sender_id=ctx.user_id,
        recipient_id=target,
        message=message.strip(),
        date=datetime.now(timezone.utc),
    )
    session.add(chat)

    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"[chat.post] sender={ctx.user_id} failed: {e}")
        raise StorageError("Failed to store chat message") from e

    logger.info(f"[chat.post] sender={ctx.user_id} recipient={target} id={chat.id}")
    return ChatEntry.model_validate(chat)


async def list_conversation(*, ctx: RequestContext, session: AsyncSession) -> list[ChatEntry]:
    """Messages the caller sent or received, oldest first."""
    result = await session.execute(
        select(ChatMessage)
        .where(or_(ChatMessage.sender_id == ctx.user_id, ChatMessage.recipient_id == ctx.user_id))
        .order_by(ChatMessage.date, ChatMessage.id)
    )
    return [ChatEntry.model_validate(chat) for chat in result.scalars().all()]

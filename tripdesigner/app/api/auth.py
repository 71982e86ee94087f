"""Identity dependency.

Stub implementation that reads the caller from a bearer token or falls back
to the dev user. Token issuing and verification live outside this service.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from tripdesigner.app.db.context import RequestContext

DEV_USER_ID = "dev-user"
ADMIN_ROLE = "admin"


async def get_current_context(
    authorization: Annotated[str | None, Header()] = None,
    x_user_email: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Extract request context from authorization header.

    Accepted formats:
    - no header: dev user, not admin
    - "Bearer <user_id>"
    - "Bearer <user_id>:admin"

    Args:
        authorization: Authorization header (e.g., "Bearer <token>")
        x_user_email: Optional caller email

    Returns:
        RequestContext with user_id, email and admin flag

    Raises:
        HTTPException: If authorization is invalid
    """
    if not authorization:
        return RequestContext(user_id=DEV_USER_ID, email=x_user_email)

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:].strip()  # Strip "Bearer "
    user_id, _, role = token.partition(":")

    if not user_id or (role and role != ADMIN_ROLE):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token (expected user_id or user_id:admin)",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return RequestContext(user_id=user_id, email=x_user_email, is_admin=role == ADMIN_ROLE)


async def require_identified_context(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    authorization: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Like get_current_context, but without the dev-user fallback.

    Raises:
        HTTPException: 401 if no authorization header was sent
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return ctx

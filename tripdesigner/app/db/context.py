"""Request context for ownership enforcement."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Request context containing the caller's identity.

    Every itinerary, chat and review operation is scoped through it.
    """

    user_id: str
    email: str | None = None
    is_admin: bool = False

"""Planner error taxonomy."""


class PlannerError(Exception):
    """Base class for errors surfaced by planner operations."""


class ValidationError(PlannerError):
    """Malformed create/edit input (name, date, counts, message text)."""


class NotFoundError(PlannerError):
    """Operation targets an itinerary the caller does not own."""


class StorageError(PlannerError):
    """Persistence store failed to apply or commit changes."""

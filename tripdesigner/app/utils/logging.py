"""Structured logging for itinerary lifecycle operations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set the root log level for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


class StructuredItineraryLogger:
    """Structured logger for itinerary lifecycle outcomes."""

    def log_operation(
        self,
        operation: str,
        owner_user_id: str,
        outcome: str,
        itinerary_id: int | None = None,
        **details: Any,
    ) -> None:
        """Log a lifecycle operation with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "owner_user_id": owner_user_id,
            "outcome": outcome,
        }

        if itinerary_id is not None:
            log_data["itinerary_id"] = itinerary_id
        log_data.update(details)

        log_msg = f"[itinerary.{operation}] owner={owner_user_id} outcome={outcome}"

        if outcome in ("success", "skipped"):
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

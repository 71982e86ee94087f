"""Tests for converting itinerary records to API views."""

from datetime import date
from decimal import Decimal

import pytest

from tripdesigner.app.api.routes.itineraries import to_view
from tripdesigner.app.db.repositories import ItineraryRecord
from tripdesigner.app.planning.errors import StorageError


def test_to_view_copies_persisted_record() -> None:
    """Test a saved record maps field for field."""
    record = ItineraryRecord(
        id=3,
        owner_user_id="alice",
        name="Trip",
        date=date(2025, 6, 10),
        number_of_people=2,
        total_cost_for_all_locations=Decimal("10.00"),
        total_cost_per_itinerary=Decimal("20.00"),
        total_cost_for_all_people=Decimal("20.00"),
    )

    view = to_view(record)

    assert view.id == 3
    assert view.number_of_people == 2
    assert view.total_cost_for_all_people == Decimal("20.00")


def test_to_view_rejects_unsaved_record() -> None:
    """Test a record without an id raises StorageError."""
    record = ItineraryRecord(owner_user_id="alice", name="Draft", date=date(2025, 6, 10))

    with pytest.raises(StorageError):
        to_view(record)

"""Tests for settings, engine URL handling and operation logging."""

import logging

import pytest

from tripdesigner.app.config import Settings
from tripdesigner.app.db.engine import create_async_engine_from_settings
from tripdesigner.app.utils.logging import StructuredItineraryLogger


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test environment variables override defaults."""
    monkeypatch.setenv("ADMIN_USER_ID", "support")
    monkeypatch.setenv("SEED_CATALOG", "false")

    settings = Settings()

    assert settings.admin_user_id == "support"
    assert settings.seed_catalog is False


def test_engine_rejects_empty_url() -> None:
    """Test an empty database URL fails fast."""
    with pytest.raises(ValueError, match="DATABASE_URL"):
        create_async_engine_from_settings(Settings(database_url=""))


def test_engine_upgrades_sync_sqlite_url() -> None:
    """Test plain sqlite URLs are switched to the async driver."""
    engine = create_async_engine_from_settings(Settings(database_url="sqlite:///./trip.db"))

    assert engine.url.drivername == "sqlite+aiosqlite"


def test_log_operation_success_is_info(caplog: pytest.LogCaptureFixture) -> None:
    """Test successful operations log at INFO with structured data."""
    with caplog.at_level(logging.INFO, logger="tripdesigner.app.utils.logging"):
        StructuredItineraryLogger().log_operation("create", "alice", "success", 7, locations=2)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert "[itinerary.create] owner=alice outcome=success" in record.getMessage()
    assert record.structured == {  # type: ignore[attr-defined]
        "operation": "create",
        "owner_user_id": "alice",
        "outcome": "success",
        "itinerary_id": 7,
        "locations": 2,
    }


def test_log_operation_failure_is_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Test other outcomes log at WARNING."""
    with caplog.at_level(logging.INFO, logger="tripdesigner.app.utils.logging"):
        StructuredItineraryLogger().log_operation("edit", "alice", "not_found")

    assert caplog.records[-1].levelno == logging.WARNING

"""Shared test fixtures for Mindbridge.

Provides settings, a fake settings backend, and a client wired to it.
"""

from typing import Any

import pytest
from pydantic import SecretStr

from mindbridge.api import APIClient
from mindbridge.settings import Settings
from tests.helpers.backend import FakeBackend, make_client

# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(
        api_base_url="http://backend.test",
        api_token=SecretStr("test-token"),
        request_timeout=5,
    )


@pytest.fixture
def mock_settings(test_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Mock get_settings() to return test settings."""
    import mindbridge.api.base
    import mindbridge.settings

    monkeypatch.setattr(mindbridge.settings, "get_settings", lambda: test_settings)
    monkeypatch.setattr(mindbridge.api.base, "get_settings", lambda: test_settings)
    return test_settings


# =============================================================================
# BACKEND
# =============================================================================


@pytest.fixture
def remote_settings() -> dict[str, dict[str, Any]]:
    """Settings held by the fake backend (camelCase wire format)."""
    return {
        "notifications": {
            "emailNotifications": True,
            "systemAlerts": False,
            "maintenanceAlerts": True,
            "securityAlerts": True,
        },
        "security": {
            "passwordExpiry": 60,
            "sessionTimeout": 30,
            "maxLoginAttempts": 4,
        },
        "system": {
            "maintenanceMode": False,
            "debugMode": True,
            "logLevel": "warn",
            "backupFrequency": "weekly",
        },
    }


@pytest.fixture
def fake_backend(remote_settings: dict[str, dict[str, Any]]) -> FakeBackend:
    """Fake settings authority serving ``remote_settings``."""
    return FakeBackend(remote_settings)


@pytest.fixture
def api_client(fake_backend: FakeBackend) -> APIClient:
    """APIClient talking to ``fake_backend``."""
    return make_client(fake_backend)

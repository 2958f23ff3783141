"""Unit tests for CLI settings commands."""

from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from mindbridge.cli.main import app
from tests.helpers.backend import make_client


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI callback from replacing pytest's log handlers."""
    with patch("mindbridge.cli.main.configure_logging"):
        yield


@pytest.fixture
def patched_client(fake_backend):
    """Route the CLI's shared client to the fake backend."""
    with patch(
        "mindbridge.cli.commands.settings.get_api_client",
        side_effect=lambda: make_client(fake_backend),
    ):
        yield fake_backend


class TestSettingsShow:
    def test_show_renders_categories(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "Notification Settings" in result.stdout
        assert "Security Settings" in result.stdout
        assert "sessionTimeout" in result.stdout
        assert "weekly" in result.stdout
        assert len(patched_client.gets) == 1

    def test_show_load_failure(self, runner, patched_client):
        patched_client.queue_get(httpx.Response(500))

        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.stdout
        assert "Showing default settings" in result.stdout


class TestSettingsSet:
    def test_set_success(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "set", "security", "sessionTimeout", "45"])

        assert result.exit_code == 0
        assert "Setting updated successfully" in result.stdout
        assert patched_client.put_bodies() == [
            {"category": "security", "setting": "sessionTimeout", "value": 45}
        ]

    def test_set_clamps_to_bounds(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "set", "security", "sessionTimeout", "1000"])

        assert result.exit_code == 0
        assert patched_client.put_bodies()[0]["value"] == 240

    def test_set_bool(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "set", "notifications", "emailNotifications", "off"])

        assert result.exit_code == 0
        assert patched_client.put_bodies()[0]["value"] is False

    def test_set_rejected_reverts(self, runner, patched_client):
        patched_client.queue_put(httpx.Response(200, json={"success": False, "message": "Locked by policy"}))

        result = runner.invoke(app, ["settings", "set", "security", "sessionTimeout", "45"])

        assert result.exit_code == 1
        assert "Locked by policy" in result.stdout
        assert "30 → 30" in result.stdout
        # initial load + resync
        assert len(patched_client.gets) == 2

    def test_set_skipped_when_load_fails(self, runner, patched_client):
        patched_client.queue_get(httpx.ConnectError("refused"))

        result = runner.invoke(app, ["settings", "set", "security", "sessionTimeout", "45"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.stdout
        assert "Setting not changed" in result.stdout
        assert "→" not in result.stdout
        assert patched_client.puts == []

    def test_set_invalid_value(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "set", "system", "logLevel", "verbose"])

        assert result.exit_code == 1
        assert "logLevel must be one of" in result.stdout
        assert patched_client.requests == []

    def test_set_unknown_field(self, runner, patched_client):
        result = runner.invoke(app, ["settings", "set", "security", "theme", "dark"])

        assert result.exit_code == 1
        assert "Unknown field" in result.stdout
        assert patched_client.requests == []


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Mindbridge" in result.stdout

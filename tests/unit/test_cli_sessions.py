"""Unit tests for CLI sessions commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from mindbridge.cli.main import app


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
def sessions_file(tmp_path):
    """Sessions JSON file with one chat, one mood and one combined session."""
    path = tmp_path / "sessions.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 1,
                    "type": "chat",
                    "status": "active",
                    "lastActivity": "2024-01-15T10:00:00+00:00",
                    "lastMessage": "Feeling overwhelmed",
                    "unreadCount": 2,
                },
                {
                    "id": 2,
                    "type": "mood",
                    "status": "active",
                    "lastActivity": "2024-01-14T09:00:00+00:00",
                    "moodReport": {
                        "mood": "anxious",
                        "intensity": 7,
                        "notes": "Exam week",
                        "triggers": ["Exams", "Sleep"],
                    },
                },
                {
                    "id": 3,
                    "type": "both",
                    "status": "closed",
                    "lastActivity": "2024-01-10T09:00:00+00:00",
                    "lastMessage": "Thank you",
                    "moodReport": {"mood": "calm", "intensity": 3},
                    "details": {
                        "tags": ["Family"],
                        "sessionNotes": "Discussed coping",
                        "totalInteractions": 5,
                    },
                },
            ]
        )
    )
    return path


class TestSessionsList:
    def test_all_sessions(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "--file", str(sessions_file)])

        assert result.exit_code == 0
        assert "Anonymous Session #1" in result.stdout
        assert "Anonymous Session #2" in result.stdout
        assert "Anonymous Session #3" in result.stdout
        assert "2 unread messages" in result.stdout
        assert "All Sessions (3)" in result.stdout
        assert "Active Chats (2)" in result.stdout
        assert "Mood Reports (2)" in result.stdout

    def test_chats_tab(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "--file", str(sessions_file), "--tab", "chats"])

        assert result.exit_code == 0
        assert "Anonymous Session #1" in result.stdout
        assert "Anonymous Session #2" not in result.stdout
        assert "Anonymous Session #3" in result.stdout

    def test_mood_tab(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "-f", str(sessions_file), "-t", "mood"])

        assert result.exit_code == 0
        assert "Anonymous Session #1" not in result.stdout
        assert "Level 7" in result.stdout
        assert "Exams, Sleep" in result.stdout

    def test_expand_shows_details(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "-f", str(sessions_file), "--expand", "3"])

        assert result.exit_code == 0
        assert "Discussed coping" in result.stdout
        assert "Interactions:" in result.stdout

    def test_collapsed_hides_details(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "-f", str(sessions_file)])

        assert "Discussed coping" not in result.stdout

    def test_expand_unknown_session(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "-f", str(sessions_file), "--expand", "99"])

        assert result.exit_code == 0
        assert "Session 99 not found" in result.stdout

    def test_invalid_tab(self, runner, sessions_file):
        result = runner.invoke(app, ["sessions", "list", "-f", str(sessions_file), "--tab", "archived"])
        assert result.exit_code != 0

    def test_empty_file(self, runner, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")

        result = runner.invoke(app, ["sessions", "list", "-f", str(path)])

        assert result.exit_code == 0
        assert "No sessions found" in result.stdout

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["sessions", "list", "-f", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read sessions file" in result.stdout

    def test_default_file_from_settings(self, runner, sessions_file, monkeypatch):
        from mindbridge.settings import Settings

        monkeypatch.setattr(
            "mindbridge.cli.commands.sessions.get_settings",
            lambda: Settings(sessions_file=str(sessions_file)),
        )

        result = runner.invoke(app, ["sessions", "list"])

        assert result.exit_code == 0
        assert "Anonymous Session #2" in result.stdout

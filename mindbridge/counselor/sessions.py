"""Counselor sessions dashboard.

Projects anonymous session records (chats and mood reports) into a
tab-filtered, expandable view. Records are read-only here.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from mindbridge.exceptions import SessionDataError

SessionType = Literal["chat", "mood", "both"]


class MoodType(NamedTuple):
    emoji: str
    label: str
    color: str


MOOD_TYPES: dict[str, MoodType] = {
    "happy": MoodType("😊", "Happy", "green"),
    "calm": MoodType("😌", "Calm", "cyan"),
    "neutral": MoodType("😐", "Neutral", "white"),
    "sad": MoodType("😢", "Sad", "blue"),
    "anxious": MoodType("😰", "Anxious", "yellow"),
    "stressed": MoodType("😫", "Stressed", "magenta"),
    "angry": MoodType("😠", "Angry", "red"),
}

UNKNOWN_MOOD = MoodType("❔", "Unknown", "grey50")


def mood_type(mood: str) -> MoodType:
    return MOOD_TYPES.get(mood, UNKNOWN_MOOD)


# =============================================================================
# RECORDS
# =============================================================================


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class MoodReport(_Record):
    """A student's self-reported mood."""

    mood: str
    intensity: int
    notes: str | None = None
    triggers: list[str] = Field(default_factory=list)


class SessionDetails(_Record):
    """Counselor-facing details shown when a session is expanded."""

    tags: list[str] = Field(default_factory=list)
    session_notes: str | None = None
    total_interactions: int | None = None
    average_response_time: str | None = None
    status_note: str | None = None


class SessionRecord(_Record):
    """An anonymous counseling session."""

    id: int | str
    type: SessionType
    status: str = "active"
    last_activity: datetime
    last_message: str | None = None
    unread_count: int = 0
    mood_report: MoodReport | None = None
    details: SessionDetails | None = None

    @property
    def has_chat(self) -> bool:
        return self.type in ("chat", "both")

    @property
    def has_mood(self) -> bool:
        return self.type in ("mood", "both")

    @property
    def status_label(self) -> str:
        return self.status[:1].upper() + self.status[1:]

    @property
    def unread_label(self) -> str | None:
        """``"3 unread messages"``, or None when nothing is unread."""
        if self.unread_count <= 0:
            return None
        suffix = "s" if self.unread_count > 1 else ""
        return f"{self.unread_count} unread message{suffix}"


_RECORDS = TypeAdapter(list[SessionRecord])


def parse_sessions(data: Any) -> list[SessionRecord]:
    """Parse session records from decoded JSON.

    Accepts a list of records or an object with a ``sessions`` list.

    Raises:
        SessionDataError: If the data does not hold valid records
    """
    if isinstance(data, dict):
        data = data.get("sessions")
    if not isinstance(data, list):
        raise SessionDataError("Session data must be a list of records")
    try:
        return _RECORDS.validate_python(data)
    except ValidationError as e:
        raise SessionDataError(f"Invalid session records ({e.error_count()} errors)") from e


def load_sessions(path: Path | str) -> list[SessionRecord]:
    """Read session records from a JSON file.

    Raises:
        SessionDataError: If the file is missing, not JSON, or invalid
    """
    source = Path(path).expanduser()
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise SessionDataError(f"Cannot read sessions file {source}: {e.strerror}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SessionDataError(f"Sessions file {source} is not valid JSON") from e
    return parse_sessions(data)


# =============================================================================
# VIEW
# =============================================================================


class SessionTab(str, Enum):
    """Dashboard tabs."""

    ALL = "all"
    CHATS = "chats"
    MOOD = "mood"

    @property
    def heading(self) -> str:
        return _TAB_TITLES[self]


_TAB_TITLES = {
    SessionTab.ALL: "All Sessions",
    SessionTab.CHATS: "Active Chats",
    SessionTab.MOOD: "Mood Reports",
}


def matches_tab(record: SessionRecord, tab: SessionTab) -> bool:
    if tab is SessionTab.CHATS:
        return record.has_chat
    if tab is SessionTab.MOOD:
        return record.has_mood
    return True


def filter_sessions(records: list[SessionRecord], tab: SessionTab | str) -> list[SessionRecord]:
    """Return the records shown under a tab, in input order.

    Raises:
        ValueError: If ``tab`` is not a known tab name
    """
    tab = SessionTab(tab)
    if tab is SessionTab.ALL:
        return list(records)
    return [r for r in records if matches_tab(r, tab)]


class SessionView:
    """Tab selection and expand/collapse state over a list of sessions.

    At most one session is expanded at a time.
    """

    def __init__(self, records: list[SessionRecord], tab: SessionTab | str = SessionTab.ALL):
        self.records = list(records)
        self.active_tab = SessionTab(tab)
        self.expanded_id: int | str | None = None

    def select_tab(self, tab: SessionTab | str) -> None:
        self.active_tab = SessionTab(tab)

    def toggle(self, session_id: int | str) -> None:
        """Expand a session, or collapse it if it is already expanded."""
        self.expanded_id = None if self.expanded_id == session_id else session_id

    def is_expanded(self, record: SessionRecord) -> bool:
        return self.expanded_id is not None and record.id == self.expanded_id

    def visible(self) -> list[SessionRecord]:
        return filter_sessions(self.records, self.active_tab)

    def counts(self) -> dict[SessionTab, int]:
        return {tab: len(filter_sessions(self.records, tab)) for tab in SessionTab}


def time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """Relative label for a past timestamp (``"5 minutes ago"``).

    Timestamps 30 or more days old are shown as a date.
    """
    if now is None:
        now = datetime.now(timestamp.tzinfo)
    seconds = int((now - timestamp).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hour{'s' if hours != 1 else ''} ago"
    days = hours // 24
    if days < 30:
        return f"{days} day{'s' if days != 1 else ''} ago"
    return timestamp.strftime("%Y-%m-%d")

"""Counselor Sessions dashboard."""

from mindbridge.counselor.sessions import (
    MOOD_TYPES,
    SessionRecord,
    SessionTab,
    SessionView,
    filter_sessions,
    load_sessions,
    time_ago,
)

__all__ = [
    "MOOD_TYPES",
    "SessionRecord",
    "SessionTab",
    "SessionView",
    "filter_sessions",
    "load_sessions",
    "time_ago",
]

"""User-visible notifications.

The settings store reports outcomes through a ``Notifier``; how they are
shown (console, toast, log) is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

NotificationLevel = Literal["success", "error"]


@runtime_checkable
class Notifier(Protocol):
    """Transient success/error notifications."""

    def success(self, message: str) -> None:
        """Report a completed action."""

    def error(self, message: str) -> None:
        """Report a failed action."""


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


class LoggingNotifier:
    """Notifier that writes to the mindbridge log."""

    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.warning(message)


@dataclass
class RecordingNotifier:
    """Notifier that keeps every notification in order.

    The CLI renders the recorded notifications after an operation completes.
    """

    notifications: list[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.notifications.append(Notification("success", message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification("error", message))

    @property
    def errors(self) -> list[str]:
        return [n.message for n in self.notifications if n.level == "error"]

    @property
    def successes(self) -> list[str]:
        return [n.message for n in self.notifications if n.level == "success"]

    def clear(self) -> None:
        self.notifications.clear()

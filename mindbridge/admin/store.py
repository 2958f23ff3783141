"""Settings store with optimistic, serialized writes.

The store owns the in-memory settings snapshot. ``load`` replaces it
wholesale from the backend; ``update_field`` applies a change locally
before the backend confirms it and, if the backend rejects the write,
discards the local change by re-fetching the full snapshot.

Loads and writes share one ``asyncio.Lock``, so at most one write and its
corrective resync are outstanding at any time.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from mindbridge.admin.schema import SettingsSnapshot, UpdateEnvelope, field_attr
from mindbridge.exceptions import SettingsFetchError, SettingsWriteRejected
from mindbridge.notifications import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load settings"
UPDATE_FAILED_MESSAGE = "Failed to update setting"
UPDATE_OK_MESSAGE = "Setting updated successfully"


class SettingsBackend(Protocol):
    """Remote authority for settings (see ``mindbridge.api.APIClient``)."""

    async def fetch_settings(self) -> SettingsSnapshot: ...

    async def put_setting(self, category: str, setting: str, value: Any) -> UpdateEnvelope: ...


class SettingsStore:
    """Owner of the current settings snapshot.

    Usage:
        store = SettingsStore(get_api_client(), notifier)
        await store.load()
        await store.update_field("security", "sessionTimeout", 45)
    """

    def __init__(
        self,
        backend: SettingsBackend,
        notifier: Notifier | None = None,
        initial: SettingsSnapshot | None = None,
    ):
        self._backend = backend
        self._notifier = notifier or LoggingNotifier()
        self._current = initial or SettingsSnapshot()
        self._loading = True
        self._lock = asyncio.Lock()

    @property
    def current(self) -> SettingsSnapshot:
        return self._current

    @property
    def loading(self) -> bool:
        return self._loading

    def get(self, category: str, field: str) -> Any:
        return self._current.get(category, field)

    async def load(self) -> bool:
        """Replace the snapshot with the backend's.

        On failure the previous snapshot is kept and an error notification
        is emitted. ``loading`` is false afterwards either way.

        Returns:
            True if a fresh snapshot was installed
        """
        async with self._lock:
            return await self._load()

    async def _load(self) -> bool:
        try:
            snapshot = await self._backend.fetch_settings()
        except SettingsFetchError as e:
            logger.error("Error fetching settings: %s (correlation_id=%s)", e, e.correlation_id)
            self._notifier.error(LOAD_FAILED_MESSAGE)
            return False
        finally:
            self._loading = False

        self._current = snapshot
        return True

    async def update_field(self, category: str, field: str, value: Any) -> bool:
        """Optimistically set one field and write it to the backend.

        The value is applied locally before the write. If the backend
        rejects it, an error notification is emitted and the snapshot is
        resynchronized with a full ``load``. The write is never retried.
        Any other error (including cancellation) restores the previous
        snapshot and propagates.

        The value is not range-checked here; callers constrain it first
        (see ``mindbridge.admin.schema.coerce_value``).

        Args:
            category: Settings category
            field: Field wire name within the category
            value: New value

        Returns:
            True if the backend accepted the write

        Raises:
            SettingsValidationError: If the category or field is unknown
        """
        field_attr(category, field)

        async with self._lock:
            previous = self._current
            self._current = previous.with_value(category, field, value)

            try:
                await self._backend.put_setting(category, field, value)
            except SettingsWriteRejected as e:
                logger.error(
                    "Error updating setting %s.%s: %s (correlation_id=%s)",
                    category,
                    field,
                    e,
                    e.correlation_id,
                )
                self._notifier.error(e.server_message or UPDATE_FAILED_MESSAGE)
                # Revert the change
                if not await self._load():
                    # Backend unreachable: fall back to the last snapshot it confirmed
                    self._current = previous
                return False
            except BaseException:
                self._current = previous
                raise

            self._notifier.success(UPDATE_OK_MESSAGE)
            return True

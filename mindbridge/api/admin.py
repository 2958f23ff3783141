"""Admin settings endpoints.

``GET /api/admin/settings`` returns the full snapshot and
``PUT /api/admin/settings`` writes a single field.
"""

import logging
from typing import Any

from pydantic import ValidationError

from mindbridge.admin.schema import (
    SettingsEnvelope,
    SettingsSnapshot,
    SettingUpdate,
    UpdateEnvelope,
)
from mindbridge.exceptions import APIClientError, SettingsFetchError, SettingsWriteRejected

logger = logging.getLogger(__name__)

SETTINGS_PATH = "/api/admin/settings"


class AdminSettingsMixin:
    """Mixin providing the admin settings endpoints."""

    async def fetch_settings(self) -> SettingsSnapshot:
        """Fetch the full settings snapshot.

        Returns:
            Parsed settings snapshot

        Raises:
            SettingsFetchError: On transport or status failure, a
                ``success: false`` envelope, or a malformed payload
        """
        try:
            data = await self._request("GET", SETTINGS_PATH)  # type: ignore[attr-defined]
        except APIClientError as e:
            raise SettingsFetchError(str(e), correlation_id=e.correlation_id) from e

        try:
            envelope = SettingsEnvelope.model_validate(data)
        except ValidationError as e:
            raise SettingsFetchError(
                f"Malformed settings payload ({e.error_count()} errors)"
            ) from e

        if not envelope.success:
            raise SettingsFetchError("Backend reported failure fetching settings")
        if envelope.settings is None:
            raise SettingsFetchError("Settings payload missing from response")
        return envelope.settings

    async def put_setting(self, category: str, setting: str, value: Any) -> UpdateEnvelope:
        """Write a single settings field.

        Args:
            category: Settings category (notifications, security, system)
            setting: Field wire name within the category
            value: New value

        Returns:
            The success envelope

        Raises:
            SettingsWriteRejected: If the value cannot be sent, on transport or
                status failure, or a ``success: false`` envelope
        """
        try:
            body = SettingUpdate(category=category, setting=setting, value=value)
        except ValidationError as e:
            raise SettingsWriteRejected(f"Invalid value for {category}.{setting}: {value!r}") from e

        try:
            data = await self._request(  # type: ignore[attr-defined]
                "PUT", SETTINGS_PATH, json=body.model_dump()
            )
        except APIClientError as e:
            message = e.details.get("message")
            raise SettingsWriteRejected(
                str(e),
                server_message=message if isinstance(message, str) else None,
                correlation_id=e.correlation_id,
            ) from e

        try:
            envelope = UpdateEnvelope.model_validate(data)
        except ValidationError as e:
            raise SettingsWriteRejected("Malformed update response") from e

        if not envelope.success:
            raise SettingsWriteRejected(
                envelope.message or "Backend rejected settings update",
                server_message=envelope.message,
            )
        return envelope

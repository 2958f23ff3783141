"""Mindbridge exception hierarchy.

Base exceptions for all application layers with correlation ID support.

Usage:
    from mindbridge.exceptions import APIClientError, SettingsWriteRejected

    try:
        await client.put_setting("security", "sessionTimeout", 45)
    except APIClientError as e:
        logger.error("Write failed (%s)", e.correlation_id)
"""

import uuid
from typing import Any


class MindbridgeError(Exception):
    """Base exception for all Mindbridge application errors.

    Carries a correlation_id for tracing errors across layers.
    """

    def __init__(self, message: str, *, correlation_id: str | None = None):
        self.correlation_id = correlation_id or str(uuid.uuid4())
        super().__init__(message)


class APIClientError(MindbridgeError):
    """Errors from backend HTTP calls.

    Raised when a request cannot be sent, times out, returns a non-2xx
    status, or carries a body that is not JSON.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
    ):
        self.operation = operation
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message, correlation_id=correlation_id)


class SettingsFetchError(MindbridgeError):
    """The settings snapshot could not be obtained from the backend."""

    pass


class SettingsWriteRejected(MindbridgeError):
    """The backend did not accept a settings write.

    ``server_message`` holds the envelope's message, if the backend sent one.
    """

    def __init__(self, message: str, *, server_message: str | None = None, **kwargs):
        self.server_message = server_message
        super().__init__(message, **kwargs)


class SettingsValidationError(MindbridgeError):
    """A category, field, or value outside the settings schema."""

    def __init__(self, message: str, *, category: str | None = None, field: str | None = None, **kwargs):
        self.category = category
        self.field = field
        super().__init__(message, **kwargs)


class ConfigurationError(MindbridgeError):
    """Errors from application configuration."""

    pass


class SessionDataError(MindbridgeError):
    """Session records could not be read or parsed."""

    pass

"""Mindbridge backend client.

Thin facade combining the base HTTP client with the endpoint mixins.
"""

import threading

from mindbridge.api.admin import AdminSettingsMixin
from mindbridge.api.base import APIClientConfig, BaseAPIClient

__all__ = ["APIClient", "APIClientConfig", "get_api_client"]


class APIClient(BaseAPIClient, AdminSettingsMixin):
    """Client for the Mindbridge backend.

    Usage:
        client = get_api_client()
        snapshot = await client.fetch_settings()
        await client.put_setting("security", "sessionTimeout", 45)
    """

    pass


_client: APIClient | None = None
_client_lock = threading.Lock()


def get_api_client() -> APIClient:
    """Get or create the shared client built from application settings.

    Thread-safe: Uses double-checked locking.
    """
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = APIClient()
    return _client

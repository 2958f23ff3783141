"""Backend API client package.

Exports:
    APIClient: Facade over the settings endpoints
    APIClientConfig: Explicit base URL, token and timeout
    get_api_client: Shared client accessor
"""

from mindbridge.api.client import APIClient, APIClientConfig, get_api_client

__all__ = ["APIClient", "APIClientConfig", "get_api_client"]

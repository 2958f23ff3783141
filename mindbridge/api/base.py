"""Base backend client with HTTP request handling and connection management.

Provides the shared httpx client, bearer authentication, and the error
wrapping used by every Mindbridge API client.
"""

import logging
import time
from typing import Any

import httpx
from pydantic import BaseModel, Field

from mindbridge.exceptions import APIClientError, ConfigurationError
from mindbridge.settings import get_settings

logger = logging.getLogger(__name__)


class APIClientConfig(BaseModel):
    """Configuration for the backend client."""

    base_url: str = Field(..., description="Backend base URL, e.g. http://localhost:5000")
    token: str = Field(..., description="Bearer token presented with every request")
    timeout: int = Field(default=30, description="Request timeout in seconds")


class BaseAPIClient:
    """Base HTTP client for the Mindbridge backend.

    Handles connection management, authentication, and HTTP requests.
    Endpoint-specific functionality is added via mixins.
    """

    def __init__(
        self,
        config: APIClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Optional configuration (uses settings if not provided)
            transport: Optional httpx transport, used to substitute the backend
        """
        if config is None:
            config = self._resolve_config()
        self.config = config
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @staticmethod
    def _resolve_config() -> APIClientConfig:
        """Build client config from application settings."""
        settings = get_settings()
        if not settings.api_base_url:
            raise ConfigurationError("API_BASE_URL is not configured")
        return APIClientConfig(
            base_url=settings.api_base_url,
            token=settings.api_token.get_secret_value(),
            timeout=settings.request_timeout,
        )

    def _get_url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}{path}"

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create a shared httpx.AsyncClient with connection pooling.

        The client is created lazily on first use and reused across requests.
        """
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport,
                limits=httpx.Limits(
                    max_keepalive_connections=10,
                    max_connections=20,
                ),
            )
        return self._http_client

    async def close(self) -> None:
        """Close the shared HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """Make an authenticated request to the backend.

        Args:
            method: HTTP method
            path: API path (without base URL)
            json: JSON body
            params: Query parameters

        Returns:
            Decoded response JSON

        Raises:
            APIClientError: On transport failure, non-2xx status, or a non-JSON body
        """
        operation = f"{method.upper()} {path}"
        start_time = time.perf_counter()
        client = self._get_http_client()

        headers = {"Authorization": f"Bearer {self.config.token}"}
        if json is not None:
            headers["Content-Type"] = "application/json"

        try:
            response = await client.request(
                method,
                self._get_url(path),
                headers=headers,
                json=json,
                params=params,
            )
        except httpx.ConnectError as e:
            raise APIClientError(f"{operation}: Connection failed", operation) from e
        except httpx.TimeoutException as e:
            raise APIClientError(f"{operation}: Timeout", operation) from e
        except httpx.HTTPError as e:
            raise APIClientError(f"{operation}: {type(e).__name__}", operation) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("%s -> %s in %.1fms", operation, response.status_code, duration_ms)

        if not response.is_success:
            details: dict[str, Any] = {}
            try:
                body = response.json()
                if isinstance(body, dict):
                    details = body
            except ValueError:
                pass
            raise APIClientError(
                f"{operation}: HTTP {response.status_code}",
                operation,
                details,
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise APIClientError(
                f"{operation}: Invalid JSON response",
                operation,
                status_code=response.status_code,
            ) from e

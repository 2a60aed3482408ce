"""HTTP request executor shared by the service façades."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from sendly.errors import error_from_response

logger = logging.getLogger(__name__)

USER_AGENT = "sendly-python/0.1.0"


class RequestExecutor(Protocol):
    """Performs one API call and returns the decoded JSON body."""

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any: ...


class HTTPRequestExecutor:
    """Async executor for the Sendly REST API.

    Args:
        api_key: Sendly API key, sent as a bearer token.
        base_url: Versioned API root; request paths are relative to it.
        timeout: Per-request timeout in seconds.
        http_client: Pre-configured client; when given, the caller owns it.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str,
        timeout: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        self._client = http_client or httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=httpx.Timeout(timeout),
        )
        self._owns_client = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        """Close the underlying HTTP client if we own it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Returns:
            The decoded body, or ``None`` for empty responses.

        Raises:
            APIError: On non-2xx responses (subclass chosen by status code).
            httpx.HTTPError: On transport failures, unchanged.
        """
        logger.debug("Sendly request %s %s", method, path)

        response = await self._client.request(
            method,
            f"{self._base_url}/{path.lstrip('/')}",
            json=body,
            params=params,
            headers=self._headers,
        )

        if response.is_error:
            error = error_from_response(response)
            logger.warning(
                "Sendly API error %s %s -> %d (%s)",
                method,
                path,
                response.status_code,
                error.code or error.message,
            )
            raise error

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

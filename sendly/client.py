"""Sendly API client."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from sendly.config import ClientConfigLoader, get_settings
from sendly.errors import ValidationError
from sendly.executor import HTTPRequestExecutor
from sendly.templates.service import TemplateManager
from sendly.verify.service import VerificationManager
from sendly.webhooks.service import WebhookEndpointManager

logger = logging.getLogger(__name__)

settings = get_settings()


class Sendly:
    """Async client for the Sendly API.

    Args:
        api_key: Sendly API key. Defaults to ``SENDLY_API_KEY`` (Docker secret
            ``sendly_api_key`` or environment variable).
        base_url: API root. Defaults to ``SENDLY_BASE_URL``.
        timeout: Request timeout in seconds. Defaults to ``SENDLY_TIMEOUT``.
        http_client: Pre-configured ``httpx.AsyncClient``; left open on close.

    Example::

        async with Sendly("sk_live_...") as sendly:
            created = await sendly.webhooks.create(
                CreateWebhookRequest(url="https://example.com/hook", events=["sms.delivered"])
            )
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        api_key = api_key or settings.SENDLY_API_KEY
        if not api_key:
            raise ValidationError("API key is required (pass api_key or set SENDLY_API_KEY)")

        self._executor = HTTPRequestExecutor(
            api_key,
            base_url=base_url or settings.SENDLY_BASE_URL,
            timeout=timeout if timeout is not None else settings.SENDLY_TIMEOUT,
            http_client=http_client,
        )
        self.webhooks = WebhookEndpointManager(self._executor)
        self.verify = VerificationManager(self._executor)
        self.templates = TemplateManager(self._executor)
        logger.debug("Sendly client initialised (base_url=%s)", self._executor.base_url)

    @classmethod
    def from_config(cls, path: str | Path, **kwargs: Any) -> Sendly:
        """Build a client from a YAML configuration file."""
        config = ClientConfigLoader.load(path)
        return cls(config.api_key, base_url=config.base_url, timeout=config.timeout, **kwargs)

    async def close(self) -> None:
        await self._executor.close()

    async def __aenter__(self) -> Sendly:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

"""Webhook endpoint management."""

from __future__ import annotations

import logging

from sendly.errors import ValidationError
from sendly.executor import RequestExecutor
from sendly.validation import require_delivery_id, require_https, require_webhook_id
from sendly.webhooks.schemas import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookCreatedResponse,
    WebhookDelivery,
    WebhookSecretRotation,
    WebhookTestResult,
)

logger = logging.getLogger(__name__)


class WebhookEndpointManager:
    """CRUD and operational actions for webhook endpoints."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def create(self, req: CreateWebhookRequest) -> WebhookCreatedResponse:
        """
        Create a webhook endpoint.

        Args:
            req: Endpoint URL (HTTPS) and at least one event type

        Returns:
            The webhook and its signing secret. The secret cannot be
            retrieved again.
        """
        require_https(req.url)
        if not req.events:
            raise ValidationError("at least one event type is required")

        data = await self._executor.request(
            "POST", "/webhooks", req.model_dump(exclude_none=True)
        )
        data = data or {}
        webhook = Webhook.model_validate(data)
        logger.info("Created webhook %s for %d event(s)", webhook.id, len(webhook.events))
        return WebhookCreatedResponse(webhook=webhook, secret=data.get("secret") or "")

    async def list(self) -> list[Webhook]:
        """List all webhooks for the account, in server order."""
        data = await self._executor.request("GET", "/webhooks")
        return [Webhook.model_validate(item) for item in data or []]

    async def get(self, webhook_id: str) -> Webhook:
        require_webhook_id(webhook_id)
        data = await self._executor.request("GET", f"/webhooks/{webhook_id}")
        return Webhook.model_validate(data)

    async def update(self, webhook_id: str, req: UpdateWebhookRequest) -> Webhook:
        """Update a webhook; fields left as ``None`` are not sent."""
        require_webhook_id(webhook_id)
        if req.url is not None:
            require_https(req.url)

        data = await self._executor.request(
            "PATCH", f"/webhooks/{webhook_id}", req.model_dump(exclude_none=True)
        )
        logger.info("Updated webhook %s", webhook_id)
        return Webhook.model_validate(data)

    async def delete(self, webhook_id: str) -> None:
        require_webhook_id(webhook_id)
        await self._executor.request("DELETE", f"/webhooks/{webhook_id}")
        logger.info("Deleted webhook %s", webhook_id)

    async def test(self, webhook_id: str) -> WebhookTestResult:
        """Send a synthetic event to the endpoint; the result is returned as sent."""
        require_webhook_id(webhook_id)
        data = await self._executor.request("POST", f"/webhooks/{webhook_id}/test")
        return WebhookTestResult.model_validate(data or {})

    async def rotate_secret(self, webhook_id: str) -> WebhookSecretRotation:
        """
        Rotate the signing secret.

        The previous secret keeps validating until ``old_secret_expires_at``.
        """
        require_webhook_id(webhook_id)
        data = await self._executor.request("POST", f"/webhooks/{webhook_id}/rotate-secret")
        logger.info("Rotated secret for webhook %s", webhook_id)
        return WebhookSecretRotation.model_validate(data or {})

    async def get_deliveries(self, webhook_id: str) -> list[WebhookDelivery]:
        """Delivery history for a webhook, in server order."""
        require_webhook_id(webhook_id)
        data = await self._executor.request("GET", f"/webhooks/{webhook_id}/deliveries")
        return [WebhookDelivery.model_validate(item) for item in data or []]

    async def retry_delivery(self, webhook_id: str, delivery_id: str) -> None:
        require_webhook_id(webhook_id)
        require_delivery_id(delivery_id)
        await self._executor.request(
            "POST", f"/webhooks/{webhook_id}/deliveries/{delivery_id}/retry"
        )
        logger.info("Queued retry of delivery %s for webhook %s", delivery_id, webhook_id)

    async def list_event_types(self) -> list[str]:
        """Event types a webhook can subscribe to."""
        data = await self._executor.request("GET", "/webhooks/event-types")
        return [event["type"] for event in (data or {}).get("events") or []]

"""Webhook endpoint management."""

from sendly.webhooks.schemas import (
    CircuitState,
    CreateWebhookRequest,
    DeliveryStatus,
    UpdateWebhookRequest,
    Webhook,
    WebhookCreatedResponse,
    WebhookDelivery,
    WebhookMode,
    WebhookSecretRotation,
    WebhookTestResult,
)
from sendly.webhooks.service import WebhookEndpointManager

__all__ = [
    "CircuitState",
    "CreateWebhookRequest",
    "DeliveryStatus",
    "UpdateWebhookRequest",
    "Webhook",
    "WebhookCreatedResponse",
    "WebhookDelivery",
    "WebhookEndpointManager",
    "WebhookMode",
    "WebhookSecretRotation",
    "WebhookTestResult",
]

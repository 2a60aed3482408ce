"""Webhook Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class WebhookMode(str, Enum):
    """Which traffic a webhook receives."""

    ALL = "all"
    TEST = "test"
    LIVE = "live"


class CircuitState(str, Enum):
    """Server-side circuit breaker state for an endpoint."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class DeliveryStatus(str, Enum):
    """Webhook delivery status."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class Webhook(BaseModel):
    """Webhook endpoint as returned by the API (secret never included)."""

    id: str = Field("", description="Webhook ID (whk_ prefix)")
    url: str = Field("", description="Delivery URL (HTTPS)")
    events: list[str] = Field(default_factory=list, description="Subscribed event types")
    description: str | None = Field(None, description="Endpoint description")
    mode: str = Field(WebhookMode.ALL.value, description="Traffic mode, 'all' when unset")
    is_active: bool = Field(False, description="Whether deliveries are enabled")
    failure_count: int = Field(0, description="Consecutive delivery failures")
    last_failure_at: datetime | None = Field(None, description="Most recent failure")
    circuit_state: str = Field("", description="Circuit breaker state as reported")
    circuit_opened_at: datetime | None = Field(None, description="When the circuit opened")
    api_version: str = Field("", description="Payload API version")
    metadata: dict[str, Any] | None = Field(None, description="Caller-defined metadata")
    total_deliveries: int = Field(0, description="Deliveries attempted")
    successful_deliveries: int = Field(0, description="Deliveries acknowledged with 2xx")
    success_rate: float = Field(0.0, description="Successful / total deliveries")
    last_delivery_at: datetime | None = Field(None, description="Most recent delivery")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    model_config = {"frozen": True}

    @field_validator("mode", mode="before")
    @classmethod
    def _default_mode(cls, value: Any) -> Any:
        return value or WebhookMode.ALL.value


class WebhookCreatedResponse(BaseModel):
    """Newly created webhook plus its signing secret.

    The secret is returned exactly once; later reads never include it.
    """

    webhook: Webhook
    secret: str = Field(..., description="One-time plaintext signing secret")

    model_config = {"frozen": True}


class WebhookSecretRotation(BaseModel):
    """Result of rotating a webhook signing secret."""

    webhook: Webhook = Field(default_factory=Webhook, description="Updated endpoint")
    new_secret: str = Field("", description="New plaintext signing secret")
    old_secret_expires_at: datetime | None = Field(
        None, description="End of the grace period for the previous secret"
    )
    message: str = Field("", description="Server message")

    model_config = {"frozen": True}


class WebhookTestResult(BaseModel):
    """Outcome of a synthetic test delivery.

    Kept exactly as the server sent it: unknown keys are preserved under their
    wire names and available through ``model_extra``/``model_dump()``.
    """

    success: bool | None = Field(None, description="Whether the endpoint accepted the event")

    model_config = {"frozen": True, "extra": "allow"}


class WebhookDelivery(BaseModel):
    """Webhook delivery log entry."""

    id: str = Field(..., description="Delivery ID (del_ prefix)")
    webhook_id: str = Field(..., description="Parent webhook ID")
    event_id: str = Field("", description="Event ID")
    event_type: str = Field("", description="Event type (e.g., message.delivered)")
    attempt_number: int = Field(0, description="Attempt number of this delivery")
    max_attempts: int = Field(0, description="Attempts allowed before giving up")
    status: str = Field("", description="Delivery status: pending, success, failed, ...")
    response_status_code: int | None = Field(None, description="HTTP status from endpoint")
    response_time_ms: int | None = Field(None, description="Endpoint latency in milliseconds")
    error_message: str | None = Field(None, description="Error message if failed")
    error_code: str | None = Field(None, description="Error code if failed")
    next_retry_at: datetime | None = Field(None, description="Next scheduled retry")
    created_at: datetime | None = Field(None, description="When delivery was created")
    delivered_at: datetime | None = Field(None, description="When delivery completed")

    model_config = {"frozen": True}


class CreateWebhookRequest(BaseModel):
    """Create webhook request."""

    url: str = Field(..., description="Delivery URL, must be HTTPS")
    events: list[str] = Field(..., description="Event types to subscribe to (non-empty)")
    description: str | None = Field(None, description="Endpoint description")
    mode: str | None = Field(None, description="Traffic mode (all, test, live)")
    metadata: dict[str, Any] | None = Field(None, description="Caller-defined metadata")


class UpdateWebhookRequest(BaseModel):
    """Webhook update request.

    Only provided fields are sent.
    """

    url: str | None = Field(None, description="New delivery URL, must be HTTPS")
    events: list[str] | None = Field(None, description="New event subscription list")
    description: str | None = Field(None, description="New description")
    is_active: bool | None = Field(None, description="Enable or disable deliveries")
    mode: str | None = Field(None, description="New traffic mode")
    metadata: dict[str, Any] | None = Field(None, description="Replacement metadata")

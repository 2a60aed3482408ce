"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from sendly import Sendly

BASE_URL = "https://api.sendly.test/v1"


@pytest_asyncio.fixture
async def sendly() -> AsyncGenerator[Sendly, None]:
    """Client pointed at the mocked API root."""
    client = Sendly("sk_test_abc123", base_url=BASE_URL)
    yield client
    await client.close()


@pytest.fixture
def webhook_payload():
    """Webhook as the API returns it (snake_case, no secret)."""
    return {
        "id": "whk_abc123",
        "url": "https://example.com/hook",
        "events": ["sms.delivered", "sms.failed"],
        "description": "Delivery receipts",
        "mode": "all",
        "is_active": True,
        "failure_count": 0,
        "last_failure_at": None,
        "circuit_state": "closed",
        "circuit_opened_at": None,
        "api_version": "2024-01-01",
        "metadata": {"team": "growth"},
        "created_at": "2025-01-15T10:30:00Z",
        "updated_at": "2025-01-15T10:30:00Z",
        "total_deliveries": 10,
        "successful_deliveries": 9,
        "success_rate": 0.9,
        "last_delivery_at": "2025-01-16T08:00:00Z",
    }


@pytest.fixture
def delivery_payload():
    """Webhook delivery as the API returns it."""
    return {
        "id": "del_xyz789",
        "webhook_id": "whk_abc123",
        "event_id": "evt_001",
        "event_type": "sms.delivered",
        "attempt_number": 2,
        "max_attempts": 5,
        "status": "failed",
        "response_status_code": 503,
        "response_time_ms": 1200,
        "error_message": "Service Unavailable",
        "error_code": "http_error",
        "next_retry_at": "2025-01-15T10:35:00Z",
        "created_at": "2025-01-15T10:30:00Z",
        "delivered_at": None,
    }


@pytest.fixture
def template_payload():
    """Template as the API returns it."""
    return {
        "id": "tpl_001",
        "name": "Login code",
        "text": "Your {{app_name}} code is {{code}}",
        "variables": [
            {"key": "app_name", "type": "string", "fallback": "Sendly"},
            {"key": "code", "type": "string"},
        ],
        "is_preset": False,
        "status": "draft",
        "version": 1,
        "created_at": "2025-01-15T10:30:00Z",
        "updated_at": "2025-01-15T10:30:00Z",
    }

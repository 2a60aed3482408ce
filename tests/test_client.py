"""Tests for the Sendly client and its request executor."""

from unittest.mock import patch

import httpx
import pytest

from sendly import (
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    NotFoundError,
    RateLimitError,
    Sendly,
    ValidationError,
)
from sendly.executor import USER_AGENT, HTTPRequestExecutor
from sendly.templates import TemplateManager
from sendly.verify import SendVerificationRequest, VerificationManager
from sendly.webhooks import WebhookEndpointManager

from .conftest import BASE_URL


class TestClientConstruction:
    """Tests for client setup."""

    def test_composes_services(self, sendly):
        assert isinstance(sendly.webhooks, WebhookEndpointManager)
        assert isinstance(sendly.verify, VerificationManager)
        assert isinstance(sendly.templates, TemplateManager)

    def test_missing_api_key(self):
        with patch("sendly.client.settings") as mock_settings:
            mock_settings.SENDLY_API_KEY = ""

            with pytest.raises(ValidationError, match="API key"):
                Sendly()

    @pytest.mark.asyncio
    async def test_api_key_from_settings(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/webhooks").mock(
            return_value=httpx.Response(200, json=[])
        )

        with patch("sendly.client.settings") as mock_settings:
            mock_settings.SENDLY_API_KEY = "sk_from_env"
            mock_settings.SENDLY_BASE_URL = BASE_URL
            mock_settings.SENDLY_TIMEOUT = 5.0

            async with Sendly() as client:
                await client.webhooks.list()

        assert route.calls.last.request.headers["Authorization"] == "Bearer sk_from_env"

    @pytest.mark.asyncio
    async def test_sends_auth_and_json_headers(self, sendly, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/webhooks").mock(
            return_value=httpx.Response(200, json=[])
        )

        await sendly.webhooks.list()

        headers = route.calls.last.request.headers
        assert headers["Authorization"] == "Bearer sk_test_abc123"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_caller_supplied_client_left_open(self, respx_mock):
        respx_mock.get(f"{BASE_URL}/templates").mock(
            return_value=httpx.Response(200, json={"templates": []})
        )

        async with httpx.AsyncClient() as http_client:
            async with Sendly("sk_test", base_url=BASE_URL, http_client=http_client) as client:
                result = await client.templates.list()

            assert result.templates == []
            assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        executor = HTTPRequestExecutor("sk_test", base_url=BASE_URL, timeout=5.0)

        await executor.close()

        assert executor._client.is_closed

    def test_base_url_trailing_slash_trimmed(self):
        executor = HTTPRequestExecutor("sk_test", base_url=f"{BASE_URL}/", timeout=5.0)

        assert executor.base_url == BASE_URL


class TestErrorMapping:
    """Tests for API error classification."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error_class"),
        [
            (400, APIError),
            (401, AuthenticationError),
            (402, InsufficientCreditsError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (422, APIError),
            (500, APIError),
        ],
    )
    async def test_status_maps_to_error(self, sendly, respx_mock, status, error_class):
        respx_mock.get(f"{BASE_URL}/templates").mock(
            return_value=httpx.Response(
                status, json={"error": "some_error", "message": "Something went wrong"}
            )
        )

        with pytest.raises(error_class) as exc_info:
            await sendly.templates.list()

        error = exc_info.value
        assert type(error) is error_class
        assert error.status_code == status
        assert error.code == "some_error"
        assert error.message == "Something went wrong"
        assert error.body == {"error": "some_error", "message": "Something went wrong"}
        assert str(status) in str(error)

    @pytest.mark.asyncio
    async def test_rate_limit_retry_after(self, sendly, respx_mock):
        respx_mock.get(f"{BASE_URL}/templates").mock(
            return_value=httpx.Response(
                429,
                headers={"Retry-After": "30"},
                json={"error": "rate_limit_exceeded", "message": "Slow down"},
            )
        )

        with pytest.raises(RateLimitError) as exc_info:
            await sendly.templates.list()

        assert exc_info.value.retry_after == 30

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, sendly, respx_mock):
        respx_mock.get(f"{BASE_URL}/templates").mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )

        with pytest.raises(APIError) as exc_info:
            await sendly.templates.list()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        assert exc_info.value.body is None
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, sendly, respx_mock):
        respx_mock.get(f"{BASE_URL}/templates").mock(
            side_effect=httpx.ConnectError
        )

        with pytest.raises(httpx.ConnectError):
            await sendly.templates.list()

    @pytest.mark.asyncio
    async def test_timeout_propagates_unchanged(self, sendly, respx_mock):
        respx_mock.post(f"{BASE_URL}/verify").mock(side_effect=httpx.ReadTimeout)

        with pytest.raises(httpx.ReadTimeout):
            await sendly.verify.send(SendVerificationRequest(to="+15551234567"))

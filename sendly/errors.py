"""Sendly client exceptions."""

from __future__ import annotations

from typing import Any

import httpx


class SendlyError(Exception):
    """Base class for every error raised by this library."""


class ValidationError(SendlyError, ValueError):
    """Request rejected locally, before any network call."""


class APIError(SendlyError):
    """Non-2xx response from the Sendly API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.body = body

    def __str__(self) -> str:
        if self.code:
            return f"[{self.status_code}] {self.code}: {self.message}"
        return f"[{self.status_code}] {self.message}"


class AuthenticationError(APIError):
    """Missing, invalid or revoked API key."""


class InsufficientCreditsError(APIError):
    """Account balance is too low for the operation."""


class NotFoundError(APIError):
    """Requested resource does not exist."""


class RateLimitError(APIError):
    """Too many requests."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
        body: Any = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status_code, code=code, body=body)
        self.retry_after = retry_after


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    402: InsufficientCreditsError,
    403: AuthenticationError,
    404: NotFoundError,
}


def error_from_response(response: httpx.Response) -> APIError:
    """Build the exception matching an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    code = None
    message = response.reason_phrase or "Request failed"
    if isinstance(body, dict):
        code = body.get("error") if isinstance(body.get("error"), str) else None
        message = body.get("message") or code or message
    elif response.text:
        message = response.text

    status = response.status_code
    if status == 429:
        retry_after = response.headers.get("Retry-After")
        return RateLimitError(
            message,
            status,
            code=code,
            body=body,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )

    error_class = _STATUS_ERRORS.get(status, APIError)
    return error_class(message, status, code=code, body=body)

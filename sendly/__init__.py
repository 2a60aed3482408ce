"""Sendly - async Python client for the Sendly messaging API."""

from sendly.client import Sendly
from sendly.errors import (
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    NotFoundError,
    RateLimitError,
    SendlyError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AuthenticationError",
    "InsufficientCreditsError",
    "NotFoundError",
    "RateLimitError",
    "Sendly",
    "SendlyError",
    "ValidationError",
]

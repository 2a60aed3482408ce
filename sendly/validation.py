"""Local request checks run before any network call."""

from sendly.errors import ValidationError

WEBHOOK_ID_PREFIX = "whk_"
DELIVERY_ID_PREFIX = "del_"


def require_webhook_id(webhook_id: str) -> None:
    if not webhook_id or not webhook_id.startswith(WEBHOOK_ID_PREFIX):
        raise ValidationError("invalid webhook ID format")


def require_delivery_id(delivery_id: str) -> None:
    if not delivery_id or not delivery_id.startswith(DELIVERY_ID_PREFIX):
        raise ValidationError("invalid delivery ID format")


def require_https(url: str | None) -> None:
    """Reject anything that is not an ``https://`` URL, including empty strings."""
    if not url or not url.startswith("https://"):
        raise ValidationError("webhook URL must be HTTPS")


def require_value(value: str | None, field: str) -> None:
    if not value:
        raise ValidationError(f"{field} is required")

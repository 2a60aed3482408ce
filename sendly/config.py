"""Client configuration."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from sendly.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sendly.live/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DOCKER_SECRETS_PATH = Path("/run/secrets")

_ENV_REF = re.compile(r"^\$\{(\w+)\}$")


def read_secret(name: str, default: str = "") -> str:
    """Read secret from Docker secrets or environment variable."""
    secret_path = DOCKER_SECRETS_PATH / name
    if secret_path.exists():
        return secret_path.read_text().strip()
    return os.getenv(name.upper(), default)


class Settings:
    """Environment settings."""

    SENDLY_API_KEY: str = read_secret("sendly_api_key", "")
    SENDLY_BASE_URL: str = os.getenv("SENDLY_BASE_URL", DEFAULT_BASE_URL)
    SENDLY_TIMEOUT: float = float(os.getenv("SENDLY_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))


@lru_cache
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class ClientConfig:
    """Connection parameters for a Sendly client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS


class ClientConfigLoader:
    """Loads client configuration from a YAML file."""

    @classmethod
    def load(cls, path: str | Path) -> ClientConfig:
        """
        Load a client configuration.

        The file holds ``api_key``, ``base_url`` and ``timeout``. ``api_key``
        should be a ``${VAR_NAME}`` reference, resolved from Docker Secrets
        first and the environment second.

        Raises:
            ValidationError: If the file is missing, unparsable, or the key
                cannot be resolved.
        """
        path = Path(path)
        if not path.exists():
            raise ValidationError(f"Sendly configuration not found at {path}")

        try:
            with open(path) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to parse Sendly configuration: {e}") from e

        if not isinstance(raw_config, dict):
            raise ValidationError(f"Sendly configuration at {path} must be a mapping")

        key_ref = raw_config.get("api_key")
        if not key_ref:
            raise ValidationError(f"Sendly configuration at {path} missing 'api_key' field")

        api_key = cls._resolve_secret(str(key_ref))
        if not api_key:
            raise ValidationError(f"API key could not be resolved: {key_ref}")

        try:
            timeout = float(raw_config.get("timeout", DEFAULT_TIMEOUT_SECONDS))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid timeout in {path}: {raw_config.get('timeout')!r}") from e

        config = ClientConfig(
            api_key=api_key,
            base_url=raw_config.get("base_url") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
        logger.info("Loaded Sendly configuration from %s (base_url=%s)", path, config.base_url)
        return config

    @classmethod
    def _resolve_secret(cls, secret_ref: str) -> str | None:
        """Resolve a ``${VAR_NAME}`` reference, or return a literal value."""
        match = _ENV_REF.match(secret_ref)
        if not match:
            logger.warning(
                "Sendly configuration uses a literal API key. "
                "Use ${VAR_NAME} or Docker Secrets instead."
            )
            return secret_ref

        var_name = match.group(1)

        secret_file = DOCKER_SECRETS_PATH / var_name.lower()
        if secret_file.exists():
            try:
                return secret_file.read_text().strip()
            except OSError as e:
                logger.warning("Failed to read Docker Secret %s: %s", secret_file, e)

        return os.environ.get(var_name) or None

"""
Client configuration for Fapshi SDK.

The base URL is resolved once, at client construction, with the precedence
``base_url`` > ``environment`` > API key prefix.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .models.errors import FapshiError

SANDBOX_BASE_URL = "https://sandbox.fapshi.com"
LIVE_BASE_URL = "https://live.fapshi.com"

SANDBOX_KEY_PREFIX = "FAK_TEST_"
LIVE_KEY_PREFIX = "FAK_"


class Environment(str, Enum):
    """Deployment of the payment service."""

    SANDBOX = "sandbox"
    LIVE = "live"


BASE_URLS = {
    Environment.SANDBOX: SANDBOX_BASE_URL,
    Environment.LIVE: LIVE_BASE_URL,
}


def detect_environment_from_api_key(api_key: str) -> Environment:
    """Infer the environment from the API key format.

    Sandbox keys look like ``FAK_TEST_XXX`` and live keys like ``FAK_XXX``.
    Unrecognized formats fall back to sandbox.
    """
    if api_key.startswith(SANDBOX_KEY_PREFIX):
        return Environment.SANDBOX
    if api_key.startswith(LIVE_KEY_PREFIX):
        return Environment.LIVE
    return Environment.SANDBOX


def resolve_base_url(
    api_key: str,
    environment: Optional[Union[Environment, str]] = None,
    base_url: Optional[str] = None,
) -> str:
    """Return the base URL requests are sent to."""
    if base_url:
        return base_url[:-1] if base_url.endswith("/") else base_url

    if environment:
        try:
            env = Environment(environment)
        except ValueError:
            raise FapshiError(
                f"Invalid environment: {environment!r} (expected 'sandbox' or 'live')"
            ) from None
    else:
        env = detect_environment_from_api_key(api_key)
    return BASE_URLS[env]


@dataclass(frozen=True)
class FapshiConfig:
    """Credentials and endpoint selection for a client.

    Attributes:
        api_user: Value sent in the ``apiuser`` header
        api_key: Value sent in the ``apikey`` header
        environment: ``sandbox`` or ``live``; inferred from the key when unset
        base_url: Explicit endpoint, overrides ``environment``
        timeout: Request timeout in seconds; ``None`` waits indefinitely
    """

    api_user: str
    api_key: str
    environment: Optional[Union[Environment, str]] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.api_user:
            raise FapshiError("API user is required")
        if not self.api_key:
            raise FapshiError("API key is required")
        # Fail at construction on an unknown environment tag.
        resolve_base_url(self.api_key, self.environment, self.base_url)

    @property
    def resolved_environment(self) -> Optional[Environment]:
        """Environment in effect, or None when an explicit base URL is set."""
        if self.base_url:
            return None
        if self.environment:
            return Environment(self.environment)
        return detect_environment_from_api_key(self.api_key)

    @property
    def resolved_base_url(self) -> str:
        return resolve_base_url(self.api_key, self.environment, self.base_url)

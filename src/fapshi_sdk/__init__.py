"""
Fapshi Python SDK

Typed client for the Fapshi payment API: payment links, direct mobile
payments, payouts, transaction lookup and search, and balance queries.
"""

from typing import Optional, Union

from ._version import __version__
from .client import AsyncFapshiClient, FapshiClient
from .config import (
    LIVE_BASE_URL,
    SANDBOX_BASE_URL,
    Environment,
    FapshiConfig,
    detect_environment_from_api_key,
    resolve_base_url,
)
from .models.balance import BalanceResponse
from .models.errors import FapshiError
from .models.payment import (
    DirectPayMedium,
    DirectPayRequest,
    DirectPayResponse,
    ExpirePayRequest,
    ExpirePayResponse,
    InitiatePayRequest,
    InitiatePayResponse,
)
from .models.payout import PayoutRequest, PayoutResponse
from .models.search import SearchStatus, SearchTransactionsParams, SortOrder
from .models.transaction import PaymentMedium, Transaction, TransactionStatus


def create_fapshi_client(
    api_user: str,
    api_key: str,
    environment: Optional[Union[Environment, str]] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> FapshiClient:
    """Create a blocking client from credentials."""
    return FapshiClient(
        api_user=api_user,
        api_key=api_key,
        environment=environment,
        base_url=base_url,
        timeout=timeout,
    )


def create_async_fapshi_client(
    api_user: str,
    api_key: str,
    environment: Optional[Union[Environment, str]] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> AsyncFapshiClient:
    """Create an async client from credentials."""
    return AsyncFapshiClient(
        api_user=api_user,
        api_key=api_key,
        environment=environment,
        base_url=base_url,
        timeout=timeout,
    )


__all__ = [
    # Clients
    "FapshiClient",
    "AsyncFapshiClient",
    "create_fapshi_client",
    "create_async_fapshi_client",
    # Configuration
    "FapshiConfig",
    "Environment",
    "SANDBOX_BASE_URL",
    "LIVE_BASE_URL",
    "detect_environment_from_api_key",
    "resolve_base_url",
    # Errors
    "FapshiError",
    # Transaction models
    "Transaction",
    "TransactionStatus",
    "PaymentMedium",
    # Payment models
    "InitiatePayRequest",
    "InitiatePayResponse",
    "DirectPayMedium",
    "DirectPayRequest",
    "DirectPayResponse",
    "ExpirePayRequest",
    "ExpirePayResponse",
    # Payout models
    "PayoutRequest",
    "PayoutResponse",
    # Search models
    "SearchTransactionsParams",
    "SearchStatus",
    "SortOrder",
    # Balance
    "BalanceResponse",
]

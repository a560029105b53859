"""
Pytest configuration and fixtures for Fapshi SDK tests.
"""
from __future__ import annotations

import pytest

from fapshi_sdk import AsyncFapshiClient, FapshiClient


# Mock response data
MOCK_RESPONSES = {
    "transaction": {
        "transId": "tx_abc123",
        "status": "SUCCESSFUL",
        "medium": "mobile money",
        "serviceName": "Test Service",
        "amount": 500,
        "revenue": 490,
        "payerName": "John Doe",
        "email": "john@example.com",
        "redirectUrl": "https://example.com/done",
        "externalId": "order_42",
        "userId": "user_1",
        "webhook": "https://example.com/hook",
        "financialTransId": "MP250101.1234.A00001",
        "dateInitiated": "2025-01-20",
        "dateConfirmed": "2025-01-20",
    },
    "initiate_pay": {
        "message": "Request successful",
        "link": "https://checkout.fapshi.com/link/abc123",
        "transId": "tx_abc123",
        "dateInitiated": "2025-01-20",
    },
    "direct_pay": {
        "message": "Request successful",
        "transId": "tx_direct1",
        "dateInitiated": "2025-01-20",
    },
    "payout": {
        "message": "Payout successful",
        "transId": "tx_payout1",
        "dateInitiated": "2025-01-20",
    },
    "expire_pay": {
        "transId": "tx_abc123",
        "status": "EXPIRED",
        "amount": 500,
        "dateInitiated": "2025-01-20",
    },
    "balance": {
        "service": "Test Service",
        "balance": 125000,
        "currency": "XAF",
    },
}


@pytest.fixture
def api_user() -> str:
    """Test API user."""
    return "test-api-user"


@pytest.fixture
def api_key() -> str:
    """Test sandbox API key."""
    return "FAK_TEST_abc123"


@pytest.fixture
async def client(api_user: str, api_key: str) -> AsyncFapshiClient:
    """Create a test client."""
    client = AsyncFapshiClient(api_user=api_user, api_key=api_key)
    yield client
    await client.close()


@pytest.fixture
def sync_client(api_user: str, api_key: str) -> FapshiClient:
    """Create a blocking test client."""
    client = FapshiClient(api_user=api_user, api_key=api_key)
    yield client
    client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES

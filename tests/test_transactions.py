"""
Tests for transaction lookup, search and balance
"""
import pytest

from fapshi_sdk import FapshiError, SearchTransactionsParams, SearchStatus, SortOrder

BASE = "https://sandbox.fapshi.com"


class TestGetTransactionsByUserId:
    """Tests for get_transactions_by_user_id method."""

    async def test_list_user_transactions(self, client, httpx_mock, mock_responses):
        """Should return the user's transactions."""
        httpx_mock.add_response(
            url=f"{BASE}/transaction/user_1",
            method="GET",
            json=[mock_responses["transaction"]],
        )

        transactions = await client.get_transactions_by_user_id("user_1")

        assert len(transactions) == 1
        assert transactions[0].user_id == "user_1"
        assert transactions[0].amount == 500

    async def test_empty_list(self, client, httpx_mock):
        """Should handle a user without transactions."""
        httpx_mock.add_response(url=f"{BASE}/transaction/user-2", method="GET", json=[])

        assert await client.get_transactions_by_user_id("user-2") == []

    @pytest.mark.parametrize(
        "user_id",
        ["user 1", "user/1", "user@mail", "x" * 101, "user_1\n", "ümlaut"],
    )
    async def test_reject_invalid_user_id(self, client, httpx_mock, user_id):
        """Should reject IDs outside the allowed characters and length."""
        with pytest.raises(FapshiError, match="User ID must match pattern"):
            await client.get_transactions_by_user_id(user_id)

        assert httpx_mock.get_requests() == []

    async def test_accept_max_length_user_id(self, client, httpx_mock):
        """Should accept a 100 character ID."""
        user_id = "a" * 100
        httpx_mock.add_response(url=f"{BASE}/transaction/{user_id}", method="GET", json=[])

        assert await client.get_transactions_by_user_id(user_id) == []

    async def test_reject_non_string_user_id(self, client, httpx_mock):
        """Should reject a user ID that is not a string."""
        with pytest.raises(FapshiError, match="User ID must be a string"):
            await client.get_transactions_by_user_id(42)

        assert httpx_mock.get_requests() == []

    async def test_reject_empty_user_id(self, client, httpx_mock):
        """Should require a user ID."""
        with pytest.raises(FapshiError, match="User ID is required"):
            await client.get_transactions_by_user_id("")

        assert httpx_mock.get_requests() == []


class TestSearchTransactions:
    """Tests for search_transactions method."""

    async def test_search_with_filters(self, client, httpx_mock, mock_responses):
        """Should send filters as query parameters."""
        httpx_mock.add_response(
            url=(
                f"{BASE}/search?status=successful&medium=mobile+money"
                "&start=2025-01-01&end=2025-01-31&amt=500&limit=20&sort=asc"
            ),
            method="GET",
            json=[mock_responses["transaction"]],
        )

        transactions = await client.search_transactions(
            status=SearchStatus.SUCCESSFUL,
            medium="mobile money",
            start="2025-01-01",
            end="2025-01-31",
            amt=500,
            limit=20,
            sort=SortOrder.ASC,
        )

        assert transactions[0].trans_id == "tx_abc123"

    async def test_search_with_params_model(self, client, httpx_mock):
        """Should accept a SearchTransactionsParams instance."""
        httpx_mock.add_response(url=f"{BASE}/search?limit=100&sort=desc", method="GET", json=[])

        result = await client.search_transactions(SearchTransactionsParams(limit=100, sort="desc"))

        assert result == []

    @pytest.mark.parametrize("limit", [0, -1, 101, 1000])
    async def test_reject_limit_out_of_range(self, client, httpx_mock, limit):
        """Should reject limits outside 1-100."""
        with pytest.raises(FapshiError, match="Limit must be between 1 and 100"):
            await client.search_transactions(limit=limit)

        assert httpx_mock.get_requests() == []

    @pytest.mark.parametrize("limit", [1, 100])
    async def test_accept_limit_bounds(self, client, httpx_mock, limit):
        """Should accept both ends of the limit range."""
        httpx_mock.add_response(url=f"{BASE}/search?limit={limit}", method="GET", json=[])

        assert await client.search_transactions(limit=limit) == []

    async def test_reject_unknown_status(self, client, httpx_mock):
        """Should reject a status the search endpoint does not accept."""
        with pytest.raises(FapshiError, match="Invalid SearchTransactionsParams"):
            await client.search_transactions(status="PENDING")

        assert httpx_mock.get_requests() == []


class TestGetBalance:
    """Tests for get_balance method."""

    async def test_get_balance(self, client, httpx_mock, mock_responses):
        """Should return the service balance."""
        httpx_mock.add_response(url=f"{BASE}/balance", method="GET", json=mock_responses["balance"])

        balance = await client.get_balance()

        assert balance.service == "Test Service"
        assert balance.balance == 125000
        assert balance.currency == "XAF"

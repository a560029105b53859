"""
Fapshi Python SDK client.

Example usage:
    ```python
    from fapshi_sdk import AsyncFapshiClient

    async with AsyncFapshiClient(api_user="...", api_key="FAK_TEST_...") as client:
        # Generate a payment link
        link = await client.initiate_pay(amount=500, email="buyer@example.com")

        # Check on it later
        transaction = await client.get_payment_status(link.trans_id)
    ```

A blocking ``FapshiClient`` with the same operations is provided for code
that does not run an event loop.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ._version import __version__
from .config import Environment, FapshiConfig
from .models.balance import BalanceResponse
from .models.base import FapshiModel
from .models.errors import FapshiError
from .models.payment import (
    DirectPayRequest,
    DirectPayResponse,
    ExpirePayRequest,
    ExpirePayResponse,
    InitiatePayRequest,
    InitiatePayResponse,
)
from .models.payout import PayoutRequest, PayoutResponse
from .models.search import SearchTransactionsParams
from .models.transaction import Transaction
from .validation import (
    validate_direct_pay,
    validate_expire_pay,
    validate_initiate_pay,
    validate_payout,
    validate_search,
    validate_trans_id,
    validate_user_id,
)

logger = logging.getLogger(__name__)

USER_AGENT = f"fapshi-sdk-python/{__version__}"

# Only these methods carry a JSON body.
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

M = TypeVar("M", bound=FapshiModel)
RequestInput = Optional[Union[FapshiModel, Mapping[str, Any]]]


def _format_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'request'}: {err['msg']}"
        for err in exc.errors()
    )


def _coerce_request(
    model: Type[M],
    request: RequestInput,
    fields: dict[str, Any],
) -> M:
    """Build a request model from a model instance, a mapping or keyword fields."""
    if request is not None and fields:
        raise FapshiError("Pass either a request object or keyword arguments, not both")
    if isinstance(request, model):
        return request
    data = fields if request is None else request
    if isinstance(data, FapshiModel):
        data = data.to_dict()
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise FapshiError(f"Invalid {model.__name__}: {_format_validation_error(e)}") from e


def _parse(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise FapshiError(
            f"Unexpected response for {model.__name__}: {_format_validation_error(e)}"
        ) from e


def _parse_transactions(data: Any) -> list[Transaction]:
    if not isinstance(data, list):
        raise FapshiError("Unexpected response: expected a list of transactions")
    return [_parse(Transaction, item) for item in data]


@dataclass(frozen=True)
class _Operation:
    """A validated call, ready to be sent by either client flavour."""

    method: str
    path: str
    parse: Callable[[Any], Any]
    json: Optional[dict[str, Any]] = None
    params: Optional[dict[str, Any]] = None


class _BaseFapshiClient:
    """Configuration, request preparation and response mapping.

    Holds no mutable state apart from the lazily created HTTP client, so
    concurrent calls on one instance are independent.
    """

    def __init__(
        self,
        config: Optional[FapshiConfig] = None,
        *,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        environment: Optional[Union[Environment, str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        if config is None:
            config = FapshiConfig(
                api_user=api_user or "",
                api_key=api_key or "",
                environment=environment,
                base_url=base_url,
                timeout=timeout,
            )
        elif any(v is not None for v in (api_user, api_key, environment, base_url, timeout)):
            raise FapshiError("Pass either a FapshiConfig or keyword arguments, not both")

        self._config = config
        self._base_url = config.resolved_base_url
        self._environment = config.resolved_environment
        self._headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "apiuser": config.api_user,
            "apikey": config.api_key,
        }

    @property
    def config(self) -> FapshiConfig:
        return self._config

    @property
    def base_url(self) -> str:
        """Resolved base URL, without trailing slash."""
        return self._base_url

    @property
    def environment(self) -> Optional[Environment]:
        """Resolved environment; None when an explicit base URL is used."""
        return self._environment

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    # ==================== Request plumbing ====================

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    @staticmethod
    def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
        if not params:
            return None
        return {key: value for key, value in params.items() if value is not None}

    def _request_kwargs(self, operation: _Operation) -> dict[str, Any]:
        method = operation.method.upper()
        return {
            "method": method,
            "url": self._build_url(operation.path),
            "params": self._clean_params(operation.params),
            "json": operation.json if method in BODY_METHODS else None,
            "headers": self._headers,
        }

    @staticmethod
    def _network_error(method: str, url: str, exc: Exception) -> FapshiError:
        logger.warning("Fapshi request %s %s failed: %s", method, url, exc)
        return FapshiError(f"Network error: Unable to connect to Fapshi API. {exc}")

    @staticmethod
    def _handle_response(method: str, url: str, response: httpx.Response) -> Any:
        """Return the decoded body or raise for a non-2xx status."""
        try:
            data = response.json()
        except ValueError as e:
            if response.is_success:
                raise FapshiError(
                    f"Invalid JSON in response: {e}", response.status_code
                ) from e
            data = None

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            if not message:
                message = f"API request failed with status {response.status_code}"
            logger.warning(
                "Fapshi request %s %s returned %s: %s",
                method,
                url,
                response.status_code,
                message,
            )
            raise FapshiError(str(message), response.status_code)

        return data

    # ==================== Operations ====================

    def _initiate_pay(self, request: RequestInput, fields: dict[str, Any]) -> _Operation:
        req = _coerce_request(InitiatePayRequest, request, fields)
        validate_initiate_pay(req)
        return _Operation(
            "POST",
            "/initiate-pay",
            lambda data: _parse(InitiatePayResponse, data),
            json=req.to_dict(),
        )

    def _direct_pay(self, request: RequestInput, fields: dict[str, Any]) -> _Operation:
        req = _coerce_request(DirectPayRequest, request, fields)
        validate_direct_pay(req)
        return _Operation(
            "POST",
            "/direct-pay",
            lambda data: _parse(DirectPayResponse, data),
            json=req.to_dict(),
        )

    def _get_payment_status(self, trans_id: str) -> _Operation:
        validate_trans_id(trans_id)

        def parse(data: Any) -> Transaction:
            # The endpoint answers with a single transaction object.
            if not isinstance(data, dict) or not data.get("transId"):
                raise FapshiError(f"No transaction found with ID: {trans_id}", 404)
            return _parse(Transaction, data)

        return _Operation("GET", f"/payment-status/{quote(trans_id, safe='')}", parse)

    def _expire_pay(self, request: RequestInput, fields: dict[str, Any]) -> _Operation:
        req = _coerce_request(ExpirePayRequest, request, fields)
        validate_expire_pay(req)
        return _Operation(
            "POST",
            "/expire-pay",
            lambda data: _parse(ExpirePayResponse, data),
            json=req.to_dict(),
        )

    def _get_transactions_by_user_id(self, user_id: str) -> _Operation:
        validate_user_id(user_id)
        return _Operation("GET", f"/transaction/{quote(user_id, safe='')}", _parse_transactions)

    def _search_transactions(self, params: RequestInput, filters: dict[str, Any]) -> _Operation:
        search = _coerce_request(SearchTransactionsParams, params, filters)
        validate_search(search)
        return _Operation("GET", "/search", _parse_transactions, params=search.to_query())

    def _get_balance(self) -> _Operation:
        return _Operation("GET", "/balance", lambda data: _parse(BalanceResponse, data))

    def _payout(self, request: RequestInput, fields: dict[str, Any]) -> _Operation:
        req = _coerce_request(PayoutRequest, request, fields)
        validate_payout(req)
        return _Operation(
            "POST",
            "/payout",
            lambda data: _parse(PayoutResponse, data),
            json=req.to_dict(),
        )


class AsyncFapshiClient(_BaseFapshiClient):
    """
    Async Fapshi API client.

    Each operation validates its input locally, issues exactly one HTTP
    call and returns a typed model. Every failure is raised as
    :class:`FapshiError`; nothing is retried.

    Args:
        config: A ``FapshiConfig``; alternatively pass its fields as keywords
        api_user: API user, sent as the ``apiuser`` header
        api_key: API key, sent as the ``apikey`` header
        environment: ``"sandbox"`` or ``"live"``; inferred from the key if unset
        base_url: Explicit endpoint, overrides ``environment``
        timeout: Request timeout in seconds (default: no timeout)
        http_client: Optional ``httpx.AsyncClient`` to send requests with;
            it is left open by ``close()``
    """

    def __init__(
        self,
        config: Optional[FapshiConfig] = None,
        *,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        environment: Optional[Union[Environment, str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(
            config,
            api_user=api_user,
            api_key=api_key,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
        )
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._config.timeout)
            self._owns_client = True
        return self._client

    async def _execute(self, operation: _Operation) -> Any:
        kwargs = self._request_kwargs(operation)
        method, url = kwargs["method"], kwargs["url"]
        logger.debug("Fapshi request %s %s", method, url)
        try:
            response = await self._get_client().request(**kwargs)
        except httpx.TransportError as e:
            raise self._network_error(method, url, e) from e
        except httpx.HTTPError as e:
            logger.warning("Fapshi request %s %s failed: %s", method, url, e)
            raise FapshiError(str(e)) from e
        return operation.parse(self._handle_response(method, url, response))

    async def initiate_pay(
        self, request: RequestInput = None, **fields: Any
    ) -> InitiatePayResponse:
        """Generate a payment link to be completed on a Fapshi-hosted page.

        Args:
            request: ``InitiatePayRequest`` or mapping; or pass its fields as keywords

        Returns:
            InitiatePayResponse with the link and transaction ID
        """
        return await self._execute(self._initiate_pay(request, fields))

    async def direct_pay(self, request: RequestInput = None, **fields: Any) -> DirectPayResponse:
        """Send a payment request directly to a user's mobile device."""
        return await self._execute(self._direct_pay(request, fields))

    async def get_payment_status(self, trans_id: str) -> Transaction:
        """Retrieve a transaction by ID.

        Raises:
            FapshiError: with status code 404 if the API returns no transaction
        """
        return await self._execute(self._get_payment_status(trans_id))

    async def expire_pay(self, request: RequestInput = None, **fields: Any) -> ExpirePayResponse:
        """Expire a payment link so it can no longer be paid."""
        return await self._execute(self._expire_pay(request, fields))

    async def get_transactions_by_user_id(self, user_id: str) -> list[Transaction]:
        """List the transactions tagged with ``user_id``."""
        return await self._execute(self._get_transactions_by_user_id(user_id))

    async def search_transactions(
        self, params: RequestInput = None, **filters: Any
    ) -> list[Transaction]:
        """Search transactions by status, medium, date range, amount.

        Args:
            params: ``SearchTransactionsParams`` or mapping; or pass filters as keywords

        Returns:
            Matching transactions
        """
        return await self._execute(self._search_transactions(params, filters))

    async def get_balance(self) -> BalanceResponse:
        """Return the current service balance."""
        return await self._execute(self._get_balance())

    async def payout(self, request: RequestInput = None, **fields: Any) -> PayoutResponse:
        """Send money to a mobile money, orange money or Fapshi account.

        ``phone`` is required unless ``medium="fapshi"``, which requires ``email``.
        """
        return await self._execute(self._payout(request, fields))

    async def close(self) -> None:
        """Close the HTTP client if the SDK created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncFapshiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class FapshiClient(_BaseFapshiClient):
    """
    Blocking Fapshi API client.

    Same operations and arguments as :class:`AsyncFapshiClient`.

    Example usage:
        ```python
        with FapshiClient(api_user="...", api_key="FAK_...") as client:
            balance = client.get_balance()
        ```
    """

    def __init__(
        self,
        config: Optional[FapshiConfig] = None,
        *,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        environment: Optional[Union[Environment, str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(
            config,
            api_user=api_user,
            api_key=api_key,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
        )
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self._config.timeout)
            self._owns_client = True
        return self._client

    def _execute(self, operation: _Operation) -> Any:
        kwargs = self._request_kwargs(operation)
        method, url = kwargs["method"], kwargs["url"]
        logger.debug("Fapshi request %s %s", method, url)
        try:
            response = self._get_client().request(**kwargs)
        except httpx.TransportError as e:
            raise self._network_error(method, url, e) from e
        except httpx.HTTPError as e:
            logger.warning("Fapshi request %s %s failed: %s", method, url, e)
            raise FapshiError(str(e)) from e
        return operation.parse(self._handle_response(method, url, response))

    def initiate_pay(self, request: RequestInput = None, **fields: Any) -> InitiatePayResponse:
        """Generate a payment link to be completed on a Fapshi-hosted page."""
        return self._execute(self._initiate_pay(request, fields))

    def direct_pay(self, request: RequestInput = None, **fields: Any) -> DirectPayResponse:
        """Send a payment request directly to a user's mobile device."""
        return self._execute(self._direct_pay(request, fields))

    def get_payment_status(self, trans_id: str) -> Transaction:
        """Retrieve a transaction by ID; a missing transaction raises with status 404."""
        return self._execute(self._get_payment_status(trans_id))

    def expire_pay(self, request: RequestInput = None, **fields: Any) -> ExpirePayResponse:
        """Expire a payment link so it can no longer be paid."""
        return self._execute(self._expire_pay(request, fields))

    def get_transactions_by_user_id(self, user_id: str) -> list[Transaction]:
        """List the transactions tagged with ``user_id``."""
        return self._execute(self._get_transactions_by_user_id(user_id))

    def search_transactions(self, params: RequestInput = None, **filters: Any) -> list[Transaction]:
        """Search transactions by status, medium, date range, amount."""
        return self._execute(self._search_transactions(params, filters))

    def get_balance(self) -> BalanceResponse:
        """Return the current service balance."""
        return self._execute(self._get_balance())

    def payout(self, request: RequestInput = None, **fields: Any) -> PayoutResponse:
        """Send money to a mobile money, orange money or Fapshi account."""
        return self._execute(self._payout(request, fields))

    def close(self) -> None:
        """Close the HTTP client if the SDK created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "FapshiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

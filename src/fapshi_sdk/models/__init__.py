"""Fapshi SDK Models."""
from .base import FapshiModel
from .balance import BalanceResponse
from .errors import FapshiError
from .payment import (
    DirectPayMedium,
    DirectPayRequest,
    DirectPayResponse,
    ExpirePayRequest,
    ExpirePayResponse,
    InitiatePayRequest,
    InitiatePayResponse,
)
from .payout import PayoutRequest, PayoutResponse
from .search import SearchStatus, SearchTransactionsParams, SortOrder
from .transaction import PaymentMedium, Transaction, TransactionStatus

__all__ = [
    "FapshiModel",
    "FapshiError",
    "Transaction",
    "TransactionStatus",
    "PaymentMedium",
    "InitiatePayRequest",
    "InitiatePayResponse",
    "DirectPayMedium",
    "DirectPayRequest",
    "DirectPayResponse",
    "ExpirePayRequest",
    "ExpirePayResponse",
    "PayoutRequest",
    "PayoutResponse",
    "SearchTransactionsParams",
    "SearchStatus",
    "SortOrder",
    "BalanceResponse",
]

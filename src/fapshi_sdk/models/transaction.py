"""Transaction models for Fapshi SDK."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .base import FapshiModel


class TransactionStatus(str, Enum):
    """Transaction status as reported by the API."""

    CREATED = "CREATED"
    PENDING = "PENDING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"


class PaymentMedium(str, Enum):
    """Payment channel."""

    MOBILE_MONEY = "mobile money"
    ORANGE_MONEY = "orange money"
    FAPSHI = "fapshi"


class Transaction(FapshiModel):
    """A payment or payout attempt, owned by the API."""

    trans_id: Optional[str] = None
    status: Optional[str] = None
    medium: Optional[str] = None
    service_name: Optional[str] = None
    amount: Optional[Union[int, float]] = None
    revenue: Optional[Union[int, float]] = None
    payer_name: Optional[str] = None
    email: Optional[str] = None
    redirect_url: Optional[str] = None
    external_id: Optional[str] = None
    user_id: Optional[str] = None
    webhook: Optional[str] = None
    financial_trans_id: Optional[str] = None
    date_initiated: Optional[str] = None
    date_confirmed: Optional[str] = None

"""Payment collection models for Fapshi SDK."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import FapshiModel
from .transaction import PaymentMedium, Transaction


class DirectPayMedium(str, Enum):
    """Channels a direct payment can be pushed to."""

    MOBILE_MONEY = PaymentMedium.MOBILE_MONEY.value
    ORANGE_MONEY = PaymentMedium.ORANGE_MONEY.value


class InitiatePayRequest(FapshiModel):
    """Request to generate a payment link."""

    amount: Optional[int] = None
    email: Optional[str] = None
    redirect_url: Optional[str] = None
    user_id: Optional[str] = None
    external_id: Optional[str] = None
    message: Optional[str] = None


class InitiatePayResponse(FapshiModel):
    """Response from generating a payment link."""

    message: Optional[str] = None
    link: Optional[str] = None
    trans_id: Optional[str] = None
    date_initiated: Optional[str] = None


class DirectPayRequest(FapshiModel):
    """Request to push a payment prompt to a mobile device."""

    amount: Optional[int] = None
    phone: Optional[str] = None
    medium: Optional[DirectPayMedium] = None
    name: Optional[str] = None
    email: Optional[str] = None
    user_id: Optional[str] = None
    external_id: Optional[str] = None
    message: Optional[str] = None


class DirectPayResponse(FapshiModel):
    """Response from a direct payment request."""

    message: Optional[str] = None
    trans_id: Optional[str] = None
    date_initiated: Optional[str] = None


class ExpirePayRequest(FapshiModel):
    """Request to expire a payment link."""

    trans_id: Optional[str] = None


class ExpirePayResponse(Transaction):
    """The expired transaction."""

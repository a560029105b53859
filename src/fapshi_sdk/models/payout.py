"""Payout models for Fapshi SDK."""
from __future__ import annotations

from typing import Optional

from .base import FapshiModel
from .transaction import PaymentMedium


class PayoutRequest(FapshiModel):
    """Request to send money to a mobile money, orange money or Fapshi account.

    ``phone`` is required unless ``medium`` is ``"fapshi"``, in which case
    ``email`` is required instead.
    """

    amount: Optional[int] = None
    phone: Optional[str] = None
    medium: Optional[PaymentMedium] = None
    name: Optional[str] = None
    email: Optional[str] = None
    user_id: Optional[str] = None
    external_id: Optional[str] = None
    message: Optional[str] = None


class PayoutResponse(FapshiModel):
    """Response from a payout."""

    message: Optional[str] = None
    trans_id: Optional[str] = None
    date_initiated: Optional[str] = None

"""Balance model for Fapshi SDK."""
from __future__ import annotations

from typing import Optional, Union

from .base import FapshiModel


class BalanceResponse(FapshiModel):
    """Current service balance."""

    service: Optional[str] = None
    balance: Optional[Union[int, float]] = None
    currency: Optional[str] = None

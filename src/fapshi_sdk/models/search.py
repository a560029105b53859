"""Transaction search models for Fapshi SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .base import FapshiModel
from .transaction import PaymentMedium


class SearchStatus(str, Enum):
    """Status filter accepted by the search endpoint."""

    CREATED = "created"
    SUCCESSFUL = "successful"
    FAILED = "failed"
    EXPIRED = "expired"


class SortOrder(str, Enum):
    """Sort order by date."""

    ASC = "asc"
    DESC = "desc"


class SearchTransactionsParams(FapshiModel):
    """Query filters for transaction search."""

    status: Optional[SearchStatus] = None
    medium: Optional[PaymentMedium] = None
    start: Optional[str] = None  # YYYY-MM-DD
    end: Optional[str] = None  # YYYY-MM-DD
    amt: Optional[int] = None
    limit: Optional[int] = None  # 1-100, server default 10
    sort: Optional[SortOrder] = None  # server default desc

    def to_query(self) -> dict[str, Any]:
        """Query parameters; unset filters are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)

"""Local request validation.

Every check here runs before a request is sent and raises
:class:`FapshiError` without a status code.
"""
from __future__ import annotations

import re
from typing import Optional

from .models.errors import FapshiError
from .models.payment import DirectPayRequest, ExpirePayRequest, InitiatePayRequest
from .models.payout import PayoutRequest
from .models.search import SearchTransactionsParams
from .models.transaction import PaymentMedium

MIN_AMOUNT = 100
MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 100
USER_ID_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]{1,100}$")


def validate_amount(amount: Optional[int]) -> None:
    if not amount or amount < MIN_AMOUNT:
        raise FapshiError(f"Amount must be at least {MIN_AMOUNT}")


def validate_initiate_pay(request: InitiatePayRequest) -> None:
    validate_amount(request.amount)


def validate_direct_pay(request: DirectPayRequest) -> None:
    validate_amount(request.amount)
    if not request.phone:
        raise FapshiError("Phone number is required")


def validate_payout(request: PayoutRequest) -> None:
    """Check amount, then the recipient field the medium calls for.

    A Fapshi account is addressed by email; every other medium, including
    an unset one, is addressed by phone.
    """
    validate_amount(request.amount)
    if request.medium == PaymentMedium.FAPSHI.value:
        if not request.email:
            raise FapshiError('Email is required when medium is "fapshi"')
    elif not request.phone:
        raise FapshiError('Phone is required when medium is not "fapshi" or not specified')


def validate_trans_id(trans_id: Optional[str]) -> None:
    if not trans_id:
        raise FapshiError("Transaction ID is required")
    if not isinstance(trans_id, str):
        raise FapshiError("Transaction ID must be a string")


def validate_expire_pay(request: ExpirePayRequest) -> None:
    validate_trans_id(request.trans_id)


def validate_user_id(user_id: Optional[str]) -> None:
    if not user_id:
        raise FapshiError("User ID is required")
    if not isinstance(user_id, str):
        raise FapshiError("User ID must be a string")
    if not USER_ID_PATTERN.fullmatch(user_id):
        raise FapshiError(f"User ID must match pattern: {USER_ID_PATTERN.pattern}")


def validate_search(params: SearchTransactionsParams) -> None:
    if params.limit is not None and not MIN_SEARCH_LIMIT <= params.limit <= MAX_SEARCH_LIMIT:
        raise FapshiError(
            f"Limit must be between {MIN_SEARCH_LIMIT} and {MAX_SEARCH_LIMIT}"
        )

"""Error model for Fapshi SDK."""
from __future__ import annotations

from typing import Any, Optional


class FapshiError(Exception):
    """Error raised for every failure surfaced by the SDK.

    Local validation failures and network failures carry no status code.
    Failures reported by the API carry the HTTP status code and the
    server-supplied message.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"FapshiError(message={self.message!r}, status_code={self.status_code!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "message": self.message,
                "status_code": self.status_code,
            }
        }

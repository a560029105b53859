"""Base model for Fapshi SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FapshiModel(BaseModel):
    """Base model with common configuration.

    Fields are snake_case in Python and camelCase on the wire. Unknown
    fields returned by the API are kept as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FapshiModel":
        """Create model from dictionary."""
        return cls.model_validate(data)

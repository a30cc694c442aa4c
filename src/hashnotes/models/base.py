"""Shared base for models persisted with camelCase JSON keys."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serializes to camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

"""Base model for camelCase wire schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON (dump with ``by_alias=True``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

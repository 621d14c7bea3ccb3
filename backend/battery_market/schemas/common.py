"""Common/shared schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# largest integer the database drivers can bind; ids above it never exist
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    """Serializes with camelCase keys; accepts camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class HealthStatus(BaseModel):
    status: str = "ok"


class Message(BaseModel):
    message: str

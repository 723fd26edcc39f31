"""Shared schema bases and the success envelopes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Schema whose JSON field names are camelCase (``first_name`` <-> ``firstName``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for successful responses carrying a row or rows."""
    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """Envelope for successful responses carrying only a message (deletes)."""
    success: bool = True
    message: str


"""Pydantic schemas for Category."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel


class CategoryBase(CamelModel):
    """Base schema for Category."""
    name: str = Field(..., min_length=1, max_length=100, description="Unique category name")
    description: Optional[str] = Field(None, description="Category description")


class CategoryCreate(CategoryBase):
    """Schema for creating a new category."""
    pass


class CategoryUpdate(CamelModel):
    """Schema for updating a category."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class CategoryResponse(CategoryBase):
    """Schema for Category response."""
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

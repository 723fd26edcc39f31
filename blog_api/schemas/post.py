"""Pydantic schemas for Post."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from .category import CategoryResponse
from .common import CamelModel


class PostBase(CamelModel):
    """Base schema for Post."""
    title: str = Field(..., min_length=1, max_length=255, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique URL slug")
    published: bool = False


class PostCreate(PostBase):
    """Schema for creating a new post."""
    category_ids: Optional[List[UUID]] = Field(None, description="Categories to attach to the post")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "title": "Hello world",
            "content": "First post",
            "slug": "hello-world",
            "published": True,
            "categoryIds": ["5d4c8a3e-6a55-4c7b-9f6e-0a9e6c1b2d3f"],
        }
    })


class PostUpdate(CamelModel):
    """Schema for updating a post.

    When ``categoryIds`` is present it replaces the post's whole category set.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    published: Optional[bool] = None
    category_ids: Optional[List[UUID]] = None

    @field_validator("title", "content", "slug", "published", "category_ids")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class PostResponse(PostBase):
    """Schema for Post response."""
    id: UUID
    author_id: UUID
    categories: List[CategoryResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

"""Pydantic schemas for `User` domain objects."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, field_validator

from .common import CamelModel


class UserBase(CamelModel):
	email: EmailStr
	first_name: Optional[str] = None
	last_name: Optional[str] = None


class UserCreate(UserBase):
	password: str = Field(..., min_length=8)

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"email": "test@example.com",
			"password": "password123",
			"firstName": "John",
			"lastName": "Doe",
		}
	})


class UserUpdate(CamelModel):
	email: Optional[EmailStr] = None
	first_name: Optional[str] = None
	last_name: Optional[str] = None
	is_active: Optional[bool] = None

	@field_validator("email", "is_active")
	@classmethod
	def reject_null(cls, v):
		if v is None:
			raise ValueError("may be omitted but not null")
		return v

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"email": "john.new@example.com",
			"firstName": "Johnny",
			"isActive": True,
		}
	})


class UserResponse(UserBase):
	"""User as rendered by the API; the stored password is never included."""
	id: UUID
	is_active: bool
	created_at: datetime
	updated_at: datetime

	model_config = ConfigDict(from_attributes=True, json_schema_extra={
		"example": {
			"id": "0b6f1f3e-8d0e-4a53-9a1c-2b7f5f0e9c11",
			"email": "test@example.com",
			"firstName": "John",
			"lastName": "Doe",
			"isActive": True,
			"createdAt": "2025-01-01T10:00:00Z",
			"updatedAt": "2025-01-02T10:00:00Z",
		}
	})

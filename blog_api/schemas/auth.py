"""Pydantic schemas for authentication."""

from typing import Optional

from pydantic import EmailStr, Field

from .common import CamelModel


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")


class IdentityResponse(CamelModel):
    sub: str
    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None

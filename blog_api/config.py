import re
from datetime import timedelta
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


_DURATION_RE = re.compile(r"^(\d+)\s*([smhdw]?)$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """Parse a token lifetime such as ``3600``, ``30m``, ``12h`` or ``7d``."""
    match = _DURATION_RE.match(value.strip().lower())
    if not match:
        raise ValueError(f"Invalid duration '{value}', expected e.g. 3600, 30m, 12h, 7d")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Database
    DATABASE_URL: str

    # Application
    PORT: int = Field(default=5000, ge=1, le=65535)
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # API
    API_TITLE: str = "Blog API"
    API_VERSION: str = "1.0.0"

    # JWT
    JWT_SECRET: str = Field(..., min_length=32)
    JWT_EXPIRES_IN: str = "7d"
    JWT_ALGORITHM: str = "HS256"

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: Literal["debug", "info", "warn", "error"] = "info"

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        try:
            make_url(v)
        except ArgumentError as e:
            raise ValueError(f"DATABASE_URL is not a valid database URL: {e}") from e
        return v

    @field_validator("JWT_EXPIRES_IN")
    @classmethod
    def validate_expires_in(cls, v: str) -> str:
        parse_duration(v)
        return v

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def jwt_expires_delta(self) -> timedelta:
        return parse_duration(self.JWT_EXPIRES_IN)

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


def get_settings() -> Settings:
    """Load settings from the environment, failing fast on invalid values."""
    return Settings()

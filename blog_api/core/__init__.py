"""Core module exports."""

from .exceptions import (
    AppError,
    NotFoundError,
    StoreError,
    StoreErrorKind,
    UnauthorizedError,
)
from .security import (
    Identity,
    create_access_token,
    decode_token,
    extract_bearer_token,
)

__all__ = [
    "AppError",
    "NotFoundError",
    "StoreError",
    "StoreErrorKind",
    "UnauthorizedError",
    "Identity",
    "create_access_token",
    "decode_token",
    "extract_bearer_token",
]

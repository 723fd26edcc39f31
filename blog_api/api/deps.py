"""FastAPI dependency injection functions for settings, database access and authentication."""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from blog_api.config import Settings
from blog_api.core.exceptions import UnauthorizedError
from blog_api.core.security import Identity, decode_token, extract_bearer_token
from blog_api.database import get_db

logger = logging.getLogger(__name__)

# Raw Authorization header; the exact "Bearer " prefix is checked by extract_bearer_token
bearer_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BearerAuth",
    description="Bearer <token>",
    auto_error=False,
)


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def require_identity(
    authorization: Optional[str] = Depends(bearer_header),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """
    Dependency that requires a valid bearer token.

    Args:
        authorization: Raw Authorization header
        settings: Application settings (signing secret and algorithm)

    Returns:
        Identity: Claims of the verified token

    Raises:
        UnauthorizedError: 401 if the header is missing or malformed, or the
            token is invalid or expired
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.info("[AUTH] Missing or malformed Authorization header")
        raise UnauthorizedError("Missing or invalid authorization header")

    try:
        identity = decode_token(token, secret=settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    except UnauthorizedError as e:
        logger.info(f"[AUTH] Token rejected: {e.message}")
        raise

    logger.debug(f"[AUTH] Authenticated sub={identity.sub}")
    return identity


def optional_identity(
    authorization: Optional[str] = Depends(bearer_header),
    settings: Settings = Depends(get_settings),
) -> Optional[Identity]:
    """
    Dependency to optionally identify the caller.
    Returns None if no valid token provided.

    Useful for endpoints that allow both authenticated and unauthenticated access.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None
    try:
        return decode_token(token, secret=settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    except UnauthorizedError:
        return None


__all__ = [
    "get_db",
    "get_settings",
    "require_identity",
    "optional_identity",
]

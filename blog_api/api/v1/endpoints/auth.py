"""Authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_db, get_settings, require_identity
from blog_api.config import Settings
from blog_api.core.exceptions import UnauthorizedError
from blog_api.core.security import Identity, create_access_token
from blog_api.crud import crud_user
from blog_api.schemas.auth import IdentityResponse, LoginRequest, TokenResponse
from blog_api.schemas.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
)


@router.post(
    "/login",
    response_model=SuccessResponse[TokenResponse],
    status_code=status.HTTP_200_OK,
    summary="Login user",
)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse[TokenResponse]:
    """
    Login with email and password.

    Args:
        credentials: Email and password
        db: Database session
        settings: Application settings (signing secret, token lifetime)

    Returns:
        SuccessResponse: Access token, token type and lifetime in seconds

    Raises:
        UnauthorizedError: 401 if credentials are invalid or the account is inactive
    """
    user = crud_user.authenticate(db, email=credentials.email, password=credentials.password)
    if not user:
        logger.info("[AUTH] Login failed: bad credentials")
        raise UnauthorizedError("Invalid email or password")

    if not user.is_active:
        logger.info(f"[AUTH] Login refused for inactive user id={user.id}")
        raise UnauthorizedError("User account is inactive")

    expires_delta = settings.jwt_expires_delta
    access_token = create_access_token(
        str(user.id),
        user.email,
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_delta=expires_delta,
    )
    return SuccessResponse(
        data=TokenResponse(
            access_token=access_token,
            expires_in=int(expires_delta.total_seconds()),
        )
    )


@router.get(
    "/me",
    response_model=SuccessResponse[IdentityResponse],
    status_code=status.HTTP_200_OK,
    summary="Get current token claims",
)
def read_identity(identity: Identity = Depends(require_identity)) -> SuccessResponse[IdentityResponse]:
    """Return the claims of the caller's bearer token."""
    return SuccessResponse(
        data=IdentityResponse(sub=identity.sub, email=identity.email, iat=identity.iat, exp=identity.exp)
    )


__all__ = ["router"]

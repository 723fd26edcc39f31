"""Security utilities for JWT bearer authentication."""

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from blog_api.core.exceptions import UnauthorizedError


BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Claims of a verified access token."""

    sub: str
    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None


def create_access_token(
    subject: str,
    email: str,
    *,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: timedelta,
    now: Optional[int] = None,
) -> str:
    """Create a signed JWT access token.

    Args:
        subject: Token subject (user id)
        email: Email of the user the token is issued to
        secret: Shared signing secret
        algorithm: JWT signing algorithm
        expires_delta: Token lifetime
        now: Issue time in epoch seconds (defaults to current time)

    Returns:
        Encoded JWT token
    """
    issued_at = int(time.time()) if now is None else now
    claims: Dict[str, Any] = {
        "sub": subject,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + int(expires_delta.total_seconds()),
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnauthorizedError("Invalid token")
    return int(value)


def decode_token(
    token: str,
    *,
    secret: str,
    algorithm: str = "HS256",
    now: Optional[int] = None,
) -> Identity:
    """Verify a JWT token and return its claims.

    Expiry is checked against ``now`` when one is given (python-jose is then
    told not to verify ``exp`` against the wall clock), otherwise against the
    current time.

    Raises:
        UnauthorizedError: If the token is malformed, badly signed or expired
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"verify_exp": now is None},
        )
    except ExpiredSignatureError as e:
        raise UnauthorizedError("Token has expired") from e
    except JWTError as e:
        raise UnauthorizedError("Invalid token") from e

    sub = payload.get("sub")
    email = payload.get("email")
    if not isinstance(sub, str) or not isinstance(email, str):
        raise UnauthorizedError("Invalid token")

    identity = Identity(
        sub=sub,
        email=email,
        iat=_optional_int(payload.get("iat")),
        exp=_optional_int(payload.get("exp")),
    )

    current = int(time.time()) if now is None else now
    if identity.exp is not None and identity.exp < current:
        raise UnauthorizedError("Token has expired")

    return identity


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, or None."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None

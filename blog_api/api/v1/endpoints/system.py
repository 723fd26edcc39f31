"""Welcome and health check endpoints."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from blog_api.api.deps import get_settings, optional_identity
from blog_api.config import Settings
from blog_api.core.security import Identity

router = APIRouter(tags=["System"])


@router.get("/")
def read_root(identity: Optional[Identity] = Depends(optional_identity)):
    """Welcome endpoint; greets the caller when a valid token is sent."""
    if identity is not None:
        return {"message": f"Welcome back to the Blog API, {identity.email}"}
    return {"message": "Welcome to the Blog API"}


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """API health check"""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
    }

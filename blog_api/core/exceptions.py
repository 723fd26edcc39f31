"""Error types raised by the Blog API.

Every failure a handler can produce is one of these variants (or a framework
``HTTPException`` / validation error); ``blog_api.core.error_handler`` maps
them to responses.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError


class AppError(Exception):
    """Application failure carrying its own HTTP status."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers: Optional[Dict[str, str]] = None

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class UnauthorizedError(AppError):
    """Missing, invalid or expired bearer token.

    Response Body:
        {
            "error": "Unauthorized",
            "message": "Token has expired"
        }
    """

    def __init__(self, message: str = "Missing or invalid authorization header"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)
        self.headers = {"WWW-Authenticate": "Bearer"}

    def to_body(self) -> Dict[str, Any]:
        return {"error": "Unauthorized", "message": self.message}


class NotFoundError(AppError):
    """Resource with the requested id does not exist."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found", status.HTTP_404_NOT_FOUND)
        self.resource = resource


class StoreErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    OTHER = "other"


# PostgreSQL SQLSTATE codes
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"

_KIND_BY_CODE = {
    PG_UNIQUE_VIOLATION: StoreErrorKind.UNIQUE_VIOLATION,
    PG_FOREIGN_KEY_VIOLATION: StoreErrorKind.FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_UNIQUE": StoreErrorKind.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": StoreErrorKind.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": StoreErrorKind.FOREIGN_KEY_VIOLATION,
}

_SQLITE_CONSTRAINT_MESSAGES = (
    ("UNIQUE constraint failed", "SQLITE_CONSTRAINT_UNIQUE"),
    ("FOREIGN KEY constraint failed", "SQLITE_CONSTRAINT_FOREIGNKEY"),
)


def extract_store_code(exc: SQLAlchemyError) -> Optional[str]:
    """Return the driver's vendor error code for a wrapped DBAPI error, if any.

    psycopg2 exposes the SQLSTATE as ``pgcode``, psycopg 3 as ``sqlstate`` and
    sqlite3 the extended result name as ``sqlite_errorname``.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return None
    for attr in ("pgcode", "sqlstate"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    code = getattr(orig, "sqlite_errorname", None)
    if code == "SQLITE_CONSTRAINT":
        # Older SQLite builds report only the primary result code
        message = str(orig)
        for prefix, extended in _SQLITE_CONSTRAINT_MESSAGES:
            if message.startswith(prefix):
                return extended
    return code


class StoreError(Exception):
    """Relational store failure, classified by its vendor error code."""

    def __init__(self, kind: StoreErrorKind, code: Optional[str] = None, message: str = "Database error"):
        super().__init__(message)
        self.kind = kind
        self.code = code
        self.message = message

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> "StoreError":
        code = extract_store_code(exc)
        kind = _KIND_BY_CODE.get(code, StoreErrorKind.OTHER) if code else StoreErrorKind.OTHER
        return cls(kind, code, str(getattr(exc, "orig", None) or exc))


__all__ = [
    "AppError",
    "UnauthorizedError",
    "NotFoundError",
    "StoreErrorKind",
    "StoreError",
    "extract_store_code",
    "PG_UNIQUE_VIOLATION",
    "PG_FOREIGN_KEY_VIOLATION",
]

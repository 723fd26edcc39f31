"""CRUD operations for `User` model."""

from __future__ import annotations

import secrets
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.core.exceptions import StoreError
from blog_api.crud.base import CRUDBase
from blog_api.models.user import User
from blog_api.schemas.user import UserCreate, UserUpdate


def verify_password(plain_password: str, stored_password: str) -> bool:
    # Passwords are stored as given; compare in constant time
    return secrets.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        stmt = select(User).where(User.email == email).limit(1)
        try:
            return db.scalars(stmt).first()
        except SQLAlchemyError as e:
            raise StoreError.from_exception(e) from e

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        """Authenticate user by email and password."""
        user = self.get_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user


# Singleton instance
crud_user = CRUDUser(User)

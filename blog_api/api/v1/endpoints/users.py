"""User endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_db
from blog_api.core.exceptions import NotFoundError
from blog_api.crud import crud_user
from blog_api.schemas.common import MessageResponse, SuccessResponse
from blog_api.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "",
    response_model=SuccessResponse[List[UserResponse]],
    status_code=status.HTTP_200_OK,
    summary="List all users",
)
def list_users(db: Session = Depends(get_db)) -> SuccessResponse[List[UserResponse]]:
    """
    Get list of all users.

    Args:
        db: Database session

    Returns:
        SuccessResponse: Every user row
    """
    users = crud_user.get_multi(db)
    return SuccessResponse(data=[UserResponse.model_validate(user) for user in users])


@router.get(
    "/{user_id}",
    response_model=SuccessResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    summary="Get user by ID",
)
def get_user(user_id: str, db: Session = Depends(get_db)) -> SuccessResponse[UserResponse]:
    """
    Get user by ID.

    Raises:
        NotFoundError: 404 if user not found
    """
    user = crud_user.get(db, id=user_id)
    if not user:
        raise NotFoundError("User")
    return SuccessResponse(data=UserResponse.model_validate(user))


@router.post(
    "",
    response_model=SuccessResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create new user",
)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)) -> SuccessResponse[UserResponse]:
    """
    Register a new user.

    The password is stored as given. A duplicate email is rejected by the
    store and reported as 409.

    Args:
        user_in: User creation data (email, password, firstName, lastName)
        db: Database session

    Returns:
        SuccessResponse: Created user data
    """
    user = crud_user.create(db, obj_in=user_in)
    logger.info(f"User created: id={user.id}")
    return SuccessResponse(data=UserResponse.model_validate(user))


@router.put(
    "/{user_id}",
    response_model=SuccessResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    summary="Update user",
)
def update_user(
    user_id: str,
    user_update: UserUpdate,
    db: Session = Depends(get_db),
) -> SuccessResponse[UserResponse]:
    """
    Update user information. Fields not sent are left unchanged.

    Raises:
        NotFoundError: 404 if user not found
    """
    db_user = crud_user.get(db, id=user_id)
    if not db_user:
        raise NotFoundError("User")

    updated_user = crud_user.update(db, db_obj=db_user, obj_in=user_update)
    return SuccessResponse(data=UserResponse.model_validate(updated_user))


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete user",
)
def delete_user(user_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """
    Permanently delete a user.

    Raises:
        NotFoundError: 404 if user not found
    """
    if not crud_user.delete(db, id=user_id):
        raise NotFoundError("User")

    logger.info(f"User deleted: id={user_id}")
    return MessageResponse(message="User deleted successfully")


__all__ = ["router"]

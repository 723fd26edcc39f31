"""Category endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_db
from blog_api.core.exceptions import NotFoundError
from blog_api.crud import crud_category
from blog_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_api.schemas.common import MessageResponse, SuccessResponse

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
)


@router.get(
    "",
    response_model=SuccessResponse[List[CategoryResponse]],
    summary="List all categories",
)
def list_categories(db: Session = Depends(get_db)) -> SuccessResponse[List[CategoryResponse]]:
    categories = crud_category.get_multi(db)
    return SuccessResponse(data=[CategoryResponse.model_validate(c) for c in categories])


@router.get(
    "/{category_id}",
    response_model=SuccessResponse[CategoryResponse],
    summary="Get category by ID",
)
def get_category(category_id: str, db: Session = Depends(get_db)) -> SuccessResponse[CategoryResponse]:
    category = crud_category.get(db, id=category_id)
    if not category:
        raise NotFoundError("Category")
    return SuccessResponse(data=CategoryResponse.model_validate(category))


@router.post(
    "",
    response_model=SuccessResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create new category",
)
def create_category(
    category_in: CategoryCreate,
    db: Session = Depends(get_db),
) -> SuccessResponse[CategoryResponse]:
    """Create a category. Names are unique; a duplicate is reported as 409."""
    category = crud_category.create(db, obj_in=category_in)
    return SuccessResponse(data=CategoryResponse.model_validate(category))


@router.put(
    "/{category_id}",
    response_model=SuccessResponse[CategoryResponse],
    summary="Update category",
)
def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    db: Session = Depends(get_db),
) -> SuccessResponse[CategoryResponse]:
    category = crud_category.get(db, id=category_id)
    if not category:
        raise NotFoundError("Category")
    category = crud_category.update(db, db_obj=category, obj_in=category_update)
    return SuccessResponse(data=CategoryResponse.model_validate(category))


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete category",
)
def delete_category(category_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete a category. Fails with 400 while posts still reference it."""
    if not crud_category.delete(db, id=category_id):
        raise NotFoundError("Category")
    return MessageResponse(message="Category deleted successfully")


__all__ = ["router"]

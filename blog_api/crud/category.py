"""CRUD operations for Category."""

from blog_api.crud.base import CRUDBase
from blog_api.models.category import Category
from blog_api.schemas.category import CategoryCreate, CategoryUpdate


class CRUDCategory(CRUDBase[Category, CategoryCreate, CategoryUpdate]):
    """CRUD operations for Category."""


# Singleton instance
crud_category = CRUDCategory(Category)

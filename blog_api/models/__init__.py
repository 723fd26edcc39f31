"""
SQLAlchemy Models for the Blog API
"""

from ..database import Base
from .user import User
from .post import Post
from .category import Category
from .post_category import PostCategory

# Export all models
__all__ = [
    "Base",
    "User",
    "Post",
    "Category",
    "PostCategory",
]

"""PostCategory join model linking posts to categories."""

import uuid

from sqlalchemy import Column, TIMESTAMP, ForeignKey, Index, Uuid
from sqlalchemy.sql import func
from ..database import Base


class PostCategory(Base):
    """Many-to-many link row between a post and a category."""

    __tablename__ = "post_categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Foreign Keys (no ON DELETE CASCADE: the application removes link rows first)
    post_id = Column(Uuid, ForeignKey("posts.id"), nullable=False, index=True)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=False, index=True)

    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_post_category_pair", "post_id", "category_id"),
    )

"""Post model for blog articles."""

import uuid

from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Post(Base):
    """Blog post owned by a user and tagged with any number of categories."""

    __tablename__ = "posts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Content
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    published = Column(Boolean, default=False, nullable=False)

    # Foreign Keys
    author_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    author = relationship("User", back_populates="posts")
    # Join rows are written explicitly by the post CRUD, so this side is read-only
    categories = relationship(
        "Category",
        secondary="post_categories",
        viewonly=True,
        order_by="Category.name",
    )

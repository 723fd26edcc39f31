import uuid

from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class User(Base):
    __tablename__ = "users"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Authentication
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)  # stored as given, no hashing

    # Profile
    first_name = Column(String(100))
    last_name = Column(String(100))

    # Account Status
    is_active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    # Deleting an author that still has posts fails in the store (foreign key)
    posts = relationship("Post", back_populates="author", passive_deletes="all")

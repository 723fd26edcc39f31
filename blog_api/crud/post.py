"""CRUD operations for Post.

Post writes touch two tables (``posts`` and ``post_categories``); each write
runs in a single transaction so a reader never sees a post without its
intended category set.
"""

from typing import Any, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.core.exceptions import StoreError
from blog_api.crud.base import CRUDBase
from blog_api.models.post import Post
from blog_api.models.post_category import PostCategory
from blog_api.schemas.post import PostCreate, PostUpdate


def _link_rows(post_id: UUID, category_ids: Iterable[UUID]) -> List[PostCategory]:
    # dict.fromkeys drops repeated ids but keeps the client's order
    return [
        PostCategory(post_id=post_id, category_id=category_id)
        for category_id in dict.fromkeys(category_ids)
    ]


class CRUDPost(CRUDBase[Post, PostCreate, PostUpdate]):
    """CRUD operations for Post."""

    def create_post(
        self,
        db: Session,
        *,
        post_in: PostCreate,
        author_id: UUID,
    ) -> Post:
        """Create a post and its category links in one transaction."""
        post_data = post_in.model_dump(exclude={"category_ids"})
        post = Post(**post_data, author_id=author_id)
        try:
            db.add(post)
            db.flush()
            if post_in.category_ids:
                db.add_all(_link_rows(post.id, post_in.category_ids))
            db.commit()
            db.refresh(post)
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError.from_exception(e) from e
        return post

    def update_post(
        self,
        db: Session,
        *,
        db_obj: Post,
        post_in: PostUpdate,
    ) -> Post:
        """Update a post; a given category list replaces the existing links.

        The row update, link removal and link insertion commit together.
        """
        update_data = post_in.model_dump(exclude_unset=True)
        category_ids: Optional[List[UUID]] = update_data.pop("category_ids", None)

        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db_obj.updated_at = func.now()

        try:
            db.add(db_obj)
            if category_ids is not None:
                db.execute(delete(PostCategory).where(PostCategory.post_id == db_obj.id))
                db.add_all(_link_rows(db_obj.id, category_ids))
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError.from_exception(e) from e
        return db_obj

    def delete(self, db: Session, *, id: Any) -> Optional[Post]:
        """Delete a post, removing its category links first, in one transaction."""
        post = self.get(db, id)
        if not post:
            return None

        try:
            db.execute(delete(PostCategory).where(PostCategory.post_id == post.id))
            db.delete(post)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError.from_exception(e) from e
        return post


# Singleton instance
crud_post = CRUDPost(Post)

"""Post endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_db, require_identity
from blog_api.core.exceptions import NotFoundError, UnauthorizedError
from blog_api.core.security import Identity
from blog_api.crud import crud_post
from blog_api.crud.base import parse_id
from blog_api.schemas.common import MessageResponse, SuccessResponse
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)


@router.get(
    "",
    response_model=SuccessResponse[List[PostResponse]],
    status_code=status.HTTP_200_OK,
    summary="List all posts",
)
def list_posts(db: Session = Depends(get_db)) -> SuccessResponse[List[PostResponse]]:
    """Get every post with its categories."""
    posts = crud_post.get_multi(db)
    return SuccessResponse(data=[PostResponse.model_validate(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=SuccessResponse[PostResponse],
    status_code=status.HTTP_200_OK,
    summary="Get post by ID",
)
def get_post(post_id: str, db: Session = Depends(get_db)) -> SuccessResponse[PostResponse]:
    post = crud_post.get(db, id=post_id)
    if not post:
        raise NotFoundError("Post")
    return SuccessResponse(data=PostResponse.model_validate(post))


@router.post(
    "",
    response_model=SuccessResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create new post",
    description="""
    Create a post authored by the caller.

    **Access:** bearer token required. `categoryIds` are linked in the same
    transaction as the post; an unknown category id rolls the whole write back.
    """,
)
def create_post(
    post_in: PostCreate,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
) -> SuccessResponse[PostResponse]:
    author_id = parse_id(identity.sub)
    if author_id is None:
        raise UnauthorizedError("Invalid token")

    post = crud_post.create_post(db, post_in=post_in, author_id=author_id)
    logger.info(f"Post created: id={post.id} author={author_id}")
    return SuccessResponse(data=PostResponse.model_validate(post))


@router.put(
    "/{post_id}",
    response_model=SuccessResponse[PostResponse],
    status_code=status.HTTP_200_OK,
    summary="Update post",
)
def update_post(
    post_id: str,
    post_update: PostUpdate,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
) -> SuccessResponse[PostResponse]:
    """
    Update a post. Fields not sent are left unchanged; `categoryIds`, when
    sent, replaces the post's categories entirely.

    **Access:** any authenticated caller; the post's author is not checked.

    Raises:
        NotFoundError: 404 if post not found
    """
    post = crud_post.get(db, id=post_id)
    if not post:
        raise NotFoundError("Post")

    post = crud_post.update_post(db, db_obj=post, post_in=post_update)
    logger.info(f"Post updated: id={post.id} by={identity.sub}")
    return SuccessResponse(data=PostResponse.model_validate(post))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete post",
)
def delete_post(
    post_id: str,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Delete a post together with its category links.

    **Access:** any authenticated caller; the post's author is not checked.
    """
    if not crud_post.delete(db, id=post_id):
        raise NotFoundError("Post")

    logger.info(f"Post deleted: id={post_id} by={identity.sub}")
    return MessageResponse(message="Post deleted successfully")


__all__ = ["router"]

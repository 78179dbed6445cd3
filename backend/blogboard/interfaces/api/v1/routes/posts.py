import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from blogboard.application.services.post_service import (
    create_post,
    delete_post,
    get_post,
    list_posts,
    serialize_post_response,
    update_post,
)
from blogboard.domain.post_category import PostCategory
from blogboard.infrastructure.db.models import User
from blogboard.infrastructure.db.session import get_db
from blogboard.interfaces.api.v1.dependencies.auth import require_authenticated
from blogboard.interfaces.api.v1.dependencies.pagination import get_page_request
from blogboard.interfaces.api.v1.schemas.pagination import PageRequest
from blogboard.interfaces.api.v1.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    description="Create a post authored by the current user.",
    responses={401: {"description": "Unauthorized"}},
)
def create_post_endpoint(
    payload: PostCreate,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    post = create_post(db=db, payload=payload, author_id=current_user.id)
    return serialize_post_response(post)


@router.get(
    "",
    response_model=PostListResponse,
    summary="List posts",
    description=(
        "Public paginated list. `search` matches title, content and author username; "
        "`sort_by` accepts created_at, updated_at, title or category."
    ),
)
def get_posts(
    pagination: PageRequest = Depends(get_page_request),
    category: PostCategory | None = Query(default=None),
    author_id: uuid.UUID | None = Query(default=None),
    created_from: datetime | None = Query(default=None),
    created_to: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return list_posts(
        db=db,
        page_request=pagination,
        category=category,
        author_id=author_id,
        created_from=created_from,
        created_to=created_to,
    )


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post by id",
    responses={404: {"description": "Post not found"}},
)
def get_post_endpoint(post_id: uuid.UUID, db: Session = Depends(get_db)):
    return serialize_post_response(get_post(db=db, post_id=post_id))


@router.patch(
    "/{post_id}",
    response_model=PostResponse,
    summary="Update post",
    description="Partial update, allowed for the post author only.",
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Not the post author"},
        404: {"description": "Post not found"},
    },
)
def update_post_endpoint(
    post_id: uuid.UUID,
    payload: PostUpdate,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    post = update_post(db=db, post_id=post_id, payload=payload, user_id=current_user.id)
    return serialize_post_response(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete post",
    description="Delete a post and its comments, allowed for the post author only.",
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Not the post author"},
        404: {"description": "Post not found"},
    },
)
def delete_post_endpoint(
    post_id: uuid.UUID,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    delete_post(db=db, post_id=post_id, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

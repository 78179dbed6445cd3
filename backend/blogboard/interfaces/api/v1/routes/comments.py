import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from blogboard.application.services.comment_service import (
    create_comment,
    delete_comment,
    get_comment,
    list_comments,
    list_comments_for_post,
    serialize_comment_response,
    update_comment,
)
from blogboard.infrastructure.db.models import User
from blogboard.infrastructure.db.session import get_db
from blogboard.interfaces.api.v1.dependencies.auth import require_authenticated
from blogboard.interfaces.api.v1.dependencies.pagination import get_page_request
from blogboard.interfaces.api.v1.schemas.comment import (
    CommentContent,
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from blogboard.interfaces.api.v1.schemas.pagination import PageRequest

router = APIRouter(prefix="/comments", tags=["comments"])
post_comments_router = APIRouter(prefix="/posts/{post_id}/comments", tags=["posts"])

NOT_AUTHOR_RESPONSES = {
    401: {"description": "Unauthorized"},
    403: {"description": "Not the comment author"},
    404: {"description": "Comment not found"},
}


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Post not found"}},
)
def create_comment_endpoint(
    payload: CommentCreate,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    comment = create_comment(db=db, post_id=payload.post_id, content=payload.content, author_id=current_user.id)
    return serialize_comment_response(comment)


@router.get(
    "",
    response_model=CommentListResponse,
    summary="List comments",
    description="Public paginated list. `search` matches content; `sort_by` accepts created_at, updated_at or content.",
)
def get_comments(
    pagination: PageRequest = Depends(get_page_request),
    post_id: uuid.UUID | None = Query(default=None),
    author_id: uuid.UUID | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return list_comments(db=db, page_request=pagination, post_id=post_id, author_id=author_id)


@router.get(
    "/{comment_id}",
    response_model=CommentResponse,
    summary="Get comment by id",
    responses={404: {"description": "Comment not found"}},
)
def get_comment_endpoint(comment_id: uuid.UUID, db: Session = Depends(get_db)):
    return serialize_comment_response(get_comment(db=db, comment_id=comment_id))


@router.patch(
    "/{comment_id}",
    response_model=CommentResponse,
    summary="Update comment",
    responses=NOT_AUTHOR_RESPONSES,
)
def update_comment_endpoint(
    comment_id: uuid.UUID,
    payload: CommentUpdate,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    comment = update_comment(db=db, comment_id=comment_id, payload=payload, user_id=current_user.id)
    return serialize_comment_response(comment)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
    responses=NOT_AUTHOR_RESPONSES,
)
def delete_comment_endpoint(
    comment_id: uuid.UUID,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    delete_comment(db=db, comment_id=comment_id, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@post_comments_router.get(
    "",
    response_model=CommentListResponse,
    summary="List comments of a post",
    responses={404: {"description": "Post not found"}},
)
def get_post_comments(
    post_id: uuid.UUID,
    pagination: PageRequest = Depends(get_page_request),
    db: Session = Depends(get_db),
):
    return list_comments_for_post(db=db, post_id=post_id, page_request=pagination)


@post_comments_router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Post not found"}},
)
def create_post_comment(
    post_id: uuid.UUID,
    payload: CommentContent,
    current_user: User = Depends(require_authenticated),
    db: Session = Depends(get_db),
):
    comment = create_comment(db=db, post_id=post_id, content=payload.content, author_id=current_user.id)
    return serialize_comment_response(comment)

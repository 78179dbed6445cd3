import uuid

from sqlalchemy.orm import Session

from blogboard.application.errors import ForbiddenError, NotFoundError
from blogboard.application.services.pagination_service import paginate
from blogboard.application.services.post_service import get_post
from blogboard.domain.query_operators import FilterOperator
from blogboard.infrastructure.db.models import Comment
from blogboard.infrastructure.db.query_builder import SelectQueryBuilder
from blogboard.infrastructure.logging import get_logger
from blogboard.interfaces.api.v1.schemas.comment import CommentUpdate
from blogboard.interfaces.api.v1.schemas.pagination import (
    FilterCondition,
    PageRequest,
    PaginatedResult,
    PaginationOptions,
)

COMMENT_SORTABLE_FIELDS = ["created_at", "updated_at", "content"]

logger = get_logger(__name__)


def serialize_comment_response(comment: Comment) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def get_comment(db: Session, comment_id: uuid.UUID) -> Comment:
    comment = db.get(Comment, comment_id)
    if comment is None:
        logger.warning("comment_not_found", comment_id=str(comment_id))
        raise NotFoundError("Comment not found")
    return comment


def _get_owned_comment(db: Session, comment_id: uuid.UUID, user_id: uuid.UUID, action: str) -> Comment:
    comment = get_comment(db, comment_id)
    if comment.author_id != user_id:
        logger.warning("comment_forbidden", comment_id=str(comment_id), user_id=str(user_id), action=action)
        raise ForbiddenError(f"You can only {action} your own comments")
    return comment


def create_comment(db: Session, post_id: uuid.UUID, content: str, author_id: uuid.UUID) -> Comment:
    get_post(db, post_id)
    comment = Comment(content=content, post_id=post_id, author_id=author_id)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info("comment_created", comment_id=str(comment.id), post_id=str(post_id), author_id=str(author_id))
    return comment


def list_comments(
    db: Session,
    page_request: PageRequest,
    post_id: uuid.UUID | None = None,
    author_id: uuid.UUID | None = None,
) -> PaginatedResult[dict]:
    filters: list[FilterCondition] = []
    if post_id is not None:
        filters.append(FilterCondition(field="post_id", operator=FilterOperator.eq, value=post_id))
    if author_id is not None:
        filters.append(FilterCondition(field="author_id", operator=FilterOperator.eq, value=author_id))

    result = paginate(
        SelectQueryBuilder(db, Comment, alias="comment"),
        page_request,
        serialize_comment_response,
        PaginationOptions(search_fields=["content"], default_sort_field="created_at", filters=filters),
        sortable_fields=COMMENT_SORTABLE_FIELDS,
    )
    logger.info(
        "comments_listed",
        returned=len(result.items),
        page=result.pagination.page,
        total_pages=result.pagination.total_pages,
    )
    return result


def list_comments_for_post(db: Session, post_id: uuid.UUID, page_request: PageRequest) -> PaginatedResult[dict]:
    get_post(db, post_id)
    return list_comments(db, page_request, post_id=post_id)


def update_comment(db: Session, comment_id: uuid.UUID, payload: CommentUpdate, user_id: uuid.UUID) -> Comment:
    comment = _get_owned_comment(db, comment_id, user_id, action="update")
    if payload.content is not None:
        comment.content = payload.content

    db.commit()
    db.refresh(comment)
    logger.info("comment_updated", comment_id=str(comment_id))
    return comment


def delete_comment(db: Session, comment_id: uuid.UUID, user_id: uuid.UUID) -> None:
    comment = _get_owned_comment(db, comment_id, user_id, action="delete")
    db.delete(comment)
    db.commit()
    logger.info("comment_deleted", comment_id=str(comment_id))

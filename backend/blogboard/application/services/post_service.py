import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from blogboard.application.errors import ForbiddenError, NotFoundError
from blogboard.application.services.pagination_service import paginate
from blogboard.domain.post_category import PostCategory
from blogboard.domain.query_operators import FilterOperator
from blogboard.infrastructure.db.models import Post
from blogboard.infrastructure.db.query_builder import SelectQueryBuilder
from blogboard.infrastructure.logging import get_logger
from blogboard.interfaces.api.v1.schemas.pagination import (
    DateRangeFilter,
    FilterCondition,
    PageRequest,
    PaginatedResult,
    PaginationOptions,
)
from blogboard.interfaces.api.v1.schemas.post import PostCreate, PostUpdate

POST_SORTABLE_FIELDS = ["created_at", "updated_at", "title", "category"]

logger = get_logger(__name__)


def serialize_post_response(post: Post) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "category": post.category,
        "author_id": post.author_id,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def get_post_by_id(db: Session, post_id: uuid.UUID) -> Post | None:
    return db.get(Post, post_id)


def get_post(db: Session, post_id: uuid.UUID) -> Post:
    post = get_post_by_id(db, post_id)
    if post is None:
        logger.warning("post_not_found", post_id=str(post_id))
        raise NotFoundError("Post not found")
    return post


def _get_owned_post(db: Session, post_id: uuid.UUID, user_id: uuid.UUID, action: str) -> Post:
    post = get_post(db, post_id)
    if post.author_id != user_id:
        logger.warning("post_forbidden", post_id=str(post_id), user_id=str(user_id), action=action)
        raise ForbiddenError(f"You can only {action} your own posts")
    return post


def create_post(db: Session, payload: PostCreate, author_id: uuid.UUID) -> Post:
    post = Post(title=payload.title, content=payload.content, category=payload.category, author_id=author_id)
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("post_created", post_id=str(post.id), author_id=str(author_id))
    return post


def list_posts(
    db: Session,
    page_request: PageRequest,
    category: PostCategory | None = None,
    author_id: uuid.UUID | None = None,
    created_from: datetime | None = None,
    created_to: datetime | None = None,
) -> PaginatedResult[dict]:
    filters: list[FilterCondition] = []
    if category is not None:
        filters.append(FilterCondition(field="category", operator=FilterOperator.eq, value=category))
    if author_id is not None:
        filters.append(FilterCondition(field="author_id", operator=FilterOperator.eq, value=author_id))

    date_range_filters: list[DateRangeFilter] = []
    if created_from is not None or created_to is not None:
        date_range_filters.append(DateRangeFilter(field="created_at", from_=created_from, to=created_to))

    builder = SelectQueryBuilder(db, Post, alias="post").join("author")
    result = paginate(
        builder,
        page_request,
        serialize_post_response,
        PaginationOptions(
            search_fields=["title", "content"],
            search_relations=["author.username"],
            default_sort_field="created_at",
            filters=filters,
            date_range_filters=date_range_filters,
        ),
        sortable_fields=POST_SORTABLE_FIELDS,
    )
    logger.info(
        "posts_listed",
        returned=len(result.items),
        page=result.pagination.page,
        total_pages=result.pagination.total_pages,
    )
    return result


def update_post(db: Session, post_id: uuid.UUID, payload: PostUpdate, user_id: uuid.UUID) -> Post:
    post = _get_owned_post(db, post_id, user_id, action="update")
    if payload.title is not None:
        post.title = payload.title
    if payload.content is not None:
        post.content = payload.content
    if payload.category is not None:
        post.category = payload.category

    db.commit()
    db.refresh(post)
    logger.info("post_updated", post_id=str(post_id))
    return post


def delete_post(db: Session, post_id: uuid.UUID, user_id: uuid.UUID) -> None:
    post = _get_owned_post(db, post_id, user_id, action="delete")
    db.delete(post)
    db.commit()
    logger.info("post_deleted", post_id=str(post_id))

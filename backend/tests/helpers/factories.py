from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from blogboard.domain.post_category import PostCategory
from blogboard.infrastructure.db.models import Comment, Post, User

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def at_hour(offset: int) -> datetime:
    return BASE_TIME + timedelta(hours=offset)


def create_user(db: Session, username: str) -> User:
    user = User(username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_post(
    db: Session,
    author: User,
    title: str,
    content: str = "Body",
    category: PostCategory = PostCategory.other,
    created_at: datetime | None = None,
) -> Post:
    post = Post(title=title, content=content, category=category, author_id=author.id)
    if created_at is not None:
        post.created_at = created_at
        post.updated_at = created_at
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def create_posts(db: Session, author: User, count: int, prefix: str = "Post") -> list[Post]:
    return [create_post(db, author, f"{prefix} {index:02d}", created_at=at_hour(index)) for index in range(1, count + 1)]


def create_comment(
    db: Session,
    author: User,
    post: Post,
    content: str,
    created_at: datetime | None = None,
) -> Comment:
    comment = Comment(content=content, post_id=post.id, author_id=author.id)
    if created_at is not None:
        comment.created_at = created_at
        comment.updated_at = created_at
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment

from sqlalchemy import select
from sqlalchemy.orm import Session

from blogboard.domain.post_category import PostCategory
from blogboard.infrastructure.db.models import Comment, Post, User
from blogboard.infrastructure.db.session import SessionLocal

SEED_POSTS = [
    ("alice", "A short history of the printing press", "From Gutenberg to mass literacy.", PostCategory.history),
    ("alice", "Why the sky is blue", "Rayleigh scattering explained without equations.", PostCategory.science),
    ("bob", "Rust or Go for CLI tools", "Notes after rewriting the same tool twice.", PostCategory.technology),
    ("bob", "Sketching every day", "What a year of daily sketches taught me.", PostCategory.art),
    ("carol", "Learning jazz chords", "Shell voicings are the fastest way in.", PostCategory.music),
    ("carol", "Marathon training log", "Week twelve and the long runs are getting long.", PostCategory.sports),
]

SEED_COMMENTS = [
    ("bob", "Why the sky is blue", "Great explanation, finally makes sense."),
    ("carol", "Why the sky is blue", "Would love a follow-up on sunsets."),
    ("alice", "Rust or Go for CLI tools", "Go wins on compile times for me."),
]


def create_user_if_missing(db: Session, username: str) -> User:
    existing = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if existing is not None:
        return existing

    user = User(username=username)
    db.add(user)
    db.flush()
    return user


def create_post_if_missing(db: Session, author: User, title: str, content: str, category: PostCategory) -> Post:
    existing = db.execute(select(Post).where(Post.title == title, Post.author_id == author.id)).scalar_one_or_none()
    if existing is not None:
        return existing

    post = Post(title=title, content=content, category=category, author_id=author.id)
    db.add(post)
    db.flush()
    return post


def create_comment_if_missing(db: Session, author: User, post: Post, content: str) -> None:
    existing = db.execute(
        select(Comment).where(Comment.post_id == post.id, Comment.author_id == author.id, Comment.content == content)
    ).scalar_one_or_none()
    if existing is not None:
        return
    db.add(Comment(content=content, post_id=post.id, author_id=author.id))


def main() -> None:
    db = SessionLocal()
    try:
        users = {username: create_user_if_missing(db, username) for username in ("alice", "bob", "carol")}
        posts = {
            title: create_post_if_missing(db, users[username], title, content, category)
            for username, title, content, category in SEED_POSTS
        }
        for username, title, content in SEED_COMMENTS:
            create_comment_if_missing(db, users[username], posts[title], content)

        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    main()

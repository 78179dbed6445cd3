import uuid

import pytest

from blogboard.application.errors import ForbiddenError, NotFoundError
from blogboard.application.services.comment_service import (
    create_comment,
    delete_comment,
    get_comment,
    list_comments,
    list_comments_for_post,
    update_comment,
)
from blogboard.interfaces.api.v1.schemas.comment import CommentUpdate
from blogboard.interfaces.api.v1.schemas.pagination import PageRequest
from tests.helpers.factories import at_hour, create_post
from tests.helpers.factories import create_comment as factory_create_comment


def test_create_comment_requires_existing_post(db_session, seeded_users):
    """
    Validate create_comment post lookup.

    1. Create a comment on a seeded post.
    2. Try to create a comment on an unknown post.
    3. Validate the first succeeds and the second raises NotFoundError.
    """
    post = create_post(db_session, seeded_users["alice"], "Topic")
    comment = create_comment(db_session, post.id, "Nice topic", author_id=seeded_users["bob"].id)
    assert comment.post_id == post.id
    assert comment.author.username == "bob"

    with pytest.raises(NotFoundError) as exc:
        create_comment(db_session, uuid.uuid4(), "Orphan", author_id=seeded_users["bob"].id)
    assert str(exc.value) == "Post not found"


def test_get_comment_raises_not_found(db_session):
    with pytest.raises(NotFoundError) as exc:
        get_comment(db_session, uuid.uuid4())
    assert str(exc.value) == "Comment not found"


def test_list_comments_filters_and_searches(db_session, seeded_users):
    """
    Validate list_comments filter and search arguments.

    1. Seed comments on two posts by two authors.
    2. List by post, by author and by search term.
    3. Validate each result set.
    """
    alice, bob = seeded_users["alice"], seeded_users["bob"]
    first = create_post(db_session, alice, "First")
    second = create_post(db_session, alice, "Second")
    factory_create_comment(db_session, bob, first, "Great read", created_at=at_hour(1))
    factory_create_comment(db_session, alice, first, "Thanks", created_at=at_hour(2))
    factory_create_comment(db_session, bob, second, "Another great one", created_at=at_hour(3))

    by_post = list_comments(db_session, PageRequest(sort_order="asc"), post_id=first.id)
    by_author = list_comments(db_session, PageRequest(sort_order="asc"), author_id=bob.id)
    by_search = list_comments(db_session, PageRequest(search="GREAT", sort_order="asc"))
    assert [item["content"] for item in by_post.items] == ["Great read", "Thanks"]
    assert [item["content"] for item in by_author.items] == ["Great read", "Another great one"]
    assert by_search.pagination.total == 2


def test_list_comments_for_post_requires_existing_post(db_session, seeded_users):
    post = create_post(db_session, seeded_users["alice"], "Quiet")
    assert list_comments_for_post(db_session, post.id, PageRequest()).pagination.total == 0
    with pytest.raises(NotFoundError):
        list_comments_for_post(db_session, uuid.uuid4(), PageRequest())


def test_update_and_delete_comment_require_author(db_session, seeded_users):
    """
    Validate comment ownership checks.

    1. Seed a comment by the second user.
    2. Try to update it as the first user.
    3. Update and delete it as its author.
    4. Validate the forbidden branch and the final removal.
    """
    post = create_post(db_session, seeded_users["alice"], "Topic")
    comment = factory_create_comment(db_session, seeded_users["bob"], post, "Draft")
    comment_id = comment.id

    with pytest.raises(ForbiddenError) as exc:
        update_comment(db_session, comment_id, CommentUpdate(content="Hijack"), user_id=seeded_users["alice"].id)
    assert str(exc.value) == "You can only update your own comments"

    updated = update_comment(db_session, comment_id, CommentUpdate(content="Final"), user_id=seeded_users["bob"].id)
    assert updated.content == "Final"

    delete_comment(db_session, comment_id, user_id=seeded_users["bob"].id)
    with pytest.raises(NotFoundError):
        get_comment(db_session, comment_id)

import uuid

import pytest

from blogboard.application.errors import ConflictError
from blogboard.application.services.auth_service import login
from blogboard.application.services.security_service import decode_access_token
from blogboard.application.services.user_service import (
    create_user,
    get_user_by_id,
    get_user_by_username,
    serialize_user_response,
)
from blogboard.config import settings


def test_create_user_persists_new_user(db_session):
    """
    Validate create_user success behavior.

    1. Call create_user for a new username.
    2. Validate the user is persisted with an id.
    3. Validate lookups by id and by username find it.
    """
    created = create_user(db_session, "dora")
    assert isinstance(created.id, uuid.UUID)
    assert get_user_by_id(db_session, created.id).username == "dora"
    assert get_user_by_username(db_session, "dora").id == created.id
    assert get_user_by_username(db_session, "nobody") is None


def test_create_user_raises_conflict_for_duplicate_username(db_session, seeded_users):
    with pytest.raises(ConflictError) as exc:
        create_user(db_session, "alice")
    assert str(exc.value) == "Username already exists"


def test_serialize_user_response_exposes_public_fields(seeded_users):
    payload = serialize_user_response(seeded_users["alice"])
    assert set(payload) == {"id", "username", "created_at"}
    assert payload["username"] == "alice"


def test_login_registers_unknown_username(db_session):
    """
    Validate login registers users on first use.

    1. Log in with a username that does not exist.
    2. Validate the user was created.
    3. Validate the token subject matches the new user id.
    4. Validate expiry is reported in seconds.
    """
    result = login(db_session, "erin")
    user = get_user_by_username(db_session, "erin")
    assert user is not None
    assert result["token_type"] == "bearer"
    assert result["expires_in"] == settings.jwt_access_token_expire_minutes * 60
    assert result["user"]["id"] == user.id
    assert decode_access_token(result["access_token"])["sub"] == str(user.id)


def test_login_reuses_existing_user(db_session, seeded_users):
    """
    Validate login does not duplicate known users.

    1. Log in twice as an existing user.
    2. Validate both logins resolve to the seeded user.
    """
    first = login(db_session, "alice")
    second = login(db_session, "alice")
    assert first["user"]["id"] == seeded_users["alice"].id
    assert second["user"]["id"] == seeded_users["alice"].id

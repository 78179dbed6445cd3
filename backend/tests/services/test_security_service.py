from jose import jwt

from blogboard.application.services.security_service import create_access_token, decode_access_token
from blogboard.config import settings


def test_token_round_trip_carries_subject_and_username():
    """
    Validate issued tokens decode to their claims.

    1. Issue a token for a user id and username.
    2. Decode the token once.
    3. Validate subject, username and expiry claims.
    """
    token = create_access_token("8d4f6a52-7a0b-4a51-9a43-7d1c2f5e9b10", "alice", expires_minutes=5)
    payload = decode_access_token(token)
    assert payload is not None
    assert payload["sub"] == "8d4f6a52-7a0b-4a51-9a43-7d1c2f5e9b10"
    assert payload["username"] == "alice"
    assert "exp" in payload


def test_decode_access_token_rejects_invalid_tokens():
    """
    Validate decoding failure branches.

    1. Decode a malformed token.
    2. Decode an expired token.
    3. Decode tokens signed with another key or missing a subject.
    4. Validate every branch returns None.
    """
    assert decode_access_token("bad-token") is None
    assert decode_access_token(create_access_token("some-id", "alice", expires_minutes=-1)) is None

    foreign = jwt.encode({"sub": "some-id"}, "another-secret", algorithm=settings.jwt_algorithm)
    assert decode_access_token(foreign) is None

    missing_sub = jwt.encode({"exp": 9999999999}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    assert decode_access_token(missing_sub) is None

"""Unit tests for JWT issuing and decoding."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

from bloglist.auth import Identity
from bloglist.auth.tokens import bearer_token, decode_token, issue_token
from bloglist.errors import Unauthenticated

# pylint: disable=unused-argument

USER = SimpleNamespace(id=7, username="testuser")


def test_roundtrip_yields_identity(app):
    token = issue_token(USER)
    assert decode_token(token) == Identity(user_id=7, username="testuser")


def test_claims(app):
    now = datetime(2030, 1, 1, tzinfo=timezone.utc)
    token = issue_token(USER, now=now)
    payload = jwt.decode(
        token,
        app.config["JWT_SECRET_KEY"],
        algorithms=["HS256"],
        options={"verify_exp": False, "verify_iat": False},
    )
    assert payload["sub"] == "7"
    assert payload["username"] == "testuser"
    assert payload["exp"] - payload["iat"] == app.config["JWT_EXPIRES_HOURS"] * 3600


def test_expired_token_is_rejected(app):
    past = datetime.now(timezone.utc) - timedelta(hours=app.config["JWT_EXPIRES_HOURS"] + 1)
    token = issue_token(USER, now=past)
    with pytest.raises(Unauthenticated, match="expired"):
        decode_token(token)


def test_token_signed_with_other_key_is_rejected(app):
    token = jwt.encode(
        {"sub": "7", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret-that-is-long-enough-000",
        algorithm="HS256",
    )
    with pytest.raises(Unauthenticated):
        decode_token(token)


def test_token_without_sub_is_rejected(app):
    token = jwt.encode(
        {"username": "x", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        app.config["JWT_SECRET_KEY"],
        algorithm="HS256",
    )
    with pytest.raises(Unauthenticated):
        decode_token(token)


def test_token_with_non_numeric_sub_is_rejected(app):
    token = jwt.encode(
        {"sub": "abc", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        app.config["JWT_SECRET_KEY"],
        algorithm="HS256",
    )
    with pytest.raises(Unauthenticated):
        decode_token(token)


@pytest.mark.parametrize("token", ["", None, "not-a-jwt"])
def test_garbage_is_rejected(app, token):
    with pytest.raises(Unauthenticated):
        decode_token(token)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("Bearer ", None),
        ("Basic dXNlcjpwYXNz", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_token(header, expected):
    assert bearer_token(header) == expected

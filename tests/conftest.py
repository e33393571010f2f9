"""Global pytest fixtures for the bloglist backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import pytest

from bloglist import create_app
from bloglist.auth import Identity
from bloglist.config import TestingConfig
from bloglist.extensions import db
from bloglist.services import authenticator

if TYPE_CHECKING:
    from flask import Flask
    from flask.testing import FlaskClient

    from bloglist.models import User

# Deal with pytest fixtures
# pylint: disable=redefined-outer-name


@pytest.fixture
def app() -> Flask:
    """Application on a fresh in-memory database, with its app context pushed."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def project_caplog(app: Flask, caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """`caplog` wired to the `bloglist` logger, which does not propagate."""
    logger = logging.getLogger("bloglist")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def make_user(app: Flask) -> Callable[..., User]:
    """Factory registering users through the authenticator."""

    def _make(
        username: str = "testuser",
        password: str = "testpassword",
        name: str = "Test User",
    ) -> User:
        return authenticator.register(name, username, password)

    return _make


@pytest.fixture
def identity_of() -> Callable[[User], Identity]:
    def _identity(user: User) -> Identity:
        return Identity(user_id=user.id, username=user.username)

    return _identity


@pytest.fixture
def login_token(client: FlaskClient) -> Callable[[str, str], str]:
    """Log in over HTTP and return the bearer token."""

    def _login(username: str = "testuser", password: str = "testpassword") -> str:
        response = client.post(
            "/api/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.get_json()
        return response.get_json()["token"]

    return _login


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    def _headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers

"""Tests for motortech/auth/dependencies.py - bearer guard modes."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from motortech.auth.dependencies import (
    get_admin_actor,
    get_current_actor,
    get_optional_actor,
)
from motortech.auth.exceptions import (
    AdminRequiredError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
)
from motortech.auth.tokens import TokenService


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


# --- Required ---


def test_required_resolves_actor(token_service, user):
    """Test a valid token resolves to the user's actor."""
    actor = get_current_actor(token_service, _bearer(token_service.issue(user)))

    assert actor.id == user.id
    assert actor.email == user.email
    assert actor.is_admin is False


def test_required_without_token(token_service):
    """Test a missing bearer token is a 401 MissingTokenError."""
    with pytest.raises(MissingTokenError) as exc_info:
        get_current_actor(token_service, None)

    assert exc_info.value.message == "Access token required"
    assert exc_info.value.status_code == 401


def test_required_with_bad_token(token_service):
    with pytest.raises(InvalidTokenError):
        get_current_actor(token_service, _bearer("garbage"))


def test_required_with_expired_token(token_service, user):
    token = token_service.issue(user, now=datetime.now(UTC) - timedelta(days=30))

    with pytest.raises(TokenExpiredError):
        get_current_actor(token_service, _bearer(token))


# --- Optional ---


def test_optional_without_token_is_anonymous(token_service):
    assert get_optional_actor(token_service, None) is None


def test_optional_with_bad_token_is_anonymous(token_service):
    """Test an unusable token degrades to anonymous instead of failing."""
    assert get_optional_actor(token_service, _bearer("garbage")) is None


def test_optional_without_secret_is_anonymous(user):
    token = TokenService(secret="s").issue(user)

    assert get_optional_actor(TokenService(secret=None), _bearer(token)) is None


def test_optional_with_valid_token(token_service, user):
    actor = get_optional_actor(token_service, _bearer(token_service.issue(user)))

    assert actor is not None
    assert actor.id == user.id


# --- Admin ---


def test_admin_guard_allows_admin(actor_for, admin_user):
    actor = actor_for(admin_user)

    assert get_admin_actor(actor) is actor


def test_admin_guard_rejects_user(actor_for, user):
    with pytest.raises(AdminRequiredError) as exc_info:
        get_admin_actor(actor_for(user))

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Admin access required"


# --- Over HTTP ---


def test_protected_route_without_token(client):
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "type": "missing_token",
        "message": "Access token required",
    }


def test_protected_route_with_non_bearer_scheme(client):
    response = client.get("/auth/me", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401


def test_admin_route_as_user(client, user, auth_headers):
    response = client.get("/admin/stats", headers=auth_headers(user))

    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"

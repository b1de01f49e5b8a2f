from datetime import timedelta

import pytest
from starlette.requests import Request
from pydantic import ValidationError

from app.config.security import SecurityConfig
from app.schemas.tokens import SessionUser
from app.utils.auth import get_current_session
from app.utils.security import create_access_token, decode_access_token

COOKIE = SecurityConfig.COOKIE['name']


def test_sign_sets_http_only_cookie(client, add_user):
    add_user("alice@example.com", role="hr")

    response = client.post("/jwt-sign", json={"email": "alice@example.com", "name": "Alice"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{COOKIE}=")
    assert "HttpOnly" in set_cookie
    assert "samesite=strict" in set_cookie.lower()
    assert "Max-Age=3600" in set_cookie

    claims = decode_access_token(response.cookies[COOKIE])
    assert claims["email"] == "alice@example.com"
    assert claims["name"] == "Alice"
    assert "exp" in claims


def test_signed_cookie_authenticates_follow_up_requests(client, add_user):
    add_user("alice@example.com", role="hr")
    response = client.post("/jwt-sign", json={"email": "alice@example.com"})
    client.cookies.set(COOKIE, response.cookies[COOKIE])

    response = client.get("/checkRole/alice@example.com")

    assert response.status_code == 200
    assert response.json() == {"role": "hr"}


def test_missing_cookie_is_unauthorized(client):
    response = client.get("/checkRole/alice@example.com")
    assert response.status_code == 401


def test_tampered_token_is_forbidden(client, add_user):
    add_user("alice@example.com")
    client.cookies.set(COOKIE, create_access_token({"email": "alice@example.com"}) + "x")

    response = client.get("/checkRole/alice@example.com")

    assert response.status_code == 403


def test_expired_token_is_forbidden(client, add_user):
    add_user("alice@example.com")
    token = create_access_token({"email": "alice@example.com"}, expires_delta=timedelta(seconds=-5))
    client.cookies.set(COOKIE, token)

    response = client.get("/checkRole/alice@example.com")

    assert response.status_code == 403


def test_check_role_of_unknown_user_is_not_found(client, login):
    login("alice@example.com")
    response = client.get("/checkRole/nobody@example.com")
    assert response.status_code == 404


def test_logout_expires_cookie(client):
    response = client.post("/jwt-logout")

    assert response.status_code == 200
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{COOKIE}=")
    assert "Max-Age=0" in set_cookie


def test_cookie_options_depend_on_environment(monkeypatch):
    monkeypatch.setattr(SecurityConfig, "ENVIRONMENT", "production")
    assert SecurityConfig.cookie_options()["secure"] is True
    assert SecurityConfig.cookie_options()["samesite"] == "none"

    monkeypatch.setattr(SecurityConfig, "ENVIRONMENT", "development")
    assert SecurityConfig.cookie_options()["secure"] is False
    assert SecurityConfig.cookie_options()["samesite"] == "strict"


GUARDED_ENDPOINTS = {
    "employee": "/work-sheet/{email}",
    "hr": "/onlyEmployee",
    "admin": "/payRequest",
}


@pytest.mark.parametrize("required_role", ["employee", "hr", "admin"])
@pytest.mark.parametrize("caller_role", ["employee", "hr", "admin"])
def test_role_guards(client, add_user, login, required_role, caller_role):
    email = f"{caller_role}@example.com"
    add_user(email, role=caller_role)
    login(email)

    response = client.get(GUARDED_ENDPOINTS[required_role].format(email=email))

    if caller_role == required_role:
        assert response.status_code == 200
    else:
        assert response.status_code == 403


def test_role_guard_rejects_session_without_user_record(client, login):
    login("ghost@example.com")
    response = client.get("/onlyEmployee")
    assert response.status_code == 403


def test_session_resolves_to_session_user():
    token = create_access_token({"email": "alice@example.com", "name": "Alice"})
    request = Request({"type": "http", "headers": [(b"cookie", f"{COOKIE}={token}".encode())]})

    session = get_current_session(request)

    assert session == SessionUser(email="alice@example.com", name="Alice")
    with pytest.raises(ValidationError):
        session.email = "mallory@example.com"


def test_token_without_email_claim_is_forbidden(client):
    client.cookies.set(COOKIE, create_access_token({"name": "No Email"}))
    assert client.get("/checkRole/alice@example.com").status_code == 403

"""Tests for bearer token authentication (header parsing + middleware)."""

import time

import pytest
from conftest import bearer

from outpace.config import Settings
from outpace.errors import Unauthorized
from outpace.middleware.auth import authenticate, is_protected
from outpace.security.tokens import TokenPayload, issue_token

SETTINGS = Settings(jwt_secret="test-secret-for-outpace-api-tests")


# === authenticate() ===


def test_missing_header():
    with pytest.raises(Unauthorized, match="No token provided"):
        authenticate(None, SETTINGS)


def test_bearer_prefix_required():
    token = issue_token(TokenPayload(id=1, email="a@x.com", role=0), settings=SETTINGS)
    with pytest.raises(Unauthorized, match="No token provided"):
        authenticate(token, SETTINGS)


def test_empty_bearer_token():
    with pytest.raises(Unauthorized, match="No token provided"):
        authenticate("Bearer ", SETTINGS)


def test_invalid_token():
    with pytest.raises(Unauthorized, match="Invalid token"):
        authenticate("Bearer abc.def.ghi", SETTINGS)


def test_valid_token_resolves_identity():
    token = issue_token(TokenPayload(id=42, email="a@x.com", role=1), settings=SETTINGS)
    user = authenticate(f"Bearer {token}", SETTINGS)
    assert (user.id, user.email, user.role) == (42, "a@x.com", 1)


def test_protected_paths():
    assert is_protected("/api/tasks")
    assert is_protected("/api/tasks/12")
    assert is_protected("/api/projects/3")
    assert not is_protected("/api/auth/login")
    assert not is_protected("/health")
    assert not is_protected("/api/tasksx")


# === Middleware through the app ===


def test_missing_auth_header_returns_401(client):
    resp = client.get("/api/tasks")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "No token provided"}


def test_invalid_token_returns_401(client):
    resp = client.get("/api/projects", headers=bearer("wrong"))
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid token"


def test_expired_token_returns_401(client, settings):
    stale = int(time.time()) - 8 * 86400
    token = issue_token(TokenPayload(id=1, email="a@x.com", role=0), settings=settings, now=stale)
    resp = client.get("/api/tasks", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid token"


def test_token_signed_with_other_secret_returns_401(client):
    token = issue_token(
        TokenPayload(id=1, email="a@x.com", role=0), settings=Settings(jwt_secret="other-secret-for-outpace-api-tests")
    )
    resp = client.get("/api/tasks", headers=bearer(token))
    assert resp.status_code == 401


def test_public_paths_need_no_token(client):
    assert client.get("/health").status_code == 200
    assert client.get("/").status_code == 200


def test_cors_preflight_not_blocked(client):
    resp = client.options(
        "/api/tasks",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cors_headers_on_rejected_request(client):
    resp = client.get("/api/tasks", headers={"Origin": "http://localhost:3000"})
    assert resp.status_code == 401
    assert resp.headers["access-control-allow-origin"] == "*"


def test_token_resolves_to_its_user_on_every_resource(client, ada, bob):
    ada_id = ada["user"]["id"]
    task = client.post("/api/tasks", json={"title": "Mine"}, headers=ada["headers"]).json()["data"]
    project = client.post("/api/projects", json={"title": "P"}, headers=ada["headers"]).json()["data"]
    assert task["createdBy"] == ada_id
    assert project["createdBy"] == ada_id
    assert ada_id != bob["user"]["id"]

"""Tests for /api/auth endpoints."""

from conftest import register_user


def test_register_returns_201_with_user_and_token(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@x.com", "password": "secret1"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Registration successful"
    assert "error" not in body

    user = body["data"]["user"]
    assert set(user) == {"id", "name", "email", "role", "isActive", "createdAt"}
    assert user["role"] == 0
    assert user["isActive"] is True
    assert body["data"]["token"]


def test_register_duplicate_email_returns_400(client):
    register_user(client)
    resp = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "ada@x.com", "password": "another1"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Email already registered"}


def test_register_validation_errors(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "A", "email": "not-an-email", "password": "123"},
    )
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert "name:" in error
    assert "email:" in error
    assert "password:" in error


def test_register_oversized_password_returns_400(client):
    resp = client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@x.com", "password": "p" * 5000},
    )
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("password:")

    resp = client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@x.com", "password": "p" * 73},
    )
    assert resp.status_code == 400


def test_register_accepts_password_at_bcrypt_limit(client):
    register_user(client, password="p" * 72)
    resp = client.post("/api/auth/login", json={"email": "ada@x.com", "password": "p" * 72})
    assert resp.status_code == 200


def test_register_malformed_json_returns_400(client):
    resp = client.post(
        "/api/auth/register",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_login_success(client):
    registered = register_user(client)
    resp = client.post("/api/auth/login", json={"email": "ada@x.com", "password": "secret1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["data"]["user"]["id"] == registered["user"]["id"]
    assert body["data"]["token"]


def test_login_failures_are_identical(client):
    register_user(client)
    wrong_password = client.post(
        "/api/auth/login", json={"email": "ada@x.com", "password": "wrong-pass"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "ghost@x.com", "password": "secret1"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "error": "Invalid email or password",
    }


def test_login_requires_valid_email(client):
    resp = client.post("/api/auth/login", json={"email": "ada", "password": "secret1"})
    assert resp.status_code == 400

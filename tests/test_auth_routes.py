"""
Tests for /auth endpoints and bearer-token handling.
"""
from unittest.mock import patch

from workforce.utils.security import create_access_token


def test_register_returns_user_and_token(client):
    res = client.post("/auth/register", json={"email": "New@Company.com", "password": "Password123"})

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert body["data"]["user"]["email"] == "new@company.com"
    assert body["data"]["user"]["role"] == "employee"
    assert set(body["data"]["user"]) == {"id", "email", "role"}
    assert body["data"]["token"]


def test_public_registration_never_grants_admin(client):
    res = client.post("/auth/register", json={"email": "sneaky@company.com", "password": "Password123", "role": "admin"})

    assert res.status_code == 201
    assert res.json()["data"]["user"]["role"] == "employee"


def test_register_duplicate_email_is_rejected(client):
    client.post("/auth/register", json={"email": "dup@company.com", "password": "Password123"})
    res = client.post("/auth/register", json={"email": "DUP@company.com", "password": "Password123"})

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Email already registered"}


def test_register_short_password(client):
    res = client.post("/auth/register", json={"email": "short@company.com", "password": "short"})

    assert res.status_code == 400
    assert res.json()["message"] == "Password must be at least 8 characters"


def test_register_race_on_same_email(client):
    client.post("/auth/register", json={"email": "race@company.com", "password": "Password123"})

    with patch("workforce.queries.user_queries.user_exists_by_email", return_value=False):
        res = client.post("/auth/register", json={"email": "race@company.com", "password": "Password123"})

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Email already registered"}


def test_register_rejects_special_use_domains(client):
    res = client.post("/auth/register", json={"email": "dev@company.local", "password": "Password123"})

    assert res.status_code == 400
    assert [e["field"] for e in res.json()["errors"]] == ["email"]


def test_register_invalid_email_fails_validation(client):
    res = client.post("/auth/register", json={"email": "not-an-email", "password": "Password123"})

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert [e["field"] for e in body["errors"]] == ["email"]


def test_login_success(client, employee_user):
    res = client.post("/auth/login", json={"email": "employee@company.com", "password": "Password123"})

    assert res.status_code == 200
    assert res.json()["message"] == "Login successful"
    assert res.json()["data"]["user"]["id"] == employee_user["user"]["id"]


def test_login_failures_have_identical_bodies(client, employee_user):
    wrong_password = client.post("/auth/login", json={"email": "employee@company.com", "password": "WrongPassword"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@company.com", "password": "Password123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "message": "Invalid email or password",
    }


def test_missing_authorization_header(client):
    res = client.get("/employees")

    assert res.status_code == 401
    assert res.json()["message"] == "Missing or invalid Authorization header"
    assert res.headers["www-authenticate"] == "Bearer"


def test_non_bearer_authorization_header(client):
    res = client.get("/employees", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert res.status_code == 401
    assert res.json()["message"] == "Missing or invalid Authorization header"


def test_expired_token(client, settings):
    token = create_access_token(
        {"userId": 1, "email": "a@company.com", "role": "admin"},
        settings.jwt_secret,
        expires_minutes=-5,
    )
    res = client.get("/employees", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401
    assert res.json()["message"] == "Invalid or expired token"


def test_token_with_bad_signature(client):
    token = create_access_token({"userId": 1, "email": "a@company.com", "role": "admin"}, "wrong-secret")
    res = client.get("/employees", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401

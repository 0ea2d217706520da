"""Integration tests for authentication endpoints."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from jose import jwt

from app.config import settings
from app.core.security import ALGORITHM, create_access_token


def test_user_registration_success(client: TestClient) -> None:
    payload = {"email": "learner@example.com", "password": "securepassword", "name": "Learner One"}

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert uuid.UUID(data["id"])  # Valid UUID string
    assert data["email"] == payload["email"]
    assert data["name"] == "Learner One"
    assert data["is_active"] is True
    assert "hashed_password" not in data
    assert data["preferences"]["theme"] == "system"
    assert data["preferences"]["pomodoro_focus"] == 25


def test_user_registration_duplicate_email(client: TestClient) -> None:
    payload = {"email": "duplicate@example.com", "password": "anothersecurepassword"}

    first_response = client.post("/api/auth/register", json=payload)
    assert first_response.status_code == 201

    duplicate_response = client.post("/api/auth/register", json=payload)
    assert duplicate_response.status_code == 400
    assert duplicate_response.json()["detail"] == "A user with this email already exists."


def test_user_registration_rejects_short_password(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register", json={"email": "short@example.com", "password": "short"}
    )

    assert response.status_code == 422
    assert response.json()["message"] == "Validation failed"


def test_user_login_success_sets_cookie(client: TestClient) -> None:
    client.post("/api/auth/register", json={"email": "login@example.com", "password": "supersecure"})

    response = client.post(
        "/api/auth/login", json={"email": "login@example.com", "password": "supersecure"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert response.cookies.get(settings.AUTH_COOKIE_NAME) == data["access_token"]
    claims = jwt.decode(data["access_token"], settings.SECRET_KEY, algorithms=[ALGORITHM])
    assert claims["email"] == "login@example.com"
    assert claims["type"] == "access"


def test_user_login_invalid_credentials(client: TestClient) -> None:
    client.post("/api/auth/register", json={"email": "known@example.com", "password": "supersecure"})

    wrong_password = client.post(
        "/api/auth/login", json={"email": "known@example.com", "password": "wrongpassword"}
    )
    unknown_user = client.post(
        "/api/auth/login", json={"email": "unknown@example.com", "password": "wrongpassword"}
    )

    assert wrong_password.status_code == 401
    assert wrong_password.json()["detail"] == "Incorrect email or password"
    assert unknown_user.status_code == 401


def test_me_with_cookie(client: TestClient) -> None:
    client.post(
        "/api/auth/register",
        json={"email": "cookie@example.com", "password": "supersecure", "name": "Cookie"},
    )
    client.post("/api/auth/login", json={"email": "cookie@example.com", "password": "supersecure"})

    response = client.get("/api/auth/me")

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "cookie@example.com"
    assert user["preferences"]["study_goal_minutes"] == 60


def test_me_with_bearer_token(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.cookies.clear()

    response = client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Learner One"


def test_me_requires_token(client: TestClient) -> None:
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


def test_me_rejects_expired_token(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.cookies.clear()
    me = client.get("/api/auth/me", headers=auth_headers).json()["user"]
    expired = jwt.encode(
        {
            "sub": me["id"],
            "email": me["email"],
            "type": "access",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        settings.SECRET_KEY,
        algorithm=ALGORITHM,
    )

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401


def test_me_rejects_token_for_unknown_user(client: TestClient) -> None:
    token = create_access_token(str(uuid.uuid4()), email="ghost@example.com")

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_logout_clears_cookie(client: TestClient) -> None:
    client.post("/api/auth/register", json={"email": "bye@example.com", "password": "supersecure"})
    client.post("/api/auth/login", json={"email": "bye@example.com", "password": "supersecure"})
    assert client.get("/api/auth/me").status_code == 200

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}
    assert client.get("/api/auth/me").status_code == 401


def test_email_is_case_insensitive(client: TestClient) -> None:
    registered = client.post(
        "/api/auth/register", json={"email": "Mixed.Case@Example.com", "password": "supersecure"}
    )
    duplicate = client.post(
        "/api/auth/register", json={"email": "mixed.case@example.com", "password": "supersecure"}
    )
    login = client.post(
        "/api/auth/login", json={"email": "MIXED.CASE@example.com", "password": "supersecure"}
    )

    assert registered.json()["email"] == "mixed.case@example.com"
    assert duplicate.status_code == 400
    assert login.status_code == 200

"""
Auth API tests - register, login, logout, me.
"""

import pytest
from httpx import AsyncClient

from sellfurniture.core.security import create_access_token, decode_access_token


@pytest.mark.asyncio
async def test_register_then_login_returns_verifiable_token(client: AsyncClient):
    response = await client.post(
        "/auth/register", json={"email": "a@x.com", "password": "pw123", "name": "Ann"}
    )
    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully"}

    response = await client.post("/auth/login", json={"email": "a@x.com", "password": "pw123"})
    assert response.status_code == 200
    payload = decode_access_token(response.json()["token"])
    assert payload["email"] == "a@x.com"
    assert payload["role"] == "user"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"password": "pw123"},
        {"email": "a@x.com"},
        {"email": "", "password": "pw123"},
        {},
    ],
)
async def test_register_requires_email_and_password(client: AsyncClient, body: dict):
    response = await client.post("/auth/register", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Email and password are required"}


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_user):
    response = await client.post(
        "/auth/register", json={"email": test_user.email, "password": "whatever"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "User already exists"}


@pytest.mark.asyncio
async def test_register_rejects_overlong_password(client: AsyncClient):
    response = await client.post(
        "/auth/register", json={"email": "long@x.com", "password": "p" * 73}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client: AsyncClient, test_user):
    wrong_password = await client.post(
        "/auth/login", json={"email": test_user.email, "password": "nope"}
    )
    unknown_email = await client.post(
        "/auth/login", json={"email": "ghost@example.com", "password": "nope"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}


@pytest.mark.asyncio
async def test_logout_is_stateless_ack(client: AsyncClient):
    response = await client.post("/auth/logout")
    assert response.status_code == 200
    assert "message" in response.json()


@pytest.mark.asyncio
async def test_me_returns_summary_without_password(client: AsyncClient, auth_headers, test_user):
    response = await client.get("/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == test_user.email
    assert data["name"] == "Test User"
    assert data["role"] == "user"
    assert data["id"] == test_user.id
    assert "hashedPassword" not in data
    assert "hashed_password" not in data


@pytest.mark.asyncio
async def test_me_without_token(client: AsyncClient):
    response = await client.get("/auth/me")
    assert response.status_code == 401
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_me_with_invalid_token(client: AsyncClient):
    response = await client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_me_when_user_deleted_after_login(client: AsyncClient):
    token = create_access_token("gone@example.com", "user")
    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}

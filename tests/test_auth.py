"""Tests for registration, login and the Authorization header."""

from typing import Any

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_success(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    response = await client.post("/auth/register", json=alice_data)

    assert response.status_code == 201
    data = response.json()
    assert set(data) == {"id", "username", "email"}
    assert data["username"] == "alice"
    assert data["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_register_does_not_store_plain_password(
    client: AsyncClient, store, alice_data: dict[str, Any]
) -> None:
    await client.post("/auth/register", json=alice_data)
    user = store.find_user_by_username("alice")
    assert user.password_hash != alice_data["password"]
    assert user.password_hash.startswith("$2")


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["username", "email", "password"])
async def test_register_missing_field(client: AsyncClient, alice_data: dict[str, Any], missing: str) -> None:
    payload = {k: v for k, v in alice_data.items() if k != missing}
    response = await client.post("/auth/register", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_register_empty_field(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    response = await client.post("/auth/register", json={**alice_data, "username": ""})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    await client.post("/auth/register", json=alice_data)
    response = await client.post(
        "/auth/register",
        json={"username": "alice", "email": "different@x.com", "password": "other"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "username or email already exists"}


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    await client.post("/auth/register", json=alice_data)
    response = await client.post(
        "/auth/register",
        json={"username": "alice2", "email": "a@x.com", "password": "other"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "username or email already exists"}


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    registered = (await client.post("/auth/register", json=alice_data)).json()

    response = await client.post(
        "/auth/login",
        json={"username": "alice", "password": "pw1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token"] == registered["id"]
    assert data["user"] == registered


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    await client.post("/auth/register", json=alice_data)
    response = await client.post("/auth/login", json={"username": "alice", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "invalid credentials"}


@pytest.mark.asyncio
async def test_login_unknown_user(client: AsyncClient) -> None:
    response = await client.post("/auth/login", json={"username": "ghost", "password": "pw"})
    assert response.status_code == 401
    assert response.json() == {"error": "invalid credentials"}


@pytest.mark.asyncio
async def test_login_missing_password(client: AsyncClient) -> None:
    response = await client.post("/auth/login", json={"username": "alice"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_api_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/wishlists")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
async def test_api_rejects_unknown_token(client: AsyncClient) -> None:
    response = await client.get("/api/wishlists", headers={"Authorization": "not-a-user"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_api_accepts_bearer_prefix(client: AsyncClient, alice: dict[str, Any]) -> None:
    response = await client.get(
        "/api/wishlists",
        headers={"Authorization": f"Bearer {alice['token']}"},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_api_rejects_bare_bearer_scheme(client: AsyncClient) -> None:
    response = await client.get("/api/wishlists", headers={"Authorization": "Bearer "})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_register_password_too_long(client: AsyncClient, store, alice_data: dict[str, Any]) -> None:
    response = await client.post("/auth/register", json={**alice_data, "password": "p" * 73})

    assert response.status_code == 500
    assert response.json() == {"error": "could not hash password"}
    assert store.find_user_by_username("alice") is None


@pytest.mark.asyncio
async def test_register_password_at_limit(client: AsyncClient, alice_data: dict[str, Any]) -> None:
    password = "p" * 72
    response = await client.post("/auth/register", json={**alice_data, "password": password})
    assert response.status_code == 201

    response = await client.post("/auth/login", json={"username": "alice", "password": password})
    assert response.status_code == 200

    response = await client.post("/auth/login", json={"username": "alice", "password": password + "x"})
    assert response.status_code == 401

"""Pytest fixtures for testing."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

# Set environment variables for tests BEFORE importing app modules
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FORMAT"] = "text"

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Clear the settings cache to pick up test env vars
from wishshare.config import Settings, get_settings
get_settings.cache_clear()

from wishshare.main import create_app
from wishshare.store import WishlistStore


@pytest.fixture
def settings() -> Settings:
    """Settings with the cheapest bcrypt cost."""
    return Settings(bcrypt_rounds=4, log_format="text")


@pytest.fixture
def store() -> WishlistStore:
    """Fresh in-memory store for each test."""
    return WishlistStore()


@pytest.fixture
def app(settings: Settings, store: WishlistStore) -> FastAPI:
    return create_app(settings, store)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Test HTTP client bound to a fresh application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def alice_data() -> dict[str, Any]:
    return {"username": "alice", "email": "a@x.com", "password": "pw1"}


@pytest.fixture
def bob_data() -> dict[str, Any]:
    return {"username": "bob", "email": "b@x.com", "password": "pw2"}


@pytest.fixture
def register_and_login(
    client: AsyncClient,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Register a user, log in, and return id, token and ready-made headers."""

    async def _register_and_login(user_data: dict[str, Any]) -> dict[str, Any]:
        response = await client.post("/auth/register", json=user_data)
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        response = await client.post(
            "/auth/login",
            json={"username": user_data["username"], "password": user_data["password"]},
        )
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        return {"id": user_id, "token": token, "headers": {"Authorization": token}}

    return _register_and_login


@pytest_asyncio.fixture
async def alice(register_and_login, alice_data: dict[str, Any]) -> dict[str, Any]:
    return await register_and_login(alice_data)


@pytest_asyncio.fixture
async def bob(register_and_login, bob_data: dict[str, Any]) -> dict[str, Any]:
    return await register_and_login(bob_data)

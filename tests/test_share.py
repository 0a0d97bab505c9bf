"""Tests for sharing wishlists and the end-to-end access scenarios."""

from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def wishlist(client: AsyncClient, alice: dict[str, Any]) -> dict[str, Any]:
    response = await client.post(
        "/api/wishlists",
        json={"title": "Bday"},
        headers=alice["headers"],
    )
    return response.json()


async def share(client: AsyncClient, user: dict[str, Any], wishlist_id: str, payload: dict[str, Any]):
    return await client.post(
        f"/api/wishlists/{wishlist_id}/share",
        json=payload,
        headers=user["headers"],
    )


@pytest.mark.asyncio
async def test_share_success(client: AsyncClient, alice, bob, wishlist) -> None:
    response = await share(client, alice, wishlist["id"], {"shared_user_id": bob["id"], "can_edit": True})

    assert response.status_code == 201
    data = response.json()
    assert data["wishlist_id"] == wishlist["id"]
    assert data["user_id"] == bob["id"]
    assert data["can_edit"] is True
    assert data["id"]


@pytest.mark.asyncio
async def test_share_defaults_to_read_only(client: AsyncClient, alice, bob, wishlist) -> None:
    response = await share(client, alice, wishlist["id"], {"shared_user_id": bob["id"]})
    assert response.status_code == 201
    assert response.json()["can_edit"] is False


@pytest.mark.asyncio
async def test_share_missing_user_id(client: AsyncClient, alice, wishlist) -> None:
    response = await share(client, alice, wishlist["id"], {"can_edit": True})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_share_wishlist_not_found(client: AsyncClient, alice, bob) -> None:
    response = await share(client, alice, "missing", {"shared_user_id": bob["id"]})
    assert response.status_code == 404
    assert response.json() == {"error": "wishlist not found"}


@pytest.mark.asyncio
async def test_share_by_non_owner_forbidden(client: AsyncClient, alice, bob, wishlist) -> None:
    await share(client, alice, wishlist["id"], {"shared_user_id": bob["id"], "can_edit": True})

    # Even an edit grantee cannot re-share
    response = await share(client, bob, wishlist["id"], {"shared_user_id": alice["id"]})

    assert response.status_code == 403
    assert response.json() == {"error": "only owner can share wishlist"}


@pytest.mark.asyncio
async def test_share_unknown_user(client: AsyncClient, alice, wishlist) -> None:
    response = await share(client, alice, wishlist["id"], {"shared_user_id": "ghost"})
    assert response.status_code == 404
    assert response.json() == {"error": "user to share with not found"}


@pytest.mark.asyncio
async def test_share_with_self(client: AsyncClient, alice, wishlist) -> None:
    response = await share(client, alice, wishlist["id"], {"shared_user_id": alice["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "cannot share with yourself"}


@pytest.mark.asyncio
async def test_reshare_replaces_edit_flag(client: AsyncClient, store, alice, bob, wishlist) -> None:
    first = (await share(client, alice, wishlist["id"], {"shared_user_id": bob["id"], "can_edit": True})).json()
    second = (await share(client, alice, wishlist["id"], {"shared_user_id": bob["id"], "can_edit": False})).json()

    assert second["id"] == first["id"]
    assert second["can_edit"] is False
    assert len(store.list_share_grants_by_grantee(bob["id"])) == 1

    response = await client.put(
        f"/api/wishlists/{wishlist['id']}",
        json={"title": "Downgraded"},
        headers=bob["headers"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_sharing_scenario(client: AsyncClient, alice, bob) -> None:
    """Alice shares a wishlist read-only, then with edit rights."""
    wishlist = (
        await client.post("/api/wishlists", json={"title": "Bday"}, headers=alice["headers"])
    ).json()
    w1 = wishlist["id"]
    item = (
        await client.post(
            f"/api/wishlists/{w1}/items",
            json={"name": "Phone", "price": "999.99"},
            headers=alice["headers"],
        )
    ).json()
    i1 = item["id"]

    response = await client.get(f"/api/wishlists/{w1}", headers=bob["headers"])
    assert response.status_code == 403

    response = await share(client, alice, w1, {"shared_user_id": bob["id"], "can_edit": False})
    assert response.status_code == 201

    response = await client.get(f"/api/wishlists/{w1}", headers=bob["headers"])
    assert response.status_code == 200

    response = await client.put(
        f"/api/wishlists/{w1}",
        json={"title": "Bob was here"},
        headers=bob["headers"],
    )
    assert response.status_code == 403

    response = await share(client, alice, w1, {"shared_user_id": bob["id"], "can_edit": True})
    assert response.status_code == 201

    response = await client.put(
        f"/api/wishlists/{w1}/items/{i1}",
        json={"name": "Phone", "price": "999.99", "is_purchased": True},
        headers=bob["headers"],
    )
    assert response.status_code == 200
    assert response.json()["is_purchased"] is True


@pytest.mark.asyncio
async def test_delete_scenario(client: AsyncClient, alice, bob) -> None:
    """Only the owner can delete; afterwards the wishlist is gone."""
    w1 = (
        await client.post("/api/wishlists", json={"title": "Bday"}, headers=alice["headers"])
    ).json()["id"]
    await share(client, alice, w1, {"shared_user_id": bob["id"], "can_edit": True})

    response = await client.delete(f"/api/wishlists/{w1}", headers=bob["headers"])
    assert response.status_code == 403

    response = await client.delete(f"/api/wishlists/{w1}", headers=alice["headers"])
    assert response.status_code == 204

    response = await client.get(f"/api/wishlists/{w1}", headers=alice["headers"])
    assert response.status_code == 404

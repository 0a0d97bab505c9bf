"""HTTP client for the wishlist sharing API."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"


class WishshareClientError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class WishshareClient:
    """Thin synchronous client; remembers the token returned by ``login``.

    Pass ``http`` to reuse an existing ``httpx.Client`` (for example a
    ``fastapi.testclient.TestClient``); otherwise one is created for
    ``base_url`` and closed by :meth:`close`.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.token: str | None = None

    def __enter__(self) -> "WishshareClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def _headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": self.token}

    def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        response = self.http.request(method, path, json=json, headers=self._headers())
        logger.debug("%s %s -> %s", method, path, response.status_code)
        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            raise WishshareClientError(response.status_code, message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def register(self, username: str, email: str, password: str) -> dict[str, Any]:
        return self._request(
            "POST",
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    def login(self, username: str, password: str) -> dict[str, Any]:
        result = self._request(
            "POST",
            "/auth/login",
            json={"username": username, "password": password},
        )
        self.token = result["token"]
        return result

    def create_wishlist(self, title: str, description: str = "") -> dict[str, Any]:
        return self._request(
            "POST",
            "/api/wishlists",
            json={"title": title, "description": description},
        )

    def list_wishlists(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/wishlists")

    def get_wishlist(self, wishlist_id: str) -> dict[str, Any]:
        return self._request("GET", f"/api/wishlists/{wishlist_id}")

    def update_wishlist(self, wishlist_id: str, title: str, description: str = "") -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/wishlists/{wishlist_id}",
            json={"title": title, "description": description},
        )

    def delete_wishlist(self, wishlist_id: str) -> None:
        self._request("DELETE", f"/api/wishlists/{wishlist_id}")

    def add_item(
        self,
        wishlist_id: str,
        name: str,
        description: str = "",
        price: str = "",
        link: str = "",
    ) -> dict[str, Any]:
        return self._request(
            "POST",
            f"/api/wishlists/{wishlist_id}/items",
            json={"name": name, "description": description, "price": price, "link": link},
        )

    def list_items(self, wishlist_id: str) -> list[dict[str, Any]]:
        return self._request("GET", f"/api/wishlists/{wishlist_id}/items")

    def update_item(self, wishlist_id: str, item_id: str, **fields: Any) -> dict[str, Any]:
        return self._request("PUT", f"/api/wishlists/{wishlist_id}/items/{item_id}", json=fields)

    def delete_item(self, wishlist_id: str, item_id: str) -> None:
        self._request("DELETE", f"/api/wishlists/{wishlist_id}/items/{item_id}")

    def share_wishlist(self, wishlist_id: str, user_id: str, can_edit: bool = False) -> dict[str, Any]:
        return self._request(
            "POST",
            f"/api/wishlists/{wishlist_id}/share",
            json={"shared_user_id": user_id, "can_edit": can_edit},
        )

    def list_shared(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/shared")

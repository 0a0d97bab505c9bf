"""In-memory store for users, wishlists, items and share grants.

All four mappings sit behind one :class:`ReadWriteLock`. Every public method
takes the lock exactly once, so each call is atomic with respect to every
other call. Returned entities are copies; mutating them does not change the
stored state.
"""

import logging
from copy import copy
from typing import Any

from wishshare.errors import ConflictError
from wishshare.locking import ReadWriteLock
from wishshare.models import ITEM_UPDATABLE_FIELDS, Item, ShareGrant, User, Wishlist

logger = logging.getLogger(__name__)


class WishlistStore:
    """Process-wide state, constructed once per application."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._users: dict[str, User] = {}
        self._wishlists: dict[str, Wishlist] = {}
        self._items: dict[str, Item] = {}
        self._shares: dict[str, ShareGrant] = {}

    # Users

    def create_user(self, username: str, email: str, password_hash: str) -> User:
        """Create a user; raises ConflictError if username or email is taken."""
        with self._lock.write():
            for existing in self._users.values():
                if existing.username == username:
                    raise ConflictError("username", username)
                if existing.email == email:
                    raise ConflictError("email", email)
            user = User(username=username, email=email, password_hash=password_hash)
            self._users[user.id] = user
            return copy(user)

    def find_user_by_username(self, username: str) -> User | None:
        with self._lock.read():
            for user in self._users.values():
                if user.username == username:
                    return copy(user)
            return None

    def get_user(self, user_id: str) -> User | None:
        with self._lock.read():
            user = self._users.get(user_id)
            return copy(user) if user else None

    # Wishlists

    def create_wishlist(self, owner_id: str, title: str, description: str = "") -> Wishlist:
        with self._lock.write():
            wishlist = Wishlist(user_id=owner_id, title=title, description=description)
            wishlist.updated_at = wishlist.created_at
            self._wishlists[wishlist.id] = wishlist
            return copy(wishlist)

    def get_wishlist(self, wishlist_id: str) -> Wishlist | None:
        with self._lock.read():
            wishlist = self._wishlists.get(wishlist_id)
            return copy(wishlist) if wishlist else None

    def list_wishlists_by_owner(self, owner_id: str) -> list[Wishlist]:
        """Wishlists owned by ``owner_id``. No ordering is guaranteed."""
        with self._lock.read():
            return [copy(w) for w in self._wishlists.values() if w.user_id == owner_id]

    def update_wishlist(self, wishlist_id: str, title: str, description: str = "") -> Wishlist | None:
        with self._lock.write():
            wishlist = self._wishlists.get(wishlist_id)
            if wishlist is None:
                return None
            wishlist.title = title
            wishlist.description = description
            wishlist.touch()
            return copy(wishlist)

    def delete_wishlist(self, wishlist_id: str) -> bool:
        """Remove a wishlist together with its items and share grants.

        The cascade runs in the same write section as the removal so no
        reader can observe orphaned items or grants. Returns False if the
        wishlist did not exist.
        """
        with self._lock.write():
            if self._wishlists.pop(wishlist_id, None) is None:
                return False
            item_ids = [i.id for i in self._items.values() if i.wishlist_id == wishlist_id]
            for item_id in item_ids:
                del self._items[item_id]
            share_ids = [s.id for s in self._shares.values() if s.wishlist_id == wishlist_id]
            for share_id in share_ids:
                del self._shares[share_id]
        logger.debug(
            "Deleted wishlist %s with %d items and %d shares",
            wishlist_id,
            len(item_ids),
            len(share_ids),
        )
        return True

    # Items

    def create_item(
        self,
        wishlist_id: str,
        name: str,
        description: str = "",
        price: str = "",
        link: str = "",
    ) -> Item | None:
        """Add an item; returns None if the wishlist no longer exists."""
        with self._lock.write():
            if wishlist_id not in self._wishlists:
                return None
            item = Item(
                wishlist_id=wishlist_id,
                name=name,
                description=description,
                price=price,
                link=link,
                is_purchased=False,
            )
            self._items[item.id] = item
            return copy(item)

    def get_item(self, item_id: str) -> Item | None:
        with self._lock.read():
            item = self._items.get(item_id)
            return copy(item) if item else None

    def list_items_by_wishlist(self, wishlist_id: str) -> list[Item]:
        with self._lock.read():
            return [copy(i) for i in self._items.values() if i.wishlist_id == wishlist_id]

    def update_item(self, item_id: str, **fields: Any) -> Item | None:
        unknown = set(fields) - ITEM_UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown item fields: {', '.join(sorted(unknown))}")
        with self._lock.write():
            item = self._items.get(item_id)
            if item is None:
                return None
            for name, value in fields.items():
                setattr(item, name, value)
            return copy(item)

    def delete_item(self, item_id: str) -> bool:
        with self._lock.write():
            return self._items.pop(item_id, None) is not None

    # Share grants

    def create_share_grant(self, wishlist_id: str, grantee_id: str, can_edit: bool) -> ShareGrant | None:
        """Grant ``grantee_id`` access to a wishlist.

        At most one grant exists per (wishlist, grantee); sharing again
        replaces the edit flag of the existing grant and keeps its id.
        Returns None if the wishlist no longer exists.
        """
        with self._lock.write():
            if wishlist_id not in self._wishlists:
                return None
            for grant in self._shares.values():
                if grant.wishlist_id == wishlist_id and grant.user_id == grantee_id:
                    grant.can_edit = can_edit
                    return copy(grant)
            grant = ShareGrant(wishlist_id=wishlist_id, user_id=grantee_id, can_edit=can_edit)
            self._shares[grant.id] = grant
            return copy(grant)

    def list_share_grants(self) -> list[ShareGrant]:
        with self._lock.read():
            return [copy(s) for s in self._shares.values()]

    def list_share_grants_by_grantee(self, user_id: str) -> list[ShareGrant]:
        with self._lock.read():
            return [copy(s) for s in self._shares.values() if s.user_id == user_id]

    def list_shared_with(self, user_id: str) -> list[tuple[Wishlist, bool]]:
        """(wishlist, can_edit) for every grant addressed to ``user_id``."""
        with self._lock.read():
            shared = []
            for grant in self._shares.values():
                if grant.user_id != user_id:
                    continue
                wishlist = self._wishlists.get(grant.wishlist_id)
                if wishlist is not None:
                    shared.append((copy(wishlist), grant.can_edit))
            return shared

    def stats(self) -> dict[str, int]:
        """Entity counts, used by the health endpoint."""
        with self._lock.read():
            return {
                "users": len(self._users),
                "wishlists": len(self._wishlists),
                "items": len(self._items),
                "shares": len(self._shares),
            }

"""In-memory entity models."""

from wishshare.models.item import ITEM_UPDATABLE_FIELDS, Item
from wishshare.models.share import ShareGrant
from wishshare.models.user import User
from wishshare.models.wishlist import Wishlist

__all__ = [
    "User",
    "Wishlist",
    "Item",
    "ITEM_UPDATABLE_FIELDS",
    "ShareGrant",
]

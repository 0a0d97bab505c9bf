"""Pydantic schemas for API validation."""

from wishshare.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)
from wishshare.schemas.item import (
    ItemCreate,
    ItemResponse,
    ItemUpdate,
)
from wishshare.schemas.share import (
    ShareCreate,
    ShareGrantResponse,
    SharedWishlistResponse,
)
from wishshare.schemas.wishlist import (
    WishlistCreate,
    WishlistResponse,
    WishlistUpdate,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "WishlistCreate",
    "WishlistUpdate",
    "WishlistResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "ShareCreate",
    "ShareGrantResponse",
    "SharedWishlistResponse",
]

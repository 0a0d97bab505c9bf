"""Wishlist-related Pydantic schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WishlistBase(BaseModel):
    """Base wishlist schema with common fields."""

    title: Annotated[str, Field(min_length=1)]
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        """Treat an explicit null like an omitted field."""
        return "" if v is None else v


class WishlistCreate(WishlistBase):
    """Schema for wishlist creation."""

    pass


class WishlistUpdate(WishlistBase):
    """Schema for updating a wishlist. Both fields are replaced."""

    pass


class WishlistResponse(WishlistBase):
    """Schema for wishlist response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

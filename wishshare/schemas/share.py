"""Share-related Pydantic schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wishshare.schemas.wishlist import WishlistResponse


class ShareCreate(BaseModel):
    """Schema for sharing a wishlist with another user."""

    shared_user_id: Annotated[str, Field(min_length=1)]
    can_edit: bool = False

    @field_validator("can_edit", mode="before")
    @classmethod
    def null_to_false(cls, v):
        return False if v is None else v


class ShareGrantResponse(BaseModel):
    """Schema for share grant response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    wishlist_id: str
    user_id: str
    can_edit: bool


class SharedWishlistResponse(BaseModel):
    """A wishlist shared with the caller and whether they may edit it."""

    wishlist: WishlistResponse
    can_edit: bool

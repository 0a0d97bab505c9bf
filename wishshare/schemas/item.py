"""Item-related Pydantic schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemBase(BaseModel):
    """Base item schema with common fields."""

    name: Annotated[str, Field(min_length=1)]
    description: str = ""
    # Kept as text, e.g. "999.99"
    price: str = ""
    link: str = ""

    @field_validator("description", "price", "link", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        """Treat an explicit null like an omitted field."""
        return "" if v is None else v


class ItemCreate(ItemBase):
    """Schema for item creation. New items are never purchased."""

    pass


class ItemUpdate(ItemBase):
    """Schema for updating an item. Every field is replaced."""

    is_purchased: bool = False

    @field_validator("is_purchased", mode="before")
    @classmethod
    def null_to_false(cls, v):
        return False if v is None else v


class ItemResponse(ItemBase):
    """Schema for item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    wishlist_id: str
    is_purchased: bool

"""Wishlists shared with the current user."""

from fastapi import APIRouter

from wishshare.dependencies import CurrentUserId, StoreDep
from wishshare.schemas import SharedWishlistResponse, WishlistResponse

router = APIRouter(prefix="/api/shared", tags=["shared"])


@router.get("", response_model=list[SharedWishlistResponse])
def list_shared_wishlists(current_user_id: CurrentUserId, store: StoreDep) -> list[SharedWishlistResponse]:
    """List every wishlist shared with the caller together with its edit flag."""
    return [
        SharedWishlistResponse(
            wishlist=WishlistResponse.model_validate(wishlist),
            can_edit=can_edit,
        )
        for wishlist, can_edit in store.list_shared_with(current_user_id)
    ]

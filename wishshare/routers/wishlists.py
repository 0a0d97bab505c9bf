"""Wishlist management endpoints."""

import logging

from fastapi import APIRouter, Response, status

from wishshare.access import AccessLevel, require_access
from wishshare.dependencies import CurrentUserId, StoreDep
from wishshare.errors import not_found
from wishshare.models import Wishlist
from wishshare.schemas import WishlistCreate, WishlistResponse, WishlistUpdate
from wishshare.store import WishlistStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wishlists", tags=["wishlists"])


def get_wishlist_or_404(store: WishlistStore, wishlist_id: str) -> Wishlist:
    wishlist = store.get_wishlist(wishlist_id)
    if wishlist is None:
        raise not_found("wishlist not found")
    return wishlist


@router.post("", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
def create_wishlist(
    data: WishlistCreate,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> WishlistResponse:
    """Create a new wishlist owned by the caller."""
    wishlist = store.create_wishlist(current_user_id, data.title, data.description)
    logger.info("Wishlist created", extra={"user_id": current_user_id, "wishlist_id": wishlist.id})
    return WishlistResponse.model_validate(wishlist)


@router.get("", response_model=list[WishlistResponse])
def list_wishlists(current_user_id: CurrentUserId, store: StoreDep) -> list[WishlistResponse]:
    """List wishlists owned by the caller."""
    return [
        WishlistResponse.model_validate(w)
        for w in store.list_wishlists_by_owner(current_user_id)
    ]


@router.get(
    "/{wishlist_id}",
    response_model=WishlistResponse,
    responses={
        403: {"description": "No read access"},
        404: {"description": "Wishlist not found"},
    },
)
def get_wishlist(wishlist_id: str, current_user_id: CurrentUserId, store: StoreDep) -> WishlistResponse:
    """Get a wishlist the caller owns or that is shared with them."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.READ, current_user_id, wishlist, store.list_share_grants())
    return WishlistResponse.model_validate(wishlist)


@router.put(
    "/{wishlist_id}",
    response_model=WishlistResponse,
    responses={
        403: {"description": "No edit access"},
        404: {"description": "Wishlist not found"},
    },
)
def update_wishlist(
    wishlist_id: str,
    data: WishlistUpdate,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> WishlistResponse:
    """Replace title and description (owner or edit grant)."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.EDIT, current_user_id, wishlist, store.list_share_grants())

    updated = store.update_wishlist(wishlist_id, data.title, data.description)
    if updated is None:
        # Deleted by the owner after the access check
        raise not_found("wishlist not found")

    logger.info("Wishlist updated", extra={"user_id": current_user_id, "wishlist_id": wishlist_id})
    return WishlistResponse.model_validate(updated)


@router.delete(
    "/{wishlist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"description": "Not the wishlist owner"},
        404: {"description": "Wishlist not found"},
    },
)
def delete_wishlist(wishlist_id: str, current_user_id: CurrentUserId, store: StoreDep) -> Response:
    """Delete a wishlist with its items and shares (owner only)."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.OWN, current_user_id, wishlist, ())

    if not store.delete_wishlist(wishlist_id):
        raise not_found("wishlist not found")

    logger.info("Wishlist deleted", extra={"user_id": current_user_id, "wishlist_id": wishlist_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)

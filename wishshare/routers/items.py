"""Item management endpoints."""

import logging

from fastapi import APIRouter, Response, status

from wishshare.access import AccessLevel, require_access
from wishshare.dependencies import CurrentUserId, StoreDep
from wishshare.errors import not_found
from wishshare.models import Item
from wishshare.routers.wishlists import get_wishlist_or_404
from wishshare.schemas import ItemCreate, ItemResponse, ItemUpdate
from wishshare.store import WishlistStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wishlists", tags=["items"])


def _get_item_or_404(store: WishlistStore, wishlist_id: str, item_id: str) -> Item:
    item = store.get_item(item_id)
    # An item addressed through another wishlist's path does not exist there
    if item is None or item.wishlist_id != wishlist_id:
        raise not_found("item not found")
    return item


@router.get(
    "/{wishlist_id}/items",
    response_model=list[ItemResponse],
    responses={
        403: {"description": "No read access"},
        404: {"description": "Wishlist not found"},
    },
)
def list_items(wishlist_id: str, current_user_id: CurrentUserId, store: StoreDep) -> list[ItemResponse]:
    """List items in a wishlist."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.READ, current_user_id, wishlist, store.list_share_grants())
    return [ItemResponse.model_validate(i) for i in store.list_items_by_wishlist(wishlist_id)]


@router.post(
    "/{wishlist_id}/items",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {"description": "No edit access"},
        404: {"description": "Wishlist not found"},
    },
)
def create_item(
    wishlist_id: str,
    data: ItemCreate,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> ItemResponse:
    """Add an item to a wishlist."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.EDIT, current_user_id, wishlist, store.list_share_grants())

    item = store.create_item(
        wishlist_id,
        name=data.name,
        description=data.description,
        price=data.price,
        link=data.link,
    )
    if item is None:
        raise not_found("wishlist not found")

    logger.info(
        "Item added",
        extra={"user_id": current_user_id, "wishlist_id": wishlist_id, "item_id": item.id},
    )
    return ItemResponse.model_validate(item)


@router.put(
    "/{wishlist_id}/items/{item_id}",
    response_model=ItemResponse,
    responses={
        403: {"description": "No edit access"},
        404: {"description": "Wishlist or item not found"},
    },
)
def update_item(
    wishlist_id: str,
    item_id: str,
    data: ItemUpdate,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> ItemResponse:
    """Replace an item's fields."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.EDIT, current_user_id, wishlist, store.list_share_grants())
    _get_item_or_404(store, wishlist_id, item_id)

    updated = store.update_item(item_id, **data.model_dump())
    if updated is None:
        raise not_found("item not found")

    logger.info(
        "Item updated",
        extra={"user_id": current_user_id, "wishlist_id": wishlist_id, "item_id": item_id},
    )
    return ItemResponse.model_validate(updated)


@router.delete(
    "/{wishlist_id}/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"description": "No edit access"},
        404: {"description": "Wishlist or item not found"},
    },
)
def delete_item(
    wishlist_id: str,
    item_id: str,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> Response:
    """Remove an item from a wishlist."""
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(AccessLevel.EDIT, current_user_id, wishlist, store.list_share_grants())
    _get_item_or_404(store, wishlist_id, item_id)

    store.delete_item(item_id)
    logger.info(
        "Item deleted",
        extra={"user_id": current_user_id, "wishlist_id": wishlist_id, "item_id": item_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

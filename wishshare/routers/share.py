"""Wishlist sharing endpoint."""

import logging

from fastapi import APIRouter, status

from wishshare.access import AccessLevel, require_access
from wishshare.dependencies import CurrentUserId, StoreDep
from wishshare.errors import not_found, validation_error
from wishshare.routers.wishlists import get_wishlist_or_404
from wishshare.schemas import ShareCreate, ShareGrantResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wishlists", tags=["share"])


@router.post(
    "/{wishlist_id}/share",
    response_model=ShareGrantResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Cannot share with yourself"},
        403: {"description": "Not the wishlist owner"},
        404: {"description": "Wishlist or user not found"},
    },
)
def share_wishlist(
    wishlist_id: str,
    data: ShareCreate,
    current_user_id: CurrentUserId,
    store: StoreDep,
) -> ShareGrantResponse:
    """Grant another user read or edit access (owner only).

    Sharing again with the same user replaces the edit flag.
    """
    wishlist = get_wishlist_or_404(store, wishlist_id)
    require_access(
        AccessLevel.OWN,
        current_user_id,
        wishlist,
        (),
        message="only owner can share wishlist",
    )

    if store.get_user(data.shared_user_id) is None:
        raise not_found("user to share with not found")

    if data.shared_user_id == current_user_id:
        raise validation_error("cannot share with yourself")

    grant = store.create_share_grant(wishlist_id, data.shared_user_id, data.can_edit)
    if grant is None:
        raise not_found("wishlist not found")

    logger.info(
        "Wishlist shared",
        extra={
            "user_id": current_user_id,
            "wishlist_id": wishlist_id,
            "grantee_id": data.shared_user_id,
            "can_edit": data.can_edit,
        },
    )
    return ShareGrantResponse.model_validate(grant)

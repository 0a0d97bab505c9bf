"""Access-control rules for wishlists and their items.

The owner of a wishlist holds every right implicitly. Anyone else needs a
share grant: any grant gives read access, a grant with ``can_edit`` gives
edit access. Delete and share are owner-only. When several grants exist for
the same (wishlist, user) pair, edit access is the OR across them.

These are pure predicates over a grant snapshot; callers check that the
wishlist exists first.
"""

import enum
import logging
from typing import Iterable

from wishshare.errors import forbidden
from wishshare.models import ShareGrant, Wishlist

logger = logging.getLogger(__name__)


class AccessLevel(str, enum.Enum):
    """Operation class being authorized."""

    READ = "read"
    EDIT = "edit"
    OWN = "own"


def is_owner(user_id: str, wishlist: Wishlist) -> bool:
    return wishlist.user_id == user_id


def _grants_for(user_id: str, wishlist: Wishlist, grants: Iterable[ShareGrant]) -> Iterable[ShareGrant]:
    return (g for g in grants if g.user_id == user_id and g.wishlist_id == wishlist.id)


def can_read(user_id: str, wishlist: Wishlist, grants: Iterable[ShareGrant]) -> bool:
    if is_owner(user_id, wishlist):
        return True
    return any(True for _ in _grants_for(user_id, wishlist, grants))


def can_edit(user_id: str, wishlist: Wishlist, grants: Iterable[ShareGrant]) -> bool:
    if is_owner(user_id, wishlist):
        return True
    return any(g.can_edit for g in _grants_for(user_id, wishlist, grants))


def can_delete(user_id: str, wishlist: Wishlist) -> bool:
    return is_owner(user_id, wishlist)


def can_share(user_id: str, wishlist: Wishlist) -> bool:
    return is_owner(user_id, wishlist)


def has_access(
    level: AccessLevel,
    user_id: str,
    wishlist: Wishlist,
    grants: Iterable[ShareGrant],
) -> bool:
    if level is AccessLevel.OWN:
        return is_owner(user_id, wishlist)
    if level is AccessLevel.EDIT:
        return can_edit(user_id, wishlist, grants)
    return can_read(user_id, wishlist, grants)


def require_access(
    level: AccessLevel,
    user_id: str,
    wishlist: Wishlist,
    grants: Iterable[ShareGrant],
    message: str = "access denied",
) -> None:
    """Raise a 403 API error unless ``user_id`` holds ``level`` on ``wishlist``."""
    if not has_access(level, user_id, wishlist, grants):
        logger.warning(
            "Access denied",
            extra={"user_id": user_id, "wishlist_id": wishlist.id, "required": level.value},
        )
        raise forbidden(message)

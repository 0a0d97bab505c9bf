"""Share grant model."""

from dataclasses import dataclass, field

from wishshare.utils import new_uuid


@dataclass
class ShareGrant:
    """Read (and optionally edit) access to a wishlist for a non-owner user."""

    wishlist_id: str
    user_id: str
    can_edit: bool = False
    id: str = field(default_factory=new_uuid)

"""Wishlist model."""

from dataclasses import dataclass, field
from datetime import datetime

from wishshare.utils import new_uuid, utcnow


@dataclass
class Wishlist:
    """A named collection of items owned by exactly one user.

    ``user_id`` is the owner and never changes after creation.
    """

    user_id: str
    title: str
    description: str = ""
    id: str = field(default_factory=new_uuid)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def touch(self) -> None:
        """Refresh the updated timestamp."""
        self.updated_at = utcnow()

"""Item model."""

from dataclasses import dataclass, field

from wishshare.utils import new_uuid

# Fields a caller may replace through an item update.
ITEM_UPDATABLE_FIELDS = frozenset({"name", "description", "price", "link", "is_purchased"})


@dataclass
class Item:
    """A desired product entry inside a wishlist."""

    wishlist_id: str
    name: str
    description: str = ""
    price: str = ""
    link: str = ""
    is_purchased: bool = False
    id: str = field(default_factory=new_uuid)

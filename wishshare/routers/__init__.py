"""API routers."""

from wishshare.routers.auth import router as auth_router
from wishshare.routers.health import router as health_router
from wishshare.routers.items import router as items_router
from wishshare.routers.share import router as share_router
from wishshare.routers.shared import router as shared_router
from wishshare.routers.wishlists import router as wishlists_router

__all__ = [
    "auth_router",
    "health_router",
    "wishlists_router",
    "items_router",
    "share_router",
    "shared_router",
]

"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wishshare import __version__
from wishshare.config import Settings, get_settings
from wishshare.logging_config import configure_logging
from wishshare.middleware import setup_middleware
from wishshare.routers import (
    auth_router,
    health_router,
    items_router,
    share_router,
    shared_router,
    wishlists_router,
)
from wishshare.security import UserIdAuthenticator
from wishshare.store import WishlistStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: WishlistStore | None = None,
) -> FastAPI:
    """Build the application around a single store instance."""
    settings = settings or get_settings()
    configure_logging(
        settings.log_level,
        settings.log_format,
        service=settings.app_name,
        environment=settings.environment,
    )
    store = store or WishlistStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting %s (%s)", settings.app_name, settings.environment)
        yield
        logger.info("Shutting down %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Wishlist sharing API",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.authenticator = UserIdAuthenticator(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.cors_allow_all else settings.cors_origins,
        allow_credentials=not settings.cors_allow_all,  # credentials not allowed with wildcard
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    setup_middleware(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(wishlists_router)
    app.include_router(items_router)
    app.include_router(share_router)
    app.include_router(shared_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": settings.app_name, "version": __version__}

    return app

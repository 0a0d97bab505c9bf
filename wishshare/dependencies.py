"""FastAPI dependencies for authentication and store access."""

from typing import Annotated

from fastapi import Depends, Header, Request

from wishshare.config import Settings
from wishshare.errors import unauthorized
from wishshare.security import Authenticator, extract_token
from wishshare.store import WishlistStore


def get_store(request: Request) -> WishlistStore:
    """Store created for this application in ``create_app``."""
    return request.app.state.store


def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    authorization: Annotated[str | None, Header(alias="Authorization")] = None,
) -> str:
    """Resolve the caller from the ``Authorization`` header."""
    token = extract_token(authorization)
    if token is None:
        raise unauthorized()

    user_id = authenticator.resolve(token)
    if user_id is None:
        raise unauthorized()
    return user_id


# Type aliases for dependency injection
StoreDep = Annotated[WishlistStore, Depends(get_store)]
AuthenticatorDep = Annotated[Authenticator, Depends(get_authenticator)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]

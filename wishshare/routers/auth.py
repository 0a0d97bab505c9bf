"""Registration and login endpoints."""

import logging

from fastapi import APIRouter, status

from wishshare.dependencies import AuthenticatorDep, SettingsDep, StoreDep
from wishshare.errors import ConflictError, conflict, internal_error, unauthorized
from wishshare.schemas import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from wishshare.security import hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing field or username/email already exists"},
        500: {"description": "Password could not be hashed"},
    },
)
def register(payload: RegisterRequest, store: StoreDep, settings: SettingsDep) -> UserResponse:
    """Register a new user."""
    try:
        password_hash = hash_password(payload.password, rounds=settings.bcrypt_rounds)
    except ValueError as exc:
        logger.warning("Password hashing failed: %s", exc)
        raise internal_error("could not hash password")

    try:
        user = store.create_user(payload.username, payload.email, password_hash)
    except ConflictError as exc:
        logger.info("Registration rejected", extra={"conflict_field": exc.field})
        raise conflict()

    logger.info("User registered", extra={"user_id": user.id})
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials"}},
)
def login(
    payload: LoginRequest,
    store: StoreDep,
    authenticator: AuthenticatorDep,
    settings: SettingsDep,
) -> LoginResponse:
    """Authenticate with username and password and return the access token."""
    user = store.find_user_by_username(payload.username)
    if user is None:
        # Prevent timing attacks by verifying against a throwaway hash
        verify_password(
            payload.password,
            hash_password("dummy-password-for-timing", rounds=settings.bcrypt_rounds),
        )
        raise unauthorized("invalid credentials")

    if not verify_password(payload.password, user.password_hash):
        raise unauthorized("invalid credentials")

    logger.info("User logged in", extra={"user_id": user.id})
    return LoginResponse(
        token=authenticator.issue_token(user),
        user=UserResponse.model_validate(user),
    )

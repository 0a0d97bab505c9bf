"""Password hashing and request token handling."""

from abc import ABC, abstractmethod

import bcrypt

from wishshare.models import User
from wishshare.store import WishlistStore

DEFAULT_BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """bcrypt hash of ``password``; raises ValueError past 72 bytes."""
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    # hash_password rejects these, so no stored hash can match
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def extract_token(authorization: str | None) -> str | None:
    """Token from an ``Authorization`` header.

    Accepts both the bare token and the ``Bearer <token>`` form.
    """
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer":
        value = rest.strip()
    return value or None


class Authenticator(ABC):
    """Issues tokens at login and maps request tokens back to user ids."""

    @abstractmethod
    def issue_token(self, user: User) -> str:
        ...

    @abstractmethod
    def resolve(self, token: str) -> str | None:
        """User id for ``token``, or None if the token is not valid."""
        ...


class UserIdAuthenticator(Authenticator):
    """The token is the user id itself: no signature, no expiry."""

    def __init__(self, store: WishlistStore):
        self.store = store

    def issue_token(self, user: User) -> str:
        return user.id

    def resolve(self, token: str) -> str | None:
        user = self.store.get_user(token)
        return user.id if user else None

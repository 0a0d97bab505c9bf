"""User model."""

from dataclasses import dataclass, field

from wishshare.utils import new_uuid


@dataclass
class User:
    """Registered account. Never updated or deleted once created."""

    username: str
    email: str
    password_hash: str
    id: str = field(default_factory=new_uuid)

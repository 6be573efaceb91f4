"""User domain model for the storefront administration API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import BaseEntity


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    MODERATOR = "moderator"


@dataclass(slots=True, frozen=True)
class User(BaseEntity):
    """
    User account managed through the admin API.

    Attributes:
        email: Contact address, unique across all users
        name: Display name
        role: One of admin, user or moderator
        is_active: Whether the account is enabled
    """

    email: str
    name: str
    role: UserRole
    is_active: bool

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} role={self.role.value} active={self.is_active}>"

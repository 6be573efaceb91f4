"""Repository for User records held in memory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, ContextManager, List, Optional

from ...domain.exceptions import DuplicateEmailError
from ...domain.models import (
    CreateUserDto,
    PaginatedResult,
    PaginationParams,
    QueryOptions,
    UpdateUserDto,
    User,
    UserRole,
)
from .memory import InMemoryRepository

logger = logging.getLogger(__name__)


def _seeded_user(user_id: str, email: str, name: str, role: UserRole, day: int) -> User:
    stamp = datetime(2024, 1, day, tzinfo=timezone.utc)
    return User(
        id=user_id,
        email=email,
        name=name,
        role=role,
        is_active=True,
        created_at=stamp,
        updated_at=stamp,
    )


def sample_users() -> List[User]:
    return [
        _seeded_user("1", "admin@example.com", "Admin User", UserRole.ADMIN, 1),
        _seeded_user("2", "john@example.com", "John Doe", UserRole.USER, 2),
        _seeded_user("3", "jane@example.com", "Jane Smith", UserRole.MODERATOR, 3),
    ]


class UserRepository:
    """User storage built on a generic in-memory collection."""

    def __init__(self, seed: bool = True) -> None:
        self._store: InMemoryRepository[User] = InMemoryRepository(
            "users", User, seed=sample_users() if seed else ()
        )

    # Generic operations ---------------------------------------------------
    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._store.find_by_id(user_id)

    def find_all(self, options: Optional[QueryOptions] = None) -> List[User]:
        return self._store.find_all(options)

    def find_with_pagination(
        self, params: PaginationParams, options: Optional[QueryOptions] = None
    ) -> PaginatedResult[User]:
        return self._store.find_with_pagination(params, options)

    def delete(self, user_id: str) -> bool:
        return self._store.delete(user_id)

    def count(self, options: Optional[QueryOptions] = None) -> int:
        return self._store.count(options)

    def exists(self, user_id: str) -> bool:
        return self._store.exists(user_id)

    def transaction(self) -> ContextManager[Any]:
        return self._store.transaction()

    # User queries ---------------------------------------------------------
    def find_by_email(self, email: str) -> Optional[User]:
        user = self._store.find_first(lambda item: item.email == email)
        logger.debug("Lookup by email %s found=%s", email, user is not None)
        return user

    def find_by_role(self, role: UserRole) -> List[User]:
        return self._store.find_all(QueryOptions(where={"role": role}))

    def find_active_users(self) -> List[User]:
        return self._store.find_all(QueryOptions(where={"is_active": True}))

    def search_users(self, term: str) -> List[User]:
        needle = term.lower()
        users = self._store.find_where(
            lambda item: needle in item.name.lower() or needle in item.email.lower()
        )
        logger.debug("Found %d users matching search: %s", len(users), term)
        return users

    # User mutations -------------------------------------------------------
    def create_user(self, dto: CreateUserDto) -> User:
        with self._store.transaction():
            if self.find_by_email(dto.email) is not None:
                raise DuplicateEmailError()
            return self._store.create(
                {
                    "email": dto.email,
                    "name": dto.name,
                    "role": UserRole(dto.role) if dto.role else UserRole.USER,
                    "is_active": True,
                }
            )

    def update_user(self, user_id: str, dto: UpdateUserDto) -> Optional[User]:
        changes = dto.changes()
        if "role" in changes:
            changes["role"] = UserRole(changes["role"])
        with self._store.transaction():
            if "email" in changes:
                existing = self.find_by_email(changes["email"])
                if existing is not None and existing.id != user_id:
                    raise DuplicateEmailError()
            return self._store.update(user_id, changes)

    def activate_user(self, user_id: str) -> Optional[User]:
        return self._store.update(user_id, {"is_active": True})

    def deactivate_user(self, user_id: str) -> Optional[User]:
        return self._store.update(user_id, {"is_active": False})

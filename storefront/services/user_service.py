"""Service for user account management."""

from __future__ import annotations

import logging
import re
from typing import List

from ..domain.exceptions import DomainError
from ..domain.models import (
    ApiResponse,
    CreateUserDto,
    PaginatedResult,
    PaginationParams,
    UpdateUserDto,
    User,
    UserRole,
)
from ..domain.ports.repositories import UserRepository
from .validation import is_valid_name, is_valid_search_term, pagination_error

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

USER_NOT_FOUND = "User not found"
INVALID_ROLE = "Invalid role"


class UserService:
    """Validates user operations and wraps repository results in envelopes."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def create_user(self, dto: CreateUserDto) -> ApiResponse[User]:
        """
        Register a new user.

        Args:
            dto: Email, name and optional role (defaults to ``user``)

        Returns:
            Envelope holding the created user, or the validation / uniqueness error
        """
        if not self._is_valid_email(dto.email):
            return ApiResponse.fail("Invalid email format")
        if not is_valid_name(dto.name):
            return ApiResponse.fail("Name must be at least 2 characters long")
        if dto.role is not None and not self._is_valid_role(dto.role):
            return ApiResponse.fail(INVALID_ROLE)

        try:
            user = self.user_repository.create_user(dto)
        except DomainError as exc:
            return ApiResponse.fail(str(exc))
        except Exception:
            logger.exception("UserService.create_user failed")
            return ApiResponse.fail("Failed to create user")
        return ApiResponse.ok(user, "User created successfully")

    async def get_user_by_id(self, user_id: str) -> ApiResponse[User]:
        try:
            user = self.user_repository.find_by_id(user_id)
        except Exception:
            logger.exception("UserService.get_user_by_id failed")
            return ApiResponse.fail("Failed to retrieve user")
        if user is None:
            return ApiResponse.fail(USER_NOT_FOUND)
        return ApiResponse.ok(user)

    async def get_all_users(self, params: PaginationParams) -> ApiResponse[PaginatedResult[User]]:
        """Page through users, optionally sorted by ``params.sort_by``."""
        error = pagination_error(params)
        if error:
            return ApiResponse.fail(error)
        try:
            result = self.user_repository.find_with_pagination(params)
        except Exception:
            logger.exception("UserService.get_all_users failed")
            return ApiResponse.fail("Failed to retrieve users")
        return ApiResponse.ok(result)

    async def update_user(self, user_id: str, dto: UpdateUserDto) -> ApiResponse[User]:
        """
        Apply a partial update to a user.

        Only the fields set on ``dto`` are validated and written. A new email
        must not belong to another user.
        """
        if dto.email is not None and not self._is_valid_email(dto.email):
            return ApiResponse.fail("Invalid email format")
        if dto.name is not None and not is_valid_name(dto.name):
            return ApiResponse.fail("Name must be at least 2 characters long")
        if dto.role is not None and not self._is_valid_role(dto.role):
            return ApiResponse.fail(INVALID_ROLE)

        try:
            user = self.user_repository.update_user(user_id, dto)
        except DomainError as exc:
            return ApiResponse.fail(str(exc))
        except Exception:
            logger.exception("UserService.update_user failed")
            return ApiResponse.fail("Failed to update user")
        if user is None:
            return ApiResponse.fail(USER_NOT_FOUND)
        return ApiResponse.ok(user, "User updated successfully")

    async def delete_user(self, user_id: str) -> ApiResponse[bool]:
        """
        Delete a user.

        Existence is checked first; admins are never deleted.
        """
        try:
            with self.user_repository.transaction():
                user = self.user_repository.find_by_id(user_id)
                if user is None:
                    return ApiResponse.fail(USER_NOT_FOUND)
                if user.role == UserRole.ADMIN:
                    return ApiResponse.fail("Admin users cannot be deleted")
                deleted = self.user_repository.delete(user_id)
        except Exception:
            logger.exception("UserService.delete_user failed")
            return ApiResponse.fail("Failed to delete user")
        return ApiResponse.ok(deleted, "User deleted successfully")

    async def search_users(self, term: str) -> ApiResponse[List[User]]:
        if not is_valid_search_term(term):
            return ApiResponse.fail("Search term must be at least 2 characters long")
        try:
            users = self.user_repository.search_users(term.strip())
        except Exception:
            logger.exception("UserService.search_users failed")
            return ApiResponse.fail("Failed to search users")
        return ApiResponse.ok(users)

    async def get_users_by_role(self, role: UserRole) -> ApiResponse[List[User]]:
        try:
            users = self.user_repository.find_by_role(UserRole(role))
        except ValueError:
            return ApiResponse.fail(INVALID_ROLE)
        except Exception:
            logger.exception("UserService.get_users_by_role failed")
            return ApiResponse.fail("Failed to retrieve users by role")
        return ApiResponse.ok(users)

    async def activate_user(self, user_id: str) -> ApiResponse[User]:
        try:
            user = self.user_repository.activate_user(user_id)
        except Exception:
            logger.exception("UserService.activate_user failed")
            return ApiResponse.fail("Failed to activate user")
        if user is None:
            return ApiResponse.fail(USER_NOT_FOUND)
        return ApiResponse.ok(user, "User activated successfully")

    async def deactivate_user(self, user_id: str) -> ApiResponse[User]:
        try:
            user = self.user_repository.deactivate_user(user_id)
        except Exception:
            logger.exception("UserService.deactivate_user failed")
            return ApiResponse.fail("Failed to deactivate user")
        if user is None:
            return ApiResponse.fail(USER_NOT_FOUND)
        return ApiResponse.ok(user, "User deactivated successfully")

    @staticmethod
    def _is_valid_email(email: str) -> bool:
        return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None

    @staticmethod
    def _is_valid_role(role: object) -> bool:
        try:
            UserRole(role)
        except ValueError:
            return False
        return True

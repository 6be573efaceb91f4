"""Pydantic schemas for user API endpoints."""

from datetime import datetime
from typing import Optional

from ....domain.models import UserRole
from .common import CamelModel


class UserCreateRequest(CamelModel):
    """Request schema for user creation."""

    email: str
    name: str
    # Checked by UserService so an unknown role gets the envelope error.
    role: Optional[str] = None


class UserUpdateRequest(CamelModel):
    """Request schema for a partial user update."""

    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None


class UserResponse(CamelModel):
    """Response schema for user data."""

    id: str
    email: str
    name: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime

"""Input payloads accepted by the user and product services."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union

from .user import UserRole


def _explicit_fields(dto: Any) -> Dict[str, Any]:
    return {item.name: getattr(dto, item.name) for item in fields(dto) if getattr(dto, item.name) is not None}


@dataclass(slots=True)
class CreateUserDto:
    email: str
    name: str
    role: Optional[Union[UserRole, str]] = None


@dataclass(slots=True)
class UpdateUserDto:
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[Union[UserRole, str]] = None
    is_active: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied."""
        return _explicit_fields(self)


@dataclass(slots=True)
class CreateProductDto:
    name: str
    description: str
    price: float
    category_id: str
    stock: int


@dataclass(slots=True)
class UpdateProductDto:
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[str] = None
    stock: Optional[int] = None
    is_available: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied."""
        return _explicit_fields(self)

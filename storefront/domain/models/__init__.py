"""Domain models for the storefront administration API."""

from .base import BASE_FIELDS, BaseEntity
from .dto import CreateProductDto, CreateUserDto, UpdateProductDto, UpdateUserDto
from .envelope import ApiResponse
from .product import Product
from .query import PaginatedResult, Pagination, PaginationParams, QueryOptions, SortOrder
from .stats import DashboardStats
from .user import User, UserRole

__all__ = [
    "ApiResponse",
    "BASE_FIELDS",
    "BaseEntity",
    "CreateProductDto",
    "CreateUserDto",
    "DashboardStats",
    "PaginatedResult",
    "Pagination",
    "PaginationParams",
    "Product",
    "QueryOptions",
    "SortOrder",
    "UpdateProductDto",
    "UpdateUserDto",
    "User",
    "UserRole",
]

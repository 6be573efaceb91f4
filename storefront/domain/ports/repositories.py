from __future__ import annotations

from typing import Any, ContextManager, List, Optional, Protocol

from ..models import (
    CreateProductDto,
    CreateUserDto,
    PaginatedResult,
    PaginationParams,
    Product,
    QueryOptions,
    UpdateProductDto,
    UpdateUserDto,
    User,
    UserRole,
)


class UserRepository(Protocol):
    """Storage functions related to user accounts."""

    def transaction(self) -> ContextManager[Any]:
        ...

    def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    def find_all(self, options: Optional[QueryOptions] = None) -> List[User]:
        ...

    def find_with_pagination(
        self, params: PaginationParams, options: Optional[QueryOptions] = None
    ) -> PaginatedResult[User]:
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def find_by_role(self, role: UserRole) -> List[User]:
        ...

    def find_active_users(self) -> List[User]:
        ...

    def search_users(self, term: str) -> List[User]:
        ...

    def create_user(self, dto: CreateUserDto) -> User:
        ...

    def update_user(self, user_id: str, dto: UpdateUserDto) -> Optional[User]:
        ...

    def activate_user(self, user_id: str) -> Optional[User]:
        ...

    def deactivate_user(self, user_id: str) -> Optional[User]:
        ...

    def delete(self, user_id: str) -> bool:
        ...

    def count(self, options: Optional[QueryOptions] = None) -> int:
        ...


class ProductRepository(Protocol):
    """Storage functions related to the product catalogue."""

    def find_by_id(self, product_id: str) -> Optional[Product]:
        ...

    def find_all(self, options: Optional[QueryOptions] = None) -> List[Product]:
        ...

    def find_with_pagination(
        self, params: PaginationParams, options: Optional[QueryOptions] = None
    ) -> PaginatedResult[Product]:
        ...

    def find_by_category(self, category_id: str) -> List[Product]:
        ...

    def find_available_products(self) -> List[Product]:
        ...

    def find_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        ...

    def search_products(self, term: str) -> List[Product]:
        ...

    def get_low_stock_products(self, threshold: int = 10) -> List[Product]:
        ...

    def create_product(self, dto: CreateProductDto) -> Product:
        ...

    def update_product(self, product_id: str, dto: UpdateProductDto) -> Optional[Product]:
        ...

    def update_stock(self, product_id: str, quantity: int) -> Optional[Product]:
        ...

    def delete(self, product_id: str) -> bool:
        ...

    def count(self, options: Optional[QueryOptions] = None) -> int:
        ...

"""Repository for Product records held in memory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ...domain.exceptions import InsufficientStockError
from ...domain.models import (
    CreateProductDto,
    PaginatedResult,
    PaginationParams,
    Product,
    QueryOptions,
    UpdateProductDto,
)
from .memory import InMemoryRepository

logger = logging.getLogger(__name__)


def sample_products() -> List[Product]:
    rows = [
        ("1", "Laptop Pro", "High-performance laptop for professionals", 1299.99, "cat1", 50),
        ("2", "Wireless Mouse", "Ergonomic wireless mouse", 29.99, "cat2", 100),
        ("3", "Mechanical Keyboard", "RGB mechanical gaming keyboard", 149.99, "cat2", 25),
    ]
    products = []
    for day, (product_id, name, description, price, category_id, stock) in enumerate(rows, start=1):
        stamp = datetime(2024, 1, day, tzinfo=timezone.utc)
        products.append(
            Product(
                id=product_id,
                name=name,
                description=description,
                price=price,
                category_id=category_id,
                stock=stock,
                is_available=stock > 0,
                created_at=stamp,
                updated_at=stamp,
            )
        )
    return products


class ProductRepository:
    """Product storage; keeps ``is_available`` in step with ``stock``."""

    def __init__(self, seed: bool = True) -> None:
        self._store: InMemoryRepository[Product] = InMemoryRepository(
            "products", Product, seed=sample_products() if seed else ()
        )

    # Generic operations ---------------------------------------------------
    def find_by_id(self, product_id: str) -> Optional[Product]:
        return self._store.find_by_id(product_id)

    def find_all(self, options: Optional[QueryOptions] = None) -> List[Product]:
        return self._store.find_all(options)

    def find_with_pagination(
        self, params: PaginationParams, options: Optional[QueryOptions] = None
    ) -> PaginatedResult[Product]:
        return self._store.find_with_pagination(params, options)

    def delete(self, product_id: str) -> bool:
        return self._store.delete(product_id)

    def count(self, options: Optional[QueryOptions] = None) -> int:
        return self._store.count(options)

    def exists(self, product_id: str) -> bool:
        return self._store.exists(product_id)

    # Product queries ------------------------------------------------------
    def find_by_category(self, category_id: str) -> List[Product]:
        return self._store.find_all(QueryOptions(where={"category_id": category_id}))

    def find_available_products(self) -> List[Product]:
        return self._store.find_where(lambda item: item.is_available and item.stock > 0)

    def find_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        products = self._store.find_where(lambda item: min_price <= item.price <= max_price)
        logger.debug("Found %d products in price range %s - %s", len(products), min_price, max_price)
        return products

    def search_products(self, term: str) -> List[Product]:
        needle = term.lower()
        return self._store.find_where(
            lambda item: needle in item.name.lower() or needle in item.description.lower()
        )

    def get_low_stock_products(self, threshold: int = 10) -> List[Product]:
        return self._store.find_where(lambda item: item.stock <= threshold and item.is_available)

    # Product mutations ----------------------------------------------------
    def create_product(self, dto: CreateProductDto) -> Product:
        return self._store.create(
            {
                "name": dto.name,
                "description": dto.description,
                "price": dto.price,
                "category_id": dto.category_id,
                "stock": dto.stock,
                "is_available": dto.stock > 0,
            }
        )

    def update_product(self, product_id: str, dto: UpdateProductDto) -> Optional[Product]:
        changes = dto.changes()
        with self._store.transaction():
            product = self._store.find_by_id(product_id)
            if product is None:
                return None
            changes["is_available"] = changes.get("stock", product.stock) > 0
            return self._store.update(product_id, changes)

    def update_stock(self, product_id: str, quantity: int) -> Optional[Product]:
        with self._store.transaction():
            product = self._store.find_by_id(product_id)
            if product is None:
                return None
            new_stock = product.stock + quantity
            if new_stock < 0:
                raise InsufficientStockError()
            return self._store.update(product_id, {"stock": new_stock, "is_available": new_stock > 0})

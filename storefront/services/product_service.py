"""Service for the product catalogue and stock levels."""

from __future__ import annotations

import logging
import math
from typing import List

from ..domain.exceptions import DomainError
from ..domain.models import (
    ApiResponse,
    CreateProductDto,
    PaginatedResult,
    PaginationParams,
    Product,
    UpdateProductDto,
)
from ..domain.ports.repositories import ProductRepository
from .validation import (
    is_valid_name,
    is_valid_price,
    is_valid_quantity,
    is_valid_search_term,
    is_valid_stock,
    pagination_error,
)

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
INVALID_PRICE = "Price must be greater than 0"
INVALID_STOCK = "Stock must be a non-negative number"
INVALID_NAME = "Product name must be at least 2 characters long"


class ProductService:
    """Validates product operations and wraps repository results in envelopes."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def create_product(self, dto: CreateProductDto) -> ApiResponse[Product]:
        if not is_valid_price(dto.price):
            return ApiResponse.fail(INVALID_PRICE)
        if not is_valid_stock(dto.stock):
            return ApiResponse.fail(INVALID_STOCK)
        if not is_valid_name(dto.name):
            return ApiResponse.fail(INVALID_NAME)

        try:
            product = self.product_repository.create_product(dto)
        except Exception:
            logger.exception("ProductService.create_product failed")
            return ApiResponse.fail("Failed to create product")
        return ApiResponse.ok(product, "Product created successfully")

    async def get_product_by_id(self, product_id: str) -> ApiResponse[Product]:
        try:
            product = self.product_repository.find_by_id(product_id)
        except Exception:
            logger.exception("ProductService.get_product_by_id failed")
            return ApiResponse.fail("Failed to retrieve product")
        if product is None:
            return ApiResponse.fail(PRODUCT_NOT_FOUND)
        return ApiResponse.ok(product)

    async def get_all_products(self, params: PaginationParams) -> ApiResponse[PaginatedResult[Product]]:
        error = pagination_error(params)
        if error:
            return ApiResponse.fail(error)
        try:
            result = self.product_repository.find_with_pagination(params)
        except Exception:
            logger.exception("ProductService.get_all_products failed")
            return ApiResponse.fail("Failed to retrieve products")
        return ApiResponse.ok(result)

    async def get_available_products(self) -> ApiResponse[List[Product]]:
        try:
            products = self.product_repository.find_available_products()
        except Exception:
            logger.exception("ProductService.get_available_products failed")
            return ApiResponse.fail("Failed to retrieve available products")
        return ApiResponse.ok(products)

    async def update_product(self, product_id: str, dto: UpdateProductDto) -> ApiResponse[Product]:
        """Validate and apply a partial update; a new ``stock`` recomputes availability."""
        if dto.price is not None and not is_valid_price(dto.price):
            return ApiResponse.fail(INVALID_PRICE)
        if dto.stock is not None and not is_valid_stock(dto.stock):
            return ApiResponse.fail(INVALID_STOCK)
        if dto.name is not None and not is_valid_name(dto.name):
            return ApiResponse.fail(INVALID_NAME)

        try:
            product = self.product_repository.update_product(product_id, dto)
        except Exception:
            logger.exception("ProductService.update_product failed")
            return ApiResponse.fail("Failed to update product")
        if product is None:
            return ApiResponse.fail(PRODUCT_NOT_FOUND)
        return ApiResponse.ok(product, "Product updated successfully")

    async def delete_product(self, product_id: str) -> ApiResponse[bool]:
        try:
            if self.product_repository.find_by_id(product_id) is None:
                return ApiResponse.fail(PRODUCT_NOT_FOUND)
            deleted = self.product_repository.delete(product_id)
        except Exception:
            logger.exception("ProductService.delete_product failed")
            return ApiResponse.fail("Failed to delete product")
        return ApiResponse.ok(deleted, "Product deleted successfully")

    async def search_products(self, term: str) -> ApiResponse[List[Product]]:
        if not is_valid_search_term(term):
            return ApiResponse.fail("Search term must be at least 2 characters long")
        try:
            products = self.product_repository.search_products(term.strip())
        except Exception:
            logger.exception("ProductService.search_products failed")
            return ApiResponse.fail("Failed to search products")
        return ApiResponse.ok(products)

    async def get_products_by_category(self, category_id: str) -> ApiResponse[List[Product]]:
        try:
            products = self.product_repository.find_by_category(category_id)
        except Exception:
            logger.exception("ProductService.get_products_by_category failed")
            return ApiResponse.fail("Failed to retrieve products by category")
        return ApiResponse.ok(products)

    async def get_products_by_price_range(self, min_price: float, max_price: float) -> ApiResponse[List[Product]]:
        if not (math.isfinite(min_price) and math.isfinite(max_price)):
            return ApiResponse.fail("Invalid price range")
        if min_price < 0 or max_price < 0 or min_price > max_price:
            return ApiResponse.fail("Invalid price range")
        try:
            products = self.product_repository.find_by_price_range(min_price, max_price)
        except Exception:
            logger.exception("ProductService.get_products_by_price_range failed")
            return ApiResponse.fail("Failed to retrieve products by price range")
        return ApiResponse.ok(products)

    async def update_stock(self, product_id: str, quantity: int) -> ApiResponse[Product]:
        """
        Adjust stock by a signed ``quantity``.

        Args:
            product_id: Product to adjust
            quantity: Units to add (positive) or remove (negative)

        Returns:
            Envelope with the updated product; ``Insufficient stock`` when the
            result would go below zero, in which case nothing changes
        """
        if not is_valid_quantity(quantity):
            return ApiResponse.fail("Quantity must be a number")
        try:
            product = self.product_repository.update_stock(product_id, quantity)
        except DomainError as exc:
            return ApiResponse.fail(str(exc))
        except Exception:
            logger.exception("ProductService.update_stock failed")
            return ApiResponse.fail("Failed to update stock")
        if product is None:
            return ApiResponse.fail(PRODUCT_NOT_FOUND)
        return ApiResponse.ok(product, "Stock updated successfully")

    async def get_low_stock_products(self, threshold: int = 10) -> ApiResponse[List[Product]]:
        if threshold < 0:
            return ApiResponse.fail("Threshold must be a non-negative number")
        try:
            products = self.product_repository.get_low_stock_products(threshold)
        except Exception:
            logger.exception("ProductService.get_low_stock_products failed")
            return ApiResponse.fail("Failed to retrieve low stock products")
        return ApiResponse.ok(products)

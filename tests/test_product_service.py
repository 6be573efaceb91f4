"""
Tests for ProductService envelopes, validation and stock rules.
"""

import pytest

from storefront.domain.models import CreateProductDto, PaginationParams, UpdateProductDto


def product_dto(**overrides):
    values = {
        "name": "Monitor",
        "description": "27 inch display",
        "price": 249.0,
        "category_id": "cat1",
        "stock": 12,
    }
    values.update(overrides)
    return CreateProductDto(**values)


@pytest.mark.asyncio
async def test_create_product(product_service):
    result = await product_service.create_product(product_dto())

    assert result.success is True
    assert result.message == "Product created successfully"
    assert result.data.is_available is True

    fetched = await product_service.get_product_by_id(result.data.id)
    assert fetched.data == result.data


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"price": 0}, "Price must be greater than 0"),
        ({"price": -3.5}, "Price must be greater than 0"),
        ({"stock": -1}, "Stock must be a non-negative number"),
        ({"stock": 1.5}, "Stock must be a non-negative number"),
        ({"name": " x "}, "Product name must be at least 2 characters long"),
    ],
)
async def test_create_product_validation(product_service, product_repository, overrides, error):
    result = await product_service.create_product(product_dto(**overrides))

    assert result.success is False
    assert result.error == error
    assert product_repository.count() == 3


@pytest.mark.asyncio
async def test_get_missing_product(product_service):
    assert (await product_service.get_product_by_id("404")).error == "Product not found"


@pytest.mark.asyncio
async def test_get_all_products(product_service):
    result = await product_service.get_all_products(PaginationParams(page=2, limit=2, sort_by="price", sort_order="asc"))

    assert [product.id for product in result.data.data] == ["1"]
    assert result.data.pagination.total == 3
    assert result.data.pagination.pages == 2


@pytest.mark.asyncio
async def test_update_product(product_service):
    result = await product_service.update_product("2", UpdateProductDto(stock=0))

    assert result.success is True
    assert result.data.is_available is False
    assert (await product_service.get_available_products()).data[0].id == "1"


@pytest.mark.asyncio
async def test_update_product_errors(product_service):
    assert (await product_service.update_product("2", UpdateProductDto(price=0))).error == "Price must be greater than 0"
    assert (await product_service.update_product("404", UpdateProductDto(price=5))).error == "Product not found"


@pytest.mark.asyncio
async def test_delete_product(product_service):
    deleted = await product_service.delete_product("3")
    missing = await product_service.delete_product("3")

    assert deleted.data is True
    assert deleted.message == "Product deleted successfully"
    assert missing.error == "Product not found"


@pytest.mark.asyncio
async def test_search_and_filters(product_service):
    search = await product_service.search_products("mouse")
    category = await product_service.get_products_by_category("cat1")
    price_range = await product_service.get_products_by_price_range(100, 200)

    assert [p.id for p in search.data] == ["2"]
    assert [p.id for p in category.data] == ["1"]
    assert [p.id for p in price_range.data] == ["3"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "low, high",
    [(-1, 10), (10, -1), (50, 10), (float("nan"), float("nan")), (0, float("nan")), (0, float("inf"))],
)
async def test_invalid_price_range(product_service, low, high):
    assert (await product_service.get_products_by_price_range(low, high)).error == "Invalid price range"


@pytest.mark.asyncio
async def test_update_stock(product_service):
    result = await product_service.update_stock("1", -10)

    assert result.success is True
    assert result.data.stock == 40
    assert result.message == "Stock updated successfully"


@pytest.mark.asyncio
async def test_insufficient_stock_leaves_product_unchanged(product_service):
    result = await product_service.update_stock("1", -60)

    assert result.success is False
    assert result.error == "Insufficient stock"
    laptop = (await product_service.get_product_by_id("1")).data
    assert laptop.stock == 50
    assert laptop.is_available is True


@pytest.mark.asyncio
async def test_update_stock_errors(product_service):
    assert (await product_service.update_stock("404", 1)).error == "Product not found"
    assert (await product_service.update_stock("1", "ten")).error == "Quantity must be a number"


@pytest.mark.asyncio
async def test_low_stock_products(product_service):
    result = await product_service.get_low_stock_products(30)
    invalid = await product_service.get_low_stock_products(-1)

    assert [p.id for p in result.data] == ["3"]
    assert invalid.error == "Threshold must be a non-negative number"


@pytest.mark.asyncio
async def test_dashboard_stats(dashboard_service, user_repository):
    user_repository.deactivate_user("3")

    result = await dashboard_service.get_stats()

    assert result.success is True
    assert result.data.total_users == 3
    assert result.data.active_users == 2
    assert result.data.total_products == 3
    assert result.data.low_stock_products == 1

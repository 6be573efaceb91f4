"""API router for the product catalogue."""

from typing import List, Literal, Optional, Union

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic.alias_generators import to_snake

from ....core.config import Settings
from ....core.dependencies import get_product_service, get_settings
from ....domain.models import ApiResponse, CreateProductDto, PaginationParams, UpdateProductDto
from ....services.product_service import PRODUCT_NOT_FOUND, ProductService
from ..responses import with_status
from ..schemas.common import ApiEnvelope, PaginatedSchema
from ..schemas.product_schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    StockAdjustRequest,
)

router = APIRouter(prefix="/api/products", tags=["products"])

ProductEnvelope = ApiEnvelope[ProductResponse]
ProductListEnvelope = Union[
    ApiEnvelope[PaginatedSchema[ProductResponse]], ApiEnvelope[List[ProductResponse]]
]


@router.get("", response_model=ProductListEnvelope, response_model_exclude_none=True)
async def list_products(
    response: Response,
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    available: bool = False,
    low_stock: Optional[int] = Query(default=None, alias="lowStock"),
    page: int = 1,
    limit: Optional[int] = None,
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Optional[Literal["asc", "desc"]] = Query(default=None, alias="sortOrder"),
    product_service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse:
    """The first filter present wins; with none, the catalogue is paginated."""
    if search:
        result = await product_service.search_products(search)
    elif category:
        result = await product_service.get_products_by_category(category)
    elif min_price is not None and max_price is not None:
        result = await product_service.get_products_by_price_range(min_price, max_price)
    elif available:
        result = await product_service.get_available_products()
    elif low_stock is not None:
        result = await product_service.get_low_stock_products(low_stock)
    else:
        params = PaginationParams(
            page=page,
            limit=limit or settings.default_page_size,
            sort_by=to_snake(sort_by or settings.default_sort_by),
            sort_order=sort_order or settings.default_sort_order,
        )
        result = await product_service.get_all_products(params)
    return with_status(response, result)


@router.post("", response_model=ProductEnvelope, response_model_exclude_none=True)
async def create_product(
    payload: ProductCreateRequest,
    response: Response,
    product_service: ProductService = Depends(get_product_service),
) -> ApiResponse:
    result = await product_service.create_product(CreateProductDto(**payload.model_dump()))
    return with_status(response, result, success_status=status.HTTP_201_CREATED)


@router.get("/{product_id}", response_model=ProductEnvelope, response_model_exclude_none=True)
async def get_product(
    product_id: str,
    response: Response,
    product_service: ProductService = Depends(get_product_service),
) -> ApiResponse:
    result = await product_service.get_product_by_id(product_id)
    return with_status(response, result, failure_status=status.HTTP_404_NOT_FOUND)


@router.put("/{product_id}", response_model=ProductEnvelope, response_model_exclude_none=True)
async def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    response: Response,
    product_service: ProductService = Depends(get_product_service),
) -> ApiResponse:
    dto = UpdateProductDto(**payload.model_dump(exclude_unset=True))
    result = await product_service.update_product(product_id, dto)
    return with_status(response, result, not_found_error=PRODUCT_NOT_FOUND)


@router.delete("/{product_id}", response_model=ApiEnvelope[bool], response_model_exclude_none=True)
async def delete_product(
    product_id: str,
    response: Response,
    product_service: ProductService = Depends(get_product_service),
) -> ApiResponse:
    result = await product_service.delete_product(product_id)
    return with_status(response, result, not_found_error=PRODUCT_NOT_FOUND)


@router.patch("/{product_id}/stock", response_model=ProductEnvelope, response_model_exclude_none=True)
async def adjust_stock(
    product_id: str,
    payload: StockAdjustRequest,
    response: Response,
    product_service: ProductService = Depends(get_product_service),
) -> ApiResponse:
    result = await product_service.update_stock(product_id, payload.quantity)
    return with_status(response, result, not_found_error=PRODUCT_NOT_FOUND)

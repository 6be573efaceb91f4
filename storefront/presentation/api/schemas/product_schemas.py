from datetime import datetime
from typing import Any, Optional

from .common import CamelModel


class ProductCreateRequest(CamelModel):
    name: str
    description: str
    price: float
    category_id: str
    # Validated by ProductService so a bad value gets the envelope error.
    stock: Any = None


class ProductUpdateRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[str] = None
    stock: Optional[Any] = None
    is_available: Optional[bool] = None


class StockAdjustRequest(CamelModel):
    # Validated by ProductService.update_stock.
    quantity: Any = None


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float
    category_id: str
    stock: int
    is_available: bool
    created_at: datetime
    updated_at: datetime

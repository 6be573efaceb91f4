from __future__ import annotations

from dataclasses import dataclass

from .base import BaseEntity


@dataclass(slots=True, frozen=True)
class Product(BaseEntity):
    name: str
    description: str
    price: float
    category_id: str
    stock: int
    is_available: bool

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class DashboardStats:
    total_users: int
    active_users: int
    total_products: int
    low_stock_products: int

from .common import CamelModel


class DashboardStatsResponse(CamelModel):
    total_users: int
    active_users: int
    total_products: int
    low_stock_products: int

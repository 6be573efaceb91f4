import logging

from ..domain.models import ApiResponse, DashboardStats, QueryOptions
from ..domain.ports.repositories import ProductRepository, UserRepository

logger = logging.getLogger(__name__)


class DashboardService:
    """Headline counters for the admin dashboard."""

    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        low_stock_threshold: int = 10,
    ) -> None:
        self._users = user_repository
        self._products = product_repository
        self._low_stock_threshold = low_stock_threshold

    async def get_stats(self) -> ApiResponse[DashboardStats]:
        try:
            stats = DashboardStats(
                total_users=self._users.count(),
                active_users=self._users.count(QueryOptions(where={"is_active": True})),
                total_products=self._products.count(),
                low_stock_products=len(self._products.get_low_stock_products(self._low_stock_threshold)),
            )
        except Exception:
            logger.exception("DashboardService.get_stats failed")
            return ApiResponse.fail("Failed to retrieve dashboard statistics")
        return ApiResponse.ok(stats)
